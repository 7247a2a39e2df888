"""Command line front-end for the print estimator.

Examples:
    print-estimate --printer "Standard 0.4mm" --part "Small Part"
    print-estimate --part "Thin-Walled Part" --set infill_ratio=0.15 --json
    print-estimate --presets shop.json --printer "Workshop 0.4mm" --plot quote.png

Exit codes: 0 on success, 2 on a configuration or input error.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from print_estimator.config import (
    apply_overrides,
    default_log_level,
    load_presets,
    parse_overrides,
    split_overrides,
)
from print_estimator.errors import ConfigError, EstimatorError, UnknownPresetError
from print_estimator.estimator import estimate
from print_estimator.models import EstimateResult
from print_estimator.profiles import (
    DEFAULT_PART_PRESET,
    DEFAULT_PRINTER_PRESET,
    PART_PRESETS,
    PRINTER_PRESETS,
)
from print_estimator.report import format_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="print-estimate",
        description="Quick cost and time quote for an FDM print job.",
    )
    parser.add_argument(
        "--printer",
        default=DEFAULT_PRINTER_PRESET,
        help=f"printer preset label (default: {DEFAULT_PRINTER_PRESET!r})",
    )
    parser.add_argument(
        "--part",
        default=DEFAULT_PART_PRESET,
        help=f"part preset label (default: {DEFAULT_PART_PRESET!r})",
    )
    parser.add_argument(
        "--presets",
        metavar="FILE",
        help="JSON file with extra printer/part presets, merged over the built-ins",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="override one printer or part field, e.g. infill_ratio=0.3 (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="print the estimate as JSON")
    parser.add_argument("--currency", default="€", help="currency symbol for the text report")
    parser.add_argument("--plot", metavar="FILE", help="save a cost/time chart to FILE")
    parser.add_argument(
        "--list-presets", action="store_true", help="list available preset labels and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else default_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _save_plot(result: EstimateResult, path: str) -> None:
    # matplotlib is only needed for charts
    import matplotlib.pyplot as plt

    from print_estimator.visualize import plot_estimate

    try:
        fig = plot_estimate(result, show=False, save_path=path)
    except OSError as e:
        plt.close()
        raise ConfigError(f"Cannot write chart to {path}: {e.strerror or e}") from None
    plt.close(fig)
    logger.info("Chart saved to %s", path)


def _run(args: argparse.Namespace) -> int:
    printers = dict(PRINTER_PRESETS)
    parts = dict(PART_PRESETS)
    if args.presets:
        extra_printers, extra_parts = load_presets(args.presets)
        printers.update(extra_printers)
        parts.update(extra_parts)

    if args.list_presets:
        print("Printer presets:")
        for label in printers:
            print(f"  {label}")
        print("Part presets:")
        for label in parts:
            print(f"  {label}")
        return EXIT_OK

    if args.printer not in printers:
        raise UnknownPresetError(
            f"Unknown printer preset: {args.printer!r} (available: {', '.join(printers)})"
        )
    if args.part not in parts:
        raise UnknownPresetError(
            f"Unknown part preset: {args.part!r} (available: {', '.join(parts)})"
        )

    printer_overrides, part_overrides = split_overrides(parse_overrides(args.overrides))
    printer = apply_overrides(printers[args.printer], printer_overrides)
    part = apply_overrides(parts[args.part], part_overrides)

    logger.info("Estimating %r on %r", args.part, args.printer)
    result = estimate(printer, part)

    # Chart first so a bad path is reported before any success output
    if args.plot:
        _save_plot(result, args.plot)

    if args.json:
        payload = {
            "success": True,
            "printer": args.printer,
            "part": args.part,
            "overrides": {**printer_overrides, **part_overrides},
            "result": result.to_dict(),
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(f"Printer: {args.printer}")
        print(f"Part:    {args.part}")
        print()
        print(format_report(result, currency=args.currency))

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        return _run(args)
    except EstimatorError as e:
        logger.debug("Estimate failed", exc_info=True)
        if args.json:
            print(json.dumps({"success": False, "error": str(e)}, ensure_ascii=False))
        else:
            print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    sys.exit(main())
