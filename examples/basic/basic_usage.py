"""Basic usage example.

This example demonstrates:
- Selecting printer and part presets
- Overriding individual fields
- Estimating cost and time
- Displaying the report and saving a chart

This is the simplest way to use the print estimator.
"""

from dataclasses import replace
from pathlib import Path

from print_estimator import estimate, get_part_preset, get_printer_preset
from print_estimator.report import format_report
from print_estimator.visualize import plot_estimate, plot_infill_sweep


def main():
    """Quote the reference parts on the standard printer."""

    print("=" * 80)
    print("BASIC PRINT ESTIMATOR USAGE")
    print("=" * 80)

    printer = get_printer_preset("Standard 0.4mm")

    for label in ("Small Part", "Large Solid Part", "Thin-Walled Part"):
        part = get_part_preset(label)
        result = estimate(printer, part)

        print(f"\n{label} ({part.volume_cm3:.0f} cm³, infill {part.infill_ratio:.0%})")
        print("  " + "-" * 70)
        print("\n".join("  " + line for line in format_report(result).splitlines()))

    # Three walls instead of two, 35% infill
    printer = replace(printer, num_walls=3)
    part = replace(get_part_preset("Small Part"), infill_ratio=0.35)
    result = estimate(printer, part)

    print("\nSmall Part, 3 walls, 35% infill")
    print("  " + "-" * 70)
    print(f"  Total: €{result.total_cost:.2f} in {result.print_time_hours:.2f} hours")

    print("\n" + "=" * 80)
    print("GENERATING PLOTS")
    print("=" * 80)
    output_dir = Path(__file__).parent
    plot_estimate(result, show=False, save_path=str(output_dir / "basic_usage_plot.png"))
    plot_infill_sweep(printer, part, show=False, save_path=str(output_dir / "infill_sweep.png"))
    print(f"  Plots saved to: {output_dir}")
    print()


if __name__ == "__main__":
    main()
