"""Text report and breakdown rows for displaying an estimate."""

from typing import List, Tuple

from print_estimator.models import EstimateResult


def cost_breakdown(result: EstimateResult) -> List[Tuple[str, float]]:
    """Cost components as (label, amount) rows."""
    return [
        ("Material", result.material_cost),
        ("Machine", result.machine_cost),
        ("Setup", result.setup_cost),
    ]


def time_breakdown(result: EstimateResult) -> List[Tuple[str, float]]:
    """Raw deposition times as (label, hours) rows.

    These exclude the shell penalty and overhead, so they do not sum to
    ``print_time_hours``.
    """
    return [
        ("Walls", result.wall_time_hours),
        ("Infill", result.infill_time_hours),
    ]


def format_report(result: EstimateResult, currency: str = "€") -> str:
    """Format an estimate as a human-readable report.

    Currency, hours and volumes use 2 decimals, the shell ratio 3.

    Args:
        result: Estimate to format
        currency: Symbol prefixed to amounts

    Returns:
        Multi-line report without a trailing newline

    Example:
        >>> print(format_report(result))
        Cost Breakdown
          Total Cost:      €7.61
          ...
    """
    lines = ["Cost Breakdown"]
    lines.append(f"  {'Total Cost:':<16} {currency}{result.total_cost:.2f}")
    for label, amount in cost_breakdown(result):
        lines.append(f"  {label + ' Cost:':<16} {currency}{amount:.2f}")

    lines.append("")
    lines.append("Time Analysis")
    lines.append(f"  {'Total Print Time:':<22} {result.print_time_hours:.2f} hours")
    lines.append(f"  {'Wall Print Time:':<22} {result.wall_time_hours:.2f} hours")
    lines.append(f"  {'Infill Print Time:':<22} {result.infill_time_hours:.2f} hours")
    lines.append(f"  {'Shell Ratio:':<22} {result.shell_ratio:.3f}")
    lines.append(f"  {'Shell Penalty:':<22} {result.shell_penalty:.2f}x")
    lines.append(f"  {'Material Volume:':<22} {result.material_volume_cm3:.2f} cm³")
    lines.append(f"  {'Material Weight:':<22} {result.weight_kg * 1000:.2f} g")

    return "\n".join(lines)
