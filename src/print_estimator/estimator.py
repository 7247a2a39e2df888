"""Cost and time estimation for a single print job.

The estimate is a single analytical pass, not a slice:

1. Split the part into a fully solid shell and a partially filled interior
2. Derive wall and infill flow rates from the bead cross-section and speeds
3. Convert volumes to deposition times, inflated by the shell penalty and a
   fixed overhead for travel, retraction and layer changes
4. Price the deposited mass, the machine time and a flat setup fee

Example:
    >>> from print_estimator.estimator import estimate
    >>> from print_estimator.profiles import get_part_preset, get_printer_preset
    >>>
    >>> result = estimate(get_printer_preset("Standard 0.4mm"), get_part_preset("Small Part"))
    >>> round(result.shell_ratio, 3)
    0.769
"""

import logging
import math

from print_estimator.errors import InvalidInputError
from print_estimator.flow_calculator import (
    calculate_deposition_time,
    calculate_infill_flow_rate,
    calculate_wall_flow_rate,
)
from print_estimator.models import EstimateResult, PartParameters, PrinterSettings
from print_estimator.shell import (
    calculate_infill_volume,
    calculate_shell_penalty,
    calculate_shell_ratio,
    calculate_shell_volume,
)

logger = logging.getLogger(__name__)

# Flat per-job setup and handling fee, in currency units
SETUP_FEE = 5.0

# 30% time overhead for travel moves, retractions and layer-change dwell
TIME_OVERHEAD_FACTOR = 1.3

SECONDS_PER_HOUR = 3600.0
MM3_PER_CM3 = 1000.0
GRAMS_PER_KG = 1000.0


def estimate(printer: PrinterSettings, part: PartParameters) -> EstimateResult:
    """Estimate material cost, machine cost and print time for a part.

    Both records are validated on construction, so every field here is a
    finite number in range. The function is pure: it reads its arguments,
    never modifies them, and returns a new snapshot.

    Args:
        printer: Printer operating settings
        part: Geometry of the part to quote

    Returns:
        EstimateResult with the shell/infill split, time and cost breakdown

    Raises:
        TypeError: If the arguments are not PrinterSettings / PartParameters
        ZeroFlowRateError: If a flow rate is too small to print the volume
            assigned to it in finite time
        InvalidInputError: If the inputs are so large that the time or cost
            overflows

    Example:
        >>> result = estimate(printer, part)
        >>> print(f"€{result.total_cost:.2f} in {result.print_time_hours:.2f} h")
    """
    if not isinstance(printer, PrinterSettings):
        raise TypeError(f"printer must be PrinterSettings, got {type(printer).__name__}")
    if not isinstance(part, PartParameters):
        raise TypeError(f"part must be PartParameters, got {type(part).__name__}")

    # Geometry: solid shell over the surface, partial fill inside
    wall_thickness = printer.wall_thickness
    shell_volume = calculate_shell_volume(part.surface_area, wall_thickness, part.volume)
    infill_volume = calculate_infill_volume(part.volume, shell_volume, part.infill_ratio)
    total_material_volume = shell_volume + infill_volume

    shell_ratio = calculate_shell_ratio(shell_volume, infill_volume)
    shell_penalty = calculate_shell_penalty(shell_ratio)

    # Time: raw deposition time in seconds, then penalty and overhead in hours
    wall_time = calculate_deposition_time(shell_volume, calculate_wall_flow_rate(printer))
    infill_time = calculate_deposition_time(infill_volume, calculate_infill_flow_rate(printer))
    total_time = (
        (wall_time + infill_time) * shell_penalty * TIME_OVERHEAD_FACTOR
    ) / SECONDS_PER_HOUR

    # Cost
    total_volume_cm3 = total_material_volume / MM3_PER_CM3
    weight_kg = (total_volume_cm3 * printer.material_density) / GRAMS_PER_KG
    material_cost = weight_kg * printer.material_cost_per_kg
    machine_cost = total_time * printer.machine_cost_per_hour
    total_cost = material_cost + machine_cost + SETUP_FEE

    if not (math.isfinite(total_time) and math.isfinite(total_cost)):
        raise InvalidInputError(
            f"estimate overflows: print time {total_time} h, total cost {total_cost}"
        )

    logger.debug(
        "estimate: shell=%.3f mm³ infill=%.3f mm³ ratio=%.4f penalty=%.4f time=%.4f h",
        shell_volume,
        infill_volume,
        shell_ratio,
        shell_penalty,
        total_time,
    )

    return EstimateResult(
        total_cost=total_cost,
        material_cost=material_cost,
        machine_cost=machine_cost,
        setup_cost=SETUP_FEE,
        print_time_hours=total_time,
        wall_time_hours=wall_time / SECONDS_PER_HOUR,
        infill_time_hours=infill_time / SECONDS_PER_HOUR,
        shell_ratio=shell_ratio,
        shell_penalty=shell_penalty,
        material_volume_cm3=total_volume_cm3,
        shell_volume=shell_volume,
        infill_volume=infill_volume,
        total_material_volume=total_material_volume,
        weight_kg=weight_kg,
    )
