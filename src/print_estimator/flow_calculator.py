"""Volumetric flow rate and deposition time calculation."""

import math

from print_estimator.errors import ZeroFlowRateError
from print_estimator.models.printer import PrinterSettings


def calculate_cross_section(printer: PrinterSettings) -> float:
    """Cross-section of one extruded bead in mm².

    Examples:
        >>> from print_estimator.profiles import PrinterProfile, create_printer_settings
        >>> printer = create_printer_settings(PrinterProfile.STANDARD_04)
        >>> round(calculate_cross_section(printer), 6)
        0.08
    """
    return printer.cross_section


def calculate_flow_rate(printer: PrinterSettings, speed_factor: float) -> float:
    """Calculate the volumetric flow rate at a scaled print speed.

    This is the rate at which material is deposited when a bead of the
    printer's cross-section is laid down at ``base_print_speed * speed_factor``,
    measured in cubic millimeters per second (mm³/s).

    Args:
        printer: Printer settings supplying nozzle, layer height and base speed
        speed_factor: Multiplier applied to the base print speed

    Returns:
        Volumetric flow rate in mm³/s
    """
    return calculate_cross_section(printer) * printer.base_print_speed * speed_factor


def calculate_wall_flow_rate(printer: PrinterSettings) -> float:
    """Flow rate while printing perimeter walls, in mm³/s."""
    return calculate_flow_rate(printer, printer.wall_speed_factor)


def calculate_infill_flow_rate(printer: PrinterSettings) -> float:
    """Flow rate while printing infill, in mm³/s."""
    return calculate_flow_rate(printer, printer.infill_speed_factor)


def calculate_deposition_time(volume: float, flow_rate: float) -> float:
    """Calculate the time to deposit a volume at a given flow rate.

    Args:
        volume: Volume to deposit in mm³
        flow_rate: Volumetric flow rate in mm³/s

    Returns:
        Deposition time in seconds. Zero volume takes zero time at any rate.

    Raises:
        ZeroFlowRateError: If volume is positive but flow_rate is zero or so
            small that the time overflows, which happens when tiny nozzle and
            layer values underflow

    Examples:
        >>> calculate_deposition_time(400.0, 4.0)
        100.0
        >>> calculate_deposition_time(0.0, 0.0)
        0.0
    """
    if volume == 0:
        return 0.0
    if flow_rate <= 0:
        raise ZeroFlowRateError(
            f"flow rate must be positive to deposit {volume} mm³, got {flow_rate}"
        )
    time = volume / flow_rate
    if not math.isfinite(time):
        raise ZeroFlowRateError(
            f"flow rate {flow_rate} mm³/s is too small to deposit {volume} mm³"
        )
    return time
