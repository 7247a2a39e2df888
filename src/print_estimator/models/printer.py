"""Printer settings model for print estimation."""

from dataclasses import dataclass

from print_estimator.models.fields import (
    check_count,
    check_non_negative,
    check_positive,
    check_ratio,
)
from print_estimator.shell import calculate_wall_thickness


@dataclass(frozen=True)
class PrinterSettings:
    """Operating configuration of a printer profile.

    This describes the machine and its slicer profile, separate from the part
    being quoted.

    Note:
        ``support_speed_factor`` and ``support_density`` are accepted and
        validated but not used by the estimate. Support material is not
        modelled yet.

    Attributes:
        nozzle_diameter: Nozzle bore, which is also the bead width, in millimeters
        layer_height: Layer height in millimeters
        base_print_speed: Reference linear print speed in millimeters per second
        wall_speed_factor: Multiplier on base speed for perimeter walls
        infill_speed_factor: Multiplier on base speed for infill
        support_speed_factor: Multiplier on base speed for supports (reserved)
        material_cost_per_kg: Filament price per kilogram
        machine_cost_per_hour: Machine time rate per hour
        material_density: Filament density in grams per cubic centimeter
        num_walls: Number of perimeter shells
        support_density: Support fill fraction from 0 to 1 (reserved)
    """

    nozzle_diameter: float
    layer_height: float
    base_print_speed: float
    wall_speed_factor: float
    infill_speed_factor: float
    support_speed_factor: float
    material_cost_per_kg: float
    machine_cost_per_hour: float
    material_density: float
    num_walls: int
    support_density: float

    def __post_init__(self) -> None:
        """Validate all fields, failing on the first bad value."""
        for name in (
            "nozzle_diameter",
            "layer_height",
            "base_print_speed",
            "wall_speed_factor",
            "infill_speed_factor",
            "support_speed_factor",
            "material_density",
        ):
            check_positive(name, getattr(self, name))
        check_non_negative("material_cost_per_kg", self.material_cost_per_kg)
        check_non_negative("machine_cost_per_hour", self.machine_cost_per_hour)
        check_count("num_walls", self.num_walls)
        check_ratio("support_density", self.support_density)

    @property
    def wall_thickness(self) -> float:
        """Total perimeter thickness in millimeters."""
        return calculate_wall_thickness(self.nozzle_diameter, self.num_walls)

    @property
    def cross_section(self) -> float:
        """Bead cross-section in square millimeters."""
        return self.nozzle_diameter * self.layer_height
