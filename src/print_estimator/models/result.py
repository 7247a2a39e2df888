"""Estimate result model."""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class EstimateResult:
    """Snapshot of one cost and time estimate.

    Volumes are in cubic millimeters except ``material_volume_cm3``, times are
    in hours and costs are in the currency of the printer settings.

    Attributes:
        total_cost: Material, machine and setup cost combined
        material_cost: Cost of the extruded filament
        machine_cost: Print time charged at the machine rate
        setup_cost: Flat per-job setup fee
        print_time_hours: Total print time including shell penalty and overhead
        wall_time_hours: Raw wall deposition time
        infill_time_hours: Raw infill deposition time
        shell_ratio: Fraction of the extruded volume that is shell, 0 to 1
        shell_penalty: Time multiplier from shell dominance, 1 to 3
        material_volume_cm3: Extruded volume in cubic centimeters
        shell_volume: Shell volume in cubic millimeters
        infill_volume: Infill volume in cubic millimeters
        total_material_volume: Extruded volume in cubic millimeters
        weight_kg: Extruded mass in kilograms
    """

    total_cost: float
    material_cost: float
    machine_cost: float
    setup_cost: float
    print_time_hours: float
    wall_time_hours: float
    infill_time_hours: float
    shell_ratio: float
    shell_penalty: float
    material_volume_cm3: float
    shell_volume: float
    infill_volume: float
    total_material_volume: float
    weight_kg: float

    def to_dict(self) -> Dict[str, float]:
        """Convert to a JSON-serialisable dictionary."""
        return asdict(self)
