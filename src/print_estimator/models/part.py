"""Part geometry model for print estimation."""

from dataclasses import dataclass

from print_estimator.models.fields import check_non_negative, check_ratio


@dataclass(frozen=True)
class PartParameters:
    """Geometry of the part being quoted.

    Zero volume or surface area is accepted: such a part prints nothing and
    only costs the setup fee.

    Note:
        ``bounding_box_volume``, ``convex_hull_volume`` and the three
        dimensions are accepted and validated but not used by the estimate.

    Attributes:
        volume: Solid volume of the part in cubic millimeters
        bounding_box_volume: Axis-aligned bounding box volume in cubic millimeters
        convex_hull_volume: Convex hull volume in cubic millimeters
        surface_area: Outer surface area in square millimeters
        dimension_x: Extent along X in millimeters
        dimension_y: Extent along Y in millimeters
        dimension_z: Extent along Z in millimeters
        infill_ratio: Fill fraction of the interior from 0 (hollow) to 1 (solid)
    """

    volume: float
    bounding_box_volume: float
    convex_hull_volume: float
    surface_area: float
    dimension_x: float
    dimension_y: float
    dimension_z: float
    infill_ratio: float

    def __post_init__(self) -> None:
        """Validate that geometry is non-negative and infill_ratio is a fraction."""
        for name in (
            "volume",
            "bounding_box_volume",
            "convex_hull_volume",
            "surface_area",
            "dimension_x",
            "dimension_y",
            "dimension_z",
        ):
            check_non_negative(name, getattr(self, name))
        check_ratio("infill_ratio", self.infill_ratio)

    @property
    def volume_cm3(self) -> float:
        """Solid volume in cubic centimeters."""
        return self.volume / 1000.0
