"""Printer and part presets for common quoting scenarios."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from print_estimator.errors import UnknownPresetError
from print_estimator.models.part import PartParameters
from print_estimator.models.printer import PrinterSettings


class PrinterProfile(Enum):
    """Common printer profiles, keyed by their display label."""

    STANDARD_04 = "Standard 0.4mm"  # Stock nozzle, fine layers
    LARGE_10 = "Large 1.0mm"  # Large nozzle for big, coarse parts
    HIGH_SPEED_06 = "High Speed 0.6mm"  # Faster base speed and infill


class PartProfile(Enum):
    """Reference parts, keyed by their display label."""

    SMALL = "Small Part"  # 10 cm³ bracket-sized part
    LARGE_SOLID = "Large Solid Part"  # 1000 cm³ chunky part
    THIN_WALLED = "Thin-Walled Part"  # 50 cm³ with a large surface


DEFAULT_PRINTER_PRESET = PrinterProfile.STANDARD_04.value
DEFAULT_PART_PRESET = PartProfile.SMALL.value


def create_printer_settings(profile: PrinterProfile) -> PrinterSettings:
    """
    Create PrinterSettings from a predefined profile.

    All profiles share PLA-like material pricing (25 per kg, 1.24 g/cm³), a
    machine rate of 2 per hour and two perimeter walls; they differ in nozzle,
    layer height and speeds:
    - STANDARD_04: 0.4 mm nozzle, 0.2 mm layers, 50 mm/s
    - LARGE_10: 1.0 mm nozzle, 0.5 mm layers, 40 mm/s
    - HIGH_SPEED_06: 0.6 mm nozzle, 0.3 mm layers, 70 mm/s, infill at 1.2x

    Args:
        profile: Printer profile to use

    Returns:
        PrinterSettings matching the selected profile

    Examples:
        >>> standard = create_printer_settings(PrinterProfile.STANDARD_04)
        >>> print(f"Nozzle: {standard.nozzle_diameter} mm")
        Nozzle: 0.4 mm
    """
    if profile == PrinterProfile.STANDARD_04:
        return PrinterSettings(
            nozzle_diameter=0.4,
            layer_height=0.2,
            base_print_speed=50.0,
            wall_speed_factor=0.8,
            infill_speed_factor=1.0,
            support_speed_factor=1.2,
            material_cost_per_kg=25.0,
            machine_cost_per_hour=2.0,
            material_density=1.24,
            num_walls=2,
            support_density=0.2,
        )
    elif profile == PrinterProfile.LARGE_10:
        return PrinterSettings(
            nozzle_diameter=1.0,
            layer_height=0.5,
            base_print_speed=40.0,
            wall_speed_factor=0.8,
            infill_speed_factor=1.0,
            support_speed_factor=1.2,
            material_cost_per_kg=25.0,
            machine_cost_per_hour=2.0,
            material_density=1.24,
            num_walls=2,
            support_density=0.2,
        )
    elif profile == PrinterProfile.HIGH_SPEED_06:
        return PrinterSettings(
            nozzle_diameter=0.6,
            layer_height=0.3,
            base_print_speed=70.0,
            wall_speed_factor=0.8,
            infill_speed_factor=1.2,  # Infill runs faster than base
            support_speed_factor=1.4,
            material_cost_per_kg=25.0,
            machine_cost_per_hour=2.0,
            material_density=1.24,
            num_walls=2,
            support_density=0.2,
        )
    else:
        raise ValueError(f"Unknown printer profile: {profile}")


def create_part_parameters(profile: PartProfile) -> PartParameters:
    """
    Create PartParameters from a predefined reference part.

    Args:
        profile: Part profile to use

    Returns:
        PartParameters matching the selected part

    Examples:
        >>> small = create_part_parameters(PartProfile.SMALL)
        >>> print(f"{small.volume_cm3:.0f} cm³")
        10 cm³
    """
    if profile == PartProfile.SMALL:
        return PartParameters(
            volume=10_000.0,  # 10 cm³
            bounding_box_volume=15_000.0,
            convex_hull_volume=12_000.0,
            surface_area=5_000.0,
            dimension_x=50.0,
            dimension_y=25.0,
            dimension_z=15.0,
            infill_ratio=0.2,
        )
    elif profile == PartProfile.LARGE_SOLID:
        return PartParameters(
            volume=1_000_000.0,  # 1000 cm³
            bounding_box_volume=1_200_000.0,
            convex_hull_volume=1_100_000.0,
            surface_area=150_000.0,
            dimension_x=200.0,
            dimension_y=100.0,
            dimension_z=80.0,
            infill_ratio=0.3,
        )
    elif profile == PartProfile.THIN_WALLED:
        return PartParameters(
            volume=50_000.0,  # 50 cm³, shell clamps to the whole volume
            bounding_box_volume=200_000.0,
            convex_hull_volume=180_000.0,
            surface_area=100_000.0,
            dimension_x=100.0,
            dimension_y=100.0,
            dimension_z=20.0,
            infill_ratio=0.1,
        )
    else:
        raise ValueError(f"Unknown part profile: {profile}")


PRINTER_PRESETS: Mapping[str, PrinterSettings] = MappingProxyType(
    {profile.value: create_printer_settings(profile) for profile in PrinterProfile}
)

PART_PRESETS: Mapping[str, PartParameters] = MappingProxyType(
    {profile.value: create_part_parameters(profile) for profile in PartProfile}
)


def get_printer_preset(label: str) -> PrinterSettings:
    """Look up printer settings by preset label.

    Raises:
        UnknownPresetError: If no printer preset has this label
    """
    try:
        return PRINTER_PRESETS[label]
    except KeyError:
        raise UnknownPresetError(
            f"Unknown printer preset: {label!r} (available: {', '.join(PRINTER_PRESETS)})"
        ) from None


def get_part_preset(label: str) -> PartParameters:
    """Look up part parameters by preset label.

    Raises:
        UnknownPresetError: If no part preset has this label
    """
    try:
        return PART_PRESETS[label]
    except KeyError:
        raise UnknownPresetError(
            f"Unknown part preset: {label!r} (available: {', '.join(PART_PRESETS)})"
        ) from None
