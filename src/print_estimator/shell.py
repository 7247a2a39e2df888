"""Shell and infill volume split for print estimation.

The part is approximated as a uniform shell of ``wall_thickness`` laid over
its outer surface, with the remaining interior filled at ``infill_ratio``.
"""

# Extra print time at 100% shell, on top of the 1.0 baseline
SHELL_PENALTY_WEIGHT = 2.0


def calculate_wall_thickness(nozzle_diameter: float, num_walls: int) -> float:
    """Total perimeter thickness as a multiple of the bead width.

    Examples:
        >>> calculate_wall_thickness(0.4, 2)
        0.8
    """
    return nozzle_diameter * num_walls


def calculate_shell_volume(surface_area: float, wall_thickness: float, part_volume: float) -> float:
    """Calculate the shell volume, clamped to the part volume.

    A thin shell over the surface has volume ``surface_area * wall_thickness``.
    Small parts with thick walls would exceed their own volume, so the result
    is clamped: such parts print fully solid.

    Args:
        surface_area: Outer surface area in mm²
        wall_thickness: Total perimeter thickness in mm
        part_volume: Solid part volume in mm³

    Returns:
        Shell volume in mm³, never greater than part_volume

    Examples:
        >>> calculate_shell_volume(5000.0, 0.8, 10000.0)
        4000.0
        >>> calculate_shell_volume(5000.0, 4.0, 10000.0)
        10000.0
    """
    return min(surface_area * wall_thickness, part_volume)


def calculate_infill_volume(part_volume: float, shell_volume: float, infill_ratio: float) -> float:
    """Volume of infill deposited in the non-shell interior, in mm³."""
    internal_volume = part_volume - shell_volume
    return internal_volume * infill_ratio


def calculate_shell_ratio(shell_volume: float, infill_volume: float) -> float:
    """Fraction of the deposited volume that is shell.

    Returns:
        Ratio from 0.0 to 1.0. A part that deposits nothing has ratio 0.0.
    """
    total = shell_volume + infill_volume
    if total == 0:
        return 0.0
    return shell_volume / total


def calculate_shell_penalty(shell_ratio: float) -> float:
    """Calculate the print time multiplier for shell-dominated parts.

    Thin-walled parts print slower than bulk infill: more direction changes
    and slower perimeter moves. The penalty grows quadratically with the
    shell ratio:

        1.0 + shell_ratio² * 2.0

    Args:
        shell_ratio: Shell fraction of the deposited volume (0-1)

    Returns:
        Multiplier from 1.0 (no shell) to 3.0 (all shell)

    Raises:
        ValueError: If shell_ratio is not in the range [0, 1]
    """
    if not 0 <= shell_ratio <= 1:
        raise ValueError(f"shell_ratio must be between 0 and 1, got {shell_ratio}")

    return 1.0 + shell_ratio**2 * SHELL_PENALTY_WEIGHT
