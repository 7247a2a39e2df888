"""Tests for the print cost and time estimator."""

import math
from dataclasses import replace

import pytest

from print_estimator.errors import InvalidInputError, ZeroFlowRateError
from print_estimator.estimator import SETUP_FEE, estimate
from print_estimator.profiles import (
    PartProfile,
    PrinterProfile,
    create_part_parameters,
    create_printer_settings,
)


@pytest.fixture
def standard_printer():
    """Standard 0.4mm printer profile."""
    return create_printer_settings(PrinterProfile.STANDARD_04)


@pytest.fixture
def small_part():
    """Small reference part."""
    return create_part_parameters(PartProfile.SMALL)


class TestSmallPartOnStandardPrinter:
    """Worked example: "Small Part" on "Standard 0.4mm".

    wall thickness  = 0.4 * 2                 = 0.8 mm
    shell volume    = min(5000 * 0.8, 10000)  = 4000 mm³
    infill volume   = (10000 - 4000) * 0.2    = 1200 mm³
    shell ratio     = 4000 / 5200             = 10/13
    shell penalty   = 1 + (10/13)² * 2        = 369/169
    wall time       = 4000 / 3.2              = 1250 s
    infill time     = 1200 / 4.0              = 300 s
    total time      = 1550 * 369/169 * 1.3 / 3600 h
    """

    @pytest.fixture
    def result(self, standard_printer, small_part):
        return estimate(standard_printer, small_part)

    def test_volume_split(self, result):
        """Test the shell/infill split."""
        assert result.shell_volume == pytest.approx(4000.0, rel=1e-6)
        assert result.infill_volume == pytest.approx(1200.0, rel=1e-6)
        assert result.total_material_volume == pytest.approx(5200.0, rel=1e-6)

    def test_shell_ratio_and_penalty(self, result):
        """Test the shell ratio and the derived time penalty."""
        assert result.shell_ratio == pytest.approx(0.769230769, rel=1e-6)
        assert result.shell_penalty == pytest.approx(2.183431953, rel=1e-6)

    def test_times(self, result):
        """Test raw wall/infill times and the penalised total."""
        assert result.wall_time_hours == pytest.approx(1250.0 / 3600, rel=1e-6)
        assert result.infill_time_hours == pytest.approx(300.0 / 3600, rel=1e-6)
        assert result.print_time_hours == pytest.approx(1.222115385, rel=1e-6)

    def test_material(self, result):
        """Test deposited volume, mass and material cost."""
        assert result.material_volume_cm3 == pytest.approx(5.2, rel=1e-6)
        assert result.weight_kg == pytest.approx(0.006448, rel=1e-6)
        assert result.material_cost == pytest.approx(0.1612, rel=1e-6)

    def test_costs(self, result):
        """Test machine cost and total including setup fee."""
        assert result.machine_cost == pytest.approx(2.444230769, rel=1e-6)
        assert result.setup_cost == SETUP_FEE == 5.0
        assert result.total_cost == pytest.approx(7.605430769, rel=1e-6)


class TestReferenceScenarios:
    """Other preset combinations with hand-computed values."""

    def test_thin_walled_part_is_all_shell(self, standard_printer):
        """Test that a thin-walled part clamps to a solid shell with max penalty."""
        part = create_part_parameters(PartProfile.THIN_WALLED)
        result = estimate(standard_printer, part)

        # 100000 mm² * 0.8 mm = 80000 mm³ clamps to the 50000 mm³ part
        assert result.shell_volume == 50_000.0
        assert result.infill_volume == 0.0
        assert result.shell_ratio == 1.0
        assert result.shell_penalty == 3.0
        # 50000 / 3.2 = 15625 s, * 3.0 * 1.3 / 3600
        assert result.print_time_hours == pytest.approx(16.927083333, rel=1e-6)

    def test_large_solid_part(self, standard_printer):
        """Test a bulky part dominated by infill."""
        part = create_part_parameters(PartProfile.LARGE_SOLID)
        result = estimate(standard_printer, part)

        # shell 120000, infill 880000 * 0.3 = 264000
        assert result.shell_volume == pytest.approx(120_000.0)
        assert result.infill_volume == pytest.approx(264_000.0)
        assert result.shell_ratio == pytest.approx(0.3125)
        assert result.shell_penalty == pytest.approx(1.1953125)

    @pytest.mark.parametrize("printer_profile", list(PrinterProfile))
    @pytest.mark.parametrize("part_profile", list(PartProfile))
    def test_all_presets_produce_bounded_results(self, printer_profile, part_profile):
        """Test that every preset combination yields a sane result."""
        result = estimate(
            create_printer_settings(printer_profile), create_part_parameters(part_profile)
        )

        assert result.total_cost >= 5.0
        assert 0.0 <= result.shell_ratio <= 1.0
        assert 1.0 <= result.shell_penalty <= 3.0
        assert result.print_time_hours > 0
        assert result.material_cost >= 0
        assert result.machine_cost >= 0


class TestDegenerateGeometry:
    """Inputs that deposit no material."""

    def test_zero_volume_costs_only_setup(self, standard_printer, small_part):
        """Test that an empty part costs exactly the setup fee."""
        part = replace(small_part, volume=0.0)
        result = estimate(standard_printer, part)

        assert result.shell_volume == 0.0
        assert result.infill_volume == 0.0
        assert result.shell_ratio == 0.0
        assert result.shell_penalty == 1.0
        assert result.print_time_hours == 0.0
        assert result.material_cost == 0.0
        assert result.machine_cost == 0.0
        assert result.total_cost == 5.0

    def test_no_surface_and_no_infill(self, standard_printer, small_part):
        """Test that zero surface area with hollow infill deposits nothing."""
        part = replace(small_part, surface_area=0.0, infill_ratio=0.0)
        result = estimate(standard_printer, part)

        assert result.total_material_volume == 0.0
        assert result.shell_ratio == 0.0
        assert result.total_cost == 5.0

    def test_no_walls_is_all_infill(self, standard_printer, small_part):
        """Test that zero walls leaves the whole part to infill."""
        printer = replace(standard_printer, num_walls=0)
        result = estimate(printer, small_part)

        assert result.shell_volume == 0.0
        assert result.infill_volume == pytest.approx(2000.0)
        assert result.shell_ratio == 0.0
        assert result.shell_penalty == 1.0
        assert result.wall_time_hours == 0.0


class TestZeroFlowRate:
    """Flow rates that underflow to zero."""

    @pytest.fixture
    def vanishing_printer(self, standard_printer):
        # 1e-200 * 1e-200 underflows to 0.0
        return replace(standard_printer, nozzle_diameter=1e-200, layer_height=1e-200)

    def test_zero_flow_with_material_raises(self, vanishing_printer, small_part):
        """Test that material to print at zero flow is rejected."""
        with pytest.raises(ZeroFlowRateError):
            estimate(vanishing_printer, small_part)

    def test_zero_flow_without_material_is_fine(self, vanishing_printer, small_part):
        """Test that nothing to print at zero flow takes no time."""
        result = estimate(vanishing_printer, replace(small_part, volume=0.0))
        assert result.print_time_hours == 0.0
        assert result.total_cost == 5.0

    def test_tiny_flow_rate_raises_instead_of_infinite_time(self, standard_printer, small_part):
        """Test that a positive but tiny flow rate is rejected, not turned into inf."""
        # 1e-160 * 1e-160 is a positive subnormal; infill time overflows
        printer = replace(
            standard_printer,
            nozzle_diameter=1e-160,
            layer_height=1e-160,
            machine_cost_per_hour=0.0,
        )

        with pytest.raises(ZeroFlowRateError, match="too small"):
            estimate(printer, small_part)


class TestOverflow:
    """Finite inputs whose results would overflow."""

    def test_huge_machine_rate_raises(self, standard_printer):
        """Test that an overflowing machine cost is rejected."""
        printer = replace(standard_printer, machine_cost_per_hour=1e308)
        part = create_part_parameters(PartProfile.LARGE_SOLID)

        with pytest.raises(InvalidInputError, match="estimate overflows"):
            estimate(printer, part)

    @pytest.mark.parametrize("nozzle_diameter", [1e-150, 1e-155, 1e-160, 1e-170])
    def test_results_finite_or_rejected(self, standard_printer, small_part, nozzle_diameter):
        """Test that an estimate is either finite with the setup fee floor or refused."""
        printer = replace(
            standard_printer,
            nozzle_diameter=nozzle_diameter,
            layer_height=nozzle_diameter,
            machine_cost_per_hour=0.0,
        )

        try:
            result = estimate(printer, small_part)
        except InvalidInputError:
            return
        assert math.isfinite(result.print_time_hours)
        assert result.total_cost >= 5.0


class TestEstimateProperties:
    """General properties of the estimate."""

    def test_wrong_argument_types(self, standard_printer, small_part):
        """Test that records must be passed in the right order and type."""
        with pytest.raises(TypeError, match="printer must be PrinterSettings"):
            estimate(small_part, standard_printer)
        with pytest.raises(TypeError, match="part must be PartParameters"):
            estimate(standard_printer, {"volume": 1000.0})

    def test_idempotent(self, standard_printer, small_part):
        """Test that identical inputs give identical results."""
        assert estimate(standard_printer, small_part) == estimate(standard_printer, small_part)

    def test_inputs_unchanged(self, standard_printer, small_part):
        """Test that the estimate leaves its inputs untouched."""
        printer_before = replace(standard_printer)
        part_before = replace(small_part)

        estimate(standard_printer, small_part)

        assert standard_printer == printer_before
        assert small_part == part_before

    def test_cm3_round_trip(self, standard_printer, small_part):
        """Test that reported cm³ converts back to the deposited mm³."""
        result = estimate(standard_printer, small_part)
        assert result.material_volume_cm3 * 1000 == pytest.approx(
            result.total_material_volume, rel=1e-9
        )

    def test_shell_never_exceeds_part_volume(self, standard_printer, small_part):
        """Test the shell clamp across wall counts and surface areas."""
        for num_walls in range(0, 30, 3):
            for surface_area in (0.0, 1.0, 5000.0, 1e6, 1e9):
                printer = replace(standard_printer, num_walls=num_walls)
                part = replace(small_part, surface_area=surface_area)
                result = estimate(printer, part)
                assert result.shell_volume <= part.volume

    def test_infill_ratio_monotonic_in_material(self, standard_printer, small_part):
        """Test that more infill never means less material or material cost."""
        results = [
            estimate(standard_printer, replace(small_part, infill_ratio=i / 10))
            for i in range(11)
        ]

        infill = [r.infill_volume for r in results]
        material_cost = [r.material_cost for r in results]
        assert infill == sorted(infill)
        assert material_cost == sorted(material_cost)

    def test_infill_ratio_monotonic_when_infill_dominated(self, standard_printer):
        """Test that time and cost rise with infill on a bulky part."""
        part = create_part_parameters(PartProfile.LARGE_SOLID)
        results = [
            estimate(standard_printer, replace(part, infill_ratio=i / 10)) for i in range(3, 11)
        ]

        times = [r.print_time_hours for r in results]
        costs = [r.total_cost for r in results]
        assert times == sorted(times)
        assert costs == sorted(costs)

    def test_infill_dilutes_shell_penalty(self, standard_printer, small_part):
        """Test that a hollow shell-only part can take longer than a filled one.

        Going from 0% to 20% infill adds 1200 mm³ but drops the penalty from
        3.0 to ~2.18, so the total time falls.
        """
        hollow = estimate(standard_printer, replace(small_part, infill_ratio=0.0))
        filled = estimate(standard_printer, small_part)

        assert hollow.shell_penalty == 3.0
        assert hollow.print_time_hours > filled.print_time_hours

    def test_num_walls_monotonic(self, standard_printer, small_part):
        """Test that more walls never shrink the shell or the penalty."""
        results = [
            estimate(replace(standard_printer, num_walls=n), small_part) for n in range(0, 15)
        ]

        shells = [r.shell_volume for r in results]
        penalties = [r.shell_penalty for r in results]
        assert shells == sorted(shells)
        assert penalties == sorted(penalties)
        # Thick enough walls make the whole part shell
        assert shells[-1] == small_part.volume
