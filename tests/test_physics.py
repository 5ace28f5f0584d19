"""
Tests for physics calculations.

Tests unit helpers and the Breguet mission model.
"""

import math

import pytest

from missioncost.models.inputs import MissionParameters
from missioncost.physics.breguet import (
    MissionModel,
    calculate_cost_proxy,
    calculate_fuel_required,
    calculate_log_mass_ratio,
    check_mtow_feasibility,
    evaluate,
)
from missioncost.physics.units import SECONDS_PER_HOUR, km_to_m, m_to_km, per_hour_to_per_second


def reference_fuel(params: MissionParameters) -> float:
    """Straight-line double precision evaluation of the fuel equation."""
    ln_ratio = (params.range_m * (params.sfc_per_hr / 3600)) / (params.speed_mps * params.ld)
    wf = params.oew_kg + params.payload_kg
    return (wf * math.exp(ln_ratio) - wf) * params.reserve


class TestUnits:
    """Tests for units.py module."""

    def test_seconds_per_hour(self):
        """Test the SFC conversion constant is exactly 3600."""
        assert SECONDS_PER_HOUR == 3600.0

    def test_per_hour_matches_division(self):
        """Test that the SFC conversion is bit-identical to dividing by 3600."""
        for sfc in (0.5, 0.6, 0.6125, 0.7):
            assert per_hour_to_per_second(sfc) == sfc / 3600

    def test_km_conversion(self):
        """Test km/m round trip."""
        assert km_to_m(1200.0) == pytest.approx(1_200_000.0)
        assert m_to_km(1_200_000.0) == pytest.approx(1200.0)


class TestBreguetSteps:
    """Tests for the individual equation steps."""

    def test_log_mass_ratio(self):
        """Test ln(Wi/Wf) = R * SFC / (V * L/D)."""
        # 1.2e6 m * (0.6 / 3600) 1/s / (230 m/s * 17) = 200 / 3910
        ratio = calculate_log_mass_ratio(17.0, 0.6, 1_200_000.0, 230.0)
        assert ratio == pytest.approx(200.0 / 3910.0, rel=1e-12)

    def test_fuel_required_includes_reserve(self):
        """Test that the reserve multiplies the burned fuel."""
        no_reserve = calculate_fuel_required(58000.0, 0.05, 1.0)
        with_reserve = calculate_fuel_required(58000.0, 0.05, 1.05)

        assert no_reserve == pytest.approx(58000.0 * (math.exp(0.05) - 1.0))
        assert with_reserve == pytest.approx(1.05 * no_reserve)

    def test_fuel_required_zero_ratio(self):
        """Test that a zero log ratio burns no fuel."""
        assert calculate_fuel_required(58000.0, 0.0, 1.05) == 0.0

    def test_exp_overflow_gives_infinity(self):
        """Test that an overflowing mass ratio propagates as inf, not an error."""
        fuel = calculate_fuel_required(58000.0, 1000.0, 1.05)
        assert math.isinf(fuel)
        assert fuel > 0

    def test_feasibility_is_non_strict(self):
        """Test that takeoff weight equal to MTOW is feasible."""
        assert check_mtow_feasibility(42000.0, 16000.0, 20000.0, 78000.0)
        assert not check_mtow_feasibility(42000.0, 16000.0, 20000.5, 78000.0)

    def test_feasibility_nan_fuel(self):
        """Test that NaN fuel is never feasible."""
        assert not check_mtow_feasibility(42000.0, 16000.0, math.nan, 78000.0)

    def test_cost_proxy(self):
        """Test cost = fuel * price."""
        assert calculate_cost_proxy(1000.0, 0.75) == 750.0


class TestEvaluate:
    """Tests for the mission model."""

    def test_baseline_scenario(self, baseline_params):
        """Test the reference mission: about 3196 kg of fuel, cost about 2397."""
        result = evaluate(baseline_params)

        assert result.is_valid
        assert result.fuel_required_kg == pytest.approx(3196.1, abs=1.0)
        assert result.cost == pytest.approx(2397.1, abs=1.0)
        assert result.feasible is True

    def test_matches_reference_computation(self, baseline_params):
        """Test agreement with a direct double-precision evaluation."""
        result = evaluate(baseline_params)

        assert result.fuel_required_kg == pytest.approx(reference_fuel(baseline_params), rel=1e-12)

    @pytest.mark.parametrize("field", ["ld", "sfc_per_hr", "range_m", "speed_mps"])
    def test_zero_input_is_invalid(self, baseline_params, field):
        """Test that each Breguet input set to zero gives the invalid sentinel."""
        result = evaluate(baseline_params.with_value(field, 0.0))

        assert not result.is_valid
        assert math.isnan(result.fuel_required_kg)
        assert math.isnan(result.cost)
        assert result.feasible is False
        assert field in result.invalid_reason

    @pytest.mark.parametrize("field", ["ld", "sfc_per_hr", "range_m", "speed_mps"])
    def test_negative_input_is_invalid(self, baseline_params, field):
        """Test that negative Breguet inputs are rejected too."""
        result = evaluate(baseline_params.with_value(field, -1.0))

        assert not result.is_valid
        assert result.feasible is False

    def test_invalid_reason_lists_every_bad_input(self, baseline_params):
        """Test that all offending inputs are reported."""
        params = baseline_params.model_copy(update={"ld": 0.0, "speed_mps": -230.0})
        result = evaluate(params)

        assert "ld" in result.invalid_reason
        assert "speed_mps" in result.invalid_reason

    def test_other_inputs_not_validated(self, baseline_params):
        """Test that negative payload and reserve < 1 still evaluate."""
        params = baseline_params.model_copy(update={"payload_kg": -1000.0, "reserve": 0.9})
        result = evaluate(params)

        assert result.is_valid
        assert result.fuel_required_kg == pytest.approx(reference_fuel(params), rel=1e-12)

    def test_fuel_strictly_decreasing_in_ld(self, baseline_params):
        """Test monotonicity: higher L/D always needs less fuel."""
        fuels = [
            evaluate(baseline_params.with_value("ld", 14.0 + 0.1 * i)).fuel_required_kg
            for i in range(61)
        ]

        assert all(a > b for a, b in zip(fuels, fuels[1:]))

    def test_fuel_increasing_in_sfc(self, baseline_params):
        """Test that a thirstier engine burns more fuel."""
        low = evaluate(baseline_params.with_value("sfc_per_hr", 0.5))
        high = evaluate(baseline_params.with_value("sfc_per_hr", 0.7))

        assert high.fuel_required_kg > low.fuel_required_kg

    def test_cost_is_linear_in_price(self, baseline_params):
        """Test that doubling the fuel price exactly doubles cost."""
        base = evaluate(baseline_params)
        doubled = evaluate(baseline_params.with_value("fuel_price_per_kg", 1.5))

        assert doubled.fuel_required_kg == base.fuel_required_kg
        assert doubled.cost == 2 * base.cost
        assert base.cost == base.fuel_required_kg * baseline_params.fuel_price_per_kg

    def test_zero_price_is_valid_zero_cost(self, baseline_params):
        """Test that a free fuel price gives a valid zero cost."""
        result = evaluate(baseline_params.with_value("fuel_price_per_kg", 0.0))

        assert result.is_valid
        assert result.cost == 0.0

    def test_feasibility_boundary(self, baseline_params):
        """Test that OEW + payload + fuel == MTOW exactly is feasible."""
        fuel = evaluate(baseline_params).fuel_required_kg
        mtow = baseline_params.oew_kg + baseline_params.payload_kg + fuel

        at_limit = evaluate(baseline_params.with_value("mtow_kg", mtow))
        below_limit = evaluate(baseline_params.with_value("mtow_kg", math.nextafter(mtow, 0.0)))

        assert at_limit.feasible is True
        assert below_limit.feasible is False

    def test_mtow_below_zero_fuel_weight(self, heavy_params):
        """Test that an MTOW below OEW + payload is infeasible."""
        result = evaluate(heavy_params)

        assert result.is_valid
        assert result.feasible is False

    def test_overflow_propagates(self, baseline_params):
        """Test that an extreme range gives infinite fuel and is infeasible."""
        result = evaluate(baseline_params.with_value("range_m", 1e12))

        assert result.is_valid
        assert math.isinf(result.fuel_required_kg)
        assert result.feasible is False

    def test_deterministic(self, baseline_params):
        """Test that repeated evaluation gives identical results."""
        assert evaluate(baseline_params) == evaluate(baseline_params)

    def test_mission_model_wrapper(self, baseline_params):
        """Test that MissionModel delegates to evaluate."""
        model = MissionModel()

        assert model.evaluate(baseline_params) == evaluate(baseline_params)
        assert model(baseline_params) == evaluate(baseline_params)
