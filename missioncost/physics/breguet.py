"""
Breguet-range mission fuel and cost model.

Provides the closed-form single-leg cruise model:
- Log mass ratio from the Breguet range equation
- Fuel required (with reserve multiplier)
- MTOW feasibility check
- Cost proxy (fuel burn * fuel price)

ASSUMPTIONS:
- Steady cruise at constant L/D, SFC and speed for the whole range
- Final cruise weight is OEW + payload (all mission fuel burned)
- Reserve is a simple multiplier on the burned fuel
- No climb, descent or taxi allowances
"""

import math

from missioncost.models.inputs import MissionParameters
from missioncost.models.outputs import MissionResult
from missioncost.physics.units import per_hour_to_per_second


def calculate_log_mass_ratio(
    ld: float,
    sfc_per_hr: float,
    range_m: float,
    speed_mps: float,
) -> float:
    """
    Natural log of the initial-to-final weight ratio, ln(Wi/Wf).

    Uses the Breguet range equation rearranged for the mass ratio:
    ln(Wi/Wf) = R * SFC / (V * L/D), with SFC converted to 1/s.

    Args:
        ld: Cruise lift-to-drag ratio
        sfc_per_hr: Specific fuel consumption in 1/h
        range_m: Mission range in metres
        speed_mps: Cruise speed in m/s

    Returns:
        ln(Wi/Wf), dimensionless
    """
    sfc_per_s = per_hour_to_per_second(sfc_per_hr)
    return (range_m * sfc_per_s) / (speed_mps * ld)


def calculate_fuel_required(
    final_weight_kg: float,
    log_mass_ratio: float,
    reserve: float,
) -> float:
    """
    Fuel required for the leg, including the reserve multiplier.

    Wi = Wf * exp(ln_ratio); fuel = (Wi - Wf) * reserve.

    An exp overflow gives an infinite initial weight rather than an error,
    so the result follows ordinary floating-point semantics (inf or NaN).
    """
    try:
        growth = math.exp(log_mass_ratio)
    except OverflowError:
        growth = math.inf
    initial_weight_kg = final_weight_kg * growth
    return (initial_weight_kg - final_weight_kg) * reserve


def check_mtow_feasibility(
    oew_kg: float,
    payload_kg: float,
    fuel_kg: float,
    mtow_kg: float,
) -> bool:
    """
    Whether takeoff weight is within MTOW.

    Non-strict: a takeoff weight exactly equal to MTOW is feasible.
    A NaN fuel mass is never feasible.
    """
    return (oew_kg + payload_kg + fuel_kg) <= mtow_kg


def calculate_cost_proxy(fuel_kg: float, fuel_price_per_kg: float) -> float:
    """Trip cost proxy: fuel burn times fuel price."""
    return fuel_kg * fuel_price_per_kg


def _invalid_inputs(params: MissionParameters) -> list[str]:
    """Names of the Breguet inputs that are not strictly positive."""
    checks = {
        "ld": params.ld,
        "sfc_per_hr": params.sfc_per_hr,
        "range_m": params.range_m,
        "speed_mps": params.speed_mps,
    }
    return [name for name, value in checks.items() if value <= 0]


def evaluate(params: MissionParameters) -> MissionResult:
    """
    Evaluate fuel, cost and feasibility for one mission.

    Args:
        params: Mission definition

    Returns:
        MissionResult. If LD, SFC, range or speed is not positive the result
        is the invalid sentinel (NaN fuel and cost, feasible=False); nothing
        is raised so sweeps and grids keep evaluating neighbouring points.
    """
    bad = _invalid_inputs(params)
    if bad:
        return MissionResult.invalid(f"non-positive input: {', '.join(bad)}")

    log_ratio = calculate_log_mass_ratio(
        params.ld,
        params.sfc_per_hr,
        params.range_m,
        params.speed_mps,
    )
    fuel_kg = calculate_fuel_required(
        params.oew_kg + params.payload_kg,
        log_ratio,
        params.reserve,
    )
    feasible = check_mtow_feasibility(
        params.oew_kg,
        params.payload_kg,
        fuel_kg,
        params.mtow_kg,
    )
    cost = calculate_cost_proxy(fuel_kg, params.fuel_price_per_kg)

    return MissionResult(
        fuel_required_kg=fuel_kg,
        cost=cost,
        feasible=feasible,
    )


class MissionModel:
    """
    Object wrapper around :func:`evaluate`.

    Stateless; one instance can be shared between sweeps, grids and threads.
    """

    def evaluate(self, params: MissionParameters) -> MissionResult:
        return evaluate(params)

    def __call__(self, params: MissionParameters) -> MissionResult:
        return evaluate(params)
