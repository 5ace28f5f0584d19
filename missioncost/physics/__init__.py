"""
Mission physics.

Closed-form Breguet-range fuel model, MTOW feasibility and cost proxy,
with pint-based unit helpers. Steady cruise only.
"""

from missioncost.physics.units import ureg, Q_, SECONDS_PER_HOUR, km_to_m, m_to_km
from missioncost.physics.breguet import (
    calculate_log_mass_ratio,
    calculate_fuel_required,
    check_mtow_feasibility,
    calculate_cost_proxy,
    evaluate,
    MissionModel,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "SECONDS_PER_HOUR",
    "km_to_m",
    "m_to_km",
    # Breguet model
    "calculate_log_mass_ratio",
    "calculate_fuel_required",
    "check_mtow_feasibility",
    "calculate_cost_proxy",
    "evaluate",
    "MissionModel",
]
