"""
Unit registry and helpers for mission calculations.

Uses pint so that the fixed unit contract of the mission model
(range in m, speed in m/s, SFC in 1/h, masses in kg) is stated in one place.
"""

import pint

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# Seconds in one hour, used to convert SFC from 1/h to 1/s (exactly 3600.0)
SECONDS_PER_HOUR = Q_(1.0, "hour").to("second").magnitude


def km_to_m(distance_km: float) -> float:
    """Convert a distance in kilometres to metres."""
    return Q_(distance_km, "km").to("m").magnitude


def m_to_km(distance_m: float) -> float:
    """Convert a distance in metres to kilometres."""
    return Q_(distance_m, "m").to("km").magnitude


def per_hour_to_per_second(rate_per_hr: float) -> float:
    """
    Convert a rate in 1/h to 1/s.

    Divides by SECONDS_PER_HOUR rather than multiplying by a pint conversion
    factor so the result is bit-identical to ``rate / 3600``.
    """
    return rate_per_hr / SECONDS_PER_HOUR
