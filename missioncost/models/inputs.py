"""
Input models for mission evaluation.

These models define the single-leg cruise mission that the fuel/cost model
evaluates. This is for CONCEPTUAL STUDIES ONLY - steady cruise, no climb or
descent segments.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SweepAxis(str, Enum):
    """Scalar field of MissionParameters that a sweep may vary."""
    LD = "ld"
    SFC = "sfc_per_hr"
    RANGE = "range_m"
    SPEED = "speed_mps"
    OEW = "oew_kg"
    PAYLOAD = "payload_kg"
    MTOW = "mtow_kg"
    RESERVE = "reserve"
    FUEL_PRICE = "fuel_price_per_kg"


class MissionParameters(BaseModel):
    """
    Parameters fully defining one mission evaluation.

    LD, SFC, range and speed are NOT constrained here: non-positive values are
    allowed through so the mission model can report them as an invalid result
    instead of the whole sweep or grid failing validation.
    OEW, payload, MTOW, reserve and fuel price are not sanity-checked either.
    """
    model_config = ConfigDict(
        frozen=True,
        ser_json_inf_nan="strings",
        json_schema_extra={
            "example": {
                "ld": 17.0,
                "sfc_per_hr": 0.60,
                "range_m": 1_200_000.0,
                "speed_mps": 230.0,
                "oew_kg": 42000.0,
                "payload_kg": 16000.0,
                "mtow_kg": 78000.0,
                "reserve": 1.05,
                "fuel_price_per_kg": 0.75,
            }
        },
    )

    # Aerodynamics and propulsion
    ld: float = Field(..., description="Cruise lift-to-drag ratio")
    sfc_per_hr: float = Field(..., description="Specific fuel consumption in 1/h")

    # Mission
    range_m: float = Field(..., description="Mission range in metres")
    speed_mps: float = Field(..., description="Cruise speed in m/s")

    # Simple mass model
    oew_kg: float = Field(..., description="Operating empty weight in kg")
    payload_kg: float = Field(..., description="Payload in kg")
    mtow_kg: float = Field(..., description="Maximum takeoff weight limit in kg")

    # Margins and cost
    reserve: float = Field(
        default=1.05,
        description="Fuel reserve multiplier (1.05 adds a 5% margin)"
    )
    fuel_price_per_kg: float = Field(
        default=0.75,
        description="Fuel price in currency units per kg"
    )

    @classmethod
    def baseline(cls) -> "MissionParameters":
        """Reference short-haul mission used by the default study."""
        return cls(
            ld=17.0,
            sfc_per_hr=0.60,
            range_m=1_200_000.0,
            speed_mps=230.0,
            oew_kg=42000.0,
            payload_kg=16000.0,
            mtow_kg=78000.0,
            reserve=1.05,
            fuel_price_per_kg=0.75,
        )

    @property
    def zero_fuel_weight_kg(self) -> float:
        """OEW plus payload (the final cruise weight)."""
        return self.oew_kg + self.payload_kg

    def with_value(self, axis: SweepAxis | str, value: float) -> "MissionParameters":
        """
        Return a copy with one field replaced.

        Args:
            axis: Field to override (SweepAxis or its string value)
            value: New value for the field

        Raises:
            ValueError: If axis does not name a MissionParameters field
        """
        field_name = SweepAxis(axis).value
        return self.model_copy(update={field_name: float(value)})
