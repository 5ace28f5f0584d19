"""
Study configuration and results.

A study is the reference workflow: a baseline evaluation, two sensitivity
sweeps (fuel vs L/D, cost vs SFC) and an (L/D, SFC) grid search.
"""

from typing import Any, Optional

import numpy as np
from pydantic import BaseModel, Field, field_validator

from missioncost.models.inputs import MissionParameters
from missioncost.models.outputs import GridSearchReport, MissionResult, SweepResult
from missioncost.physics.units import km_to_m


class AxisRange(BaseModel):
    """Evenly spaced axis, endpoints included."""
    start: float = Field(..., description="First value")
    stop: float = Field(..., description="Last value")
    num: int = Field(..., ge=1, description="Number of values")

    def values(self) -> list[float]:
        """Axis values, same spacing as numpy.linspace."""
        return np.linspace(self.start, self.stop, self.num).tolist()


class StudyConfig(BaseModel):
    """
    Full study definition, loaded from JSON.

    ``parameters`` may give the range as ``range_km`` instead of ``range_m``.
    """
    name: str = Field(default="Short-haul baseline", description="Study name")
    parameters: MissionParameters = Field(
        default_factory=MissionParameters.baseline,
        description="Baseline mission; sweeps and grid override L/D and/or SFC"
    )
    ld_sweep: AxisRange = Field(
        default_factory=lambda: AxisRange(start=14.0, stop=20.0, num=61),
        description="L/D values for the fuel vs L/D sweep"
    )
    sfc_sweep: AxisRange = Field(
        default_factory=lambda: AxisRange(start=0.50, stop=0.70, num=81),
        description="SFC values (1/h) for the cost vs SFC sweep"
    )
    ld_grid: AxisRange = Field(
        default_factory=lambda: AxisRange(start=14.0, stop=20.0, num=121),
        description="L/D axis of the grid search"
    )
    sfc_grid: AxisRange = Field(
        default_factory=lambda: AxisRange(start=0.50, stop=0.70, num=161),
        description="SFC axis (1/h) of the grid search"
    )
    max_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Thread pool size for sweeps and grid (None = serial)"
    )

    @field_validator("parameters", mode="before")
    @classmethod
    def convert_range_km(cls, v: Any) -> Any:
        """Accept range_km in place of range_m."""
        if isinstance(v, dict) and "range_km" in v:
            v = dict(v)
            range_km = v.pop("range_km")
            if "range_m" in v:
                raise ValueError("give either range_km or range_m, not both")
            v["range_m"] = km_to_m(range_km)
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Short-haul baseline",
                "parameters": {
                    "ld": 17.0,
                    "sfc_per_hr": 0.60,
                    "range_km": 1200.0,
                    "speed_mps": 230.0,
                    "oew_kg": 42000.0,
                    "payload_kg": 16000.0,
                    "mtow_kg": 78000.0,
                    "reserve": 1.05,
                    "fuel_price_per_kg": 0.75,
                },
                "ld_sweep": {"start": 14.0, "stop": 20.0, "num": 61},
                "sfc_sweep": {"start": 0.50, "stop": 0.70, "num": 81},
                "ld_grid": {"start": 14.0, "stop": 20.0, "num": 121},
                "sfc_grid": {"start": 0.50, "stop": 0.70, "num": 161},
            }
        }
    }


class StudyResult(BaseModel):
    """Everything a reporting or plotting layer needs from one study."""
    name: str = Field(..., description="Study name")
    baseline_parameters: MissionParameters = Field(..., description="Baseline mission")
    baseline: MissionResult = Field(..., description="Baseline evaluation")
    ld_sweep: SweepResult = Field(..., description="Fuel/cost vs L/D")
    sfc_sweep: SweepResult = Field(..., description="Fuel/cost vs SFC")
    grid_search: GridSearchReport = Field(..., description="Grid tables and best point")
    warnings: list[str] = Field(default_factory=list, description="Notes about the results")
