"""
Output models for mission evaluation, sweeps and grid search.

These models are the values handed to reporting and plotting collaborators.
Grid tables use a fixed axis order: row = SFC index, column = L/D index.

In JSON, NaN and infinities are written as the strings "NaN", "Infinity" and
"-Infinity", so an invalid cell and an overflowed cell stay distinct and a
dumped report validates back into its model.
"""

import math
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from missioncost.models.inputs import MissionParameters, SweepAxis


class MissionResult(BaseModel):
    """
    Fuel, cost and MTOW feasibility for one mission evaluation.

    An invalid result (non-positive LD, SFC, range or speed) carries NaN fuel
    and cost, feasible=False and an invalid_reason. Build it with
    ``MissionResult.invalid`` so the three fields are always set together.
    """
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    fuel_required_kg: float = Field(..., description="Fuel required incl. reserve (kg), NaN if invalid")
    cost: float = Field(..., description="Cost proxy per trip, NaN if invalid")
    feasible: bool = Field(..., description="True if OEW + payload + fuel <= MTOW")
    invalid_reason: Optional[str] = Field(
        default=None,
        description="Why the inputs were rejected; None for a valid evaluation"
    )

    @classmethod
    def invalid(cls, reason: str) -> "MissionResult":
        """Sentinel result for inputs outside the model's domain."""
        return cls(
            fuel_required_kg=math.nan,
            cost=math.nan,
            feasible=False,
            invalid_reason=reason,
        )

    @property
    def is_valid(self) -> bool:
        """Whether the inputs were inside the model's domain."""
        return self.invalid_reason is None


class SweepPoint(BaseModel):
    """One sample of a one-dimensional sweep."""
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    value: float = Field(..., description="Value of the swept parameter")
    result: MissionResult = Field(..., description="Evaluation at this value")


class SweepResult(BaseModel):
    """
    Ordered results of varying one parameter with all others fixed.

    ``points`` has the same order and length as the swept values.
    """
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    axis: SweepAxis = Field(..., description="Parameter that was varied")
    fixed_parameters: MissionParameters = Field(
        ...,
        description="Parameters held constant (the swept field is overridden per point)"
    )
    points: list[SweepPoint] = Field(..., description="One point per swept value, in input order")

    @property
    def values(self) -> list[float]:
        return [p.value for p in self.points]

    @property
    def fuel(self) -> list[float]:
        return [p.result.fuel_required_kg for p in self.points]

    @property
    def cost(self) -> list[float]:
        return [p.result.cost for p in self.points]

    @property
    def feasible(self) -> list[bool]:
        return [p.result.feasible for p in self.points]

    @property
    def invalid_count(self) -> int:
        """Number of points whose inputs were rejected."""
        return sum(1 for p in self.points if not p.result.is_valid)


class GridPoint(BaseModel):
    """Location of a grid cell by index and by value."""
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    ld_index: int = Field(..., ge=0, description="Column index (L/D axis)")
    sfc_index: int = Field(..., ge=0, description="Row index (SFC axis)")
    ld: float = Field(..., description="L/D at this cell")
    sfc_per_hr: float = Field(..., description="SFC at this cell (1/h)")


class GridResult(BaseModel):
    """
    Dense fuel, cost and feasibility tables over an (SFC, L/D) grid.

    Tables are indexed ``table[sfc_index][ld_index]``: one row per SFC value,
    one column per L/D value. Every cell is filled.
    """
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    ld_values: list[float] = Field(..., description="L/D axis (columns)")
    sfc_values: list[float] = Field(..., description="SFC axis in 1/h (rows)")
    fuel_table: list[list[float]] = Field(..., description="Fuel required (kg), [sfc][ld]")
    cost_table: list[list[float]] = Field(..., description="Cost proxy, [sfc][ld]")
    feasible_table: list[list[bool]] = Field(..., description="MTOW feasibility, [sfc][ld]")

    @model_validator(mode="after")
    def check_dimensions(self) -> "GridResult":
        """Table dimensions must match the axis lengths exactly."""
        rows = len(self.sfc_values)
        cols = len(self.ld_values)
        for name in ("fuel_table", "cost_table", "feasible_table"):
            table = getattr(self, name)
            if len(table) != rows:
                raise ValueError(f"{name} has {len(table)} rows, expected {rows} (one per SFC value)")
            for r, row in enumerate(table):
                if len(row) != cols:
                    raise ValueError(
                        f"{name} row {r} has {len(row)} cells, expected {cols} (one per L/D value)"
                    )
        return self

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns) = (number of SFC values, number of L/D values)."""
        return (len(self.sfc_values), len(self.ld_values))

    def cell(self, sfc_index: int, ld_index: int) -> tuple[float, float, bool]:
        """(fuel, cost, feasible) stored at one cell."""
        return (
            self.fuel_table[sfc_index][ld_index],
            self.cost_table[sfc_index][ld_index],
            self.feasible_table[sfc_index][ld_index],
        )

    def point(self, sfc_index: int, ld_index: int) -> GridPoint:
        return GridPoint(
            ld_index=ld_index,
            sfc_index=sfc_index,
            ld=self.ld_values[ld_index],
            sfc_per_hr=self.sfc_values[sfc_index],
        )

    def infeasible_points(self) -> list[GridPoint]:
        """
        Coordinates of every infeasible cell.

        Ordered column-major (L/D index outer, SFC index inner), the same order
        the optimiser scans in.
        """
        rows, cols = self.shape
        return [
            self.point(r, c)
            for c in range(cols)
            for r in range(rows)
            if not self.feasible_table[r][c]
        ]

    def masked_cost_table(self) -> list[list[Optional[float]]]:
        """Cost table with infeasible cells replaced by None."""
        return [
            [cost if feasible else None for cost, feasible in zip(cost_row, feas_row)]
            for cost_row, feas_row in zip(self.cost_table, self.feasible_table)
        ]


class OptimizationResult(BaseModel):
    """Minimum-cost feasible grid point."""
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    status: Literal["optimal"] = "optimal"
    ld: float = Field(..., description="Best L/D")
    sfc_per_hr: float = Field(..., description="Best SFC (1/h)")
    ld_index: int = Field(..., ge=0, description="Column of the best cell")
    sfc_index: int = Field(..., ge=0, description="Row of the best cell")
    fuel_required_kg: float = Field(..., description="Fuel required at the best point (kg)")
    cost: float = Field(..., description="Minimum cost proxy")
    infeasible_points: list[GridPoint] = Field(
        default_factory=list,
        description="Cells excluded by the MTOW constraint"
    )


class NoFeasiblePoint(BaseModel):
    """Grid search outcome when no cell can be selected."""
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    status: Literal["no_feasible_point"] = "no_feasible_point"
    reason: str = Field(..., description="Why no point was selected")
    infeasible_points: list[GridPoint] = Field(
        default_factory=list,
        description="Cells excluded by the MTOW constraint"
    )


GridOptimum = Annotated[
    Union[OptimizationResult, NoFeasiblePoint],
    Field(discriminator="status"),
]


class GridSearchReport(BaseModel):
    """Grid tables plus the selected optimum (or its absence)."""
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    grid: GridResult = Field(..., description="Full result tables")
    optimum: GridOptimum = Field(..., description="Best feasible point or NoFeasiblePoint")

    @property
    def found(self) -> bool:
        return isinstance(self.optimum, OptimizationResult)
