"""
FastAPI server for the mission fuel & cost optimiser.

Provides REST API endpoints for single-point evaluation, sweeps and
grid search. For conceptual studies only.
"""

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from missioncost import __version__
from missioncost.models.inputs import MissionParameters, SweepAxis
from missioncost.models.outputs import GridSearchReport, MissionResult, SweepResult
from missioncost.models.study import AxisRange, StudyConfig, StudyResult
from missioncost.optimizer.grid_search import GridSearchOptimizer
from missioncost.optimizer.study import run_study
from missioncost.physics.breguet import evaluate
from missioncost.sweep.engine import sweep

# Create FastAPI app
app = FastAPI(
    title="Mission Cost Optimiser API",
    description="""
    Breguet-range fuel burn, MTOW feasibility and cost proxy for a
    short-haul mission, with sensitivity sweeps and an (L/D, SFC) grid search.

    **NOTE**: Steady-cruise conceptual estimates only.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Largest grid accepted over HTTP (cells)
MAX_GRID_CELLS = 250_000


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class SweepRequest(BaseModel):
    """One-parameter sweep request."""
    parameters: MissionParameters = Field(..., description="Fixed mission parameters")
    axis: SweepAxis = Field(default=SweepAxis.LD, description="Parameter to vary")
    values: Optional[list[float]] = Field(default=None, description="Explicit axis values")
    range: Optional[AxisRange] = Field(default=None, description="Evenly spaced axis values")

    def axis_values(self) -> list[float]:
        if (self.values is None) == (self.range is None):
            raise ValueError("give exactly one of 'values' or 'range'")
        return self.values if self.values is not None else self.range.values()


class GridSearchRequest(BaseModel):
    """(L/D, SFC) grid search request."""
    parameters: MissionParameters = Field(..., description="Fixed mission parameters")
    ld_values: Optional[list[float]] = Field(default=None, description="Explicit L/D axis")
    sfc_values: Optional[list[float]] = Field(default=None, description="Explicit SFC axis (1/h)")
    ld_range: Optional[AxisRange] = Field(default=None, description="Evenly spaced L/D axis")
    sfc_range: Optional[AxisRange] = Field(default=None, description="Evenly spaced SFC axis")

    @staticmethod
    def _pick(name: str, values: Optional[list[float]], axis_range: Optional[AxisRange]) -> list[float]:
        if (values is None) == (axis_range is None):
            raise ValueError(f"give exactly one of '{name}_values' or '{name}_range'")
        return values if values is not None else axis_range.values()

    def axes(self) -> tuple[list[float], list[float]]:
        lds = self._pick("ld", self.ld_values, self.ld_range)
        sfcs = self._pick("sfc", self.sfc_values, self.sfc_range)
        if len(lds) * len(sfcs) > MAX_GRID_CELLS:
            raise ValueError(f"grid has {len(lds) * len(sfcs)} cells, limit is {MAX_GRID_CELLS}")
        return lds, sfcs


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/example", response_model=MissionParameters, tags=["Reference"])
async def get_example():
    """Get the baseline short-haul mission."""
    return MissionParameters.baseline()


@app.get("/axes", tags=["Reference"])
async def list_axes():
    """Get the parameters a sweep may vary."""
    return {"axes": [a.value for a in SweepAxis]}


@app.post("/evaluate", response_model=MissionResult, tags=["Analysis"])
async def evaluate_mission(params: MissionParameters):
    """
    Evaluate fuel, cost and MTOW feasibility for one mission.

    Non-positive L/D, SFC, range or speed give an invalid result
    (null fuel and cost, feasible=false) rather than an error.
    """
    return evaluate(params)


@app.post("/sweep", response_model=SweepResult, tags=["Analysis"])
async def run_sweep(request: SweepRequest):
    """Vary one parameter with all others fixed."""
    try:
        return sweep(request.axis_values(), request.parameters, request.axis)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/grid-search", response_model=GridSearchReport, tags=["Optimisation"])
async def run_grid_search(request: GridSearchRequest):
    """
    Evaluate the (L/D, SFC) grid and select the minimum-cost feasible point.

    ``optimum.status`` is "optimal" or "no_feasible_point".
    """
    try:
        lds, sfcs = request.axes()
        return GridSearchOptimizer(request.parameters).report(lds, sfcs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/study", response_model=StudyResult, tags=["Optimisation"])
async def study(config: StudyConfig):
    """Run baseline, both sweeps and the grid search."""
    cells = config.ld_grid.num * config.sfc_grid.num
    if cells > MAX_GRID_CELLS:
        raise HTTPException(status_code=400, detail=f"grid has {cells} cells, limit is {MAX_GRID_CELLS}")
    return run_study(config)
