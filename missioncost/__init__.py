"""
Mission Fuel & Cost Optimiser (missioncost)

Evaluates short-haul mission fuel burn and a cost proxy from L/D and SFC
with the Breguet range equation, checks an MTOW feasibility constraint, and
grid-searches (L/D, SFC) for the minimum-cost feasible operating point.

NOTE: Steady single-leg cruise model for conceptual studies only.

Usage:
    python -m missioncost make-example
    python -m missioncost study --input study.json
    python -m missioncost optimize --input study.json
    python -m missioncost serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Mission Cost Project"

from missioncost.models.inputs import MissionParameters, SweepAxis
from missioncost.models.outputs import (
    MissionResult,
    SweepResult,
    GridResult,
    OptimizationResult,
    NoFeasiblePoint,
    GridSearchReport,
)
from missioncost.physics.breguet import MissionModel, evaluate
from missioncost.sweep.engine import SweepEngine, sweep
from missioncost.optimizer.grid_search import GridSearchOptimizer, grid_search

__all__ = [
    "MissionParameters",
    "SweepAxis",
    "MissionResult",
    "SweepResult",
    "GridResult",
    "OptimizationResult",
    "NoFeasiblePoint",
    "GridSearchReport",
    "MissionModel",
    "evaluate",
    "SweepEngine",
    "sweep",
    "GridSearchOptimizer",
    "grid_search",
]
