"""
Pydantic models for mission inputs, results and study configuration.
"""

from missioncost.models.inputs import MissionParameters, SweepAxis
from missioncost.models.outputs import (
    MissionResult,
    SweepPoint,
    SweepResult,
    GridPoint,
    GridResult,
    OptimizationResult,
    NoFeasiblePoint,
    GridSearchReport,
)
from missioncost.models.study import AxisRange, StudyConfig, StudyResult

__all__ = [
    "MissionParameters",
    "SweepAxis",
    "MissionResult",
    "SweepPoint",
    "SweepResult",
    "GridPoint",
    "GridResult",
    "OptimizationResult",
    "NoFeasiblePoint",
    "GridSearchReport",
    "AxisRange",
    "StudyConfig",
    "StudyResult",
]
