"""
Pytest configuration and shared fixtures.
"""

import pytest

from missioncost.models.inputs import MissionParameters
from missioncost.models.study import AxisRange, StudyConfig


@pytest.fixture
def baseline_params() -> MissionParameters:
    """Reference short-haul mission (L/D 17, SFC 0.60 1/h, 1200 km)."""
    return MissionParameters.baseline()


@pytest.fixture
def heavy_params() -> MissionParameters:
    """Mission whose zero-fuel weight already exceeds MTOW."""
    return MissionParameters.baseline().model_copy(update={"mtow_kg": 50000.0})


@pytest.fixture
def tight_params() -> MissionParameters:
    """
    Mission with an MTOW that only the efficient corner of the grid meets.

    Zero-fuel weight is 58000 kg; 3000 kg of fuel is allowed.
    """
    return MissionParameters.baseline().model_copy(update={"mtow_kg": 61000.0})


@pytest.fixture
def small_study() -> StudyConfig:
    """Study with coarse axes for fast end-to-end runs."""
    return StudyConfig(
        name="Small study",
        ld_sweep=AxisRange(start=14.0, stop=20.0, num=7),
        sfc_sweep=AxisRange(start=0.50, stop=0.70, num=5),
        ld_grid=AxisRange(start=14.0, stop=20.0, num=13),
        sfc_grid=AxisRange(start=0.50, stop=0.70, num=9),
    )
