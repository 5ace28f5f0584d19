"""
One-dimensional sensitivity sweeps.

Varies a single MissionParameters field over an ordered sequence of values
while holding all other fields fixed.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

from missioncost.models.inputs import MissionParameters, SweepAxis
from missioncost.models.outputs import MissionResult, SweepPoint, SweepResult
from missioncost.physics.breguet import evaluate

logger = logging.getLogger(__name__)


def sweep(
    axis_values: Iterable[float],
    fixed_params: MissionParameters,
    axis: SweepAxis | str,
    max_workers: Optional[int] = None,
) -> SweepResult:
    """
    Evaluate the mission model once per axis value.

    Args:
        axis_values: Ordered values for the swept field
        fixed_params: Parameters held constant
        axis: Which field the values override
        max_workers: Evaluate on a thread pool of this size when > 1

    Returns:
        SweepResult with one point per value, in input order
    """
    axis = SweepAxis(axis)
    values = [float(v) for v in axis_values]
    cases = [fixed_params.with_value(axis, v) for v in values]

    results: list[Optional[MissionResult]] = [None] * len(cases)
    if max_workers is not None and max_workers > 1 and len(cases) > 1:
        logger.debug("Sweeping %s over %d values on %d workers", axis.value, len(cases), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as ex:
            for i, result in enumerate(ex.map(evaluate, cases)):
                results[i] = result
    else:
        logger.debug("Sweeping %s over %d values", axis.value, len(cases))
        for i, case in enumerate(cases):
            results[i] = evaluate(case)

    sweep_result = SweepResult(
        axis=axis,
        fixed_parameters=fixed_params,
        points=[SweepPoint(value=v, result=r) for v, r in zip(values, results)],
    )
    if sweep_result.invalid_count:
        logger.warning(
            "%d of %d %s sweep points had invalid inputs",
            sweep_result.invalid_count, len(values), axis.value,
        )
    return sweep_result


def sweep_ld(
    ld_values: Iterable[float],
    fixed_params: MissionParameters,
    max_workers: Optional[int] = None,
) -> SweepResult:
    """Fuel/cost vs L/D at the fixed SFC."""
    return sweep(ld_values, fixed_params, SweepAxis.LD, max_workers)


def sweep_sfc(
    sfc_values: Iterable[float],
    fixed_params: MissionParameters,
    max_workers: Optional[int] = None,
) -> SweepResult:
    """Fuel/cost vs SFC at the fixed L/D."""
    return sweep(sfc_values, fixed_params, SweepAxis.SFC, max_workers)


class SweepEngine:
    """
    Reusable sweep runner bound to a set of fixed parameters.
    """

    def __init__(self, fixed_params: MissionParameters, max_workers: Optional[int] = None):
        """
        Args:
            fixed_params: Parameters held constant across every sweep
            max_workers: Thread pool size for parallel evaluation (None = serial)
        """
        self.fixed_params = fixed_params
        self.max_workers = max_workers

    def run(self, axis: SweepAxis | str, axis_values: Iterable[float]) -> SweepResult:
        return sweep(axis_values, self.fixed_params, axis, self.max_workers)
