"""
Study runner.

Runs the reference workflow for a StudyConfig: baseline evaluation,
fuel vs L/D sweep, cost vs SFC sweep and the (L/D, SFC) grid search.
"""

import logging

from missioncost.models.outputs import OptimizationResult
from missioncost.models.study import StudyConfig, StudyResult
from missioncost.optimizer.grid_search import GridSearchOptimizer
from missioncost.physics.breguet import evaluate
from missioncost.sweep.engine import sweep_ld, sweep_sfc

logger = logging.getLogger(__name__)


def run_study(config: StudyConfig) -> StudyResult:
    """
    Execute every stage of a study.

    Args:
        config: Validated study definition

    Returns:
        StudyResult with the baseline, both sweeps and the grid search report
    """
    params = config.parameters
    logger.debug("Running study %r", config.name)

    baseline = evaluate(params)
    ld_sweep = sweep_ld(config.ld_sweep.values(), params, config.max_workers)
    sfc_sweep = sweep_sfc(config.sfc_sweep.values(), params, config.max_workers)

    optimizer = GridSearchOptimizer(params, config.max_workers)
    report = optimizer.report(config.ld_grid.values(), config.sfc_grid.values())

    warnings = []
    if not baseline.is_valid:
        warnings.append(f"Baseline inputs are invalid ({baseline.invalid_reason})")
    elif not baseline.feasible:
        warnings.append(
            f"Baseline exceeds MTOW: {params.zero_fuel_weight_kg + baseline.fuel_required_kg:.0f} kg "
            f"> {params.mtow_kg:.0f} kg"
        )
    for label, result in (("L/D", ld_sweep), ("SFC", sfc_sweep)):
        if result.invalid_count:
            warnings.append(f"{result.invalid_count} {label} sweep points have invalid inputs")
    if isinstance(report.optimum, OptimizationResult):
        if report.optimum.infeasible_points:
            warnings.append(
                f"{len(report.optimum.infeasible_points)} grid points excluded by the MTOW constraint"
            )
    else:
        warnings.append(f"No feasible grid point: {report.optimum.reason}")

    return StudyResult(
        name=config.name,
        baseline_parameters=params,
        baseline=baseline,
        ld_sweep=ld_sweep,
        sfc_sweep=sfc_sweep,
        grid_search=report,
        warnings=warnings,
    )
