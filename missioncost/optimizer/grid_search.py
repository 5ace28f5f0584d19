"""
Exhaustive grid search over L/D and SFC.

Evaluates the mission model over the full cross product of an L/D axis and
an SFC axis, then selects the minimum-cost feasible cell.

Table layout: row = SFC index, column = L/D index.
Selection scans column-major (L/D outer, SFC inner) and keeps the first
strictly lower cost, so ties resolve to the smallest L/D index, then the
smallest SFC index. Do not replace this with a flattened argmin; the
flattening order would decide ties.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

from missioncost.models.inputs import MissionParameters, SweepAxis
from missioncost.models.outputs import (
    GridResult,
    GridSearchReport,
    MissionResult,
    NoFeasiblePoint,
    OptimizationResult,
)
from missioncost.physics.breguet import evaluate

logger = logging.getLogger(__name__)


class GridSearchOptimizer:
    """
    Minimum-cost search over an (SFC, L/D) grid.

    All cells are evaluated before selection; with ``max_workers`` > 1 each
    worker evaluates whole rows, and the tables are assembled by row index
    after every worker has finished.
    """

    def __init__(self, fixed_params: MissionParameters, max_workers: Optional[int] = None):
        """
        Initialize optimizer.

        Args:
            fixed_params: Parameters held constant; L/D and SFC are overridden per cell
            max_workers: Thread pool size for parallel evaluation (None = serial)
        """
        self.fixed_params = fixed_params
        self.max_workers = max_workers

    def build_grid(self, ld_values: Iterable[float], sfc_values: Iterable[float]) -> GridResult:
        """
        Evaluate every (L/D, SFC) pair and fill the result tables.

        Returns:
            GridResult with len(sfc_values) rows and len(ld_values) columns
        """
        lds = [float(v) for v in ld_values]
        sfcs = [float(v) for v in sfc_values]
        logger.debug("Evaluating %d x %d grid (SFC rows x L/D columns)", len(sfcs), len(lds))

        rows: list[Optional[list[MissionResult]]] = [None] * len(sfcs)
        if self.max_workers is not None and self.max_workers > 1 and len(sfcs) > 1:
            logger.debug("Using %d workers", self.max_workers)
            with ThreadPoolExecutor(max_workers=self.max_workers) as ex:
                futures = {r: ex.submit(self._evaluate_row, sfc, lds) for r, sfc in enumerate(sfcs)}
                for r, future in futures.items():
                    rows[r] = future.result()
        else:
            for r, sfc in enumerate(sfcs):
                rows[r] = self._evaluate_row(sfc, lds)

        return GridResult(
            ld_values=lds,
            sfc_values=sfcs,
            fuel_table=[[res.fuel_required_kg for res in row] for row in rows],
            cost_table=[[res.cost for res in row] for row in rows],
            feasible_table=[[res.feasible for res in row] for row in rows],
        )

    def _evaluate_row(self, sfc: float, lds: list[float]) -> list[MissionResult]:
        """Evaluate one SFC row across every L/D column."""
        row_params = self.fixed_params.with_value(SweepAxis.SFC, sfc)
        return [evaluate(row_params.with_value(SweepAxis.LD, ld)) for ld in lds]

    @staticmethod
    def select_best(grid: GridResult) -> OptimizationResult | NoFeasiblePoint:
        """
        Pick the minimum-cost feasible cell.

        Infeasible cells are excluded whatever their cost. A feasible cell
        with a NaN cost is also excluded (it cannot be ordered).

        Returns:
            OptimizationResult, or NoFeasiblePoint if nothing is selectable
        """
        rows, cols = grid.shape
        infeasible = grid.infeasible_points()

        best: Optional[tuple[int, int]] = None
        best_cost = math.inf
        for c in range(cols):
            for r in range(rows):
                if not grid.feasible_table[r][c]:
                    continue
                cost = grid.cost_table[r][c]
                if math.isnan(cost):
                    continue
                if best is None or cost < best_cost:
                    best = (r, c)
                    best_cost = cost

        if best is None:
            if rows * cols == 0:
                reason = "grid is empty"
            else:
                reason = f"none of the {rows * cols} grid points satisfy the MTOW constraint"
            logger.warning("Grid search found no feasible point: %s", reason)
            return NoFeasiblePoint(reason=reason, infeasible_points=infeasible)

        r_best, c_best = best
        result = OptimizationResult(
            ld=grid.ld_values[c_best],
            sfc_per_hr=grid.sfc_values[r_best],
            ld_index=c_best,
            sfc_index=r_best,
            fuel_required_kg=grid.fuel_table[r_best][c_best],
            cost=best_cost,
            infeasible_points=infeasible,
        )
        logger.info(
            "Best point: L/D=%.2f, SFC=%.3f 1/h, cost=%.0f",
            result.ld, result.sfc_per_hr, result.cost,
        )
        return result

    def search(
        self,
        ld_values: Iterable[float],
        sfc_values: Iterable[float],
    ) -> tuple[GridResult, OptimizationResult | NoFeasiblePoint]:
        """Build the grid, then select the best point."""
        grid = self.build_grid(ld_values, sfc_values)
        return grid, self.select_best(grid)

    def report(self, ld_values: Iterable[float], sfc_values: Iterable[float]) -> GridSearchReport:
        """Same as :meth:`search`, wrapped in a serialisable report."""
        grid, optimum = self.search(ld_values, sfc_values)
        return GridSearchReport(grid=grid, optimum=optimum)


def grid_search(
    ld_values: Iterable[float],
    sfc_values: Iterable[float],
    fixed_params: MissionParameters,
    max_workers: Optional[int] = None,
) -> tuple[GridResult, OptimizationResult | NoFeasiblePoint]:
    """
    Evaluate the (L/D, SFC) grid and select the minimum-cost feasible point.

    Args:
        ld_values: L/D axis (table columns)
        sfc_values: SFC axis in 1/h (table rows)
        fixed_params: All other mission parameters
        max_workers: Thread pool size for parallel evaluation

    Returns:
        (GridResult, OptimizationResult) or (GridResult, NoFeasiblePoint)
    """
    return GridSearchOptimizer(fixed_params, max_workers).search(ld_values, sfc_values)
