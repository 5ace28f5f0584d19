"""
Grid search optimiser and study runner.
"""

from missioncost.optimizer.grid_search import GridSearchOptimizer, grid_search
from missioncost.optimizer.study import run_study

__all__ = ["GridSearchOptimizer", "grid_search", "run_study"]
