"""
One-dimensional sensitivity sweeps over mission parameters.
"""

from missioncost.sweep.engine import SweepEngine, sweep, sweep_ld, sweep_sfc

__all__ = ["SweepEngine", "sweep", "sweep_ld", "sweep_sfc"]
