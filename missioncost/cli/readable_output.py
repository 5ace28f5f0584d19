"""
Helpers to turn JSON study outputs into a compact, human-readable
console summary. Useful for quickly scanning study_output.json files.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, TextIO

from missioncost.physics.units import m_to_km


def _fmt_float(value: Any, unit: str = "", digits: int = 0, missing: str = "n/a") -> str:
    """Safely format a float with optional unit suffix (JSON null -> missing)."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return missing
    suffix = f" {unit}" if unit else ""
    return f"{fval:.{digits}f}{suffix}"


def print_baseline(data: dict[str, Any], out: TextIO = sys.stdout) -> None:
    """Baseline block: L/D, SFC, fuel, cost, feasibility."""
    params = data.get("baseline_parameters", {})
    result = data.get("baseline", {})

    print(
        f"Baseline results (L/D={_fmt_float(params.get('ld'), digits=1)}, "
        f"SFC={_fmt_float(params.get('sfc_per_hr'), digits=2)} 1/hr):",
        file=out,
    )
    if params.get("range_m") is not None:
        print(f"  Range:         {_fmt_float(m_to_km(float(params['range_m'])), 'km')}", file=out)
    if result.get("invalid_reason"):
        print(f"  Invalid inputs: {result['invalid_reason']}", file=out)
        return
    print(f"  Fuel required: {_fmt_float(result.get('fuel_required_kg'), 'kg')}", file=out)
    print(f"  Cost proxy:    {_fmt_float(result.get('cost'))} / trip", file=out)
    print(f"  Feasible MTOW: {str(bool(result.get('feasible'))).lower()}", file=out)


def print_optimum(report: dict[str, Any], out: TextIO = sys.stdout) -> None:
    """Grid search block: best point or the no-feasible-point reason."""
    optimum = report.get("optimum", {})
    grid = report.get("grid", {})
    rows = len(grid.get("sfc_values", []))
    cols = len(grid.get("ld_values", []))

    print("---- Optimisation result (grid search) ----", file=out)
    print(f"Grid: {cols} L/D x {rows} SFC points", file=out)
    if optimum.get("status") != "optimal":
        print(f"No feasible point: {optimum.get('reason', '?')}", file=out)
        return
    print(f"Best L/D: {_fmt_float(optimum.get('ld'), digits=2)}", file=out)
    print(f"Best SFC: {_fmt_float(optimum.get('sfc_per_hr'), '1/hr', digits=3)}", file=out)
    print(f"Fuel at best point: {_fmt_float(optimum.get('fuel_required_kg'), 'kg')}", file=out)
    print(f"Min cost: {_fmt_float(optimum.get('cost'))} / trip", file=out)
    infeasible = optimum.get("infeasible_points") or []
    print(f"Infeasible (MTOW) points: {len(infeasible)}", file=out)


def print_study_summary(data: dict[str, Any], out: TextIO = sys.stdout) -> None:
    """
    Print a human-friendly summary of a study result.

    Args:
        data: StudyResult dumped in JSON mode
        out: Stream to write to
    """
    print(f"Study: {data.get('name', '?')}", file=out)
    print_baseline(data, out)
    print("", file=out)
    print_optimum(data.get("grid_search", {}), out)

    warnings = data.get("warnings") or []
    if warnings:
        print("Warnings:", file=out)
        for w in warnings:
            print(f"  - {w}", file=out)


def print_readable_output(json_path: Path, out: TextIO = sys.stdout) -> None:
    """
    Print a human-friendly summary of a study JSON file.

    Args:
        json_path: Path to the JSON output of ``missioncost study``.
    """
    data = json.loads(Path(json_path).read_text())
    print_study_summary(data, out)
