"""
Command-line interface for the mission fuel & cost optimiser.

Usage:
    python -m missioncost make-example [--output study.json]
    python -m missioncost evaluate --input study.json [--output result.json]
    python -m missioncost sweep --input study.json --axis ld [--output sweep.json]
    python -m missioncost optimize --input study.json [--output grid.json] [--workers 4]
    python -m missioncost study --input study.json [--output study_output.json]
    python -m missioncost serve [--port 8000]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from missioncost import __version__
from missioncost.cli.readable_output import print_optimum, print_study_summary
from missioncost.models.inputs import SweepAxis
from missioncost.models.study import AxisRange, StudyConfig
from missioncost.optimizer.grid_search import GridSearchOptimizer
from missioncost.optimizer.study import run_study
from missioncost.physics.breguet import evaluate
from missioncost.sweep.engine import sweep


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="missioncost",
        description="Mission fuel & cost optimiser - Breguet-range fuel burn, MTOW feasibility "
                    "and grid search over L/D and SFC. For conceptual studies only.",
    )
    parser.add_argument("--version", action="version", version=f"missioncost {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example study JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("study.json"),
        help="Output path for example file (default: study.json)",
    )

    # commands reading a study file
    def add_io(sub: argparse.ArgumentParser, output_help: str) -> None:
        sub.add_argument(
            "--input", "-i",
            type=Path,
            required=True,
            help="Path to JSON study file",
        )
        sub.add_argument(
            "--output", "-o",
            type=Path,
            default=None,
            help=output_help,
        )

    evaluate_parser = subparsers.add_parser(
        "evaluate",
        help="Evaluate the baseline mission",
    )
    add_io(evaluate_parser, "Path to save JSON output (prints to stdout if not specified)")

    sweep_parser = subparsers.add_parser(
        "sweep",
        help="Run a one-parameter sensitivity sweep",
    )
    add_io(sweep_parser, "Path to save sweep results (prints to stdout if not specified)")
    sweep_parser.add_argument(
        "--axis", "-a",
        choices=[a.value for a in SweepAxis],
        default=SweepAxis.LD.value,
        help="Parameter to vary (default: ld)",
    )
    sweep_parser.add_argument("--start", type=float, default=None, help="First axis value")
    sweep_parser.add_argument("--stop", type=float, default=None, help="Last axis value")
    sweep_parser.add_argument("--num", type=int, default=None, help="Number of axis values")

    optimize_parser = subparsers.add_parser(
        "optimize",
        help="Grid search for the minimum-cost feasible (L/D, SFC) point",
    )
    add_io(optimize_parser, "Path to save grid search report (prints to stdout if not specified)")
    optimize_parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Thread pool size for grid evaluation (overrides the study file)",
    )

    study_parser = subparsers.add_parser(
        "study",
        help="Run baseline, both sweeps and the grid search",
    )
    add_io(study_parser, "Path to save study results (prints to stdout if not specified)")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def load_study(path: Path) -> StudyConfig:
    """Read and validate a study file."""
    with open(path) as f:
        data = json.load(f)
    return StudyConfig(**data)


def write_output(output_json: str, output: Path | None, label: str) -> None:
    """Save JSON to a file or print it to stdout."""
    if output:
        with open(output, "w") as f:
            f.write(output_json)
        print(f"\n{label} saved to {output}", file=sys.stderr)
    else:
        print(output_json)


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example study JSON file."""
    example = StudyConfig.model_config["json_schema_extra"]["example"]

    with open(args.output, "w") as f:
        f.write(json.dumps(example, indent=2))

    print(f"Created example study file: {args.output}")
    print("\nRun the study with:")
    print(f"  python -m missioncost study --input {args.output}")

    return 0


def cmd_evaluate(args: argparse.Namespace) -> int:
    """Evaluate the baseline mission."""
    config = load_study(args.input)
    params = config.parameters

    print(f"\nMission evaluation: {config.name}", file=sys.stderr)
    print(f"L/D: {params.ld:.1f} | SFC: {params.sfc_per_hr:.2f} 1/hr", file=sys.stderr)

    result = evaluate(params)
    write_output(result.model_dump_json(indent=2), args.output, "Result")

    if not result.is_valid:
        print(f"  Invalid inputs: {result.invalid_reason}", file=sys.stderr)
    else:
        print(f"  Fuel required: {result.fuel_required_kg:.0f} kg", file=sys.stderr)
        print(f"  Cost proxy:    {result.cost:.0f} / trip", file=sys.stderr)
        print(f"  Feasible MTOW: {str(result.feasible).lower()}", file=sys.stderr)
    return 0


def cmd_sweep(args: argparse.Namespace) -> int:
    """Run a sensitivity sweep."""
    config = load_study(args.input)
    axis = SweepAxis(args.axis)

    explicit = [args.start, args.stop, args.num]
    if all(v is not None for v in explicit):
        axis_range = AxisRange(start=args.start, stop=args.stop, num=args.num)
    elif any(v is not None for v in explicit):
        raise ValueError("--start, --stop and --num must be given together")
    elif axis == SweepAxis.LD:
        axis_range = config.ld_sweep
    elif axis == SweepAxis.SFC:
        axis_range = config.sfc_sweep
    else:
        raise ValueError(f"axis {axis.value} has no range in the study file; give --start --stop --num")

    print(f"\nSensitivity Sweep: {config.name}", file=sys.stderr)
    print(
        f"Varying {axis.value} from {axis_range.start:g} to {axis_range.stop:g} "
        f"({axis_range.num} points)",
        file=sys.stderr,
    )

    result = sweep(axis_range.values(), config.parameters, axis, config.max_workers)
    write_output(result.model_dump_json(indent=2), args.output, "Sweep results")

    feasible = sum(result.feasible)
    print(f"\nSweep Summary:", file=sys.stderr)
    print(f"  Feasible points: {feasible}/{len(result.points)}", file=sys.stderr)
    if result.invalid_count:
        print(f"  Invalid points: {result.invalid_count}", file=sys.stderr)
    return 0


def cmd_optimize(args: argparse.Namespace) -> int:
    """Run the grid search."""
    config = load_study(args.input)
    workers = args.workers if args.workers is not None else config.max_workers

    print(f"\nGrid Search: {config.name}", file=sys.stderr)
    print(
        f"L/D {config.ld_grid.start:g}-{config.ld_grid.stop:g} ({config.ld_grid.num}) x "
        f"SFC {config.sfc_grid.start:g}-{config.sfc_grid.stop:g} ({config.sfc_grid.num})",
        file=sys.stderr,
    )

    optimizer = GridSearchOptimizer(config.parameters, workers)
    report = optimizer.report(config.ld_grid.values(), config.sfc_grid.values())
    write_output(report.model_dump_json(indent=2), args.output, "Grid search report")

    print("", file=sys.stderr)
    print_optimum(report.model_dump(mode="json"), out=sys.stderr)
    return 0


def cmd_study(args: argparse.Namespace) -> int:
    """Run the full study."""
    config = load_study(args.input)

    print(f"\nRunning study: {config.name}", file=sys.stderr)
    result = run_study(config)
    write_output(result.model_dump_json(indent=2), args.output, "Study results")

    print("", file=sys.stderr)
    print_study_summary(result.model_dump(mode="json"), out=sys.stderr)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    import uvicorn

    print(f"\nStarting Mission Cost Optimiser API", file=sys.stderr)
    print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
    print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
    print("\nPress Ctrl+C to stop\n", file=sys.stderr)

    uvicorn.run(
        "missioncost.api.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s | %(name)s | %(message)s")


def cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    commands = {
        "make-example": cmd_make_example,
        "evaluate": cmd_evaluate,
        "sweep": cmd_sweep,
        "optimize": cmd_optimize,
        "study": cmd_study,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1


def main() -> int:
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
