"""
Tests for the command-line interface.

Runs the CLI in-process against files in a temporary directory.
"""

import io
import json
import math

import pytest

from missioncost.cli.main import cli
from missioncost.cli.readable_output import print_optimum, print_readable_output
from missioncost.optimizer.grid_search import GridSearchOptimizer


@pytest.fixture
def study_file(tmp_path, small_study):
    """Small study written to disk."""
    path = tmp_path / "study.json"
    path.write_text(small_study.model_dump_json(indent=2))
    return path


class TestMakeExample:
    """Tests for make-example."""

    def test_writes_loadable_study(self, tmp_path):
        """Test that the example file validates and uses range_km."""
        path = tmp_path / "example.json"

        assert cli(["make-example", "--output", str(path)]) == 0

        data = json.loads(path.read_text())
        assert data["parameters"]["range_km"] == 1200.0
        assert cli(["evaluate", "--input", str(path)]) == 0


class TestEvaluateCommand:
    """Tests for evaluate."""

    def test_baseline_output(self, study_file, tmp_path):
        """Test that the baseline result is written as JSON."""
        out = tmp_path / "result.json"

        assert cli(["evaluate", "--input", str(study_file), "--output", str(out)]) == 0

        data = json.loads(out.read_text())
        assert data["feasible"] is True
        assert data["fuel_required_kg"] == pytest.approx(3196.1, abs=1.0)
        assert data["invalid_reason"] is None

    def test_invalid_inputs_print_nan(self, tmp_path, capsys):
        """Test that an invalid mission is reported, not an error."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({
            "parameters": {
                "ld": 0.0, "sfc_per_hr": 0.6, "range_m": 1.2e6, "speed_mps": 230.0,
                "oew_kg": 42000.0, "payload_kg": 16000.0, "mtow_kg": 78000.0,
            }
        }))

        assert cli(["evaluate", "--input", str(path)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["fuel_required_kg"] == "NaN"
        assert data["feasible"] is False
        assert data["invalid_reason"] == "non-positive input: ld"

    def test_missing_file(self, tmp_path):
        """Test that a missing input file exits with 1."""
        assert cli(["evaluate", "--input", str(tmp_path / "nope.json")]) == 1

    def test_bad_json(self, tmp_path):
        """Test that malformed JSON exits with 1."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        assert cli(["evaluate", "--input", str(path)]) == 1

    def test_validation_error(self, tmp_path, capsys):
        """Test that a study missing required fields exits with 1."""
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"parameters": {"ld": 17.0}}))

        assert cli(["evaluate", "--input", str(path)]) == 1
        assert "Validation Error" in capsys.readouterr().err


class TestSweepCommand:
    """Tests for sweep."""

    def test_ld_sweep_uses_study_range(self, study_file, capsys):
        """Test that the L/D sweep uses the study's ld_sweep axis."""
        assert cli(["sweep", "--input", str(study_file), "--axis", "ld"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["axis"] == "ld"
        assert len(data["points"]) == 7

    def test_explicit_range(self, study_file, capsys):
        """Test a sweep over a field the study has no range for."""
        args = ["sweep", "--input", str(study_file), "--axis", "payload_kg",
                "--start", "10000", "--stop", "20000", "--num", "3"]

        assert cli(args) == 0

        data = json.loads(capsys.readouterr().out)
        assert [p["value"] for p in data["points"]] == [10000.0, 15000.0, 20000.0]

    def test_axis_without_range_fails(self, study_file):
        """Test that a non L/D, non SFC axis needs an explicit range."""
        assert cli(["sweep", "--input", str(study_file), "--axis", "mtow_kg"]) == 1

    def test_partial_range_fails(self, study_file):
        """Test that --start alone is rejected."""
        assert cli(["sweep", "--input", str(study_file), "--start", "14"]) == 1


class TestOptimizeCommand:
    """Tests for optimize."""

    def test_report_written(self, study_file, tmp_path, capsys):
        """Test that the grid report is saved and summarised."""
        out = tmp_path / "grid.json"

        assert cli(["optimize", "--input", str(study_file), "--output", str(out), "--workers", "2"]) == 0

        data = json.loads(out.read_text())
        assert data["optimum"]["status"] == "optimal"
        assert data["optimum"]["ld"] == pytest.approx(20.0)
        assert len(data["grid"]["cost_table"]) == 9
        assert "Best L/D: 20.00" in capsys.readouterr().err


class TestStudyCommand:
    """Tests for study and the readable summary."""

    def test_study_round_trip(self, study_file, tmp_path, capsys):
        """Test the full study output and its console summary."""
        out = tmp_path / "study_output.json"

        assert cli(["study", "--input", str(study_file), "--output", str(out)]) == 0
        capsys.readouterr()

        print_readable_output(out)
        summary = capsys.readouterr().out

        assert "Baseline results (L/D=17.0, SFC=0.60 1/hr):" in summary
        assert "Range:         1200 km" in summary
        assert "Feasible MTOW: true" in summary
        assert "Best SFC: 0.500 1/hr" in summary

    def test_no_command_prints_help(self, capsys):
        """Test that running without a command shows usage."""
        assert cli([]) == 0
        assert "usage" in capsys.readouterr().out


class TestReadableOutput:
    """Tests for the console summary helpers."""

    def test_infinite_optimum_is_printed(self, baseline_params):
        """Test that an overflowed optimum prints as inf, not as missing."""
        params = baseline_params.model_copy(update={"mtow_kg": math.inf, "range_m": 1e12})
        report = GridSearchOptimizer(params).report([17.0], [0.6])
        out = io.StringIO()

        print_optimum(json.loads(report.model_dump_json()), out=out)

        text = out.getvalue()
        assert "Min cost: inf / trip" in text
        assert "n/a" not in text
