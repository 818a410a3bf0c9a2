"""Integration tests for the generate and limits CLI commands."""

import json
from pathlib import Path

import pytest
from stl import mesh
from typer.testing import CliRunner

from skapa.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.mark.slow
class TestGenerateCommand:
    """Tests for `skapa generate`."""

    def test_default_box_to_stl(self, runner: CliRunner, tmp_path: Path) -> None:
        output_path = tmp_path / "box.stl"
        result = runner.invoke(app, ["generate", "-o", str(output_path)])

        assert result.exit_code == 0, result.output
        assert "Generated 80 x 60 x 52 mm box with 4 clip pair(s)" in result.output
        assert f"STL written to: {output_path}" in result.output
        assert len(mesh.Mesh.from_file(str(output_path)).vectors) > 0

    def test_json_summary_to_stdout(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", "-w", "100", "-d", "50", "-l", "3", "--format", "json"]
        )

        assert result.exit_code == 0, result.output
        summary = json.loads(result.stdout)
        assert summary["valid"] is True
        assert summary["box"] == {
            "height": 92.0,
            "width": 100.0,
            "depth": 50.0,
            "wall": 2.0,
            "bottom": 3.0,
        }
        assert summary["mesh"]["bounding_box"]["max"][2] == pytest.approx(92.0)

    def test_json_summary_to_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output_path = tmp_path / "box.json"
        result = runner.invoke(
            app, ["generate", "--format", "json", "-o", str(output_path)]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(output_path.read_text())["clip_pairs"] == 4

    def test_open_front_options(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "generate",
                "--open-front",
                "--openness",
                "70",
                "--bottom-offset",
                "8",
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0, result.output
        opening = json.loads(result.stdout)["open_front"]
        assert opening["openness"] == pytest.approx(0.7)
        assert opening["bottom_offset"] == 8.0

    def test_config_file_with_overrides(self, runner: CliRunner, tmp_path: Path) -> None:
        output_path = tmp_path / "shelf.json"
        result = runner.invoke(
            app,
            [
                "generate",
                "-c",
                str(FIXTURES_PATH / "valid_full.json"),
                "--closed-front",
                "--front-right",
                "3",
                "--format",
                "json",
                "-o",
                str(output_path),
            ],
        )

        assert result.exit_code == 0, result.output
        summary = json.loads(output_path.read_text())
        assert "open_front" not in summary
        assert summary["corner_radii"] == {
            "front_left": 10.0,
            "front_right": 3.0,
            "back_left": 8.0,
            "back_right": 4.0,
        }
        # 120 x 92 with every clip position used
        assert summary["clip_pairs"] == 9

    def test_clamped_radius_is_reported(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "generate",
                "--front-left",
                "35",
                "-o",
                str(tmp_path / "small.stl"),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "front_left radius clamped from 35 to 30 mm" in result.output

    def test_clamped_openness_is_reported(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", "--open-front", "--openness", "2", "--format", "json"]
        )

        assert result.exit_code == 0, result.output
        assert "Note: openness clamped from 2% to 5%" in result.output

    def test_y_up_stl(self, runner: CliRunner, tmp_path: Path) -> None:
        output_path = tmp_path / "viewer.stl"
        result = runner.invoke(app, ["generate", "--y-up", "-o", str(output_path)])

        assert result.exit_code == 0, result.output
        vectors = mesh.Mesh.from_file(str(output_path)).vectors
        assert vectors[:, :, 1].max() == pytest.approx(52.0, abs=1e-3)
        assert vectors[:, :, 2].max() == pytest.approx(36.5, abs=1e-3)


class TestGenerateErrors:
    """Tests for `skapa generate` failures."""

    def test_out_of_range_option(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", "--width", "500"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
        assert "box.width" in result.output

    def test_missing_config_file(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", "-c", str(FIXTURES_PATH / "missing.json")])

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_walls_too_thick(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", "-w", "16", "-d", "16", "--wall", "8", "-r", "0"]
        )

        assert result.exit_code == 1
        assert "Error: Walls leave no room inside the box (width)" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", "--format", "obj"])

        assert result.exit_code == 1
        assert "output.format" in result.output

    def test_y_up_needs_stl(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", "--y-up", "--format", "json"])

        assert result.exit_code == 1
        assert "--y-up only applies to STL output" in result.output


class TestLimitsCommand:
    """Tests for `skapa limits`."""

    def test_default_box(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["limits"])

        assert result.exit_code == 0, result.output
        assert "Box 80 x 60 x 52 mm" in result.output
        assert "Corner radius:  0 - 30 mm" in result.output
        assert "Bottom offset:  0 - 48 mm" in result.output
        assert "Cutout radius:  0 - 18 mm (at 50% openness, 10 mm offset)" in result.output
        assert "Clip grid:      2 x 2" in result.output

    def test_narrow_opening(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["limits", "--openness", "10"])

        assert result.exit_code == 0, result.output
        assert "Cutout radius:  0 - 8 mm (at 10% openness" in result.output

    def test_from_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["limits", "-c", str(FIXTURES_PATH / "inner_dimensions.json")]
        )

        assert result.exit_code == 0, result.output
        assert "Box 80 x 60 x 92 mm" in result.output
        assert "Clip grid:      2 x 3" in result.output

    def test_invalid_box(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["limits", "--depth", "0"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


def test_no_arguments_shows_help(runner: CliRunner) -> None:
    result = runner.invoke(app, [])

    assert "generate" in result.output
    assert "limits" in result.output
    assert "validate" in result.output
