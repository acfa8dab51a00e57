"""Tests for the scene-animator command line."""

from typer.testing import CliRunner

from scene_animator.authoring import AnalysisAPIError, ContentAnalysis
from scene_animator.cli import app

runner = CliRunner()

SCENE_TEXT = "Agenda\nToday's plan\nWelcome\nRoadmap"


def test_snapshot_writes_png(tmp_path):
    """Should render the requested frame to a PNG file."""
    out = tmp_path / "frame.png"
    result = runner.invoke(app, ["snapshot", "--text", SCENE_TEXT, "--at", "1200", "-o", str(out)])

    assert result.exit_code == 0
    assert "1200ms" in result.stdout
    assert out.read_bytes().startswith(b"\x89PNG")


def test_snapshot_from_file_by_percent(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_text("History\n1900\n2000", encoding="utf-8")
    out = tmp_path / "frame.png"

    result = runner.invoke(
        app, ["snapshot", str(source), "-T", "timeline", "--percent", "50", "-o", str(out)]
    )

    assert result.exit_code == 0
    assert out.exists()


def test_at_and_percent_are_exclusive(tmp_path):
    """Should error when both --at and --percent are provided."""
    result = runner.invoke(
        app, ["snapshot", "--text", SCENE_TEXT, "--at", "10", "--percent", "5", "-o", str(tmp_path / "f.png")]
    )

    assert result.exit_code == 1
    assert "Cannot specify both --at and --percent" in (result.stdout + result.stderr)


def test_missing_input():
    """Should error when neither a file nor --text is given."""
    result = runner.invoke(app, ["markers"])

    assert result.exit_code == 1
    assert "Provide an input file or --text" in (result.stdout + result.stderr)


def test_missing_file():
    result = runner.invoke(app, ["markers", "does-not-exist.txt"])

    assert result.exit_code == 1
    assert "not found" in (result.stdout + result.stderr)


def test_unknown_template():
    result = runner.invoke(app, ["markers", "--text", SCENE_TEXT, "-T", "slides"])

    assert result.exit_code == 1
    assert "Unknown template 'slides'" in (result.stdout + result.stderr)


def test_markers_table():
    """Should list one row per element with its start time."""
    result = runner.invoke(app, ["markers", "--text", SCENE_TEXT])

    assert result.exit_code == 0
    assert "Agenda" in result.stdout
    assert "Roadmap" in result.stdout
    assert "1500" in result.stdout


def test_play_to_end_saves_final_frame(tmp_path):
    """Should play in real time at the chosen speed and save the last frame."""
    out = tmp_path / "final.png"
    result = runner.invoke(
        app, ["play", "--text", "Hi", "--speed", "2", "--refresh-rate", "100", "-o", str(out)]
    )

    assert result.exit_code == 0
    assert out.read_bytes().startswith(b"\x89PNG")


def test_play_rejects_unknown_speed():
    result = runner.invoke(app, ["play", "--text", "Hi", "--speed", "3"])

    assert result.exit_code == 1
    assert "Unsupported speed" in (result.stdout + result.stderr)


class FakeClient:
    """Stands in for the HTTP client used by --analyze and the analyze command."""

    error = None

    def analyze(self, text):
        if self.error is not None:
            raise self.error
        return ContentAnalysis(
            title="Tides",
            main_ideas=("Moon pulls water", "Two bulges"),
            key_concepts=("Gravity",),
            suggested_structure="timeline",
            reasoning="Ordered process",
        )

    def design(self, analysis):
        return {
            "elements": [
                {
                    "type": "text",
                    "content": analysis.title,
                    "position": {"x": 600, "y": 120},
                    "animationStart": 0,
                    "animationDuration": 700,
                }
            ]
        }

    def check_connection(self):
        if self.error is not None:
            return False, str(self.error)
        return True, "Connected to Claude API successfully"

    def close(self):
        pass


class FailingClient(FakeClient):
    error = AnalysisAPIError("API Error: 401 Unauthorized")


def test_analyze_prints_analysis_and_scene(monkeypatch):
    monkeypatch.setattr("scene_animator.cli.AnalysisClient", FakeClient)

    result = runner.invoke(app, ["analyze", "--text", "Why are there tides?"])

    assert result.exit_code == 0
    assert "Tides" in result.stdout
    assert "Moon pulls water" in result.stdout
    assert "timeline" in result.stdout


def test_analyze_failure_exits_with_error(monkeypatch):
    """Should report collaborator failures and exit with status 1."""
    monkeypatch.setattr("scene_animator.cli.AnalysisClient", FailingClient)

    result = runner.invoke(app, ["analyze", "--text", "Why are there tides?"])

    assert result.exit_code == 1
    assert "Analysis failed: API Error: 401" in (result.stdout + result.stderr)


def test_snapshot_with_analysis(monkeypatch, tmp_path):
    monkeypatch.setattr("scene_animator.cli.AnalysisClient", FakeClient)
    out = tmp_path / "frame.png"

    result = runner.invoke(app, ["snapshot", "--text", "tides", "--analyze", "-o", str(out)])

    assert result.exit_code == 0
    assert out.exists()


def test_markers_with_design(monkeypatch):
    """Should use the designed element timings."""
    monkeypatch.setattr("scene_animator.cli.AnalysisClient", FakeClient)

    result = runner.invoke(app, ["markers", "--text", "tides", "--design"])

    assert result.exit_code == 0
    assert "Tides" in result.stdout
    assert "design" in result.stdout


def test_analyze_and_design_are_exclusive(monkeypatch):
    monkeypatch.setattr("scene_animator.cli.AnalysisClient", FakeClient)

    result = runner.invoke(app, ["markers", "--text", "tides", "--analyze", "--design"])

    assert result.exit_code == 1
    assert "Cannot specify both --analyze and --design" in (result.stdout + result.stderr)


def test_check_connection_ok(monkeypatch):
    monkeypatch.setattr("scene_animator.cli.AnalysisClient", FakeClient)

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 0
    assert "Connected" in result.stdout


def test_check_connection_failure(monkeypatch):
    """Should exit with status 1 when the API rejects the request."""
    monkeypatch.setattr("scene_animator.cli.AnalysisClient", FailingClient)

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 1
    assert "API Error: 401" in (result.stdout + result.stderr)
