"""CLI tests."""

import json
from pathlib import Path

from typer.testing import CliRunner

from sleep_monitor_server import __version__
from sleep_monitor_server.cli import app
from tests.fixtures.samples import MINUTE_MS, NIGHT_START_MS

runner = CliRunner()


def write_exports(tmp_path: Path) -> tuple[Path, Path]:
    """Write a newest-first export of both streams."""
    audio = [
        {
            "id": i + 1,
            "mic_rms": mic,
            "piezo_peak": 5.0,
            "state": state,
            "timestamp": NIGHT_START_MS + i * 30 * MINUTE_MS,
            "created_at": f"2026-01-10T{22 + i // 2:02d}:{(i % 2) * 30:02d}:00Z",
        }
        for i, (mic, state) in enumerate([(20.0, 0), (20.0, 1), (150.0, 1), (20.0, 0)])
    ][::-1]
    vitals = [
        {
            "id": 1,
            "heart_rate": 62.0,
            "spo2": 97.0,
            "temperature": 36.5,
            "timestamp": NIGHT_START_MS,
            "created_at": "2026-01-10T22:00:00Z",
        }
    ]
    audio_file = tmp_path / "audio.json"
    vitals_file = tmp_path / "vitals.json"
    audio_file.write_text(json.dumps(audio))
    vitals_file.write_text(json.dumps(vitals))
    return audio_file, vitals_file


def test_version() -> None:
    """Test version command."""
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"v{__version__}" in result.output


def test_analyze(tmp_path: Path) -> None:
    """Test analysing exported samples."""
    audio_file, vitals_file = write_exports(tmp_path)

    result = runner.invoke(app, ["analyze", str(audio_file), str(vitals_file)])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["metrics"]["sleep_duration_hours"] == 1.0
    assert data["metrics"]["snore_event_count"] == 1
    assert data["metrics"]["quality_category"] == "Excellent"


def test_analyze_chronological(tmp_path: Path) -> None:
    """Test oldest-first files need the --chronological flag."""
    audio_file, vitals_file = write_exports(tmp_path)
    audio = json.loads(audio_file.read_text())
    audio_file.write_text(json.dumps(audio[::-1]))

    result = runner.invoke(
        app, ["analyze", str(audio_file), str(vitals_file), "--chronological"]
    )

    assert result.exit_code == 0
    assert json.loads(result.output)["metrics"]["sleep_duration_hours"] == 1.0


def test_analyze_invalid_file(tmp_path: Path) -> None:
    """Test a malformed export exits with an error."""
    audio_file, vitals_file = write_exports(tmp_path)
    audio_file.write_text("not json")

    result = runner.invoke(app, ["analyze", str(audio_file), str(vitals_file)])

    assert result.exit_code == 1
    assert "Invalid sample file" in result.output
