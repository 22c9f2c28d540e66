"""Tests for the reelai CLI."""

import json
from unittest.mock import MagicMock

from typer.testing import CliRunner

import reelai_api.factory as factory
from reelai_cli import __version__
from reelai_cli.main import app
from reelai_core.models.video import VideoRecord

from conftest import BUCKET

runner = CliRunner()


def test_version():
    """Test the version flag."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_prompt():
    """Test printing a pattern prompt."""
    result = runner.invoke(app, ["prompt", "recipe"])
    assert result.exit_code == 0
    assert "prepTime" in result.output


def test_prompt_invalid_pattern():
    """Test an unknown pattern is rejected."""
    result = runner.invoke(app, ["prompt", "dance"])
    assert result.exit_code == 1


def test_status_json(monkeypatch):
    """Test showing a record as JSON."""
    store = MagicMock()
    store.get.return_value = VideoRecord.from_document("v1", {
        "do_transcribe": True,
        "transcriptionStatus": "completed",
        "transcriptionAttempts": 1,
    })
    monkeypatch.setattr(factory, "build_video_store", lambda settings: store)

    result = runner.invoke(app, ["status", "v1", "--json"])

    assert result.exit_code == 0
    assert '"transcriptionStatus": "completed"' in result.output
    store.get.assert_called_once_with("v1")


def test_status_missing(monkeypatch):
    """Test a missing record exits with an error."""
    store = MagicMock()
    store.get.return_value = None
    monkeypatch.setattr(factory, "build_video_store", lambda settings: store)

    result = runner.invoke(app, ["status", "ghost"])

    assert result.exit_code == 1


def _run(monkeypatch, pipeline, *args):
    monkeypatch.setattr(factory, "build_pipeline", lambda settings: pipeline)
    return runner.invoke(app, ["run", *args, "--bucket", BUCKET])


def test_run_completed(monkeypatch, pipeline, ai, upload):
    """Test a completed run reports the transcription and extraction."""
    ai.chat_content = json.dumps({"type": "recipe", "name": "Pancakes", "ingredients": [], "steps": []})
    event = upload("v1", pattern="recipe")

    result = _run(monkeypatch, pipeline, event.name)

    assert result.exit_code == 0
    assert "Transcribed video v1" in result.output
    assert "Extracted recipe data" in result.output


def test_run_extraction_failed(monkeypatch, pipeline, ai, upload):
    """Test a rejected pattern is reported without failing the command."""
    ai.chat_content = json.dumps({"error": "Not a valid recipe"})
    event = upload("v1", pattern="recipe")

    result = _run(monkeypatch, pipeline, event.name)

    assert result.exit_code == 0
    assert "recipe extraction failed" in result.output


def test_run_skipped(monkeypatch, pipeline, upload):
    """Test a run for an unrequested video reports the skip."""
    event = upload("v1", do_transcribe=False)

    result = _run(monkeypatch, pipeline, event.name)

    assert result.exit_code == 0
    assert "Skipped" in result.output


def test_run_json(monkeypatch, pipeline, upload):
    """Test the run summary as JSON."""
    event = upload("v1")

    result = _run(monkeypatch, pipeline, event.name, "--json")

    assert result.exit_code == 0
    summary = json.loads(result.output[result.output.index("{"):])
    assert summary["video_id"] == "v1"
    assert summary["skipped"] is False
    assert summary["text"] == "Mix flour and eggs, then fry."
    assert summary["parse_status"] is None


def test_run_pipeline_error(monkeypatch, pipeline, ai, upload):
    """Test a failed transcription exits with an error."""
    ai.transcription = RuntimeError("boom")
    event = upload("v1")

    result = _run(monkeypatch, pipeline, event.name)

    assert result.exit_code == 1
    assert "TranscriptionFailedError: boom" in result.output


def test_run_unexpected_error(monkeypatch):
    """Test errors from the backends exit with an error instead of a traceback."""
    pipeline = MagicMock()
    pipeline.execute.side_effect = ConnectionError("firestore unavailable")

    result = _run(monkeypatch, pipeline, "videos/user1/v1.mp4")

    assert result.exit_code == 1
    assert "ConnectionError: firestore unavailable" in result.output
