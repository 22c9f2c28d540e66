"""Tests for the trigger gate."""

import pytest

from reelai_core.errors import AttemptsExceededError, VideoNotFoundError
from reelai_core.models.video import StorageEvent
from reelai_core.pipeline.stages.gate import video_id_from_path

from conftest import BUCKET


@pytest.mark.parametrize("path,expected", [
    ("videos/user1/abc.mp4", "abc"),
    ("videos/user1/abc", "abc"),
    ("videos/abc.mp4", None),
    ("videos/user1/extra/abc.mp4", None),
    ("videos/user1/.mp4", None),
])
def test_video_id_from_path(path, expected):
    """Test deriving the video id from an object path."""
    assert video_id_from_path(path) == expected


def test_malformed_path_makes_no_writes(pipeline, store, ai):
    """Test a path with the wrong shape is skipped without touching the store."""
    store.add("abc")

    result = pipeline.execute(StorageEvent(BUCKET, "videos/abc.mp4"))

    assert result.skipped
    assert "Invalid file path structure" in result.skip_reason
    assert store.writes == []
    assert ai.calls == 0


def test_missing_document_raises_without_writes(pipeline, store, blobs, ai):
    """Test an upload without a record raises and writes nothing."""
    blobs.put(BUCKET, "videos/user1/ghost.mp4")

    with pytest.raises(VideoNotFoundError, match="Video document not found"):
        pipeline.execute(StorageEvent(BUCKET, "videos/user1/ghost.mp4"))

    assert store.writes == []
    assert ai.calls == 0


def test_not_requested_makes_no_writes(pipeline, store, ai, upload):
    """Test do_transcribe=false ends the run after the read."""
    event = upload("v1", do_transcribe=False)

    result = pipeline.execute(event)

    assert result.skipped
    assert result.video_id == "v1"
    assert store.writes == []
    assert ai.calls == 0


def test_attempt_ceiling(pipeline, store, ai, upload):
    """Test a record at the ceiling gets one error write and no provider calls."""
    event = upload("v1", transcriptionAttempts=3)

    with pytest.raises(AttemptsExceededError):
        pipeline.execute(event)

    assert store.writes == [("v1", {
        "transcriptionStatus": "error",
        "transcriptionError": "Maximum transcription attempts exceeded",
    })]
    assert store.docs["v1"]["transcriptionAttempts"] == 3
    assert ai.calls == 0


def test_attempt_counter_increments_once(pipeline, store, upload):
    """Test a run that passes the gate adds exactly one attempt."""
    event = upload("v1", transcriptionAttempts=2)

    pipeline.execute(event)

    assert store.docs["v1"]["transcriptionAttempts"] == 3
    processing = [f for _, f in store.writes if f.get("transcriptionStatus") == "processing"]
    assert len(processing) == 1


def test_processing_stamp_precedes_provider(pipeline, store, ai, upload):
    """Test the processing write lands before the provider is called."""
    event = upload("v1")
    seen = []

    original = ai.transcribe

    def spy(path, language=None):
        seen.append(store.docs["v1"].get("transcriptionStatus"))
        return original(path, language)

    ai.transcribe = spy
    pipeline.execute(event)

    assert seen == ["processing"]
    assert store.writes[0][1]["transcriptionStatus"] == "processing"
    assert "transcriptionLastAttempt" in store.writes[0][1]
