"""Trigger gate: decides whether an upload event should be processed."""

import logging

from reelai_core.errors import AttemptsExceededError, SkipInvocation, VideoNotFoundError
from reelai_core.pipeline.base import Invocation, PipelineStage
from reelai_core.pipeline.status import StatusWriter
from reelai_core.storage.base import VideoStore

logger = logging.getLogger(__name__)

VIDEO_SUFFIX = ".mp4"


def video_id_from_path(path: str) -> str | None:
    """
    Derive the video id from `videos/<subfolder>/<id>.mp4`.

    Returns None for any other shape.
    """
    parts = path.split("/")
    if len(parts) != 3:
        return None
    video_id = parts[2].removesuffix(VIDEO_SUFFIX)
    return video_id or None


class TriggerGateStage(PipelineStage):
    """
    Validate the event and the record before any expensive work.

    Input: invocation.event
    Output: invocation.video_id, invocation.record; the record is stamped
    as processing with one more attempt.
    """

    name = "gate"

    def __init__(self, store: VideoStore, status_writer: StatusWriter, max_attempts: int = 3):
        self.store = store
        self.status_writer = status_writer
        self.max_attempts = max_attempts

    def execute(self, invocation: Invocation) -> int:
        path = invocation.event.name

        video_id = video_id_from_path(path)
        if video_id is None:
            logger.warning("Invalid file path structure: %s", path)
            raise SkipInvocation(f"Invalid file path structure: {path}")
        invocation.video_id = video_id

        record = self.store.get(video_id)
        if record is None:
            raise VideoNotFoundError("Video document not found", video_id)
        invocation.record = record

        if not record.do_transcribe:
            raise SkipInvocation(f"Transcription not requested for video {video_id}")

        if record.transcription_attempts >= self.max_attempts:
            raise AttemptsExceededError("Maximum transcription attempts exceeded", video_id)

        self.status_writer.mark_processing(video_id)
        attempt = record.transcription_attempts + 1
        logger.info("Video %s: transcription attempt %d/%d", video_id, attempt, self.max_attempts)
        return attempt
