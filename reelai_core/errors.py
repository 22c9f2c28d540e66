"""Error taxonomy for the transcription pipeline.

Fatal errors end an invocation: they are stamped onto the video record
(when one was loaded) and re-raised to the caller. SkipInvocation is a
control signal for legitimate no-op runs and never reaches the record.
"""

from typing import Optional


class PipelineError(Exception):
    """Base class for fatal pipeline errors."""

    def __init__(self, message: str, video_id: Optional[str] = None):
        self.message = message
        self.video_id = video_id
        super().__init__(message)


class VideoNotFoundError(PipelineError):
    """The video document for an uploaded object does not exist."""


class AttemptsExceededError(PipelineError):
    """The record has used up its transcription attempts."""


class DownloadError(PipelineError):
    """The uploaded object could not be copied to scratch storage."""


class TranscriptionFailedError(PipelineError):
    """The speech-to-text provider call failed."""


class ProviderNotConfiguredError(PipelineError):
    """An AI client was used without an API key."""


class SkipInvocation(Exception):
    """Raised by a stage to end the run without touching the record."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
