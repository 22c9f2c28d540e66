"""Transcription pipeline stage."""

from reelai_core.pipeline.base import Invocation, PipelineStage
from reelai_core.processors.transcriber import SpeechTranscriber
from reelai_core.models.video import TranscriptionResult


class TranscribeStage(PipelineStage):
    """
    Transcribe the downloaded video.

    Input: invocation.media_path
    Output: invocation.transcription
    """

    name = "transcribe"

    def __init__(self, transcriber: SpeechTranscriber):
        self.transcriber = transcriber

    def validate(self, invocation: Invocation) -> tuple[bool, str | None]:
        if invocation.media_path is None:
            return False, "No media was fetched"
        return True, None

    def execute(self, invocation: Invocation) -> TranscriptionResult:
        invocation.transcription = self.transcriber.transcribe(
            invocation.media_path, invocation.video_id
        )
        return invocation.transcription
