"""Speech-to-text transcription through a remote provider."""

import logging
from pathlib import Path
from typing import Optional

from reelai_core.ai.base import AIClient
from reelai_core.errors import PipelineError, TranscriptionFailedError
from reelai_core.models.video import TranscriptionResult

logger = logging.getLogger(__name__)


class SpeechTranscriber:
    """
    Transcribe media files with word-level timestamps.

    The provider accepts video containers directly, so the downloaded
    upload is sent as-is.
    """

    def __init__(self, ai_client: AIClient, language: Optional[str] = None):
        self.ai_client = ai_client
        self.language = language

    def transcribe(self, media_path: Path, video_id: Optional[str] = None) -> TranscriptionResult:
        """
        Transcribe a local media file.

        Args:
            media_path: Path to the downloaded media
            video_id: Owning video, for error reporting

        Returns:
            TranscriptionResult with text and (possibly empty) words

        Raises:
            TranscriptionFailedError: On any provider error, carrying the
                provider's message
        """
        logger.info(
            "Sending video %s to %s for transcription (%s)",
            video_id, self.ai_client.provider_name, self.ai_client.get_transcription_model(),
        )
        try:
            response = self.ai_client.transcribe(media_path, language=self.language)
            result = TranscriptionResult.from_provider_response(response)
        except PipelineError:
            raise
        except Exception as e:
            raise TranscriptionFailedError(str(e), video_id) from e

        logger.info("Transcribed video %s: %d chars, %d words", video_id, len(result.text), len(result.words))
        return result
