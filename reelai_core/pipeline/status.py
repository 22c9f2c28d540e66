"""Status writer: the single point where stage outcomes reach the record."""

import logging
from typing import TYPE_CHECKING, Any

from reelai_core.models.video import TranscriptionStatus
from reelai_core.storage.base import VideoStore

if TYPE_CHECKING:
    from reelai_core.pipeline.base import Invocation

logger = logging.getLogger(__name__)


class StatusWriter:
    """Persist pipeline status onto video records."""

    def __init__(self, store: VideoStore):
        self.store = store

    def mark_processing(self, video_id: str) -> None:
        """Stamp an attempt before any provider is called."""
        self.store.mark_processing(video_id)
        logger.debug("Marked video %s as processing", video_id)

    def record_success(self, invocation: "Invocation") -> None:
        """Merge transcription and (if run) extraction outcomes in one write."""
        fields: dict[str, Any] = {
            "transcriptionStatus": TranscriptionStatus.COMPLETED.value,
            "transcriptionError": None,
            **invocation.transcription.to_fields(),
        }
        if invocation.extraction is not None:
            fields.update(invocation.extraction.to_fields())

        self.store.update(invocation.video_id, fields)

    def record_failure(self, video_id: str, message: str) -> None:
        """Mark the record as errored with the failure message."""
        self.store.update(video_id, {
            "transcriptionStatus": TranscriptionStatus.ERROR.value,
            "transcriptionError": message,
        })
