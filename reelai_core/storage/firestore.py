"""Firestore-backed video store."""

import logging
from typing import Any, Optional

from google.cloud import firestore

from reelai_core.models.video import TranscriptionStatus, VideoRecord
from reelai_core.storage.base import VideoStore

logger = logging.getLogger(__name__)


class FirestoreVideoStore(VideoStore):
    """Video records stored as documents keyed by video id."""

    def __init__(self, client: firestore.Client, collection: str = "videos"):
        self.client = client
        self.collection = collection

    def _ref(self, video_id: str) -> firestore.DocumentReference:
        return self.client.collection(self.collection).document(video_id)

    def get(self, video_id: str) -> Optional[VideoRecord]:
        snapshot = self._ref(video_id).get()
        if not snapshot.exists:
            return None
        return VideoRecord.from_document(video_id, snapshot.to_dict() or {})

    def mark_processing(self, video_id: str) -> None:
        # Increment is applied server-side, so concurrent attempts never
        # overwrite each other's count.
        self._ref(video_id).update({
            "transcriptionStatus": TranscriptionStatus.PROCESSING.value,
            "transcriptionLastAttempt": firestore.SERVER_TIMESTAMP,
            "transcriptionAttempts": firestore.Increment(1),
        })

    def update(self, video_id: str, fields: dict[str, Any]) -> None:
        logger.debug("Updating %s/%s: %s", self.collection, video_id, sorted(fields))
        self._ref(video_id).update(fields)
