"""Storage abstractions consumed by the pipeline."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from reelai_core.models.video import VideoRecord


class VideoStore(ABC):
    """
    Document store holding one record per video.

    Implementations must apply each update as a single atomic write.
    """

    @abstractmethod
    def get(self, video_id: str) -> Optional[VideoRecord]:
        """Fetch and decode a record, or None if the document is missing."""

    @abstractmethod
    def mark_processing(self, video_id: str) -> None:
        """
        Stamp the start of an attempt in one write.

        Sets status to processing, stamps the last-attempt time with a
        server timestamp and increments the attempt counter by one.
        """

    @abstractmethod
    def update(self, video_id: str, fields: dict[str, Any]) -> None:
        """Merge fields into an existing record."""


class BlobStore(ABC):
    """Object storage for uploaded media and derived assets."""

    @abstractmethod
    def download(self, bucket: str, path: str, destination: Path) -> Path:
        """Copy an object to a local file and return its path."""

    @abstractmethod
    def upload(
        self,
        bucket: str,
        path: str,
        source: Path,
        content_type: Optional[str] = None,
    ) -> str:
        """Upload a local file and return the object's URI."""
