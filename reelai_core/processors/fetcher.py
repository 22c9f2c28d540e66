"""Media fetcher: copies uploaded videos to local scratch storage."""

import logging
import tempfile
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import Iterator, Optional
from uuid import uuid4

from reelai_core.errors import DownloadError
from reelai_core.storage.base import BlobStore

logger = logging.getLogger(__name__)


class MediaFetcher:
    """
    Download blobs into a scratch directory.

    Each copy gets a name unique to the call, so concurrent invocations
    for the same object never share a file.
    """

    def __init__(self, blob_store: BlobStore, scratch_dir: Optional[Path] = None):
        self.blob_store = blob_store
        self.scratch_dir = scratch_dir or Path(tempfile.gettempdir())

    def scratch_path(self, path: str) -> Path:
        """Get a fresh scratch file path for an object path."""
        basename = PurePosixPath(path).name
        return self.scratch_dir / f"{uuid4().hex}-{basename}"

    @contextmanager
    def scratch_copy(self, bucket: str, path: str, video_id: Optional[str] = None) -> Iterator[Path]:
        """
        Yield a local copy of `gs://bucket/path`, deleting it on exit.

        The file is removed on every exit path, including a failed or
        partial download.

        Raises:
            DownloadError: If the object could not be downloaded
        """
        self.scratch_dir.mkdir(parents=True, exist_ok=True)
        local_path = self.scratch_path(path)
        logger.info("Downloading video %s to %s", video_id or path, local_path)
        try:
            try:
                self.blob_store.download(bucket, path, local_path)
            except Exception as e:
                raise DownloadError(f"Failed to download {bucket}/{path}: {e}", video_id) from e
            logger.info("Successfully downloaded video %s", video_id or path)
            yield local_path
        finally:
            local_path.unlink(missing_ok=True)
            logger.info("Cleaned up scratch file for video %s", video_id or path)
