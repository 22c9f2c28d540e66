"""Google Cloud Storage blob store."""

import logging
from pathlib import Path
from typing import Optional

from google.cloud import storage

from reelai_core.storage.base import BlobStore

logger = logging.getLogger(__name__)


class GCSBlobStore(BlobStore):
    """Blob access through a google-cloud-storage client."""

    def __init__(self, client: storage.Client):
        self.client = client

    def download(self, bucket: str, path: str, destination: Path) -> Path:
        blob = self.client.bucket(bucket).blob(path)
        blob.download_to_filename(str(destination))
        logger.debug("Downloaded gs://%s/%s to %s", bucket, path, destination)
        return destination

    def upload(
        self,
        bucket: str,
        path: str,
        source: Path,
        content_type: Optional[str] = None,
    ) -> str:
        blob = self.client.bucket(bucket).blob(path)
        blob.upload_from_filename(str(source), content_type=content_type)
        return f"gs://{bucket}/{path}"
