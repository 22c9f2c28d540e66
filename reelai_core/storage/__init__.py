"""Document and blob storage adapters."""

from reelai_core.storage.base import BlobStore, VideoStore
from reelai_core.storage.firestore import FirestoreVideoStore
from reelai_core.storage.gcs import GCSBlobStore

__all__ = ["BlobStore", "VideoStore", "FirestoreVideoStore", "GCSBlobStore"]
