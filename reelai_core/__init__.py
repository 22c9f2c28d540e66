"""
ReelAI Core

Pure Python library for the upload-triggered video transcription job.
No hosting, no CLI - just the pipeline and its collaborators.
"""

from reelai_core.models.video import (
    ContentPattern,
    ExtractionResult,
    ParseStatus,
    StorageEvent,
    TranscriptionResult,
    TranscriptionStatus,
    VideoRecord,
)
from reelai_core.models.config import PipelineConfig, AIProvider, AIProviderType
from reelai_core.errors import (
    PipelineError,
    VideoNotFoundError,
    AttemptsExceededError,
    DownloadError,
    TranscriptionFailedError,
    ProviderNotConfiguredError,
    SkipInvocation,
)
from reelai_core.pipeline import Pipeline, PipelineResult, TranscriptionPipeline
from reelai_core.processors import MediaFetcher, SpeechTranscriber, PatternExtractor
from reelai_core.storage import VideoStore, BlobStore, FirestoreVideoStore, GCSBlobStore
from reelai_core.ai import AIClient, AIResponse, GroqClient, OpenAIClient

__version__ = "0.1.0"

__all__ = [
    # Models
    "ContentPattern",
    "ExtractionResult",
    "ParseStatus",
    "StorageEvent",
    "TranscriptionResult",
    "TranscriptionStatus",
    "VideoRecord",
    "PipelineConfig",
    "AIProvider",
    "AIProviderType",
    # Errors
    "PipelineError",
    "VideoNotFoundError",
    "AttemptsExceededError",
    "DownloadError",
    "TranscriptionFailedError",
    "ProviderNotConfiguredError",
    "SkipInvocation",
    # Pipeline
    "Pipeline",
    "PipelineResult",
    "TranscriptionPipeline",
    # Processors
    "MediaFetcher",
    "SpeechTranscriber",
    "PatternExtractor",
    # Storage
    "VideoStore",
    "BlobStore",
    "FirestoreVideoStore",
    "GCSBlobStore",
    # AI
    "AIClient",
    "AIResponse",
    "GroqClient",
    "OpenAIClient",
]
