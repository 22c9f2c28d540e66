"""Data models for the transcription pipeline."""

from reelai_core.models.video import (
    ContentPattern,
    ExtractionResult,
    ParseStatus,
    StorageEvent,
    TranscriptionResult,
    TranscriptionStatus,
    TranscriptWord,
    VideoRecord,
)
from reelai_core.models.config import (
    AIProvider,
    AIProviderType,
    ExtractionConfig,
    PipelineConfig,
    TranscriptionConfig,
)

__all__ = [
    "ContentPattern",
    "ExtractionResult",
    "ParseStatus",
    "StorageEvent",
    "TranscriptionResult",
    "TranscriptionStatus",
    "TranscriptWord",
    "VideoRecord",
    "AIProvider",
    "AIProviderType",
    "ExtractionConfig",
    "PipelineConfig",
    "TranscriptionConfig",
]
