"""Pipeline orchestration for upload-triggered transcription."""

from reelai_core.pipeline.base import Invocation, Pipeline, PipelineResult, PipelineStage
from reelai_core.pipeline.status import StatusWriter
from reelai_core.pipeline.stages import ExtractStage, FetchStage, TranscribeStage, TriggerGateStage
from reelai_core.pipeline.transcription import TranscriptionPipeline

__all__ = [
    "Invocation",
    "Pipeline",
    "PipelineResult",
    "PipelineStage",
    "StatusWriter",
    "TriggerGateStage",
    "FetchStage",
    "TranscribeStage",
    "ExtractStage",
    "TranscriptionPipeline",
]
