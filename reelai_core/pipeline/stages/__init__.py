"""Pipeline stages."""

from reelai_core.pipeline.stages.gate import TriggerGateStage
from reelai_core.pipeline.stages.fetch import FetchStage
from reelai_core.pipeline.stages.transcribe import TranscribeStage
from reelai_core.pipeline.stages.extract import ExtractStage

__all__ = [
    "TriggerGateStage",
    "FetchStage",
    "TranscribeStage",
    "ExtractStage",
]
