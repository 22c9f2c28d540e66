"""Processors for fetching, transcribing and extracting."""

from reelai_core.processors.fetcher import MediaFetcher
from reelai_core.processors.transcriber import SpeechTranscriber
from reelai_core.processors.extractor import PatternExtractor

__all__ = [
    "MediaFetcher",
    "SpeechTranscriber",
    "PatternExtractor",
]
