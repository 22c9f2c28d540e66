"""Pattern extraction pipeline stage."""

from reelai_core.models.video import ExtractionResult
from reelai_core.pipeline.base import Invocation, PipelineStage
from reelai_core.processors.extractor import PatternExtractor


class ExtractStage(PipelineStage):
    """
    Extract structured pattern data from the transcript.

    Runs only when the record requests a supported pattern. Its outcome,
    success or failure, never fails the invocation.

    Input: invocation.transcription, invocation.record.pattern
    Output: invocation.extraction
    """

    name = "extract"

    def __init__(self, extractor: PatternExtractor):
        self.extractor = extractor

    def validate(self, invocation: Invocation) -> tuple[bool, str | None]:
        if invocation.transcription is None:
            return False, "No transcription available"
        if invocation.record is None or invocation.record.content_pattern is None:
            return False, "No valid pattern requested"
        return True, None

    def execute(self, invocation: Invocation) -> ExtractionResult:
        invocation.extraction = self.extractor.extract(
            invocation.transcription.text,
            invocation.record.content_pattern,
        )
        return invocation.extraction
