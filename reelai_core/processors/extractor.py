"""Structured pattern extraction from transcripts."""

import json
import logging

from reelai_core.ai.base import AIClient
from reelai_core.models.video import ContentPattern, ExtractionResult
from reelai_core.processors.patterns import SYSTEM_PROMPT, build_prompt

logger = logging.getLogger(__name__)


class PatternExtractor:
    """
    Extract a pattern's JSON payload from a transcript using an AI provider.

    Failures never escape `extract`: provider errors, malformed output
    and recognized rejections all come back as a failed ExtractionResult.
    """

    def __init__(self, ai_client: AIClient, temperature: float = 0.3, max_tokens: int = 4096):
        self.ai_client = ai_client
        self.temperature = temperature
        self.max_tokens = max_tokens

    def extract(self, transcript: str, pattern: ContentPattern) -> ExtractionResult:
        """
        Run the extraction pass for one pattern.

        Args:
            transcript: Full transcription text
            pattern: Requested content pattern

        Returns:
            Completed result with the payload, or failed result with a message
        """
        try:
            response = self.ai_client.generate(
                build_prompt(pattern, transcript),
                system=SYSTEM_PROMPT,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                json_mode=True,
            )
            parsed = json.loads(response.content)
        except Exception as e:
            logger.warning("Pattern extraction (%s) failed: %s", pattern.value, e)
            return ExtractionResult.failed(pattern, str(e))

        if not isinstance(parsed, dict):
            return ExtractionResult.failed(
                pattern, f"Expected a JSON object, got {type(parsed).__name__}"
            )

        if "error" in parsed:
            error = str(parsed["error"] or f"Not a valid {pattern.value}")
            logger.info("Transcript rejected as %s: %s", pattern.value, error)
            return ExtractionResult.failed(pattern, error)

        return ExtractionResult.completed(pattern, parsed)
