"""OpenAI client."""

from openai import OpenAI

from reelai_core.ai.base import AIClient


class OpenAIClient(AIClient):
    """OpenAI client for Whisper transcription and JSON-mode chat."""

    env_var = "OPENAI_API_KEY"

    def _create_client(self) -> OpenAI:
        return OpenAI(api_key=self.api_key)

    def get_default_model(self) -> str:
        """Get the default OpenAI model."""
        return "gpt-4o-mini"

    def get_default_transcription_model(self) -> str:
        return "whisper-1"
