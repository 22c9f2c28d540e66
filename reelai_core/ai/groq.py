"""Groq AI client."""

from groq import Groq

from reelai_core.ai.base import AIClient


class GroqClient(AIClient):
    """
    Groq AI client.

    Uses the OpenAI-compatible API for fast inference, including hosted
    Whisper for transcription.
    """

    env_var = "GROQ_API_KEY"

    def _create_client(self) -> Groq:
        return Groq(api_key=self.api_key)

    def get_default_model(self) -> str:
        """Get the default Groq model."""
        return "llama-3.3-70b-versatile"

    def get_default_transcription_model(self) -> str:
        return "whisper-large-v3"
