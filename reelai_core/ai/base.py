"""Base AI client and common types."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from reelai_core.errors import ProviderNotConfiguredError

logger = logging.getLogger(__name__)


@dataclass
class AIMessage:
    """A message in an AI conversation."""

    role: str  # system, user, assistant
    content: str


@dataclass
class AIResponse:
    """Response from an AI provider."""

    content: str
    model: str
    tokens_used: int = 0
    raw: Any = None  # Raw response for debugging

    def __str__(self) -> str:
        return self.content


class AIClient(ABC):
    """
    Abstract base class for AI clients.

    Providers expose an OpenAI-compatible SDK, so chat completion and
    speech-to-text are implemented here against `self._client`; subclasses
    only build the SDK client and name their defaults.
    """

    env_var: str = ""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        transcription_model: Optional[str] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.transcription_model = transcription_model
        self._client = self._create_client() if api_key else None

    @abstractmethod
    def _create_client(self) -> Any:
        """Build the provider SDK client from `self.api_key`."""

    @abstractmethod
    def get_default_model(self) -> str:
        """Get the default chat model for this provider."""

    @abstractmethod
    def get_default_transcription_model(self) -> str:
        """Get the default speech-to-text model for this provider."""

    @property
    def provider_name(self) -> str:
        return type(self).__name__.removesuffix("Client")

    def is_configured(self) -> bool:
        """Check if the client is properly configured."""
        return self._client is not None

    def get_model(self) -> str:
        """Get the configured model or default."""
        return self.model or self.get_default_model()

    def get_transcription_model(self) -> str:
        return self.transcription_model or self.get_default_transcription_model()

    def _require_client(self) -> Any:
        if not self.is_configured():
            raise ProviderNotConfiguredError(
                f"{self.provider_name} API key is not configured (set {self.env_var})"
            )
        return self._client

    def chat(self, messages: list[AIMessage], **kwargs) -> AIResponse:
        """
        Generate a chat response.

        Args:
            messages: Conversation, system message first
            temperature: Sampling temperature (default 0.7)
            max_tokens: Completion limit (default 4096)
            json_mode: Force a JSON object response

        Returns:
            AIResponse with the first choice's content
        """
        client = self._require_client()

        request = {
            "model": self.get_model(),
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": kwargs.get("temperature", 0.7),
            "max_tokens": kwargs.get("max_tokens", 4096),
        }
        if kwargs.get("json_mode"):
            request["response_format"] = {"type": "json_object"}

        response = client.chat.completions.create(**request)

        content = response.choices[0].message.content or ""
        tokens = response.usage.total_tokens if response.usage else 0
        logger.debug("%s chat completion used %d tokens", self.provider_name, tokens)

        return AIResponse(content=content, model=self.get_model(), tokens_used=tokens, raw=response)

    def generate(self, prompt: str, system: Optional[str] = None, **kwargs) -> AIResponse:
        """Generate a response from a single prompt."""
        messages = []
        if system:
            messages.append(AIMessage(role="system", content=system))
        messages.append(AIMessage(role="user", content=prompt))
        return self.chat(messages, **kwargs)

    def transcribe(self, audio_path: Path, language: Optional[str] = None) -> Any:
        """
        Transcribe a media file with word-level timestamps.

        Returns the provider's verbose response object; errors propagate.
        """
        client = self._require_client()

        request = {
            "model": self.get_transcription_model(),
            "response_format": "verbose_json",
            "timestamp_granularities": ["word"],
        }
        if language:
            request["language"] = language

        with open(audio_path, "rb") as f:
            return client.audio.transcriptions.create(file=f, **request)
