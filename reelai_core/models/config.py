"""Configuration models for the transcription pipeline."""

import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class AIProviderType(str, Enum):
    """Available AI providers."""

    OPENAI = "openai"
    GROQ = "groq"


@dataclass
class AIProvider:
    """AI provider configuration."""

    provider: AIProviderType = AIProviderType.OPENAI
    openai_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None

    def get_api_key(self) -> Optional[str]:
        """Get the API key for the current provider."""
        match self.provider:
            case AIProviderType.OPENAI:
                return self.openai_api_key
            case AIProviderType.GROQ:
                return self.groq_api_key
            case _:
                return None

    @property
    def is_configured(self) -> bool:
        """Check if the current provider has an API key."""
        return bool(self.get_api_key())


@dataclass
class TranscriptionConfig:
    """Configuration for the speech-to-text call."""

    model: Optional[str] = None  # Provider default if None
    language: Optional[str] = None  # Auto-detect if None

    def get_model(self, provider: AIProviderType) -> str:
        if self.model:
            return self.model
        match provider:
            case AIProviderType.GROQ:
                return "whisper-large-v3"
            case _:
                return "whisper-1"


@dataclass
class ExtractionConfig:
    """Configuration for the structured-extraction call."""

    model: Optional[str] = None
    temperature: float = 0.3
    max_tokens: int = 4096

    def get_model(self, provider: AIProviderType) -> str:
        if self.model:
            return self.model
        match provider:
            case AIProviderType.GROQ:
                return "llama-3.3-70b-versatile"
            case _:
                return "gpt-4o-mini"


@dataclass
class PipelineConfig:
    """Main configuration for the transcription pipeline."""

    max_attempts: int = 3

    # Scratch space for downloaded media
    scratch_dir: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))

    # Sub-configurations
    ai: AIProvider = field(default_factory=AIProvider)
    transcription: TranscriptionConfig = field(default_factory=TranscriptionConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)

    @property
    def transcription_model(self) -> str:
        return self.transcription.get_model(self.ai.provider)

    @property
    def extraction_model(self) -> str:
        return self.extraction.get_model(self.ai.provider)
