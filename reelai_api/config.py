from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

from reelai_core.models.config import (
    AIProvider,
    AIProviderType,
    ExtractionConfig,
    PipelineConfig,
    TranscriptionConfig,
)


class Settings(BaseSettings):
    redis_url: str = "redis://localhost:6379/0"

    # ===========================================
    # Trigger
    # ===========================================
    bucket: str = "reelai-b5b1d.firebasestorage.app"
    object_filter: str = "videos/*/*.mp4"

    # ===========================================
    # Google Cloud
    # ===========================================
    gcp_project: Optional[str] = None  # None = use the ambient credentials' project
    collection: str = "videos"

    # ===========================================
    # AI API Settings
    # ===========================================
    # Provider selection: "openai" or "groq"
    ai_provider: str = "openai"

    # API keys (secret bindings, read when a task starts)
    openai_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None

    transcription_model: Optional[str] = None  # None = provider default
    transcription_language: Optional[str] = None  # None = auto-detect
    extraction_model: Optional[str] = None
    extraction_temperature: float = 0.3

    # ===========================================
    # Job limits
    # ===========================================
    max_attempts: int = 3
    scratch_dir: Optional[str] = None  # None = system temp dir
    task_memory_mib: int = 1024
    task_timeout_seconds: int = 540

    class Config:
        env_file = ".env"

    def to_pipeline_config(self) -> PipelineConfig:
        """Build the core pipeline configuration."""
        config = PipelineConfig(
            max_attempts=self.max_attempts,
            ai=AIProvider(
                provider=AIProviderType(self.ai_provider),
                openai_api_key=self.openai_api_key,
                groq_api_key=self.groq_api_key,
            ),
            transcription=TranscriptionConfig(
                model=self.transcription_model,
                language=self.transcription_language,
            ),
            extraction=ExtractionConfig(
                model=self.extraction_model,
                temperature=self.extraction_temperature,
            ),
        )
        if self.scratch_dir:
            config.scratch_dir = Path(self.scratch_dir)
        return config


settings = Settings()
