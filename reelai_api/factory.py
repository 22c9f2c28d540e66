"""Build pipeline collaborators from service settings."""

from google.cloud import firestore, storage

from reelai_core.ai.base import AIClient
from reelai_core.ai.groq import GroqClient
from reelai_core.ai.openai import OpenAIClient
from reelai_core.models.config import AIProviderType, PipelineConfig
from reelai_core.pipeline.transcription import TranscriptionPipeline
from reelai_core.storage.firestore import FirestoreVideoStore
from reelai_core.storage.gcs import GCSBlobStore

from reelai_api.config import Settings


def build_ai_client(config: PipelineConfig) -> AIClient:
    """Create the AI client for the configured provider."""
    kwargs = {
        "api_key": config.ai.get_api_key(),
        "model": config.extraction_model,
        "transcription_model": config.transcription_model,
    }
    match config.ai.provider:
        case AIProviderType.GROQ:
            return GroqClient(**kwargs)
        case _:
            return OpenAIClient(**kwargs)


def build_video_store(settings: Settings) -> FirestoreVideoStore:
    client = firestore.Client(project=settings.gcp_project)
    return FirestoreVideoStore(client, collection=settings.collection)


def build_blob_store(settings: Settings) -> GCSBlobStore:
    return GCSBlobStore(storage.Client(project=settings.gcp_project))


def build_pipeline(settings: Settings) -> TranscriptionPipeline:
    """
    Wire a pipeline against Firestore, Cloud Storage and the AI provider.

    Call once per invocation so the provider key is resolved fresh.
    """
    config = settings.to_pipeline_config()
    return TranscriptionPipeline(
        store=build_video_store(settings),
        blob_store=build_blob_store(settings),
        ai_client=build_ai_client(config),
        config=config,
    )
