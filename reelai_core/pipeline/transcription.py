"""The video transcription pipeline."""

from typing import Optional

from reelai_core.ai.base import AIClient
from reelai_core.models.config import PipelineConfig
from reelai_core.pipeline.base import Pipeline
from reelai_core.pipeline.stages import ExtractStage, FetchStage, TranscribeStage, TriggerGateStage
from reelai_core.pipeline.status import StatusWriter
from reelai_core.processors import MediaFetcher, PatternExtractor, SpeechTranscriber
from reelai_core.storage.base import BlobStore, VideoStore


class TranscriptionPipeline(Pipeline):
    """
    Complete upload-triggered transcription job.

    Runs all stages: gate -> fetch -> transcribe -> extract

    All collaborators are injected; nothing is looked up globally.
    """

    def __init__(
        self,
        store: VideoStore,
        blob_store: BlobStore,
        ai_client: AIClient,
        config: Optional[PipelineConfig] = None,
    ):
        self.config = config or PipelineConfig()
        status_writer = StatusWriter(store)

        stages = [
            TriggerGateStage(store, status_writer, max_attempts=self.config.max_attempts),
            FetchStage(MediaFetcher(blob_store, self.config.scratch_dir)),
            TranscribeStage(SpeechTranscriber(ai_client, language=self.config.transcription.language)),
            ExtractStage(PatternExtractor(
                ai_client,
                temperature=self.config.extraction.temperature,
                max_tokens=self.config.extraction.max_tokens,
            )),
        ]

        super().__init__(stages, status_writer)
