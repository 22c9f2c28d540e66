"""Base pipeline and stage abstractions."""

import logging
from abc import ABC, abstractmethod
from contextlib import ExitStack
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional
from uuid import uuid4

from reelai_core.errors import PipelineError, SkipInvocation
from reelai_core.models.video import ExtractionResult, StorageEvent, TranscriptionResult, VideoRecord
from reelai_core.pipeline.status import StatusWriter

logger = logging.getLogger(__name__)


@dataclass
class Invocation:
    """
    State of one pipeline run for one storage event.

    Stages fill in fields as they go. `resources` holds scoped resources
    (the scratch file) and is closed before the run returns or raises.
    """

    event: StorageEvent
    id: str = field(default_factory=lambda: uuid4().hex[:12])
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    video_id: Optional[str] = None
    record: Optional[VideoRecord] = None
    media_path: Optional[Path] = None
    transcription: Optional[TranscriptionResult] = None
    extraction: Optional[ExtractionResult] = None

    resources: ExitStack = field(default_factory=ExitStack, repr=False)


@dataclass
class PipelineResult:
    """Result of a pipeline execution that did not raise."""

    success: bool
    invocation: Invocation
    stage_results: dict[str, Any] = field(default_factory=dict)
    skipped: bool = False
    skip_reason: Optional[str] = None
    skipped_stages: list[str] = field(default_factory=list)

    @property
    def video_id(self) -> Optional[str]:
        return self.invocation.video_id


class PipelineStage(ABC):
    """
    Abstract base class for pipeline stages.

    Each stage represents a single step of the transcription job.
    """

    name: str = "base_stage"

    @abstractmethod
    def execute(self, invocation: Invocation) -> Any:
        """
        Execute the stage logic.

        Args:
            invocation: The run being processed

        Returns:
            Stage-specific result data
        """

    def validate(self, invocation: Invocation) -> tuple[bool, Optional[str]]:
        """
        Decide whether this stage applies to the invocation.

        Returns:
            Tuple of (should_run, reason_if_not); stages that do not apply
            are skipped, not failed.
        """
        return True, None


class Pipeline:
    """
    Orchestrate pipeline stages for one storage event.

    Stages run strictly in order. A SkipInvocation ends the run with no
    further writes. Any other exception is stamped onto the record (if
    one was loaded) and re-raised. On success the status writer merges
    all stage outcomes in one write.
    """

    def __init__(self, stages: list[PipelineStage], status_writer: StatusWriter):
        self.stages = stages
        self.status_writer = status_writer

    def execute(self, event: StorageEvent) -> PipelineResult:
        """
        Execute the pipeline for a storage event.

        Args:
            event: The object-finalized notification

        Returns:
            PipelineResult for completed or skipped runs

        Raises:
            PipelineError: Or any unexpected exception, after the record
                has been marked as errored
        """
        invocation = Invocation(event=event)
        result = PipelineResult(success=True, invocation=invocation)
        logger.info("[%s] Processing gs://%s/%s", invocation.id, event.bucket, event.name)

        try:
            with invocation.resources:
                for stage in self.stages:
                    should_run, reason = stage.validate(invocation)
                    if not should_run:
                        logger.info("[%s] Skipping stage '%s': %s", invocation.id, stage.name, reason)
                        result.skipped_stages.append(stage.name)
                        continue

                    result.stage_results[stage.name] = stage.execute(invocation)

            self.status_writer.record_success(invocation)

        except SkipInvocation as skip:
            logger.info("[%s] Nothing to do: %s", invocation.id, skip.reason)
            result.skipped = True
            result.skip_reason = skip.reason
            return result

        except Exception as e:
            message = e.message if isinstance(e, PipelineError) else (str(e) or "Unknown error")
            logger.exception("[%s] Transcription error for video %s", invocation.id, invocation.video_id)
            if invocation.record is not None:
                self._record_failure(invocation, message)
            raise

        elapsed = (datetime.now(timezone.utc) - invocation.started_at).total_seconds()
        logger.info(
            "[%s] Successfully transcribed video %s in %.1fs", invocation.id, invocation.video_id, elapsed
        )
        return result

    def _record_failure(self, invocation: Invocation, message: str) -> None:
        try:
            self.status_writer.record_failure(invocation.video_id, message)
        except Exception:
            logger.exception(
                "[%s] Could not record failure on video %s", invocation.id, invocation.video_id
            )

    def get_stage(self, stage_name: str) -> Optional[PipelineStage]:
        """Get a stage by name."""
        for stage in self.stages:
            if stage.name == stage_name:
                return stage
        return None
