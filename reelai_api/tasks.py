from celery import Celery
from celery.utils.log import get_task_logger

from reelai_core.models.video import StorageEvent

from reelai_api.config import Settings, settings
from reelai_api.factory import build_pipeline

logger = get_task_logger(__name__)

# Initialize Celery
celery_app = Celery(
    "reelai",
    broker=settings.redis_url,
    backend=settings.redis_url,
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    # Video download + transcription sizing; exceeding either is a
    # platform-level failure, not a pipeline one.
    task_time_limit=settings.task_timeout_seconds,
    worker_max_memory_per_child=settings.task_memory_mib * 1024,  # KiB
)


@celery_app.task(name="reelai.transcribe_video")
def transcribe_video(bucket: str, name: str) -> dict:
    """
    Run the transcription pipeline for one finalized upload.

    Pipeline errors propagate so the task is recorded as failed.
    """
    # Fresh settings per invocation: the provider key is a secret binding.
    pipeline = build_pipeline(Settings())

    result = pipeline.execute(StorageEvent(bucket=bucket, name=name))

    if result.skipped:
        logger.info("Skipped gs://%s/%s: %s", bucket, name, result.skip_reason)
        return {"status": "skipped", "video_id": result.video_id, "reason": result.skip_reason}

    extraction = result.invocation.extraction
    return {
        "status": "completed",
        "video_id": result.video_id,
        "words": len(result.invocation.transcription.words),
        "parse_status": extraction.status.value if extraction else None,
    }
