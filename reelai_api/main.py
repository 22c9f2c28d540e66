import logging
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict, Field

from reelai_core.models.video import StorageEvent

from reelai_api.config import settings
from reelai_api.tasks import transcribe_video

logger = logging.getLogger(__name__)

app = FastAPI(
    title="ReelAI Transcription Service",
    description="Upload-triggered video transcription and pattern extraction",
    version="0.1.0",
)


class ObjectFinalized(BaseModel):
    """Cloud Storage object metadata delivered with a finalize notification."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    bucket: str
    name: str
    content_type: Optional[str] = Field(None, alias="contentType")


class EventResponse(BaseModel):
    status: str  # queued, ignored
    task_id: Optional[str] = None
    reason: Optional[str] = None


@app.get("/")
def home():
    return {"status": "ok", "service": "reelai-transcription"}


@app.post("/events/object-finalized", response_model=EventResponse)
def object_finalized(payload: ObjectFinalized):
    """Queue transcription for uploads matching the trigger's bucket and filter."""
    event = StorageEvent(bucket=payload.bucket, name=payload.name, content_type=payload.content_type)

    if event.bucket != settings.bucket:
        return EventResponse(status="ignored", reason=f"Bucket {event.bucket} is not watched")

    if not event.matches(settings.object_filter):
        return EventResponse(status="ignored", reason=f"{event.name} does not match {settings.object_filter}")

    task = transcribe_video.delay(event.bucket, event.name)
    logger.info("Queued transcription of gs://%s/%s as task %s", event.bucket, event.name, task.id)
    return EventResponse(status="queued", task_id=task.id)
