"""Shared fakes and fixtures."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import pytest

from reelai_core.ai.base import AIClient, AIMessage, AIResponse
from reelai_core.models.config import PipelineConfig
from reelai_core.models.video import StorageEvent, VideoRecord
from reelai_core.pipeline.transcription import TranscriptionPipeline
from reelai_core.storage.base import BlobStore, VideoStore

BUCKET = "test-bucket"


class InMemoryVideoStore(VideoStore):
    """Dict-backed store that records every write."""

    def __init__(self):
        self.docs: dict[str, dict[str, Any]] = {}
        self.writes: list[tuple[str, dict[str, Any]]] = []

    def add(self, video_id: str, **fields) -> None:
        self.docs[video_id] = {"do_transcribe": True, **fields}

    def get(self, video_id: str) -> Optional[VideoRecord]:
        if video_id not in self.docs:
            return None
        return VideoRecord.from_document(video_id, dict(self.docs[video_id]))

    def mark_processing(self, video_id: str) -> None:
        attempts = self.docs[video_id].get("transcriptionAttempts") or 0
        self.update(video_id, {
            "transcriptionStatus": "processing",
            "transcriptionLastAttempt": datetime.now(timezone.utc),
            "transcriptionAttempts": attempts + 1,
        })

    def update(self, video_id: str, fields: dict[str, Any]) -> None:
        if video_id not in self.docs:
            raise KeyError(f"No document to update: {video_id}")
        self.writes.append((video_id, dict(fields)))
        self.docs[video_id].update(fields)


class InMemoryBlobStore(BlobStore):
    """Objects held as bytes; downloads write real files."""

    def __init__(self):
        self.objects: dict[tuple[str, str], bytes] = {}
        self.downloaded: list[Path] = []
        self.fail_midway = False

    def put(self, bucket: str, path: str, data: bytes = b"\x00\x00\x00\x18ftypmp42") -> None:
        self.objects[(bucket, path)] = data

    def download(self, bucket: str, path: str, destination: Path) -> Path:
        self.downloaded.append(destination)
        if self.fail_midway:
            destination.write_bytes(b"partial")
            raise ConnectionError("connection reset by peer")
        if (bucket, path) not in self.objects:
            raise FileNotFoundError(f"No such object: {bucket}/{path}")
        destination.write_bytes(self.objects[(bucket, path)])
        return destination

    def upload(self, bucket: str, path: str, source: Path, content_type: Optional[str] = None) -> str:
        self.objects[(bucket, path)] = source.read_bytes()
        return f"gs://{bucket}/{path}"


class FakeAIClient(AIClient):
    """
    Scripted provider.

    `transcription` and `chat_content` are returned as-is, or raised when
    they are exceptions.
    """

    env_var = "FAKE_API_KEY"

    def __init__(self, transcription: Any = None, chat_content: Any = "{}"):
        super().__init__(api_key="test-key")
        self.transcription = transcription if transcription is not None else {
            "text": "Mix flour and eggs, then fry.",
            "words": [
                {"word": "Mix", "start": 0.0, "end": 0.4},
                {"word": "flour", "start": 0.4, "end": 0.9},
            ],
        }
        self.chat_content = chat_content
        self.transcribe_calls: list[Path] = []
        self.chat_calls: list[tuple[list[AIMessage], dict]] = []

    def _create_client(self) -> Any:
        return object()

    def get_default_model(self) -> str:
        return "fake-chat"

    def get_default_transcription_model(self) -> str:
        return "fake-whisper"

    def transcribe(self, audio_path: Path, language: Optional[str] = None) -> Any:
        assert audio_path.exists()
        self.transcribe_calls.append(audio_path)
        if isinstance(self.transcription, Exception):
            raise self.transcription
        return self.transcription

    def chat(self, messages: list[AIMessage], **kwargs) -> AIResponse:
        self.chat_calls.append((messages, kwargs))
        if isinstance(self.chat_content, Exception):
            raise self.chat_content
        return AIResponse(content=self.chat_content, model=self.get_model())

    @property
    def calls(self) -> int:
        return len(self.transcribe_calls) + len(self.chat_calls)


@pytest.fixture
def store() -> InMemoryVideoStore:
    return InMemoryVideoStore()


@pytest.fixture
def blobs() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def ai() -> FakeAIClient:
    return FakeAIClient()


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    return tmp_path / "scratch"


@pytest.fixture
def pipeline(store, blobs, ai, scratch_dir) -> TranscriptionPipeline:
    return TranscriptionPipeline(store, blobs, ai, PipelineConfig(scratch_dir=scratch_dir))


@pytest.fixture
def upload(store, blobs):
    """Create a record plus its uploaded object; returns the event."""

    def _upload(video_id: str = "vid123", **fields) -> StorageEvent:
        path = f"videos/user1/{video_id}.mp4"
        store.add(video_id, **fields)
        blobs.put(BUCKET, path)
        return StorageEvent(bucket=BUCKET, name=path)

    return _upload
