"""Domain models for video records, transcripts and extraction outcomes."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from fnmatch import fnmatchcase
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class TranscriptionStatus(str, Enum):
    """Status of a video's transcription."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class ParseStatus(str, Enum):
    """Status of the pattern extraction pass."""

    COMPLETED = "completed"
    FAILED = "failed"


class ContentPattern(str, Enum):
    """Content schemas the extraction pass can target."""

    WORKOUT = "workout"
    RECIPE = "recipe"
    TUTORIAL = "tutorial"

    @classmethod
    def parse(cls, value: Any) -> Optional["ContentPattern"]:
        """Return the matching pattern, or None for absent/unknown values."""
        try:
            return cls(value)
        except ValueError:
            return None


class TranscriptWord(BaseModel):
    """A single transcribed word with its timing in seconds."""

    word: str
    start: float
    end: float


class VideoRecord(BaseModel):
    """
    The transcription-relevant view of a document in the videos collection.

    Field names mirror the stored document (camelCase aliases); the
    document may carry other fields owned by the app, which are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    do_transcribe: bool = False
    pattern: Optional[str] = None

    transcription_attempts: int = Field(0, alias="transcriptionAttempts")
    transcription_status: Optional[TranscriptionStatus] = Field(None, alias="transcriptionStatus")
    transcription_last_attempt: Optional[datetime] = Field(None, alias="transcriptionLastAttempt")
    transcription_text: Optional[str] = Field(None, alias="transcriptionText")
    transcription_words: Optional[list[TranscriptWord]] = Field(None, alias="transcriptionWords")
    transcription_error: Optional[str] = Field(None, alias="transcriptionError")

    parse_status: Optional[ParseStatus] = None
    parse_error: Optional[str] = None
    pattern_json: Optional[dict[str, Any]] = None

    # Stored fields may have been written by other clients; a value of the
    # wrong type reads as absent instead of failing the whole record.
    @field_validator(
        "pattern",
        "transcription_status",
        "transcription_last_attempt",
        "transcription_text",
        "transcription_words",
        "transcription_error",
        "parse_status",
        "parse_error",
        "pattern_json",
        mode="wrap",
    )
    @classmethod
    def _absent_if_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None

    @field_validator("transcription_attempts", mode="wrap")
    @classmethod
    def _attempts_default(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> int:
        if value is None:
            return 0
        try:
            return handler(value)
        except ValidationError:
            return 0

    @field_validator("do_transcribe", mode="wrap")
    @classmethod
    def _flag_default(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> bool:
        if value is None:
            return False
        try:
            return handler(value)
        except ValidationError:
            return False

    @classmethod
    def from_document(cls, video_id: str, data: dict[str, Any]) -> "VideoRecord":
        """Decode a raw document snapshot."""
        return cls.model_validate({**data, "id": video_id})

    @property
    def content_pattern(self) -> Optional[ContentPattern]:
        """The requested pattern, if it is one of the supported schemas."""
        return ContentPattern.parse(self.pattern)


@dataclass
class TranscriptionResult:
    """Verbatim transcript with word-level timing."""

    text: str
    words: list[TranscriptWord] = field(default_factory=list)

    @classmethod
    def from_provider_response(cls, response: Any) -> "TranscriptionResult":
        """
        Build from a verbose speech-to-text response.

        Accepts SDK response objects as well as plain dicts; providers may
        omit `words` entirely.
        """
        if isinstance(response, dict):
            text = response.get("text")
            raw_words = response.get("words")
        else:
            text = getattr(response, "text", None)
            raw_words = getattr(response, "words", None)

        words = []
        for item in raw_words or []:
            if not isinstance(item, dict):
                item = {"word": item.word, "start": item.start, "end": item.end}
            words.append(TranscriptWord.model_validate(item))

        return cls(text=text or "", words=words)

    def to_fields(self) -> dict[str, Any]:
        """Document fields written on transcription success."""
        return {
            "transcriptionText": self.text,
            "transcriptionWords": [w.model_dump() for w in self.words],
        }


@dataclass
class ExtractionResult:
    """Outcome of the pattern extraction pass."""

    pattern: ContentPattern
    status: ParseStatus
    payload: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @classmethod
    def completed(cls, pattern: ContentPattern, payload: dict[str, Any]) -> "ExtractionResult":
        return cls(pattern=pattern, status=ParseStatus.COMPLETED, payload=payload)

    @classmethod
    def failed(cls, pattern: ContentPattern, error: str) -> "ExtractionResult":
        return cls(pattern=pattern, status=ParseStatus.FAILED, error=error)

    @property
    def succeeded(self) -> bool:
        return self.status == ParseStatus.COMPLETED

    def to_fields(self) -> dict[str, Any]:
        """Document fields written when the extraction pass ran."""
        if self.succeeded:
            return {"parse_status": self.status.value, "pattern_json": self.payload, "parse_error": None}
        return {"parse_status": self.status.value, "parse_error": self.error, "pattern_json": None}


@dataclass
class StorageEvent:
    """An object-finalized notification from blob storage."""

    bucket: str
    name: str
    content_type: Optional[str] = None

    @property
    def segments(self) -> list[str]:
        """Path segments of the object name."""
        return self.name.split("/")

    def matches(self, pattern: str) -> bool:
        """
        Check the object name against a storage trigger filter.

        Matching is per path segment, so `*` never crosses a `/`:
        `videos/*/*.mp4` matches `videos/u1/v1.mp4` but not
        `videos/u1/extra/v1.mp4`.
        """
        pattern_parts = pattern.split("/")
        if len(pattern_parts) != len(self.segments):
            return False
        return all(fnmatchcase(part, glob) for part, glob in zip(self.segments, pattern_parts))
