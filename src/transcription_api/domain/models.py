"""Domain models for the transcription API."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class TranscriptionOptions(BaseModel, frozen=True):
    """Per-request options forwarded to a provider."""

    model: str | None = None
    language: str | None = None
    punctuate: bool = True
    smart_format: bool = True
    diarize: bool = False
    speaker_labels: bool = False


class CanonicalTranscriptionResult(BaseModel, frozen=True):
    """Provider-independent transcription result."""

    text: str
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    words: list[dict[str, Any]] = []
    language: str | None = None
    duration: float | None = None
    utterances: list[dict[str, Any]] | None = None
    speaker_labels: Any = None
    chapters: list[dict[str, Any]] = []
    entities: list[dict[str, Any]] = []


class AudioUpload(BaseModel, frozen=True):
    """
    An uploaded audio file as seen by the request handler.

    The content is read lazily through `reader` so size and format checks
    can run before the file is pulled into memory.
    """

    filename: str
    size: int
    content_type: str | None = None
    reader: Callable[[], bytes]

    def read(self) -> bytes:
        return self.reader()


class JobStatus(str, Enum):
    """Lifecycle of a remote transcription job."""

    SUBMITTED = "submitted"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)


class PollPolicy(BaseModel, frozen=True):
    """Bounded polling schedule for submit-then-poll providers."""

    interval_seconds: float = Field(default=1.0, ge=0.0)
    max_attempts: int = Field(default=600, ge=1)
    backoff_factor: float = Field(default=1.0, ge=1.0)
    max_interval_seconds: float = Field(default=10.0, ge=0.0)

    def interval_after(self, attempt: int) -> float:
        """Returns the wait in seconds after the given 1-based status check."""
        interval = self.interval_seconds * self.backoff_factor ** (attempt - 1)
        return min(interval, max(self.max_interval_seconds, self.interval_seconds))
