"""Response models for the transcription API."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from transcription_api.domain import CanonicalTranscriptionResult


class TranscribeResponse(BaseModel):
    """Response returned after a transcription request."""

    success: bool = True
    transcription: CanonicalTranscriptionResult
    service: str
    saved: bool
    transcription_id: UUID | None = None


class SpeechTestResponse(BaseModel):
    """Result of the provider credential check."""

    success: bool = True
    message: str
    projects: list[dict[str, Any]]


class MessageResponse(BaseModel):
    message: str
