"""Request bodies accepted by the transcription API."""

from pydantic import BaseModel


class TranscriptionPayload(BaseModel):
    """Fields of a transcription record supplied by the client."""

    filename: str | None = None
    original_text: str | None = None
    file_size: int | None = None
    file_type: str | None = None
    processing_time_ms: int | None = None
