"""Infrastructure interface exports."""

from .transcription_provider import TranscriptionProvider
from .transcription_store import TranscriptionStore

__all__ = ["TranscriptionProvider", "TranscriptionStore"]
