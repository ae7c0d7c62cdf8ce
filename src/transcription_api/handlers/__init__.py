"""Handler layer exports."""

from .record_handler import RecordHandler
from .transcription_handler import TranscriptionHandler, TranscriptionOutcome

__all__ = ["RecordHandler", "TranscriptionHandler", "TranscriptionOutcome"]
