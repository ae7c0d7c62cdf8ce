"""Domain layer exports."""

from .audio_formats import content_type_for, file_extension
from .models import (
    AudioUpload,
    CanonicalTranscriptionResult,
    JobStatus,
    PollPolicy,
    TranscriptionOptions,
)
from .normalizer import TranscriptNormalizer

__all__ = [
    "AudioUpload",
    "CanonicalTranscriptionResult",
    "JobStatus",
    "PollPolicy",
    "TranscriptionOptions",
    "TranscriptNormalizer",
    "content_type_for",
    "file_extension",
]
