"""Abstract interface for speech-recognition providers."""

import threading
from abc import ABC, abstractmethod

from transcription_api.domain.models import (
    CanonicalTranscriptionResult,
    TranscriptionOptions,
)


class TranscriptionProvider(ABC):
    """Abstract base class for speech-to-text backends."""

    name: str
    display_name: str

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials for this provider are available."""

    @abstractmethod
    def transcribe(
        self,
        audio_data: bytes,
        content_type: str,
        options: TranscriptionOptions,
        cancel_event: threading.Event | None = None,
    ) -> CanonicalTranscriptionResult:
        """
        Transcribes audio data and returns the canonical result.

        Args:
            audio_data: Raw audio file bytes.
            content_type: MIME type of the audio.
            options: Model, language and formatting options.
            cancel_event: Set by the caller to abandon the transcription.

        Returns:
            The normalized transcription.

        Raises:
            ConfigurationError: If credentials are missing.
            ProviderError: If the upstream call fails or returns no result.
        """
