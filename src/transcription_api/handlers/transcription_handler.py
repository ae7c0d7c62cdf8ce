"""Handler for audio transcription requests."""

import threading
import time
from collections.abc import Mapping

from pydantic import BaseModel

from transcription_api.config import UploadConfig
from transcription_api.db_models import TranscriptionCreate, TranscriptionRecord
from transcription_api.domain import (
    AudioUpload,
    CanonicalTranscriptionResult,
    TranscriptionOptions,
    content_type_for,
    file_extension,
)
from transcription_api.exceptions import (
    ConfigurationError,
    FileTooLargeError,
    MissingFileError,
    StoreError,
    UnsupportedFormatError,
    UnsupportedProviderError,
)
from transcription_api.infrastructure.interfaces import (
    TranscriptionProvider,
    TranscriptionStore,
)
from transcription_api.logging import setup_logging

logger = setup_logging()


class TranscriptionOutcome(BaseModel, frozen=True):
    """Result of one transcription request."""

    result: CanonicalTranscriptionResult
    service: str
    record: TranscriptionRecord | None = None

    @property
    def saved(self) -> bool:
        return self.record is not None


class TranscriptionHandler:
    """Orchestrates upload validation, transcription and persistence."""

    def __init__(
        self,
        providers: Mapping[str, TranscriptionProvider],
        store: TranscriptionStore,
        upload_config: UploadConfig,
        default_provider: str,
    ):
        self._providers = providers
        self._store = store
        self._upload_config = upload_config
        self._default_provider = default_provider

    def handle(
        self,
        upload: AudioUpload | None,
        options: TranscriptionOptions,
        service: str | None = None,
        cancel_event: threading.Event | None = None,
    ) -> TranscriptionOutcome:
        """
        Validates the upload, transcribes it and stores the transcript.

        Checks run in order and the first failure wins: file present, size
        within the limit, allowed extension, provider credentials. None of
        them touches the network.

        A store failure after a successful transcription does not fail the
        request; the outcome is returned without a record.

        Raises:
            MissingFileError: If no file was uploaded.
            FileTooLargeError: If the file exceeds the size limit.
            UnsupportedFormatError: If the extension is not allowed.
            UnsupportedProviderError: If the requested service is unknown.
            ConfigurationError: If the provider has no credentials.
            ProviderError: If the provider call fails.
        """
        provider = self._validate(upload, service)

        content_type = content_type_for(upload.filename)
        logger.info(
            "Transcription requested",
            extra={
                "file_name": upload.filename,
                "size": upload.size,
                "content_type": content_type,
                "provider": provider.name,
            },
        )

        audio_data = upload.read()
        started = time.perf_counter()
        result = provider.transcribe(audio_data, content_type, options, cancel_event)
        processing_time_ms = int((time.perf_counter() - started) * 1000)

        record = self._persist(
            TranscriptionCreate(
                filename=upload.filename,
                original_text=result.text,
                file_size=upload.size,
                file_type=upload.content_type or content_type,
                processing_time_ms=processing_time_ms,
            ),
            provider.name,
        )

        return TranscriptionOutcome(result=result, service=provider.name, record=record)

    def _validate(
        self, upload: AudioUpload | None, service: str | None
    ) -> TranscriptionProvider:
        if upload is None or not upload.filename:
            raise MissingFileError()

        max_size = self._upload_config.max_file_size_bytes
        if upload.size > max_size:
            raise FileTooLargeError(upload.size, max_size)

        allowed = self._upload_config.allowed_extensions
        extension = file_extension(upload.filename)
        if extension not in allowed:
            raise UnsupportedFormatError(extension, allowed)

        name = (service or self._default_provider).lower()
        provider = self._providers.get(name)
        if provider is None:
            raise UnsupportedProviderError(name, sorted(self._providers))
        if not provider.is_configured:
            raise ConfigurationError(
                provider.name, f"{provider.display_name} API key not configured"
            )
        return provider

    def _persist(
        self, data: TranscriptionCreate, provider_name: str
    ) -> TranscriptionRecord | None:
        if not data.original_text:
            logger.warning(
                "Empty transcript not saved",
                extra={"file_name": data.filename, "provider": provider_name},
            )
            return None

        try:
            return self._store.insert(data)
        except StoreError:
            logger.warning(
                "Transcription not saved",
                extra={
                    "event": "transcription_persist_failed",
                    "file_name": data.filename,
                    "provider": provider_name,
                },
            )
            return None
