"""Custom exceptions for the transcription API."""

from typing import Any
from uuid import UUID


class InvalidInputError(Exception):
    """Raised when client input is rejected before any upstream call."""

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingFileError(InvalidInputError):
    """Raised when the request carries no audio file."""

    def __init__(self):
        super().__init__("No audio file provided")


class FileTooLargeError(InvalidInputError):
    """Raised when the uploaded file exceeds the configured size limit."""

    status_code = 413

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(f"File too large. Maximum size is {_format_size(max_size)}.")


class UnsupportedFormatError(InvalidInputError):
    """Raised when the file extension is not in the allowed set."""

    def __init__(self, extension: str, allowed: tuple[str, ...]):
        self.extension = extension
        self.allowed = allowed
        super().__init__(
            "Invalid audio format. Supported formats: "
            + ", ".join(ext.upper() for ext in allowed)
        )


class UnsupportedProviderError(InvalidInputError):
    """Raised when the requested transcription service is unknown."""

    def __init__(self, provider: str, available: list[str]):
        self.provider = provider
        self.available = available
        super().__init__(
            f"Unsupported transcription service '{provider}'. "
            f"Available: {', '.join(available)}"
        )


class MissingFieldsError(InvalidInputError):
    """Raised when required record fields are missing or empty."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"{' and '.join(fields)} {'are' if len(fields) > 1 else 'is'} required")


class ProviderError(Exception):
    """Raised when a speech-recognition provider call fails."""

    def __init__(
        self,
        provider: str,
        message: str,
        status_code: int | None = None,
        details: Any = None,
        cause: Exception | None = None,
    ):
        self.provider = provider
        self.message = message
        self.status_code = status_code
        self.details = details
        self.cause = cause
        super().__init__(message)


class ConfigurationError(ProviderError):
    """Raised when provider credentials are not configured."""

    def __init__(self, provider: str, message: str):
        super().__init__(provider, message)


class NormalizationError(ProviderError):
    """Raised when a provider payload cannot be mapped to the canonical shape."""


class TranscriptionJobFailedError(ProviderError):
    """Raised when a remote transcription job ends in its error state."""

    def __init__(self, provider: str, job_id: str, reason: str | None):
        self.job_id = job_id
        super().__init__(
            provider,
            f"Transcription job {job_id} failed: {reason or 'unknown error'}",
            details={"job_id": job_id, "error": reason},
        )


class TranscriptionTimeoutError(ProviderError):
    """Raised when a transcription job is still running after the last allowed status check."""

    def __init__(self, provider: str, job_id: str, attempts: int):
        self.job_id = job_id
        self.attempts = attempts
        super().__init__(
            provider,
            f"Transcription job {job_id} did not finish after {attempts} status checks",
            details={"job_id": job_id},
        )


class TranscriptionCancelledError(ProviderError):
    """Raised when the caller cancels an in-flight transcription."""

    def __init__(self, provider: str, job_id: str | None = None):
        self.job_id = job_id
        super().__init__(provider, "Transcription cancelled")


class StoreError(Exception):
    """Raised when a transcription store operation fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Transcription store {operation} failed")


class RecordNotFoundError(Exception):
    """Raised when a requested transcription record does not exist."""

    def __init__(self, record_id: UUID):
        self.record_id = record_id
        super().__init__(f"Transcription {record_id} not found")


def _format_size(size: int) -> str:
    for unit, factor in (("GB", 1024**3), ("MB", 1024**2), ("KB", 1024)):
        if size >= factor and size % factor == 0:
            return f"{size // factor}{unit}"
    return f"{size} bytes"
