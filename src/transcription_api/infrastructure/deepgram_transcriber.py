"""Deepgram implementation of the TranscriptionProvider interface."""

import threading
from typing import Any

import requests

from transcription_api.config import DeepgramConfig
from transcription_api.domain import (
    CanonicalTranscriptionResult,
    TranscriptionOptions,
    TranscriptNormalizer,
)
from transcription_api.exceptions import (
    ConfigurationError,
    ProviderError,
    TranscriptionCancelledError,
)
from transcription_api.logging import setup_logging

from .interfaces import TranscriptionProvider
from .upstream_errors import decode_json, error_from_response

logger = setup_logging()


def _flag(value: bool) -> str:
    return "true" if value else "false"


class DeepgramTranscriber(TranscriptionProvider):
    """Transcribes audio with a single synchronous call to Deepgram /listen."""

    name = "deepgram"
    display_name = "Deepgram"

    def __init__(
        self,
        config: DeepgramConfig,
        session: requests.Session,
        normalizer: TranscriptNormalizer,
    ):
        self._config = config
        self._session = session
        self._normalizer = normalizer

    @property
    def is_configured(self) -> bool:
        return bool(self._config.api_key)

    def transcribe(
        self,
        audio_data: bytes,
        content_type: str,
        options: TranscriptionOptions,
        cancel_event: threading.Event | None = None,
    ) -> CanonicalTranscriptionResult:
        """
        Sends the raw audio to Deepgram and normalizes the best alternative.

        Raises:
            ConfigurationError: If no API key is configured.
            TranscriptionCancelledError: If cancelled before the request is sent.
            ProviderError: On transport failure, non-2xx status, or a response
                without channels/alternatives.
        """
        self._require_api_key()
        if cancel_event is not None and cancel_event.is_set():
            raise TranscriptionCancelledError(self.name)

        params = {
            "model": options.model or self._config.model,
            "language": options.language or self._config.language,
            "smart_format": _flag(options.smart_format),
            "punctuate": _flag(options.punctuate),
            "diarize": _flag(options.diarize),
            "utterances": "true",
        }
        headers = self._headers({"Content-Type": content_type})

        logger.info(
            "Sending audio to Deepgram",
            extra={
                "size": len(audio_data),
                "content_type": content_type,
                "model": params["model"],
                "has_project_id": bool(self._config.project_id),
            },
        )

        response = self._request(
            "post",
            f"{self._config.base_url}/listen",
            data=audio_data,
            headers=headers,
            params=params,
        )
        payload = decode_json(self.name, response)
        result = self._normalizer.normalize(self.name, payload)

        logger.info(
            "Deepgram transcription successful",
            extra={"confidence": result.confidence, "duration": result.duration},
        )
        return result

    def list_projects(self) -> list[dict[str, Any]]:
        """
        Lists the projects visible to the API key, used as a credential check.

        Raises:
            ConfigurationError: If no API key is configured.
            ProviderError: If Deepgram rejects the request.
        """
        self._require_api_key()
        response = self._request(
            "get", f"{self._config.base_url}/projects", headers=self._headers()
        )
        return decode_json(self.name, response).get("projects") or []

    def _require_api_key(self) -> None:
        if not self.is_configured:
            raise ConfigurationError(self.name, "Deepgram API key not configured")

    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {"Authorization": f"Token {self._config.api_key}"}
        if self._config.project_id:
            headers["X-Project-Id"] = self._config.project_id
        if extra:
            headers.update(extra)
        return headers

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            response = self._session.request(
                method, url, timeout=self._config.timeout_seconds, **kwargs
            )
        except requests.RequestException as e:
            logger.exception("Deepgram request failed", extra={"url": url})
            raise ProviderError(
                self.name, "Transcription failed", details=str(e), cause=e
            ) from e

        if not response.ok:
            error = error_from_response(self.name, self.display_name, response)
            logger.error(
                "Deepgram API error",
                extra={"status": response.status_code, "details": error.details},
            )
            raise error
        return response
