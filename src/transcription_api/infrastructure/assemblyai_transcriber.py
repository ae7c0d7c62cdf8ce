"""AssemblyAI implementation of the TranscriptionProvider interface."""

import threading
from typing import Any

import requests

from transcription_api.config import AssemblyAIConfig
from transcription_api.domain import (
    CanonicalTranscriptionResult,
    JobStatus,
    TranscriptionOptions,
    TranscriptNormalizer,
)
from transcription_api.exceptions import (
    ConfigurationError,
    NormalizationError,
    ProviderError,
    TranscriptionCancelledError,
    TranscriptionJobFailedError,
    TranscriptionTimeoutError,
)
from transcription_api.logging import setup_logging

from .interfaces import TranscriptionProvider
from .upstream_errors import decode_json, error_from_response

logger = setup_logging()

_STATUS_MAP = {
    "queued": JobStatus.SUBMITTED,
    "processing": JobStatus.RUNNING,
    "completed": JobStatus.COMPLETED,
    "error": JobStatus.FAILED,
}


class AssemblyAITranscriber(TranscriptionProvider):
    """
    Transcribes audio through AssemblyAI's asynchronous job API.

    The audio is uploaded, a transcript job is created for the upload, and
    the job is polled under the configured PollPolicy until it completes,
    fails, runs out of attempts, or the caller sets the cancel event.
    """

    name = "assemblyai"
    display_name = "AssemblyAI"

    def __init__(
        self,
        config: AssemblyAIConfig,
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
        Uploads, submits and polls until the transcript job is terminal.

        Raises:
            ConfigurationError: If no API key is configured.
            TranscriptionJobFailedError: If the job ends in the error state.
            TranscriptionTimeoutError: If the job is unfinished after max_attempts status checks.
            TranscriptionCancelledError: If cancel_event is set while waiting.
            ProviderError: On transport failure or a non-2xx status.
        """
        if not self.is_configured:
            raise ConfigurationError(self.name, "AssemblyAI API key not configured")

        cancel_event = cancel_event or threading.Event()

        upload_url = self._upload(audio_data, cancel_event)
        job_id = self._submit(upload_url, options, cancel_event)
        payload = self._wait_for_completion(job_id, cancel_event)

        result = self._normalizer.normalize(self.name, payload)
        logger.info(
            "AssemblyAI transcription successful",
            extra={"job_id": job_id, "confidence": result.confidence},
        )
        return result

    def _upload(self, audio_data: bytes, cancel_event: threading.Event) -> str:
        self._check_cancelled(cancel_event)
        response = self._request(
            "post",
            f"{self._config.base_url}/upload",
            data=audio_data,
            headers=self._headers({"Content-Type": "application/octet-stream"}),
        )
        upload_url = decode_json(self.name, response).get("upload_url")
        if not upload_url:
            raise NormalizationError(self.name, "Upload response has no upload_url")
        logger.info("Audio uploaded to AssemblyAI", extra={"size": len(audio_data)})
        return upload_url

    def _submit(
        self,
        upload_url: str,
        options: TranscriptionOptions,
        cancel_event: threading.Event,
    ) -> str:
        self._check_cancelled(cancel_event)
        body = {
            "audio_url": upload_url,
            "language_code": options.language or self._config.language,
            "punctuate": options.punctuate,
            "format_text": True,
            "speaker_labels": options.speaker_labels or self._config.speaker_labels,
        }
        response = self._request(
            "post",
            f"{self._config.base_url}/transcript",
            json=body,
            headers=self._headers({"Content-Type": "application/json"}),
        )
        job_id = decode_json(self.name, response).get("id")
        if not job_id:
            raise NormalizationError(self.name, "Transcript response has no job id")
        logger.info("AssemblyAI job submitted", extra={"job_id": job_id})
        return job_id

    def _wait_for_completion(
        self, job_id: str, cancel_event: threading.Event
    ) -> dict[str, Any]:
        policy = self._config.poll

        for attempt in range(1, policy.max_attempts + 1):
            self._check_cancelled(cancel_event, job_id)

            response = self._request(
                "get",
                f"{self._config.base_url}/transcript/{job_id}",
                headers=self._headers(),
            )
            payload = decode_json(self.name, response)
            status = self._job_status(payload, job_id)

            if status is JobStatus.COMPLETED:
                return payload
            if status is JobStatus.FAILED:
                logger.error(
                    "AssemblyAI job failed",
                    extra={"job_id": job_id, "error": payload.get("error")},
                )
                raise TranscriptionJobFailedError(self.name, job_id, payload.get("error"))

            logger.debug(
                "AssemblyAI job not finished",
                extra={"job_id": job_id, "status": status.value, "attempt": attempt},
            )
            if attempt < policy.max_attempts:
                if cancel_event.wait(policy.interval_after(attempt)):
                    raise TranscriptionCancelledError(self.name, job_id)

        logger.error(
            "AssemblyAI job still running after max poll attempts",
            extra={"job_id": job_id, "attempts": policy.max_attempts},
        )
        raise TranscriptionTimeoutError(self.name, job_id, policy.max_attempts)

    def _job_status(self, payload: dict[str, Any], job_id: str) -> JobStatus:
        raw_status = payload.get("status")
        status = _STATUS_MAP.get(raw_status)
        if status is None:
            logger.warning(
                "Unknown AssemblyAI job status",
                extra={"job_id": job_id, "status": raw_status},
            )
            return JobStatus.RUNNING
        return status

    def _check_cancelled(
        self, cancel_event: threading.Event, job_id: str | None = None
    ) -> None:
        if cancel_event.is_set():
            logger.info("AssemblyAI transcription cancelled", extra={"job_id": job_id})
            raise TranscriptionCancelledError(self.name, job_id)

    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {"Authorization": self._config.api_key}
        if extra:
            headers.update(extra)
        return headers

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            response = self._session.request(
                method, url, timeout=self._config.timeout_seconds, **kwargs
            )
        except requests.RequestException as e:
            logger.exception("AssemblyAI request failed", extra={"url": url})
            raise ProviderError(
                self.name, "Transcription failed", details=str(e), cause=e
            ) from e

        if not response.ok:
            error = error_from_response(self.name, self.display_name, response)
            logger.error(
                "AssemblyAI API error",
                extra={"status": response.status_code, "details": error.details},
            )
            raise error
        return response
