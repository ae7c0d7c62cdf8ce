"""Maps provider payloads onto the canonical transcription shape."""

from typing import Any

from pydantic import ValidationError

from transcription_api.exceptions import NormalizationError, ProviderError

from .models import CanonicalTranscriptionResult


class TranscriptNormalizer:
    """
    Converts raw provider responses into CanonicalTranscriptionResult.

    Optional fields missing from a payload default to None or an empty list.
    Only the transcript text is mandatory.
    """

    def __init__(self):
        self._mappers = {
            "deepgram": self._from_deepgram,
            "assemblyai": self._from_assemblyai,
        }

    def normalize(
        self, provider_name: str, raw: dict[str, Any]
    ) -> CanonicalTranscriptionResult:
        """
        Normalizes a provider response.

        Args:
            provider_name: Key of the provider that produced the payload.
            raw: Decoded JSON body of the provider response.

        Returns:
            The canonical result.

        Raises:
            ProviderError: If a Deepgram payload has no channels or alternatives.
            NormalizationError: If the payload is malformed or has no text.
        """
        mapper = self._mappers.get(provider_name)
        if mapper is None:
            raise NormalizationError(
                provider_name, f"No normalizer registered for '{provider_name}'"
            )
        if not isinstance(raw, dict):
            raise NormalizationError(
                provider_name, "Provider response is not a JSON object", details=raw
            )

        fields = mapper(raw)
        if fields.get("text") is None:
            raise NormalizationError(
                provider_name, "Provider response contains no transcript text"
            )

        try:
            return CanonicalTranscriptionResult(**fields)
        except ValidationError as e:
            raise NormalizationError(
                provider_name,
                "Provider response has unexpected field types",
                details=e.errors(include_url=False, include_context=False),
                cause=e,
            ) from e

    def _from_deepgram(self, raw: dict[str, Any]) -> dict[str, Any]:
        results = raw.get("results")
        channels = results.get("channels") if isinstance(results, dict) else None
        if not channels:
            raise ProviderError("deepgram", "No transcription results received")
        if not isinstance(channels, list) or not isinstance(channels[0], dict):
            raise NormalizationError(
                "deepgram", "Deepgram channels have an unexpected shape", details=channels
            )

        channel = channels[0]
        alternatives = channel.get("alternatives")
        if not alternatives:
            raise ProviderError("deepgram", "No transcription alternatives found")
        if not isinstance(alternatives, list) or not isinstance(alternatives[0], dict):
            raise NormalizationError(
                "deepgram",
                "Deepgram alternatives have an unexpected shape",
                details=alternatives,
            )

        best = alternatives[0]
        metadata = raw.get("metadata")
        if not isinstance(metadata, dict):
            metadata = {}
        paragraphs = best.get("paragraphs")
        paragraphs = paragraphs.get("paragraphs") if isinstance(paragraphs, dict) else None

        return {
            "text": best.get("transcript"),
            "confidence": best.get("confidence"),
            "words": best.get("words") or [],
            "language": (
                channel.get("detected_language") or metadata.get("language") or "en-US"
            ),
            "duration": metadata.get("duration"),
            "utterances": results.get("utterances") or paragraphs or [],
            "speaker_labels": best.get("speakers"),
        }

    def _from_assemblyai(self, raw: dict[str, Any]) -> dict[str, Any]:
        return {
            "text": raw.get("text"),
            "confidence": raw.get("confidence"),
            "words": raw.get("words") or [],
            "language": raw.get("language_code") or "en",
            "duration": raw.get("audio_duration"),
            "utterances": raw.get("utterances") or [],
            "speaker_labels": raw.get("speaker_labels"),
            "chapters": raw.get("chapters") or [],
            "entities": raw.get("entities") or [],
        }
