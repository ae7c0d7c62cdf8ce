"""Translation of failed provider HTTP responses into ProviderError."""

from typing import Any

import requests

from transcription_api.exceptions import NormalizationError, ProviderError

_STATUS_MESSAGES = {
    401: "Invalid API key. Please check your {provider} credentials.",
    413: "Audio file too large. Please use a smaller file.",
    400: "Invalid audio format. Please use MP3, WAV, M4A, or FLAC.",
}


def response_details(response: requests.Response) -> Any:
    """Returns the decoded JSON body, or the raw text when it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text or None


def error_from_response(
    provider: str, display_name: str, response: requests.Response
) -> ProviderError:
    """Builds a ProviderError whose message depends on the upstream status."""
    details = response_details(response)
    template = _STATUS_MESSAGES.get(response.status_code)

    if template:
        message = template.format(provider=display_name)
    elif isinstance(details, dict) and (details.get("error") or details.get("err_msg")):
        message = str(details.get("error") or details.get("err_msg"))
    else:
        message = f"{display_name} request failed with status {response.status_code}"

    return ProviderError(
        provider, message, status_code=response.status_code, details=details
    )


def decode_json(provider: str, response: requests.Response) -> dict[str, Any]:
    """Decodes a successful response body, rejecting anything but an object."""
    try:
        payload = response.json()
    except ValueError as e:
        raise NormalizationError(
            provider, "Provider returned a non-JSON response", cause=e
        ) from e
    if not isinstance(payload, dict):
        raise NormalizationError(
            provider, "Provider response is not a JSON object", details=payload
        )
    return payload
