"""Builders for provider payloads and HTTP responses used across tests."""

import json
from typing import Any

import requests

TEST_MAX_UPLOAD_BYTES = 64 * 1024


def make_response(
    status_code: int, payload: Any = None, url: str = "https://provider.test"
) -> requests.Response:
    """Builds a real requests.Response with a JSON (or empty) body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if payload is None:
        response._content = b""
    elif isinstance(payload, (bytes, str)):
        response._content = payload.encode() if isinstance(payload, str) else payload
    else:
        response._content = json.dumps(payload).encode()
        response.headers["Content-Type"] = "application/json"
    return response


def deepgram_payload(
    transcript: str = "hello world", confidence: float = 0.95, **metadata: Any
) -> dict[str, Any]:
    return {
        "metadata": {"request_id": "req-1", "duration": 3.2, **metadata},
        "results": {
            "channels": [
                {
                    "alternatives": [
                        {
                            "transcript": transcript,
                            "confidence": confidence,
                            "words": [
                                {"word": "hello", "start": 0.1, "end": 0.5, "confidence": 0.97},
                                {"word": "world", "start": 0.6, "end": 1.0, "confidence": 0.93},
                            ],
                        },
                        {"transcript": "yellow world", "confidence": 0.41, "words": []},
                    ]
                }
            ]
        },
    }


def assemblyai_transcript(status: str, job_id: str = "job-1", **fields: Any) -> dict[str, Any]:
    return {"id": job_id, "status": status, **fields}
