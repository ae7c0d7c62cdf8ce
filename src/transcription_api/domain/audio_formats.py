"""Audio file extension rules."""

import os

DEFAULT_CONTENT_TYPE = "audio/mpeg"

CONTENT_TYPES = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "m4a": "audio/mp4",
    "flac": "audio/flac",
    "ogg": "audio/ogg",
    "webm": "audio/webm",
}


def file_extension(filename: str) -> str:
    """Returns the lower-cased extension of a filename without the dot."""
    return os.path.splitext(filename)[1].lower().lstrip(".")


def content_type_for(filename: str) -> str:
    """Resolves the MIME type sent upstream, defaulting to audio/mpeg."""
    return CONTENT_TYPES.get(file_extension(filename), DEFAULT_CONTENT_TYPE)
