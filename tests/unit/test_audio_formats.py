import pytest

from transcription_api.domain import content_type_for, file_extension


@pytest.mark.unit
@pytest.mark.parametrize(
    ("filename", "extension"),
    [
        ("call.WAV", "wav"),
        ("archive.tar.mp3", "mp3"),
        ("no_extension", ""),
        (".hidden", ""),
    ],
)
def test_file_extension(filename, extension):
    assert file_extension(filename) == extension


@pytest.mark.unit
@pytest.mark.parametrize(
    ("filename", "content_type"),
    [
        ("a.mp3", "audio/mpeg"),
        ("a.wav", "audio/wav"),
        ("a.m4a", "audio/mp4"),
        ("a.flac", "audio/flac"),
        ("a.ogg", "audio/ogg"),
        ("a.webm", "audio/webm"),
        ("a.aiff", "audio/mpeg"),
    ],
)
def test_content_type_for(filename, content_type):
    assert content_type_for(filename) == content_type
