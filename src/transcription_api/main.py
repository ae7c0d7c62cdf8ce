"""ASGI entry point: `uvicorn transcription_api.main:app`."""

from ddtrace import patch_all

from transcription_api.app import create_app

patch_all()

app = create_app()
