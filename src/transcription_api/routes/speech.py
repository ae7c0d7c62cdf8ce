"""Speech service catalog and credential check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from transcription_api.dependencies import get_deepgram
from transcription_api.domain import catalog
from transcription_api.exceptions import ConfigurationError, ProviderError
from transcription_api.infrastructure import DeepgramTranscriber
from transcription_api.logging import setup_logging
from transcription_api.response_models import SpeechTestResponse

logger = setup_logging()

router = APIRouter(prefix="/speech", tags=["speech"])

DeepgramDep = Annotated[DeepgramTranscriber, Depends(get_deepgram)]


@router.get("/test", response_model=SpeechTestResponse)
def test_credentials(deepgram: DeepgramDep):
    """Verifies the Deepgram API key by listing its projects."""
    try:
        projects = deepgram.list_projects()
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=e.message)
    except ProviderError as e:
        logger.error("Deepgram API test failed", extra={"reason": e.message})
        upstream = e.details.get("error") if isinstance(e.details, dict) else None
        raise HTTPException(
            status_code=500,
            detail={
                "error": "Deepgram API key test failed",
                "message": upstream or e.message,
            },
        )

    return SpeechTestResponse(message="Deepgram API key is valid", projects=projects)


@router.get("/models")
def list_models() -> dict:
    """Returns the models offered by each speech service."""
    return catalog.AVAILABLE_MODELS


@router.get("/languages")
def list_languages() -> dict:
    """Returns the language codes supported by each speech service."""
    return catalog.SUPPORTED_LANGUAGES


@router.get("/web-config")
def web_speech_config() -> dict:
    return catalog.web_speech_config()
