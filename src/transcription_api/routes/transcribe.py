"""Audio transcription endpoint."""

import asyncio
import threading
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from transcription_api.dependencies import get_transcription_handler
from transcription_api.domain import AudioUpload, TranscriptionOptions
from transcription_api.exceptions import (
    ConfigurationError,
    InvalidInputError,
    ProviderError,
)
from transcription_api.handlers import TranscriptionHandler
from transcription_api.logging import setup_logging
from transcription_api.response_models import TranscribeResponse

logger = setup_logging()

router = APIRouter(prefix="/transcribe", tags=["transcription"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_transcription_handler)]

DISCONNECT_CHECK_SECONDS = 1.0


async def _cancel_on_disconnect(request: Request, cancel_event: threading.Event) -> None:
    """Sets cancel_event once the client has gone away."""
    while not cancel_event.is_set():
        if await request.is_disconnected():
            logger.warning("Client disconnected, cancelling transcription")
            cancel_event.set()
            return
        await asyncio.sleep(DISCONNECT_CHECK_SECONDS)


def _to_upload(audio: UploadFile | None) -> AudioUpload | None:
    if audio is None or not audio.filename:
        return None
    return AudioUpload(
        filename=audio.filename,
        size=audio.size if audio.size is not None else 0,
        content_type=audio.content_type,
        reader=audio.file.read,
    )


@router.post("", response_model=TranscribeResponse)
async def transcribe_audio(
    request: Request,
    handler: HandlerDep,
    audio: Annotated[UploadFile | None, File()] = None,
    service: Annotated[str | None, Form()] = None,
    language: Annotated[str | None, Form()] = None,
    model: Annotated[str | None, Form()] = None,
    diarize: Annotated[bool, Form()] = False,
    speaker_labels: Annotated[bool, Form()] = False,
):
    """
    Transcribes an uploaded audio file and stores the transcript.

    The provider call may take minutes (the AssemblyAI path polls a remote
    job), so it runs in the threadpool and is cancelled if the client
    disconnects.
    """
    upload = _to_upload(audio)
    options = TranscriptionOptions(
        model=model,
        language=language,
        diarize=diarize,
        speaker_labels=speaker_labels,
    )

    cancel_event = threading.Event()
    watcher = asyncio.create_task(_cancel_on_disconnect(request, cancel_event))
    try:
        outcome = await run_in_threadpool(
            handler.handle, upload, options, service, cancel_event
        )
    except InvalidInputError as e:
        logger.info("Upload rejected", extra={"reason": e.message})
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except ConfigurationError as e:
        logger.error("Provider not configured", extra={"provider": e.provider})
        raise HTTPException(status_code=500, detail=e.message)
    except ProviderError as e:
        logger.error(
            "Transcription failed",
            extra={"provider": e.provider, "status": e.status_code, "reason": e.message},
        )
        raise HTTPException(
            status_code=500,
            detail={
                "error": e.message,
                "message": str(e.cause) if e.cause else e.message,
                "details": e.details,
            },
        )
    finally:
        watcher.cancel()

    response = TranscribeResponse(
        transcription=outcome.result,
        service=outcome.service,
        saved=outcome.saved,
        transcription_id=outcome.record.id if outcome.record else None,
    )
    exclude = None if outcome.saved else {"transcription_id"}
    return JSONResponse(content=response.model_dump(mode="json", exclude=exclude))
