"""Transcription record CRUD endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from transcription_api.db_models import TranscriptionRecord
from transcription_api.dependencies import get_record_handler
from transcription_api.exceptions import (
    InvalidInputError,
    RecordNotFoundError,
    StoreError,
)
from transcription_api.handlers import RecordHandler
from transcription_api.request_models import TranscriptionPayload
from transcription_api.response_models import MessageResponse

router = APIRouter(prefix="/transcriptions", tags=["transcriptions"])

RecordHandlerDep = Annotated[RecordHandler, Depends(get_record_handler)]

NOT_FOUND = "Transcription not found"


@router.get("", response_model=list[TranscriptionRecord])
def list_transcriptions(handler: RecordHandlerDep):
    """Returns all transcriptions, newest first."""
    try:
        return handler.list_records()
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to fetch transcriptions")


@router.get("/{record_id}", response_model=TranscriptionRecord)
def get_transcription(record_id: UUID, handler: RecordHandlerDep):
    try:
        return handler.get_record(record_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to fetch transcription")


@router.post("", response_model=TranscriptionRecord, status_code=201)
def create_transcription(payload: TranscriptionPayload, handler: RecordHandlerDep):
    """Stores a transcription supplied by the client."""
    try:
        return handler.create_record(payload)
    except InvalidInputError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to create transcription")


@router.put("/{record_id}", response_model=TranscriptionRecord)
def update_transcription(
    record_id: UUID, payload: TranscriptionPayload, handler: RecordHandlerDep
):
    """Updates the fields present in the request body."""
    try:
        return handler.update_record(record_id, payload)
    except InvalidInputError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to update transcription")


@router.delete("/{record_id}", response_model=MessageResponse)
def delete_transcription(record_id: UUID, handler: RecordHandlerDep):
    """Deletes a transcription; unknown ids are reported as deleted too."""
    try:
        handler.delete_record(record_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="Failed to delete transcription")
    return MessageResponse(message="Transcription deleted successfully")
