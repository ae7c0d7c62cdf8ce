"""Repository for transcription record persistence."""

from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any
from uuid import UUID

from sqlmodel import Session, col, select

from transcription_api.db_models import (
    TranscriptionCreate,
    TranscriptionRecord,
    TranscriptionRow,
    utcnow,
)
from transcription_api.exceptions import RecordNotFoundError, StoreError
from transcription_api.infrastructure.interfaces import TranscriptionStore
from transcription_api.logging import setup_logging

logger = setup_logging()


class TranscriptionRepository(TranscriptionStore):
    """
    Handles database operations for transcription records.

    Encapsulates SQL queries and transaction management, keeping the
    handler layer free of database concerns. Every operation runs in its
    own session and returns detached TranscriptionRecord models.
    """

    def __init__(self, session_factory: Callable[[], AbstractContextManager[Session]]):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def insert(self, data: TranscriptionCreate) -> TranscriptionRecord:
        try:
            with self._session_factory() as db_session:
                row = TranscriptionRow.model_validate(data)
                db_session.add(row)
                db_session.commit()
                db_session.refresh(row)
                record = self._to_record(row)
        except Exception as e:
            logger.exception(
                "Failed to insert transcription",
                extra={"file_name": data.filename},
            )
            raise StoreError("insert", cause=e) from e

        logger.info(
            "Transcription inserted",
            extra={"transcription_id": str(record.id), "file_name": record.filename},
        )
        return record

    def list_all(self) -> list[TranscriptionRecord]:
        try:
            with self._session_factory() as db_session:
                statement = select(TranscriptionRow).order_by(
                    col(TranscriptionRow.created_at).desc()
                )
                return [self._to_record(row) for row in db_session.exec(statement)]
        except Exception as e:
            logger.exception("Failed to list transcriptions")
            raise StoreError("list", cause=e) from e

    def get_by_id(self, record_id: UUID) -> TranscriptionRecord:
        try:
            with self._session_factory() as db_session:
                row = db_session.get(TranscriptionRow, record_id)
                if row is None:
                    raise RecordNotFoundError(record_id)
                return self._to_record(row)
        except RecordNotFoundError:
            raise
        except Exception as e:
            logger.exception(
                "Failed to fetch transcription",
                extra={"transcription_id": str(record_id)},
            )
            raise StoreError("get", cause=e) from e

    def update(self, record_id: UUID, changes: dict[str, Any]) -> TranscriptionRecord:
        try:
            with self._session_factory() as db_session:
                row = db_session.get(TranscriptionRow, record_id)
                if row is None:
                    raise RecordNotFoundError(record_id)

                for field, value in changes.items():
                    setattr(row, field, value)
                row.updated_at = utcnow()

                db_session.add(row)
                db_session.commit()
                db_session.refresh(row)
                record = self._to_record(row)
        except RecordNotFoundError:
            raise
        except Exception as e:
            logger.exception(
                "Failed to update transcription",
                extra={"transcription_id": str(record_id)},
            )
            raise StoreError("update", cause=e) from e

        logger.info(
            "Transcription updated",
            extra={"transcription_id": str(record_id), "fields": sorted(changes)},
        )
        return record

    def delete(self, record_id: UUID) -> bool:
        try:
            with self._session_factory() as db_session:
                row = db_session.get(TranscriptionRow, record_id)
                if row is None:
                    return False
                db_session.delete(row)
                db_session.commit()
        except Exception as e:
            logger.exception(
                "Failed to delete transcription",
                extra={"transcription_id": str(record_id)},
            )
            raise StoreError("delete", cause=e) from e

        logger.info("Transcription deleted", extra={"transcription_id": str(record_id)})
        return True

    @staticmethod
    def _to_record(row: TranscriptionRow) -> TranscriptionRecord:
        return TranscriptionRecord.model_validate(row, from_attributes=True)
