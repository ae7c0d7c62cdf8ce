"""Handler for direct CRUD operations on transcription records."""

from uuid import UUID

from transcription_api.db_models import TranscriptionCreate, TranscriptionRecord
from transcription_api.exceptions import MissingFieldsError
from transcription_api.infrastructure.interfaces import TranscriptionStore
from transcription_api.logging import setup_logging
from transcription_api.request_models import TranscriptionPayload

logger = setup_logging()

_REQUIRED_FIELDS = ("filename", "original_text")


class RecordHandler:
    """Pass-through record operations with input checks."""

    def __init__(self, store: TranscriptionStore):
        self._store = store

    def list_records(self) -> list[TranscriptionRecord]:
        return self._store.list_all()

    def get_record(self, record_id: UUID) -> TranscriptionRecord:
        return self._store.get_by_id(record_id)

    def create_record(self, payload: TranscriptionPayload) -> TranscriptionRecord:
        """
        Creates a record from client-supplied fields.

        Raises:
            MissingFieldsError: If filename or original_text is missing or empty.
            StoreError: If the insert fails.
        """
        missing = [name for name in _REQUIRED_FIELDS if not getattr(payload, name)]
        if missing:
            raise MissingFieldsError(missing)
        return self._store.insert(TranscriptionCreate(**payload.model_dump()))

    def update_record(
        self, record_id: UUID, payload: TranscriptionPayload
    ) -> TranscriptionRecord:
        """
        Applies the fields present in the payload.

        Raises:
            MissingFieldsError: If filename or original_text is set to empty.
            RecordNotFoundError: If the record does not exist.
            StoreError: If the update fails.
        """
        changes = payload.model_dump(exclude_unset=True)
        emptied = [
            name for name in _REQUIRED_FIELDS if name in changes and not changes[name]
        ]
        if emptied:
            raise MissingFieldsError(emptied)
        return self._store.update(record_id, changes)

    def delete_record(self, record_id: UUID) -> None:
        """
        Deletes a record. Deleting an unknown id is not an error.

        Raises:
            StoreError: If the delete fails.
        """
        if not self._store.delete(record_id):
            logger.info(
                "Delete requested for unknown transcription",
                extra={"transcription_id": str(record_id)},
            )
