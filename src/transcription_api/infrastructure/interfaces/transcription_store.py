"""Abstract interface for transcription record persistence."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from transcription_api.db_models import TranscriptionCreate, TranscriptionRecord


class TranscriptionStore(ABC):
    """Abstract base class for the `transcriptions` row store."""

    @abstractmethod
    def insert(self, data: TranscriptionCreate) -> TranscriptionRecord:
        """
        Inserts a record; the store assigns id and timestamps.

        Raises:
            StoreError: If the insert fails.
        """

    @abstractmethod
    def list_all(self) -> list[TranscriptionRecord]:
        """
        Returns all records, newest first.

        Raises:
            StoreError: If the query fails.
        """

    @abstractmethod
    def get_by_id(self, record_id: UUID) -> TranscriptionRecord:
        """
        Returns one record.

        Raises:
            RecordNotFoundError: If no record has this id.
            StoreError: If the query fails.
        """

    @abstractmethod
    def update(self, record_id: UUID, changes: dict[str, Any]) -> TranscriptionRecord:
        """
        Applies the given column values and refreshes updated_at.

        Raises:
            RecordNotFoundError: If no record has this id.
            StoreError: If the update fails.
        """

    @abstractmethod
    def delete(self, record_id: UUID) -> bool:
        """
        Deletes a record.

        Returns:
            True if a row was removed, False if none matched.

        Raises:
            StoreError: If the delete fails.
        """
