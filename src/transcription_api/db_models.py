from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Text
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TranscriptionBase(SQLModel):
    filename: str
    original_text: str = Field(sa_type=Text)
    file_size: int | None = None
    file_type: str | None = None
    processing_time_ms: int | None = None


class TranscriptionRow(TranscriptionBase, table=True):
    __tablename__ = "transcriptions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
    )


class TranscriptionCreate(TranscriptionBase):
    pass


class TranscriptionRecord(TranscriptionBase):
    id: UUID
    created_at: datetime
    updated_at: datetime
