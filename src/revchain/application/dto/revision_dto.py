"""Revision DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from revchain.domain.entities import RevisionRecord


@dataclass
class RevisionSummary:
    """Revision metadata without content."""

    id: UUID
    length: int
    created_at: datetime
    editor_id: str | None

    @classmethod
    def from_record(cls, record: RevisionRecord) -> "RevisionSummary":
        return cls(
            id=record.id,
            length=record.length,
            created_at=record.created_at,
            editor_id=record.editor_id,
        )


@dataclass
class RevisionContentOutput:
    """Reconstructed revision text with its metadata."""

    id: UUID
    content: str
    length: int
    created_at: datetime
    editor_id: str | None
