"""Revision record entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class RevisionRecord:
    """One entry of a document's revision ledger.

    patch_from_previous transforms the text of the next-older revision into
    the text of this one. It is None only for the genesis revision.
    content holds the full text and is set on the head revision only.
    """

    id: UUID
    document_id: UUID
    created_at: datetime
    length: int
    patch_from_previous: bytes | None = None
    content: str | None = None
    editor_id: str | None = None

    @property
    def is_head(self) -> bool:
        return self.content is not None

    @property
    def is_genesis(self) -> bool:
        return self.patch_from_previous is None
