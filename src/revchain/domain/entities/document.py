"""Document entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Document:
    """Document whose history is kept in the revision ledger.

    last_edited_at: time of the last content mutation.
    last_checkpoint_at: time the autosave policy last fired for this document.
    """

    id: UUID
    content: str
    last_edited_at: datetime | None = None
    last_checkpoint_at: datetime | None = None
