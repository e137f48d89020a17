"""Domain entities."""

from revchain.domain.entities.document import Document
from revchain.domain.entities.revision import RevisionRecord

__all__ = [
    "Document",
    "RevisionRecord",
]
