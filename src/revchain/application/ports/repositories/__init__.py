"""Repository ports."""

from revchain.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from revchain.application.ports.repositories.revision_repository import (
    RevisionRepository,
)

__all__ = [
    "DocumentRepository",
    "RevisionRepository",
]
