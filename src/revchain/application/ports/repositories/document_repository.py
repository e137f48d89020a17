"""Document repository port."""

from typing import Protocol
from uuid import UUID

from revchain.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for the external document store."""

    async def get_by_id(self, document_id: UUID) -> Document | None: ...

    async def update(self, document: Document) -> Document: ...
