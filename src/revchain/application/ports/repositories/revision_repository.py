"""Revision repository port - per-document revision ledger storage."""

from collections.abc import Sequence
from contextlib import AbstractAsyncContextManager
from typing import Protocol
from uuid import UUID

from revchain.domain.entities import RevisionRecord


class RevisionRepository(Protocol):
    """Port for revision ledger persistence.

    list_by_document returns records ordered by created_at, newest first.
    savepoint scopes a nested transaction: a failure inside it is rolled back
    without aborting the surrounding unit of work.
    """

    async def lock(self, document_id: UUID, *, shared: bool = False) -> None: ...

    async def append(self, record: RevisionRecord) -> RevisionRecord: ...

    async def list_by_document(self, document_id: UUID) -> list[RevisionRecord]: ...

    async def get_head(self, document_id: UUID) -> RevisionRecord | None: ...

    async def clear_content(self, revision_id: UUID) -> None: ...

    async def delete_many(self, revision_ids: Sequence[UUID]) -> None: ...

    def savepoint(self) -> AbstractAsyncContextManager[object]: ...
