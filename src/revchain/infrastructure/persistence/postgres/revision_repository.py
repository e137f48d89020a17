"""PostgreSQL revision ledger repository implementation."""

from collections.abc import Sequence
from uuid import UUID

from psycopg import AsyncConnection, AsyncTransaction

from revchain.domain.entities import RevisionRecord

_COLUMNS = "id, document_id, created_at, length, patch, content, editor_id"


def _row_to_revision(r: tuple) -> RevisionRecord:
    return RevisionRecord(
        id=r[0],
        document_id=r[1],
        created_at=r[2],
        length=r[3],
        patch_from_previous=bytes(r[4]) if r[4] is not None else None,
        content=r[5],
        editor_id=r[6],
    )


class PostgresRevisionRepository:
    """Revision repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def lock(self, document_id: UUID, *, shared: bool = False) -> None:
        """Take a transaction-scoped advisory lock on the document's ledger."""
        fn = "pg_advisory_xact_lock_shared" if shared else "pg_advisory_xact_lock"
        await self._conn.execute(
            f"SELECT {fn}(hashtextextended(%s::text, 0))",
            (str(document_id),),
        )

    async def append(self, record: RevisionRecord) -> RevisionRecord:
        """Insert revision."""
        await self._conn.execute(
            f"INSERT INTO revision ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                record.id,
                record.document_id,
                record.created_at,
                record.length,
                record.patch_from_previous,
                record.content,
                record.editor_id,
            ),
        )
        return record

    async def list_by_document(self, document_id: UUID) -> list[RevisionRecord]:
        """List revisions of a document, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM revision WHERE document_id = %s ORDER BY created_at DESC",
            (document_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_revision(r) for r in rows]

    async def get_head(self, document_id: UUID) -> RevisionRecord | None:
        """Get newest revision of a document."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM revision WHERE document_id = %s "
            "ORDER BY created_at DESC LIMIT 1",
            (document_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_revision(r)

    async def clear_content(self, revision_id: UUID) -> None:
        """Demote revision to patch-only storage."""
        await self._conn.execute(
            "UPDATE revision SET content = NULL WHERE id = %s",
            (revision_id,),
        )

    async def delete_many(self, revision_ids: Sequence[UUID]) -> None:
        """Delete revisions."""
        if not revision_ids:
            return
        await self._conn.execute(
            "DELETE FROM revision WHERE id = ANY(%s)",
            (list(revision_ids),),
        )

    def savepoint(self) -> AsyncTransaction:
        """Nested transaction; on error only the work inside it is rolled back."""
        return self._conn.transaction()
