"""PostgreSQL document repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from revchain.domain.entities import Document


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID) -> Document | None:
        """Get document by id."""
        cur = await self._conn.execute(
            "SELECT id, content, last_edited_at, last_checkpoint_at FROM document WHERE id = %s",
            (document_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Document(
            id=r[0],
            content=r[1],
            last_edited_at=r[2],
            last_checkpoint_at=r[3],
        )

    async def update(self, document: Document) -> Document:
        """Update content and checkpoint timestamps."""
        await self._conn.execute(
            "UPDATE document SET content=%s, last_edited_at=%s, last_checkpoint_at=%s WHERE id=%s",
            (
                document.content,
                document.last_edited_at,
                document.last_checkpoint_at,
                document.id,
            ),
        )
        return document
