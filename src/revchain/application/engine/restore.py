"""Restore engine - commits a historical revision's text as the new head."""

from datetime import datetime
from uuid import UUID

from loguru import logger

from revchain.application.engine.commit import commit_revision
from revchain.application.engine.reconstruct import reconstruct_revision
from revchain.application.ports import PatchCodec
from revchain.application.ports.repositories import RevisionRepository


async def restore_revision(
    revisions: RevisionRepository,
    codec: PatchCodec,
    document_id: UUID,
    revision_id: UUID,
    editor_id: str | None,
    now: datetime,
    *,
    max_count: int,
) -> str:
    """Reconstruct revision_id and commit its text as an ordinary edit.

    Returns the restored text for the caller to write back into the document.
    No revision is added if the head already holds that text.
    """
    restored = await reconstruct_revision(revisions, codec, document_id, revision_id)
    record = await commit_revision(
        revisions,
        codec,
        document_id,
        restored,
        editor_id,
        now,
        max_count=max_count,
    )
    logger.info(
        "Restored revision",
        document_id=str(document_id),
        revision_id=str(revision_id),
        new_revision_id=str(record.id) if record else None,
    )
    return restored
