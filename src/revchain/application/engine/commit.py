"""Commit engine - appends a new head revision to a document's ledger."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from loguru import logger

from revchain.application.engine.prune import prune_revisions
from revchain.application.ports import PatchCodec
from revchain.application.ports.repositories import RevisionRepository
from revchain.domain.entities import RevisionRecord
from revchain.domain.exceptions import ChainCorrupted


class EmptyDiff(Exception):
    """New content is identical to the head's content."""


def make_patch(codec: PatchCodec, old_text: str, new_text: str) -> bytes:
    """Serialized patch from old_text to new_text. Raises EmptyDiff if unchanged."""
    delta = codec.diff(old_text, new_text)
    if delta.is_empty:
        raise EmptyDiff
    return codec.to_patch(delta)


async def commit_revision(
    revisions: RevisionRepository,
    codec: PatchCodec,
    document_id: UUID,
    new_content: str,
    editor_id: str | None,
    now: datetime,
    *,
    max_count: int,
) -> RevisionRecord | None:
    """Record new_content as the document's head revision.

    The previous head is demoted to patch-only storage. Returns None when
    new_content equals the current head. Must run inside one transaction
    holding the document's exclusive ledger lock.
    """
    head = await revisions.get_head(document_id)

    if head is None:
        record = RevisionRecord(
            id=uuid4(),
            document_id=document_id,
            created_at=now,
            length=len(new_content),
            patch_from_previous=None,
            content=new_content,
            editor_id=editor_id,
        )
        await revisions.append(record)
        logger.debug("Committed genesis revision", document_id=str(document_id))
        return record

    if head.content is None:
        raise ChainCorrupted(document_id, head.id, "newest revision holds no content")

    try:
        patch = make_patch(codec, head.content, new_content)
    except EmptyDiff:
        logger.debug("Content unchanged, no revision committed", document_id=str(document_id))
        return None

    # created_at orders the ledger; keep it strictly increasing
    created_at = now if now > head.created_at else head.created_at + timedelta(microseconds=1)

    await revisions.clear_content(head.id)
    record = RevisionRecord(
        id=uuid4(),
        document_id=document_id,
        created_at=created_at,
        length=len(new_content),
        patch_from_previous=patch,
        content=new_content,
        editor_id=editor_id,
    )
    await revisions.append(record)
    logger.debug(
        "Committed revision",
        document_id=str(document_id),
        revision_id=str(record.id),
        patch_bytes=len(patch),
    )

    try:
        async with revisions.savepoint():
            await prune_revisions(revisions, document_id, max_count)
    except Exception:
        logger.exception("Pruning revisions failed", document_id=str(document_id))

    return record
