"""Retention pruner - caps the number of revisions kept per document."""

from uuid import UUID

from loguru import logger

from revchain.application.ports.repositories import RevisionRepository
from revchain.domain.exceptions import ChainCorrupted


async def prune_revisions(
    revisions: RevisionRepository, document_id: UUID, max_count: int
) -> int:
    """Delete the oldest revisions beyond max_count. Returns number deleted.

    Revisions older than the oldest kept one become unreconstructable.
    """
    if max_count < 1:
        raise ValueError("max_count must be at least 1")

    records = await revisions.list_by_document(document_id)
    excess = records[max_count:]
    if not excess:
        return 0

    head = next((r for r in excess if r.is_head), None)
    if head is not None:
        raise ChainCorrupted(document_id, head.id, "head revision is not the newest")

    await revisions.delete_many([r.id for r in excess])
    logger.debug(
        "Pruned revisions",
        document_id=str(document_id),
        deleted=len(excess),
        kept=max_count,
    )
    return len(excess)
