"""Reconstruction engine - replays reversed patches backward from the head."""

from uuid import UUID

from loguru import logger

from revchain.application.ports import PatchCodec
from revchain.application.ports.repositories import RevisionRepository
from revchain.domain.entities import RevisionRecord
from revchain.domain.exceptions import ChainCorrupted, PatchApplyError, RevisionNotFound


def find_revision_index(
    records: list[RevisionRecord], document_id: UUID, revision_id: UUID
) -> int:
    """Position of revision_id in a newest-first ledger listing."""
    for index, record in enumerate(records):
        if record.id == revision_id:
            return index
    raise RevisionNotFound(document_id, revision_id)


def replay_backward(
    codec: PatchCodec,
    document_id: UUID,
    records: list[RevisionRecord],
    target_index: int,
) -> str:
    """Text of records[target_index], walking back from the head at index 0."""
    head = records[0]
    if head.content is None:
        raise ChainCorrupted(document_id, head.id, "newest revision holds no content")

    text = head.content
    for i in range(target_index):
        newer, older = records[i], records[i + 1]
        if newer.is_genesis:
            raise ChainCorrupted(document_id, newer.id, "revision has no patch")
        try:
            delta = codec.from_patch(newer.patch_from_previous)
            text = codec.apply(codec.reverse(delta), text)
        except PatchApplyError as e:
            logger.warning(
                "Reverse patch failed to apply",
                document_id=str(document_id),
                revision_id=str(newer.id),
                failed_hunks=e.failed_hunks,
            )
            raise ChainCorrupted(document_id, newer.id, str(e)) from e
        if len(text) != older.length:
            raise ChainCorrupted(
                document_id,
                older.id,
                f"expected length {older.length}, got {len(text)}",
            )
    return text


async def reconstruct_revision(
    revisions: RevisionRepository,
    codec: PatchCodec,
    document_id: UUID,
    revision_id: UUID,
) -> str:
    """Materialize the text of a historical revision."""
    records = await revisions.list_by_document(document_id)
    target_index = find_revision_index(records, document_id, revision_id)
    return replay_backward(codec, document_id, records, target_index)
