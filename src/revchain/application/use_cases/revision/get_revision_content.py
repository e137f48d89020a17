"""Get revision content use case."""

from uuid import UUID

from revchain.application.dto.revision_dto import RevisionContentOutput
from revchain.application.engine.reconstruct import find_revision_index, replay_backward
from revchain.application.ports import PatchCodec
from revchain.domain.exceptions import NotFound


class GetRevisionContentUseCase:
    """Reconstruct the text of one revision."""

    def __init__(self, unit_of_work_factory: type, patch_codec: PatchCodec) -> None:
        self._uow_factory = unit_of_work_factory
        self._codec = patch_codec

    async def execute(self, document_id: UUID, revision_id: UUID) -> RevisionContentOutput:
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFound("Document", str(document_id))
            await uow.revisions.lock(document_id, shared=True)
            records = await uow.revisions.list_by_document(document_id)

        target_index = find_revision_index(records, document_id, revision_id)
        target = records[target_index]
        content = replay_backward(self._codec, document_id, records, target_index)
        return RevisionContentOutput(
            id=target.id,
            content=content,
            length=target.length,
            created_at=target.created_at,
            editor_id=target.editor_id,
        )
