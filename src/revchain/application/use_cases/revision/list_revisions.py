"""List revisions use case."""

from uuid import UUID

from revchain.application.dto.revision_dto import RevisionSummary
from revchain.domain.exceptions import NotFound


class ListRevisionsUseCase:
    """List revision metadata of a document, newest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> list[RevisionSummary]:
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFound("Document", str(document_id))
            await uow.revisions.lock(document_id, shared=True)
            records = await uow.revisions.list_by_document(document_id)

        return [RevisionSummary.from_record(r) for r in records]
