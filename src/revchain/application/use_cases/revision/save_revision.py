"""Save revision use case - manual checkpoint of the current content."""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from revchain.application.engine.commit import commit_revision
from revchain.application.ports import PatchCodec
from revchain.application.use_cases.revision.consider_checkpoint import utc_now
from revchain.domain.entities import RevisionRecord
from revchain.domain.exceptions import NotFound


class SaveRevisionUseCase:
    """Commit the document's current content regardless of the autosave policy."""

    def __init__(
        self,
        unit_of_work_factory: type,
        patch_codec: PatchCodec,
        max_revisions: int,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._codec = patch_codec
        self._max_revisions = max_revisions
        self._clock = clock

    async def execute(self, document_id: UUID, editor_id: str | None) -> RevisionRecord | None:
        async with self._uow_factory() as uow:
            await uow.revisions.lock(document_id)
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFound("Document", str(document_id))

            now = self._clock()
            revision = await commit_revision(
                uow.revisions,
                self._codec,
                document_id,
                document.content,
                editor_id,
                now,
                max_count=self._max_revisions,
            )
            document.last_checkpoint_at = now
            await uow.documents.update(document)

        return revision
