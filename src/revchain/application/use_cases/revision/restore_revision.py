"""Restore revision use case."""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from revchain.application.engine.restore import restore_revision
from revchain.application.ports import PatchCodec
from revchain.application.use_cases.revision.consider_checkpoint import utc_now
from revchain.domain.exceptions import NotFound


class RestoreRevisionUseCase:
    """Bring a document back to the text of a historical revision."""

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

    async def execute(self, document_id: UUID, revision_id: UUID, editor_id: str | None) -> str:
        """Restore revision_id as a new head and write it back to the document."""
        async with self._uow_factory() as uow:
            await uow.revisions.lock(document_id)
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFound("Document", str(document_id))

            now = self._clock()
            restored = await restore_revision(
                uow.revisions,
                self._codec,
                document_id,
                revision_id,
                editor_id,
                now,
                max_count=self._max_revisions,
            )
            document.content = restored
            document.last_edited_at = now
            document.last_checkpoint_at = now
            await uow.documents.update(document)

        return restored
