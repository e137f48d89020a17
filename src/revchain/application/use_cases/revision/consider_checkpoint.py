"""Consider checkpoint use case - autosave entry point."""

from collections.abc import Callable
from datetime import UTC, datetime
from uuid import UUID

from revchain.application.engine.commit import commit_revision
from revchain.application.ports import PatchCodec
from revchain.domain.autosave_policy import should_checkpoint
from revchain.domain.entities import RevisionRecord
from revchain.domain.exceptions import NotFound
from revchain.domain.value_objects import CheckpointThresholds


def utc_now() -> datetime:
    return datetime.now(UTC)


class ConsiderCheckpointUseCase:
    """Save document content, committing a revision when the autosave policy fires."""

    def __init__(
        self,
        unit_of_work_factory: type,
        patch_codec: PatchCodec,
        thresholds: CheckpointThresholds,
        max_revisions: int,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._codec = patch_codec
        self._thresholds = thresholds
        self._max_revisions = max_revisions
        self._clock = clock

    async def execute(
        self, document_id: UUID, new_content: str, editor_id: str | None
    ) -> RevisionRecord | None:
        """Store new_content and return the committed revision, if any."""
        async with self._uow_factory() as uow:
            await uow.revisions.lock(document_id)
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFound("Document", str(document_id))

            now = self._clock()
            revision = None
            if should_checkpoint(
                document.last_edited_at,
                document.last_checkpoint_at,
                now,
                self._thresholds.idle,
                self._thresholds.force,
            ):
                revision = await commit_revision(
                    uow.revisions,
                    self._codec,
                    document_id,
                    new_content,
                    editor_id,
                    now,
                    max_count=self._max_revisions,
                )
                # Counts as a checkpoint even when the content was unchanged
                document.last_checkpoint_at = now

            document.content = new_content
            document.last_edited_at = now
            await uow.documents.update(document)

        return revision
