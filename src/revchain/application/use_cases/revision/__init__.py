"""Revision ledger use cases."""

from revchain.application.use_cases.revision.consider_checkpoint import (
    ConsiderCheckpointUseCase,
)
from revchain.application.use_cases.revision.get_revision_content import (
    GetRevisionContentUseCase,
)
from revchain.application.use_cases.revision.list_revisions import ListRevisionsUseCase
from revchain.application.use_cases.revision.restore_revision import RestoreRevisionUseCase
from revchain.application.use_cases.revision.save_revision import SaveRevisionUseCase

__all__ = [
    "ConsiderCheckpointUseCase",
    "GetRevisionContentUseCase",
    "ListRevisionsUseCase",
    "RestoreRevisionUseCase",
    "SaveRevisionUseCase",
]
