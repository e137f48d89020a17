"""Revision ledger engines."""

from revchain.application.engine.commit import commit_revision
from revchain.application.engine.prune import prune_revisions
from revchain.application.engine.reconstruct import reconstruct_revision, replay_backward
from revchain.application.engine.restore import restore_revision

__all__ = [
    "commit_revision",
    "prune_revisions",
    "reconstruct_revision",
    "replay_backward",
    "restore_revision",
]
