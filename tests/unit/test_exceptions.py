"""Unit tests for domain exceptions."""

from uuid import uuid4

import pytest

from revchain.domain.exceptions import (
    ChainCorrupted,
    NotFound,
    PatchApplyError,
    RevChainError,
    RevisionNotFound,
    ValidationError,
)


def test_not_found_inherits_revchain_error() -> None:
    """NotFound is a subclass of RevChainError."""
    assert issubclass(NotFound, RevChainError)


def test_revision_not_found_is_not_found() -> None:
    """RevisionNotFound can be handled as a generic NotFound."""
    assert issubclass(RevisionNotFound, NotFound)


def test_validation_error_inherits_revchain_error() -> None:
    assert issubclass(ValidationError, RevChainError)


def test_chain_errors_inherit_revchain_error() -> None:
    assert issubclass(PatchApplyError, RevChainError)
    assert issubclass(ChainCorrupted, RevChainError)


def test_not_found_message() -> None:
    with pytest.raises(RevChainError, match="Document 123 not found"):
        raise NotFound("Document", "123")


def test_revision_not_found_carries_ids() -> None:
    document_id, revision_id = uuid4(), uuid4()
    err = RevisionNotFound(document_id, revision_id)
    assert err.entity == "Revision"
    assert err.key == str(revision_id)
    assert err.document_id == document_id
    assert str(revision_id) in str(err)


def test_chain_corrupted_message_names_revision() -> None:
    document_id, revision_id = uuid4(), uuid4()
    err = ChainCorrupted(document_id, revision_id, "hunk 0 failed")
    assert err.document_id == document_id
    assert err.at_revision == revision_id
    assert str(err) == (
        f"Revision chain of document {document_id} is corrupted "
        f"at revision {revision_id}: hunk 0 failed"
    )


def test_patch_apply_error_defaults_to_no_hunks() -> None:
    assert PatchApplyError("bad").failed_hunks == []
