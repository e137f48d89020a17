"""Domain exceptions."""

from uuid import UUID


class RevChainError(Exception):
    """Base exception for revchain."""

    pass


class NotFound(RevChainError):
    """Requested resource was not found."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(entity, key)
        self.entity = entity
        self.key = key

    def __str__(self) -> str:
        return f"{self.entity} {self.key} not found"


class RevisionNotFound(NotFound):
    """Requested revision is absent from the document's ledger."""

    def __init__(self, document_id: UUID, revision_id: UUID) -> None:
        super().__init__("Revision", str(revision_id))
        self.document_id = document_id
        self.revision_id = revision_id


class ValidationError(RevChainError):
    """Validation failed for input data."""

    pass


class PatchApplyError(RevChainError):
    """A patch could not be applied to the given text."""

    def __init__(self, message: str, failed_hunks: list[int] | None = None) -> None:
        super().__init__(message)
        self.failed_hunks = failed_hunks or []


class ChainCorrupted(RevChainError):
    """The revision chain of a document cannot be replayed."""

    def __init__(self, document_id: UUID, at_revision: UUID | None, reason: str = "") -> None:
        message = f"Revision chain of document {document_id} is corrupted"
        if at_revision is not None:
            message += f" at revision {at_revision}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.document_id = document_id
        self.at_revision = at_revision
