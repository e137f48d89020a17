"""Pytest fixtures for revchain tests."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from revchain.domain.entities import Document, RevisionRecord
from revchain.infrastructure.diffing import DiffMatchPatchCodec


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Document] = {}

    def add(self, document: Document) -> Document:
        """Helper to seed a document (document creation is outside the service)."""
        self._by_id[document.id] = document
        return document

    async def get_by_id(self, document_id: UUID) -> Document | None:
        doc = self._by_id.get(document_id)
        return replace(doc) if doc else None

    async def update(self, document: Document) -> Document:
        self._by_id[document.id] = replace(document)
        return document


class FakeRevisionRepository:
    """In-memory revision ledger."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, RevisionRecord] = {}
        self.locks: list[tuple[UUID, bool]] = []
        self.fail_delete = False
        self.fail_list = False
        self.savepoint_rollbacks = 0

    async def lock(self, document_id: UUID, *, shared: bool = False) -> None:
        self.locks.append((document_id, shared))

    async def append(self, record: RevisionRecord) -> RevisionRecord:
        self._by_id[record.id] = replace(record)
        return record

    async def list_by_document(self, document_id: UUID) -> list[RevisionRecord]:
        if self.fail_list:
            raise RuntimeError("list failed")
        return self._sorted(document_id)

    def _sorted(self, document_id: UUID) -> list[RevisionRecord]:
        items = [replace(r) for r in self._by_id.values() if r.document_id == document_id]
        items.sort(key=lambda r: r.created_at, reverse=True)
        return items

    async def get_head(self, document_id: UUID) -> RevisionRecord | None:
        items = self._sorted(document_id)
        return items[0] if items else None

    async def clear_content(self, revision_id: UUID) -> None:
        record = self._by_id.get(revision_id)
        if record:
            self._by_id[revision_id] = replace(record, content=None)

    async def delete_many(self, revision_ids: Sequence[UUID]) -> None:
        if self.fail_delete:
            raise RuntimeError("delete failed")
        for revision_id in revision_ids:
            self._by_id.pop(revision_id, None)

    @asynccontextmanager
    async def savepoint(self):
        snapshot = dict(self._by_id)
        try:
            yield self
        except BaseException:
            self._by_id = snapshot
            self.savepoint_rollbacks += 1
            raise

    def get(self, revision_id: UUID) -> RevisionRecord:
        """Helper to read a stored record directly."""
        return self._by_id[revision_id]

    def put(self, record: RevisionRecord) -> None:
        """Helper to overwrite a stored record (e.g. to corrupt it)."""
        self._by_id[record.id] = record


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.documents = FakeDocumentRepository()
        self.revisions = FakeRevisionRepository()
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


class FakeClock:
    """Controllable clock for use cases."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


# --- Fixtures ---


@pytest.fixture
def codec() -> DiffMatchPatchCodec:
    """Patch codec with deterministic diffing and exact patch matching."""
    return DiffMatchPatchCodec()


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def revisions(fake_uow: FakeUnitOfWork) -> FakeRevisionRepository:
    return fake_uow.revisions


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager that yields the shared FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory():
        try:
            yield fake_uow
            await fake_uow.commit()
        except BaseException:
            await fake_uow.rollback()
            raise

    return _factory


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def document(fake_uow: FakeUnitOfWork) -> Document:
    """A document that has never been saved through the service."""
    return fake_uow.documents.add(Document(id=uuid4(), content=""))
