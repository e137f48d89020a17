"""Fixtures for API tests."""

from uuid import uuid4

import falcon.asgi
import pytest
from falcon.testing import TestClient

from revchain.config import Settings
from revchain.domain.entities import Document
from revchain.interfaces.api.middleware.editor import EditorMiddleware
from revchain.interfaces.api.resources.health import HealthResource
from revchain.main import add_revision_routes

from tests.conftest import FakeUnitOfWork


@pytest.fixture
def api_document(fake_uow: FakeUnitOfWork) -> Document:
    """Document seeded in the shared fake store."""
    return fake_uow.documents.add(Document(id=uuid4(), content=""))


@pytest.fixture
def app(uow_factory, codec):
    """Falcon ASGI app with revision resources backed by the fake unit of work."""
    app = falcon.asgi.App(middleware=[EditorMiddleware()])
    app.add_route("/v1/health", HealthResource())
    add_revision_routes(app, uow_factory, codec, Settings(_env_file=None, revision_max_count=5))
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
