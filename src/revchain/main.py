"""Application entry point and composition root."""

import falcon
import falcon.asgi
from loguru import logger

from revchain import __version__
from revchain.application.use_cases.revision.consider_checkpoint import (
    ConsiderCheckpointUseCase,
)
from revchain.application.use_cases.revision.get_revision_content import (
    GetRevisionContentUseCase,
)
from revchain.application.use_cases.revision.list_revisions import ListRevisionsUseCase
from revchain.application.use_cases.revision.restore_revision import RestoreRevisionUseCase
from revchain.application.use_cases.revision.save_revision import SaveRevisionUseCase
from revchain.config import Settings, get_settings
from revchain.infrastructure.diffing import DiffMatchPatchCodec
from revchain.infrastructure.persistence.postgres.connection import create_pool
from revchain.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from revchain.interfaces.api.middleware.editor import EditorMiddleware
from revchain.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from revchain.interfaces.api.resources.health import HealthResource
from revchain.interfaces.api.resources.revisions import (
    DocumentContentResource,
    RevisionResource,
    RevisionRestoreResource,
    RevisionsResource,
)
from revchain.logger import setup_logger


def main() -> None:
    """CLI entry point."""
    print(f"revchain v{__version__}")


def add_revision_routes(
    app: falcon.asgi.App,
    uow_factory: object,
    codec: DiffMatchPatchCodec,
    settings: Settings,
) -> None:
    """Wire revision use cases and resources onto app."""
    consider_checkpoint = ConsiderCheckpointUseCase(
        unit_of_work_factory=uow_factory,
        patch_codec=codec,
        thresholds=settings.checkpoint_thresholds,
        max_revisions=settings.revision_max_count,
    )
    save_revision = SaveRevisionUseCase(
        unit_of_work_factory=uow_factory,
        patch_codec=codec,
        max_revisions=settings.revision_max_count,
    )
    list_revisions = ListRevisionsUseCase(unit_of_work_factory=uow_factory)
    get_revision_content = GetRevisionContentUseCase(
        unit_of_work_factory=uow_factory,
        patch_codec=codec,
    )
    restore_revision = RestoreRevisionUseCase(
        unit_of_work_factory=uow_factory,
        patch_codec=codec,
        max_revisions=settings.revision_max_count,
    )

    app.add_route(
        "/v1/documents/{document_id}/content",
        DocumentContentResource(consider_checkpoint),
    )
    app.add_route(
        "/v1/documents/{document_id}/revisions",
        RevisionsResource(list_revisions, save_revision),
    )
    app.add_route(
        "/v1/documents/{document_id}/revisions/{revision_id}",
        RevisionResource(get_revision_content),
    )
    app.add_route(
        "/v1/documents/{document_id}/revisions/{revision_id}/restore",
        RevisionRestoreResource(restore_revision),
    )


def create_revchain_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    setup_logger(level=settings.log_level, serialize=settings.environment == "production")

    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)
    codec = DiffMatchPatchCodec(
        diff_timeout=settings.diff_timeout,
        match_threshold=settings.patch_match_threshold,
    )

    app = falcon.asgi.App(
        middleware=[
            PoolLifespanMiddleware(pool),
            EditorMiddleware(),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.opt(exception=ex).error("Unhandled error on {} {}", req.method, req.path)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)

    health_resource = HealthResource(pool)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    add_revision_routes(app, uow_factory, codec, settings)

    logger.info(
        "revchain app created",
        version=__version__,
        environment=settings.environment,
        max_revisions=settings.revision_max_count,
    )
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_revchain_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
