"""Document revision API resources."""

from uuid import UUID

import falcon.asgi
from loguru import logger

from revchain.application.dto.revision_dto import RevisionContentOutput, RevisionSummary
from revchain.application.use_cases.revision.consider_checkpoint import (
    ConsiderCheckpointUseCase,
)
from revchain.application.use_cases.revision.get_revision_content import (
    GetRevisionContentUseCase,
)
from revchain.application.use_cases.revision.list_revisions import ListRevisionsUseCase
from revchain.application.use_cases.revision.restore_revision import RestoreRevisionUseCase
from revchain.application.use_cases.revision.save_revision import SaveRevisionUseCase
from revchain.domain.entities import RevisionRecord
from revchain.domain.exceptions import (
    ChainCorrupted,
    NotFound,
    RevisionNotFound,
    ValidationError,
)


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise ValidationError("Invalid UUID") from e


async def _read_content(req: falcon.asgi.Request) -> str:
    body = await req.get_media()
    content = body.get("content") if isinstance(body, dict) else None
    if not isinstance(content, str):
        raise ValidationError("content must be a string")
    return content


def _bad_request(resp: falcon.asgi.Response, e: ValidationError) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(e)}


def _not_found(resp: falcon.asgi.Response, e: NotFound) -> None:
    resp.status = falcon.HTTP_404
    if isinstance(e, RevisionNotFound):
        resp.media = {"error": "Revision not found"}
    else:
        resp.media = {"error": f"{e.entity} not found"}


def _chain_corrupted(resp: falcon.asgi.Response, e: ChainCorrupted) -> None:
    logger.error(str(e))
    resp.status = falcon.HTTP_500
    resp.media = {
        "error": "Cannot reconstruct revision content",
        "revision_id": str(e.at_revision) if e.at_revision else None,
    }


class DocumentContentResource:
    """PUT /v1/documents/{id}/content - save content, checkpointing per autosave policy."""

    def __init__(self, consider_checkpoint: ConsiderCheckpointUseCase) -> None:
        self._consider_checkpoint = consider_checkpoint

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        try:
            doc_id = _parse_uuid(document_id)
            content = await _read_content(req)
            revision = await self._consider_checkpoint.execute(
                doc_id, content, req.context.editor_id
            )
        except ValidationError as e:
            _bad_request(resp, e)
            return
        except NotFound as e:
            _not_found(resp, e)
            return
        except ChainCorrupted as e:
            _chain_corrupted(resp, e)
            return

        resp.status = falcon.HTTP_200
        resp.media = {"revision": _record_to_dict(revision) if revision else None}


class RevisionsResource:
    """GET/POST /v1/documents/{id}/revisions - list revisions, save current content."""

    def __init__(
        self,
        list_revisions: ListRevisionsUseCase,
        save_revision: SaveRevisionUseCase,
    ) -> None:
        self._list_revisions = list_revisions
        self._save_revision = save_revision

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """List revision metadata, newest first."""
        try:
            doc_id = _parse_uuid(document_id)
            summaries = await self._list_revisions.execute(doc_id)
        except ValidationError as e:
            _bad_request(resp, e)
            return
        except NotFound as e:
            _not_found(resp, e)
            return
        resp.status = falcon.HTTP_200
        resp.media = {"revisions": [_summary_to_dict(s) for s in summaries]}

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Save the current document content as a revision."""
        try:
            doc_id = _parse_uuid(document_id)
            revision = await self._save_revision.execute(doc_id, req.context.editor_id)
        except ValidationError as e:
            _bad_request(resp, e)
            return
        except NotFound as e:
            _not_found(resp, e)
            return
        except ChainCorrupted as e:
            _chain_corrupted(resp, e)
            return
        if revision is None:
            resp.status = falcon.HTTP_200
            resp.media = {"revision": None}
            return
        resp.status = falcon.HTTP_201
        resp.media = {"revision": _record_to_dict(revision)}


class RevisionResource:
    """GET /v1/documents/{id}/revisions/{revision_id} - reconstructed content."""

    def __init__(self, get_revision_content: GetRevisionContentUseCase) -> None:
        self._get_revision_content = get_revision_content

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
        revision_id: str,
    ) -> None:
        try:
            doc_id = _parse_uuid(document_id)
            rev_id = _parse_uuid(revision_id)
            result = await self._get_revision_content.execute(doc_id, rev_id)
        except ValidationError as e:
            _bad_request(resp, e)
            return
        except NotFound as e:
            _not_found(resp, e)
            return
        except ChainCorrupted as e:
            _chain_corrupted(resp, e)
            return
        resp.status = falcon.HTTP_200
        resp.media = _content_to_dict(result)


class RevisionRestoreResource:
    """POST /v1/documents/{id}/revisions/{revision_id}/restore."""

    def __init__(self, restore_revision: RestoreRevisionUseCase) -> None:
        self._restore_revision = restore_revision

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
        revision_id: str,
    ) -> None:
        try:
            doc_id = _parse_uuid(document_id)
            rev_id = _parse_uuid(revision_id)
            content = await self._restore_revision.execute(
                doc_id, rev_id, req.context.editor_id
            )
        except ValidationError as e:
            _bad_request(resp, e)
            return
        except NotFound as e:
            _not_found(resp, e)
            return
        except ChainCorrupted as e:
            _chain_corrupted(resp, e)
            return
        resp.status = falcon.HTTP_200
        resp.media = {"content": content}


def _summary_to_dict(s: RevisionSummary) -> dict:
    return {
        "id": str(s.id),
        "length": s.length,
        "created_at": s.created_at.isoformat(),
        "editor_id": s.editor_id,
    }


def _record_to_dict(r: RevisionRecord) -> dict:
    return _summary_to_dict(RevisionSummary.from_record(r))


def _content_to_dict(c: RevisionContentOutput) -> dict:
    return {
        "id": str(c.id),
        "content": c.content,
        "length": c.length,
        "created_at": c.created_at.isoformat(),
        "editor_id": c.editor_id,
    }
