"""Editor identity middleware - sets req.context.editor_id from a request header."""

import falcon.asgi

EDITOR_HEADER = "X-Editor-Id"


class EditorMiddleware:
    """Middleware that records who is acting on the request.

    The header value is taken as-is; verifying it is left to whatever
    sits in front of the service.
    """

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        editor_id = (req.get_header(EDITOR_HEADER) or "").strip()
        req.context.editor_id = editor_id or None
