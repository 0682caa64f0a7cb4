"""Catch-all sink for requests no route claimed."""

import falcon
import falcon.asgi

from corsguard.application.use_cases.intercept_preflight import is_preflight_handled


def answer_not_found(resp: falcon.asgi.Response) -> None:
    """Bare 404 with no body, so no error serializer touches the headers."""
    resp.status = falcon.HTTP_404
    resp.text = None
    resp.complete = True


class PreflightSink:
    """OPTIONS on any unmapped path: 404 unless the CORS middleware handled it."""

    async def on_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **kwargs
    ) -> None:
        if req.method != "OPTIONS":
            raise falcon.HTTPNotFound()
        if not is_preflight_handled(req):
            answer_not_found(resp)
