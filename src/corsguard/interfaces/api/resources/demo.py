"""Demo resources served behind the CORS middleware."""

import falcon
import falcon.asgi


class HelloResource:
    """GET /hi - static greeting."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"hello": "world"}
        resp.status = falcon.HTTP_200


class EchoResource:
    """POST /echo - return the JSON body unchanged."""

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media(default_when_empty=None)
        except falcon.MediaMalformedError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = body
        resp.status = falcon.HTTP_200
