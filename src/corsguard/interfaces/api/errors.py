"""Error handlers for the Falcon app."""

import logging

import falcon
import falcon.asgi

from corsguard.domain.exceptions import CorsError

logger = logging.getLogger(__name__)


async def handle_cors_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: CorsError, params
) -> None:
    """Broken CORS setup - answer 500 with the reason."""
    logger.error("CORS configuration error on %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error_code": "INTERNAL_SERVER_ERROR", "message": str(ex)}


async def log_exception(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    """Log unhandled exceptions and answer a generic 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}
