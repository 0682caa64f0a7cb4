"""Pytest fixtures for corsguard tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import falcon
import falcon.asgi
import pytest
from falcon.testing import TestClient

from corsguard.interfaces.api.errors import log_exception
from corsguard.interfaces.api.middleware.cors import register_cors


class TextResource:
    """GET / - plain ``ok``."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.content_type = falcon.MEDIA_TEXT
        resp.text = "ok"


class OptionsResource:
    """Route with its own OPTIONS responder."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.content_type = falcon.MEDIA_TEXT
        resp.text = "ok"

    async def on_options(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.content_type = falcon.MEDIA_TEXT
        resp.text = "handled"
        resp.status = falcon.HTTP_200


def build_app(middleware: list | None = None, **options: Any) -> falcon.asgi.App:
    """App with CORS registered and routes ``/`` and ``/custom``."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, log_exception)
    register_cors(app, options)
    app.add_route("/", TextResource())
    app.add_route("/custom", OptionsResource())
    return app


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Factory: CORS options -> Falcon test client."""

    def _make(middleware: list | None = None, **options: Any) -> TestClient:
        return TestClient(build_app(middleware, **options))

    return _make


@pytest.fixture
def preflight_headers() -> dict[str, str]:
    """Headers of a well-formed preflight request."""
    return {
        "Origin": "example.com",
        "Access-Control-Request-Method": "GET",
    }
