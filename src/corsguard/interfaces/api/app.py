"""Falcon ASGI application."""

from typing import Any

import falcon.asgi
from falcon.asgi import App

from corsguard.interfaces.api.errors import log_exception
from corsguard.interfaces.api.middleware.cors import register_cors
from corsguard.interfaces.api.resources.demo import EchoResource, HelloResource
from corsguard.interfaces.api.resources.health import HealthResource


def create_app(
    cors_options: dict[str, Any],
    hello_resource: HelloResource,
    echo_resource: EchoResource,
    health_resource: HealthResource,
) -> App:
    """Create Falcon ASGI app with CORS and routes."""
    app = falcon.asgi.App()
    app.add_error_handler(Exception, log_exception)
    register_cors(app, cors_options)
    app.add_route("/v1/health", health_resource)
    app.add_route("/hi", hello_resource)
    app.add_route("/echo", echo_resource)
    return app
