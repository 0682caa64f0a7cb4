"""Application entry point and composition root."""

import logging

from corsguard import __version__
from corsguard.config import Settings, get_settings
from corsguard.interfaces.api.app import create_app
from corsguard.interfaces.api.resources.demo import EchoResource, HelloResource
from corsguard.interfaces.api.resources.health import HealthResource


def configure_logging(level: str) -> None:
    """Root logging setup for the server process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    print(f"corsguard v{__version__}")


def create_corsguard_app(settings: Settings | None = None):
    """Composition root - build Falcon app with CORS and demo resources."""
    settings = settings or get_settings()
    return create_app(
        cors_options=settings.cors_options(),
        hello_resource=HelloResource(),
        echo_resource=EchoResource(),
        health_resource=HealthResource(),
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    app = create_corsguard_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)
