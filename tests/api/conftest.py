"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from corsguard.config import Settings
from corsguard.main import create_corsguard_app


@pytest.fixture
def settings() -> Settings:
    """Settings with an explicit allow-list."""
    return Settings(
        _env_file=None,
        cors_origins="https://app.example.com,/^https://.*\\.example\\.org$/",
        cors_credentials=True,
        cors_exposed_headers="X-Request-Id",
        cors_max_age=600,
    )


@pytest.fixture
def app(settings: Settings):
    """Demo Falcon ASGI app built by the composition root."""
    return create_corsguard_app(settings)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
