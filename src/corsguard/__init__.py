"""corsguard - CORS policy engine for Falcon ASGI applications."""

__version__ = "0.1.0"
