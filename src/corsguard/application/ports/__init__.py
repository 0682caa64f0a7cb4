"""Application ports (interfaces)."""

from corsguard.application.ports.http_exchange import CorsRequest, CorsResponse

__all__ = [
    "CorsRequest",
    "CorsResponse",
]
