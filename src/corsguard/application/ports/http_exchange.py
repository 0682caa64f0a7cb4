"""HTTP exchange ports - the slice of request/response the CORS core needs."""

from typing import Any, Protocol


class CorsRequest(Protocol):
    """Incoming request: method, headers and a request-scoped context."""

    method: str
    context: Any

    def get_header(self, name: str, required: bool = False, default: str | None = None) -> str | None: ...


class CorsResponse(Protocol):
    """Outgoing response headers, status and body."""

    status: Any
    text: str | None
    content_type: str | None
    complete: bool

    def get_header(self, name: str, default: str | None = None) -> str | None: ...

    def set_header(self, name: str, value: str) -> None: ...
