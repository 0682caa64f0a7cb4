"""CORS policy entity - immutable per registration."""

from dataclasses import dataclass

from corsguard.domain.value_objects import OriginOption, WildcardOrigin

DEFAULT_METHODS: tuple[str, ...] = ("GET", "HEAD", "PUT", "PATCH", "POST", "DELETE")


def join_header_values(value: str | tuple[str, ...]) -> str:
    """Comma-join a header list; plain strings pass through."""
    if isinstance(value, str):
        return value
    return ", ".join(value)


@dataclass(frozen=True)
class CorsPolicy:
    """Normalized CORS policy - read by every request, written by none."""

    origin: OriginOption = WildcardOrigin()
    methods: str | tuple[str, ...] = DEFAULT_METHODS
    preflight_continue: bool = False
    options_success_status: int = 204
    credentials: bool = False
    exposed_headers: str | tuple[str, ...] | None = None
    allowed_headers: str | tuple[str, ...] | None = None
    max_age: int | None = None
    preflight: bool = True
    strict_preflight: bool = True

    @property
    def allow_methods_header(self) -> str:
        return join_header_values(self.methods)

    @property
    def expose_headers_header(self) -> str | None:
        if self.exposed_headers is None:
            return None
        return join_header_values(self.exposed_headers)

    @property
    def allow_headers_header(self) -> str | None:
        if self.allowed_headers is None:
            return None
        return join_header_values(self.allowed_headers)
