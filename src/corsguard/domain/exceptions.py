"""Domain exceptions."""


class CorsError(Exception):
    """Base exception for corsguard."""

    pass


class InvalidCorsOrigin(CorsError):
    """Resolved origin option is falsy but not ``False`` - broken setup."""

    def __init__(self, message: str = "Invalid CORS origin option") -> None:
        super().__init__(message)

