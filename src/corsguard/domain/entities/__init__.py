"""Domain entities."""

from corsguard.domain.entities.cors_policy import DEFAULT_METHODS, CorsPolicy, join_header_values

__all__ = [
    "DEFAULT_METHODS",
    "CorsPolicy",
    "join_header_values",
]
