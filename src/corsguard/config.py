"""Application configuration from environment variables."""

import re
from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_origin_entry(entry: str) -> str | re.Pattern[str]:
    if len(entry) > 2 and entry.startswith("/") and entry.endswith("/"):
        return re.compile(entry[1:-1])
    return entry


def parse_origins(value: str) -> Any:
    """Turn CORS_ORIGINS into an origin option.

    ``*`` allows any origin, ``true``/``false`` reflect or disable, anything
    else is a comma-separated allow-list whose ``/.../`` entries are regular
    expressions. An empty value is kept as ``""`` and fails every request.
    """
    stripped = value.strip()
    if stripped == "*":
        return "*"
    if stripped.lower() in ("true", "false"):
        return stripped.lower() == "true"
    if not stripped:
        return ""
    return [_parse_origin_entry(entry) for entry in _split_csv(stripped)]


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # CORS policy
    cors_origins: str = Field(
        default="*",
        description="'*', 'true', 'false' or comma-separated origins (/regex/ allowed)",
    )
    cors_methods: str = Field(
        default="GET,HEAD,PUT,PATCH,POST,DELETE",
        description="Comma-separated methods for Access-Control-Allow-Methods",
    )
    cors_credentials: bool = Field(default=False, description="Send Allow-Credentials")
    cors_exposed_headers: str = Field(default="", description="Comma-separated exposed headers")
    cors_allowed_headers: str = Field(
        default="",
        description="Comma-separated allowed headers; empty reflects the request",
    )
    cors_max_age: int | None = Field(default=None, description="Preflight max age in seconds")
    cors_preflight: bool = Field(default=True, description="Handle OPTIONS preflight")
    cors_strict_preflight: bool = Field(
        default=True,
        description="Require Origin and Access-Control-Request-Method on preflight",
    )
    cors_preflight_continue: bool = Field(
        default=False,
        description="Pass validated preflight to the route handler",
    )
    cors_options_success_status: int = Field(
        default=204,
        description="Status for answered preflight requests",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    def cors_options(self) -> dict[str, Any]:
        """CORS options for register_cors."""
        options: dict[str, Any] = {
            "origin": parse_origins(self.cors_origins),
            "methods": _split_csv(self.cors_methods),
            "credentials": self.cors_credentials,
            "preflight": self.cors_preflight,
            "strictPreflight": self.cors_strict_preflight,
            "preflightContinue": self.cors_preflight_continue,
            "optionsSuccessStatus": self.cors_options_success_status,
        }
        if self.cors_exposed_headers.strip():
            options["exposedHeaders"] = _split_csv(self.cors_exposed_headers)
        if self.cors_allowed_headers.strip():
            options["allowedHeaders"] = _split_csv(self.cors_allowed_headers)
        if self.cors_max_age is not None:
            options["maxAge"] = self.cors_max_age
        return options


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
