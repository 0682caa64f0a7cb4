"""Config normalizer - merge CORS options over defaults into a CorsPolicy."""

from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from corsguard.domain.entities import CorsPolicy
from corsguard.domain.value_objects import parse_origin_option

# Option names as exposed to callers; snake_case names are accepted as well.
OPTION_ALIASES: dict[str, str] = {
    "origin": "origin",
    "methods": "methods",
    "preflightContinue": "preflight_continue",
    "optionsSuccessStatus": "options_success_status",
    "credentials": "credentials",
    "exposedHeaders": "exposed_headers",
    "allowedHeaders": "allowed_headers",
    "maxAge": "max_age",
    "preflight": "preflight",
    "strictPreflight": "strict_preflight",
}

_POLICY_FIELDS = frozenset(f.name for f in fields(CorsPolicy))


def _freeze_list(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return value


_COERCE = {
    "origin": parse_origin_option,
    "methods": _freeze_list,
    "exposed_headers": _freeze_list,
    "allowed_headers": _freeze_list,
}


def normalize_policy(options: Mapping[str, Any] | None = None, **overrides: Any) -> CorsPolicy:
    """Build a CorsPolicy from defaults plus options.

    Only option names are checked here. The origin value is parsed but not
    judged: an unusable origin fails each request with InvalidCorsOrigin.
    """
    merged: dict[str, Any] = {**(options or {}), **overrides}
    values: dict[str, Any] = {}
    for key, value in merged.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in _POLICY_FIELDS:
            raise TypeError(f"Unknown CORS option: {key!r}")
        coerce = _COERCE.get(name)
        values[name] = coerce(value) if coerce else value
    return CorsPolicy(**values)
