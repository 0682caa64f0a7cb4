"""Vary header manipulation."""

import re

_FIELD_NAME = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def parse_vary(header: str) -> list[str]:
    """Split a Vary header value into its field names."""
    return [token.strip() for token in header.split(",") if token.strip()]


def append_vary(header: str | None, field: str) -> str:
    """Append field name(s) to a Vary value.

    Comparison is case-insensitive and existing order is preserved; a ``*``
    on either side collapses the result to ``*``.
    """
    fields = parse_vary(field)
    for name in fields:
        if not _FIELD_NAME.match(name):
            raise ValueError(f"Invalid header name in Vary field: {name!r}")

    value = header or ""
    if value.strip() == "*":
        return "*"

    seen = [token.lower() for token in parse_vary(value)]
    if "*" in fields or "*" in seen:
        return "*"

    for name in fields:
        lowered = name.lower()
        if lowered in seen:
            continue
        seen.append(lowered)
        value = f"{value}, {name}" if value else name
    return value
