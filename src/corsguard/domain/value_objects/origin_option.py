"""Origin option - tagged variants of the ``origin`` CORS setting.

Each static variant evaluates itself against the request origin and returns
an :class:`OriginDecision`. ``DynamicOrigin`` is resolved by the origin
resolver, which awaits the function and parses its result into one of the
static variants.

Raw values accepted by :func:`parse_origin_option`:

* ``"*"`` - any origin (``WildcardOrigin``)
* any other non-empty string - fixed origin, echoed as-is (``FixedOrigin``)
* ``True`` - reflect the request origin (``ReflectOrigin``)
* ``False`` - CORS disabled (``DisabledOrigin``)
* compiled regular expression - reflect on match (``OriginPattern``)
* list or tuple of the above - reflect when any element matches (``OriginList``)
* callable - resolved per request (``DynamicOrigin``)
* ``""``, ``0``, ``None`` - invalid, fails every request (``InvalidOrigin``)
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union, get_args

from corsguard.domain.value_objects.origin_decision import OriginDecision

OriginFn = Callable[[str | None], Any]


def _reflect(matcher: OriginMatcher, request_origin: str | None) -> OriginDecision:
    if request_origin and matcher.matches(request_origin):
        return OriginDecision.allow(request_origin)
    return OriginDecision.deny()


@dataclass(frozen=True)
class WildcardOrigin:
    """``*`` - every origin is allowed."""

    def evaluate(self, request_origin: str | None) -> OriginDecision:
        return OriginDecision.allow("*")


@dataclass(frozen=True)
class FixedOrigin:
    """Fixed origin, sent regardless of the request origin."""

    value: str

    def evaluate(self, request_origin: str | None) -> OriginDecision:
        return OriginDecision.allow(self.value)


@dataclass(frozen=True)
class ExactOrigin:
    """List element compared for exact equality."""

    value: str

    def matches(self, request_origin: str) -> bool:
        return request_origin == self.value


@dataclass(frozen=True)
class ReflectOrigin:
    """``True`` - reflect whatever origin the request carries."""

    def matches(self, request_origin: str) -> bool:
        return True

    def evaluate(self, request_origin: str | None) -> OriginDecision:
        return _reflect(self, request_origin)


@dataclass(frozen=True)
class DisabledOrigin:
    """``False`` - no CORS headers besides Vary."""

    def matches(self, request_origin: str) -> bool:
        return False

    def evaluate(self, request_origin: str | None) -> OriginDecision:
        return OriginDecision.disabled()


@dataclass(frozen=True)
class OriginPattern:
    """Regular expression searched in the request origin."""

    pattern: re.Pattern[str]

    def matches(self, request_origin: str) -> bool:
        return self.pattern.search(request_origin) is not None

    def evaluate(self, request_origin: str | None) -> OriginDecision:
        return _reflect(self, request_origin)


@dataclass(frozen=True)
class OriginList:
    """Ordered matchers; the first match wins."""

    matchers: tuple[OriginMatcher, ...]

    def matches(self, request_origin: str) -> bool:
        return any(matcher.matches(request_origin) for matcher in self.matchers)

    def evaluate(self, request_origin: str | None) -> OriginDecision:
        return _reflect(self, request_origin)


@dataclass(frozen=True)
class InvalidOrigin:
    """Falsy value other than ``False``."""

    raw: Any

    def evaluate(self, request_origin: str | None) -> OriginDecision:
        return OriginDecision.invalid()


@dataclass(frozen=True)
class DynamicOrigin:
    """Function called with the request origin; may return an awaitable."""

    fn: OriginFn


OriginMatcher = Union[ExactOrigin, ReflectOrigin, DisabledOrigin, OriginPattern, OriginList]

StaticOrigin = Union[
    WildcardOrigin,
    FixedOrigin,
    ReflectOrigin,
    DisabledOrigin,
    OriginPattern,
    OriginList,
    InvalidOrigin,
]

OriginOption = Union[StaticOrigin, DynamicOrigin]

ORIGIN_OPTION_TYPES: tuple[type, ...] = get_args(OriginOption)


def _parse_matcher(raw: Any) -> OriginMatcher:
    if isinstance(raw, str):
        return ExactOrigin(raw)
    if isinstance(raw, re.Pattern):
        return OriginPattern(raw)
    if isinstance(raw, (list, tuple)):
        return OriginList(tuple(_parse_matcher(item) for item in raw))
    return ReflectOrigin() if raw else DisabledOrigin()


def parse_static_origin(raw: Any) -> StaticOrigin:
    """Parse a non-callable raw origin value."""
    if raw is False:
        return DisabledOrigin()
    if raw is True:
        return ReflectOrigin()
    if isinstance(raw, str):
        if raw == "*":
            return WildcardOrigin()
        return FixedOrigin(raw) if raw else InvalidOrigin(raw)
    if isinstance(raw, re.Pattern):
        return OriginPattern(raw)
    if isinstance(raw, (list, tuple)):
        return OriginList(tuple(_parse_matcher(item) for item in raw))
    if not raw:
        return InvalidOrigin(raw)
    raise TypeError(f"Unsupported CORS origin option: {raw!r}")


def parse_origin_option(raw: Any) -> OriginOption:
    """Parse a raw ``origin`` setting into its tagged variant."""
    if isinstance(raw, ORIGIN_OPTION_TYPES):
        return raw
    if callable(raw):
        return DynamicOrigin(raw)
    return parse_static_origin(raw)
