"""Origin decision - outcome of resolving the request origin against policy."""

from dataclasses import dataclass
from enum import StrEnum


class DecisionKind(StrEnum):
    """Kinds of origin decision."""

    ALLOW = "allow"
    DENY = "deny"
    DISABLED = "disabled"  # origin=False: CORS is off, only Vary is written
    INVALID = "invalid"


@dataclass(frozen=True)
class OriginDecision:
    """Per-request decision; never cached."""

    kind: DecisionKind
    value: str | None = None

    @classmethod
    def allow(cls, value: str) -> "OriginDecision":
        return cls(kind=DecisionKind.ALLOW, value=value)

    @classmethod
    def deny(cls) -> "OriginDecision":
        return cls(kind=DecisionKind.DENY)

    @classmethod
    def disabled(cls) -> "OriginDecision":
        return cls(kind=DecisionKind.DISABLED)

    @classmethod
    def invalid(cls) -> "OriginDecision":
        return cls(kind=DecisionKind.INVALID)

    @property
    def allowed(self) -> bool:
        return self.kind is DecisionKind.ALLOW
