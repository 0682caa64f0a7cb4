"""Preflight interceptor states."""

from enum import StrEnum


class PreflightState(StrEnum):
    """States of the preflight state machine."""

    NOT_APPLICABLE = "not_applicable"
    REJECTED = "rejected"
    VALIDATED = "validated"
