"""Domain value objects."""

from corsguard.domain.value_objects.origin_decision import DecisionKind, OriginDecision
from corsguard.domain.value_objects.origin_option import (
    ORIGIN_OPTION_TYPES,
    DisabledOrigin,
    DynamicOrigin,
    ExactOrigin,
    FixedOrigin,
    InvalidOrigin,
    OriginFn,
    OriginList,
    OriginOption,
    OriginPattern,
    ReflectOrigin,
    StaticOrigin,
    WildcardOrigin,
    parse_origin_option,
    parse_static_origin,
)
from corsguard.domain.value_objects.preflight_state import PreflightState
from corsguard.domain.value_objects.vary import append_vary, parse_vary

__all__ = [
    "ORIGIN_OPTION_TYPES",
    "DecisionKind",
    "DisabledOrigin",
    "DynamicOrigin",
    "ExactOrigin",
    "FixedOrigin",
    "InvalidOrigin",
    "OriginDecision",
    "OriginFn",
    "OriginList",
    "OriginOption",
    "OriginPattern",
    "PreflightState",
    "ReflectOrigin",
    "StaticOrigin",
    "WildcardOrigin",
    "append_vary",
    "parse_origin_option",
    "parse_static_origin",
    "parse_vary",
]
