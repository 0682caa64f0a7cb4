"""Origin resolver use case."""

import inspect
import logging

from corsguard.domain.exceptions import InvalidCorsOrigin
from corsguard.domain.value_objects import (
    DecisionKind,
    DynamicOrigin,
    OriginDecision,
    OriginOption,
    StaticOrigin,
    parse_static_origin,
)

logger = logging.getLogger(__name__)


class ResolveOriginUseCase:
    """Decide whether a request origin is allowed.

    Decisions are computed per request. A dynamic origin function is the only
    suspension point; its result is evaluated like a static option.
    """

    def __init__(self, origin: OriginOption) -> None:
        self._origin = origin

    async def execute(self, request_origin: str | None) -> OriginDecision:
        """Resolve the origin decision; raise InvalidCorsOrigin on bad setup."""
        option = self._origin
        if isinstance(option, DynamicOrigin):
            option = await self._resolve_dynamic(option, request_origin)

        decision = option.evaluate(request_origin)
        if decision.kind is DecisionKind.INVALID:
            raise InvalidCorsOrigin()
        logger.debug("CORS origin %r resolved to %s", request_origin, decision.kind)
        return decision

    async def _resolve_dynamic(
        self, option: DynamicOrigin, request_origin: str | None
    ) -> StaticOrigin:
        result = option.fn(request_origin)
        if inspect.isawaitable(result):
            result = await result
        if callable(result):
            # Only one level of indirection is resolved.
            raise InvalidCorsOrigin()
        return parse_static_origin(result)
