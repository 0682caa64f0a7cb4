"""CORS middleware - origin resolution, CORS headers and preflight handling."""

import logging
from typing import Any

import falcon.asgi

from corsguard.application.use_cases.compose_headers import HeaderComposer
from corsguard.application.use_cases.intercept_preflight import (
    PreflightInterceptor,
    is_preflight_handled,
)
from corsguard.application.use_cases.normalize_policy import normalize_policy
from corsguard.application.use_cases.resolve_origin import ResolveOriginUseCase
from corsguard.domain.entities import CorsPolicy
from corsguard.domain.exceptions import InvalidCorsOrigin
from corsguard.domain.value_objects import DecisionKind, PreflightState
from corsguard.interfaces.api.errors import handle_cors_error
from corsguard.interfaces.api.resources.preflight import PreflightSink, answer_not_found

logger = logging.getLogger(__name__)


class CORSMiddleware:
    """Middleware that applies a CorsPolicy to every request before routing."""

    def __init__(self, policy: CorsPolicy) -> None:
        self._policy = policy
        self._resolve_origin = ResolveOriginUseCase(policy.origin)
        self._composer = HeaderComposer(policy)
        self._preflight = PreflightInterceptor(policy, self._composer)

    @property
    def policy(self) -> CorsPolicy:
        return self._policy

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Add Vary, resolve origin, write CORS headers, intercept preflight."""
        self._composer.add_vary(resp, "Origin")

        decision = await self._resolve_origin.execute(req.get_header("Origin"))
        if decision.kind is DecisionKind.DISABLED:
            return

        self._composer.add_cors_headers(resp, decision)
        state = self._preflight.execute(req, resp)
        if state is not PreflightState.NOT_APPLICABLE:
            logger.debug("%s %s preflight %s", req.method, req.path, state)

    async def process_resource(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params
    ) -> None:
        """Unclaimed OPTIONS on a mapped route falls through to the catch-all 404.

        A resource with its own ``on_options`` keeps handling OPTIONS itself.
        """
        if resource is None or req.method != "OPTIONS":
            return
        if hasattr(resource, "on_options") or is_preflight_handled(req):
            return
        answer_not_found(resp)


def register_cors(
    app: falcon.asgi.App, options: dict[str, Any] | None = None, **overrides: Any
) -> CorsPolicy:
    """Install CORS on the whole app: middleware, catch-all sink, error handler."""
    policy = normalize_policy(options, **overrides)
    app.add_middleware(CORSMiddleware(policy))
    app.add_sink(PreflightSink().on_request)
    app.add_error_handler(InvalidCorsOrigin, handle_cors_error)
    logger.info("CORS registered: origin=%r preflight=%s", policy.origin, policy.preflight)
    return policy
