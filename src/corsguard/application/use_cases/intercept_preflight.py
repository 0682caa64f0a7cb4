"""Preflight interceptor - validate, answer or pass through OPTIONS requests."""

import logging

from corsguard.application.ports import CorsRequest, CorsResponse
from corsguard.application.use_cases.compose_headers import HeaderComposer
from corsguard.domain.entities import CorsPolicy
from corsguard.domain.value_objects import PreflightState

logger = logging.getLogger(__name__)

PREFLIGHT_HANDLED = "cors_preflight_handled"
INVALID_PREFLIGHT_MESSAGE = "Invalid Preflight Request"


def mark_preflight_handled(req: CorsRequest) -> None:
    """Flag this request as a preflight handled by the CORS middleware."""
    setattr(req.context, PREFLIGHT_HANDLED, True)


def is_preflight_handled(req: CorsRequest) -> bool:
    return bool(getattr(req.context, PREFLIGHT_HANDLED, False))


class PreflightInterceptor:
    """State machine for OPTIONS requests.

    NOT_APPLICABLE: not OPTIONS, or preflight handling disabled.
    REJECTED: strict mode and Origin or Access-Control-Request-Method
    missing; answered with 400.
    VALIDATED: marker set, preflight headers written, then either answered
    with ``options_success_status`` or left open for the route's own
    responder when ``preflight_continue`` is set.
    """

    def __init__(self, policy: CorsPolicy, composer: HeaderComposer) -> None:
        self._policy = policy
        self._composer = composer

    def evaluate(self, req: CorsRequest) -> PreflightState:
        """Classify the request without touching the response."""
        if req.method != "OPTIONS" or not self._policy.preflight:
            return PreflightState.NOT_APPLICABLE

        if self._policy.strict_preflight and (
            not req.get_header("Origin")
            or not req.get_header("Access-Control-Request-Method")
        ):
            return PreflightState.REJECTED
        return PreflightState.VALIDATED

    def execute(self, req: CorsRequest, resp: CorsResponse) -> PreflightState:
        """Apply the state machine to the response."""
        state = self.evaluate(req)
        if state is PreflightState.REJECTED:
            logger.warning("Rejected preflight: missing Origin or Access-Control-Request-Method")
            resp.status = 400
            resp.content_type = "text/plain; charset=utf-8"
            resp.text = INVALID_PREFLIGHT_MESSAGE
            resp.complete = True
        elif state is PreflightState.VALIDATED:
            mark_preflight_handled(req)
            self._composer.add_preflight_headers(req, resp)
            if not self._policy.preflight_continue:
                # Some browsers wait for a body on 204 without Content-Length: 0
                resp.status = self._policy.options_success_status
                resp.set_header("Content-Length", "0")
                resp.text = None
                resp.complete = True
            logger.debug(
                "Preflight validated (continue=%s)", self._policy.preflight_continue
            )
        return state
