"""Header composer - CORS response headers from policy and origin decision."""

from corsguard.application.ports import CorsRequest, CorsResponse
from corsguard.domain.entities import CorsPolicy
from corsguard.domain.value_objects import OriginDecision, append_vary


class HeaderComposer:
    """Writes common CORS headers on every response and preflight headers on demand."""

    def __init__(self, policy: CorsPolicy) -> None:
        self._policy = policy

    def add_vary(self, resp: CorsResponse, field: str) -> None:
        """Append field to Vary without duplicating it."""
        value = append_vary(resp.get_header("Vary"), field)
        if value:
            resp.set_header("Vary", value)

    def add_cors_headers(self, resp: CorsResponse, decision: OriginDecision) -> None:
        """Allow-origin, credentials and expose-headers."""
        # A denied origin gets no Access-Control-Allow-Origin at all.
        if decision.allowed and decision.value:
            resp.set_header("Access-Control-Allow-Origin", decision.value)

        if self._policy.credentials:
            resp.set_header("Access-Control-Allow-Credentials", "true")

        exposed = self._policy.expose_headers_header
        if exposed is not None:
            resp.set_header("Access-Control-Expose-Headers", exposed)

    def add_preflight_headers(self, req: CorsRequest, resp: CorsResponse) -> None:
        """Allow-methods, allow-headers and max-age for a preflight response."""
        resp.set_header("Access-Control-Allow-Methods", self._policy.allow_methods_header)

        allowed = self._policy.allow_headers_header
        if allowed is None:
            self.add_vary(resp, "Access-Control-Request-Headers")
            requested = req.get_header("Access-Control-Request-Headers")
            if requested:
                resp.set_header("Access-Control-Allow-Headers", requested)
        else:
            resp.set_header("Access-Control-Allow-Headers", allowed)

        if self._policy.max_age is not None:
            resp.set_header("Access-Control-Max-Age", str(self._policy.max_age))
