"""Unit tests for use cases."""

import re
from unittest.mock import AsyncMock, MagicMock

import falcon
import falcon.asgi
import pytest
from falcon.testing import create_asgi_req

from corsguard.application.use_cases.compose_headers import HeaderComposer
from corsguard.application.use_cases.intercept_preflight import (
    PreflightInterceptor,
    is_preflight_handled,
)
from corsguard.application.use_cases.normalize_policy import normalize_policy
from corsguard.application.use_cases.resolve_origin import ResolveOriginUseCase
from corsguard.domain.exceptions import InvalidCorsOrigin
from corsguard.domain.value_objects import (
    DecisionKind,
    OriginDecision,
    PreflightState,
    parse_origin_option,
)


def _resolver(raw) -> ResolveOriginUseCase:
    return ResolveOriginUseCase(parse_origin_option(raw))


def _preflight_req(**headers: str) -> falcon.asgi.Request:
    return create_asgi_req(method="OPTIONS", headers=headers)


# --- ResolveOriginUseCase ---


@pytest.mark.asyncio
async def test_resolve_static_options() -> None:
    """Static options resolve without suspension."""
    assert await _resolver("*").execute("a.io") == OriginDecision.allow("*")
    assert await _resolver("fixed.io").execute("a.io") == OriginDecision.allow("fixed.io")
    assert await _resolver(["a.io"]).execute("b.io") == OriginDecision.deny()
    assert (await _resolver(False).execute("a.io")).kind is DecisionKind.DISABLED


@pytest.mark.asyncio
async def test_resolve_invalid_origin_raises() -> None:
    """Falsy non-False origin surfaces as InvalidCorsOrigin."""
    with pytest.raises(InvalidCorsOrigin):
        await _resolver("").execute("a.io")


@pytest.mark.asyncio
async def test_resolve_async_function() -> None:
    """Awaitable results are awaited and evaluated one level deep."""
    fn = AsyncMock(return_value=re.compile(r"^https://.*\.example\.com$"))
    resolver = _resolver(fn)

    assert await resolver.execute("https://app.example.com") == OriginDecision.allow(
        "https://app.example.com"
    )
    assert (await resolver.execute("https://evil.com")).kind is DecisionKind.DENY
    assert fn.await_count == 2


@pytest.mark.asyncio
async def test_resolve_sync_function() -> None:
    """Plain return values are used directly."""
    fn = MagicMock(return_value="*")
    assert await _resolver(fn).execute(None) == OriginDecision.allow("*")
    fn.assert_called_once_with(None)


@pytest.mark.asyncio
async def test_resolve_function_returning_none_raises() -> None:
    with pytest.raises(InvalidCorsOrigin):
        await _resolver(AsyncMock(return_value=None)).execute("a.io")


@pytest.mark.asyncio
async def test_resolve_function_returning_function_raises() -> None:
    """Dynamic results are not resolved recursively."""
    with pytest.raises(InvalidCorsOrigin):
        await _resolver(lambda origin: (lambda inner: True)).execute("a.io")


@pytest.mark.asyncio
async def test_resolve_function_error_propagates() -> None:
    fn = AsyncMock(side_effect=RuntimeError("lookup failed"))
    with pytest.raises(RuntimeError, match="lookup failed"):
        await _resolver(fn).execute("a.io")


# --- HeaderComposer ---


def test_compose_common_headers_on_allow() -> None:
    """Allow writes the origin; credentials and exposed headers follow policy."""
    composer = HeaderComposer(normalize_policy(credentials=True, exposedHeaders=["a", "b"]))
    resp = falcon.asgi.Response()

    composer.add_cors_headers(resp, OriginDecision.allow("https://a.io"))

    assert resp.get_header("Access-Control-Allow-Origin") == "https://a.io"
    assert resp.get_header("Access-Control-Allow-Credentials") == "true"
    assert resp.get_header("Access-Control-Expose-Headers") == "a, b"


def test_compose_deny_writes_no_origin() -> None:
    composer = HeaderComposer(normalize_policy())
    resp = falcon.asgi.Response()

    composer.add_cors_headers(resp, OriginDecision.deny())

    assert resp.get_header("Access-Control-Allow-Origin") is None
    assert resp.get_header("Access-Control-Allow-Credentials") is None


def test_compose_vary_without_duplicates() -> None:
    composer = HeaderComposer(normalize_policy())
    resp = falcon.asgi.Response()
    resp.set_header("Vary", "Accept-Encoding")

    composer.add_vary(resp, "Origin")
    composer.add_vary(resp, "origin")

    assert resp.get_header("Vary") == "Accept-Encoding, Origin"


def test_compose_preflight_reflects_requested_headers() -> None:
    composer = HeaderComposer(normalize_policy(methods=["GET", "POST"], maxAge=60))
    req = _preflight_req(**{"Access-Control-Request-Headers": "X-One, X-Two"})
    resp = falcon.asgi.Response()

    composer.add_preflight_headers(req, resp)

    assert resp.get_header("Access-Control-Allow-Methods") == "GET, POST"
    assert resp.get_header("Access-Control-Allow-Headers") == "X-One, X-Two"
    assert resp.get_header("Vary") == "Access-Control-Request-Headers"
    assert resp.get_header("Access-Control-Max-Age") == "60"


def test_compose_preflight_without_requested_headers() -> None:
    composer = HeaderComposer(normalize_policy())
    resp = falcon.asgi.Response()

    composer.add_preflight_headers(_preflight_req(), resp)

    assert resp.get_header("Access-Control-Allow-Headers") is None
    assert resp.get_header("Vary") == "Access-Control-Request-Headers"
    assert resp.get_header("Access-Control-Max-Age") is None


def test_compose_preflight_fixed_headers_leave_vary() -> None:
    composer = HeaderComposer(normalize_policy(allowedHeaders=["Content-Type"]))
    req = _preflight_req(**{"Access-Control-Request-Headers": "X-Ignored"})
    resp = falcon.asgi.Response()

    composer.add_preflight_headers(req, resp)

    assert resp.get_header("Access-Control-Allow-Headers") == "Content-Type"
    assert resp.get_header("Vary") is None


# --- PreflightInterceptor ---


def _interceptor(**options) -> PreflightInterceptor:
    policy = normalize_policy(**options)
    return PreflightInterceptor(policy, HeaderComposer(policy))


def test_preflight_not_applicable_for_other_methods() -> None:
    req = create_asgi_req(method="GET", headers={"Origin": "a.io"})
    resp = falcon.asgi.Response()

    assert _interceptor().execute(req, resp) is PreflightState.NOT_APPLICABLE
    assert not resp.complete
    assert not is_preflight_handled(req)


def test_preflight_not_applicable_when_disabled() -> None:
    req = _preflight_req(Origin="a.io", **{"Access-Control-Request-Method": "GET"})
    assert _interceptor(preflight=False).evaluate(req) is PreflightState.NOT_APPLICABLE


def test_preflight_rejected_without_request_method() -> None:
    req = _preflight_req(Origin="a.io")
    resp = falcon.asgi.Response()

    assert _interceptor().execute(req, resp) is PreflightState.REJECTED
    assert falcon.http_status_to_code(resp.status) == 400
    assert resp.text == "Invalid Preflight Request"
    assert resp.complete
    assert not is_preflight_handled(req)


def test_preflight_validated_terminates() -> None:
    req = _preflight_req(Origin="a.io", **{"Access-Control-Request-Method": "PUT"})
    resp = falcon.asgi.Response()

    assert _interceptor().execute(req, resp) is PreflightState.VALIDATED
    assert falcon.http_status_to_code(resp.status) == 204
    assert resp.get_header("Content-Length") == "0"
    assert resp.text is None
    assert resp.complete
    assert is_preflight_handled(req)


def test_preflight_validated_continues() -> None:
    req = _preflight_req(Origin="a.io", **{"Access-Control-Request-Method": "PUT"})
    resp = falcon.asgi.Response()

    assert _interceptor(preflightContinue=True).execute(req, resp) is PreflightState.VALIDATED
    assert not resp.complete
    assert resp.get_header("Access-Control-Allow-Methods") is not None
    assert is_preflight_handled(req)


def test_preflight_relaxed_accepts_missing_headers() -> None:
    assert _interceptor(strictPreflight=False).evaluate(_preflight_req()) is PreflightState.VALIDATED


def test_preflight_marker_is_per_request() -> None:
    interceptor = _interceptor()
    handled = _preflight_req(Origin="a.io", **{"Access-Control-Request-Method": "GET"})
    other = _preflight_req()

    interceptor.execute(handled, falcon.asgi.Response())
    interceptor.execute(other, falcon.asgi.Response())

    assert is_preflight_handled(handled)
    assert not is_preflight_handled(other)


def test_compose_empty_header_lists_are_still_set() -> None:
    """An empty list is configured, not unset: fixed mode, empty values."""
    composer = HeaderComposer(normalize_policy(exposedHeaders=[], allowedHeaders=[]))
    req = _preflight_req(**{"Access-Control-Request-Headers": "X"})
    resp = falcon.asgi.Response()

    composer.add_cors_headers(resp, OriginDecision.allow("*"))
    composer.add_preflight_headers(req, resp)

    assert resp.get_header("Access-Control-Expose-Headers") == ""
    assert resp.get_header("Access-Control-Allow-Headers") == ""
    assert resp.get_header("Vary") is None
