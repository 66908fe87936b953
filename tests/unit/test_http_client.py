"""Tests for HTTP helpers and the bundled httpx transports."""

import httpx
import pytest

from tenable_api.client import Tenable
from tenable_api.dispatch import request, request_async
from tenable_api.errors import (
    InsufficientPermission,
    InvalidCredentialEncoding,
    RateLimitReached,
    TransportError,
    UnexpectedStatusCode,
)
from tenable_api.utils.http_client import (
    AsyncHttpxTransport,
    HttpxTransport,
    Response,
    build_request,
    check_status,
    create_async_transport,
    create_transport,
    validate_header_value,
)


def assets_handler(request: httpx.Request) -> httpx.Response:
    if request.headers.get("X-ApiKeys") != "accessKey=ak;secretKey=sk":
        return httpx.Response(403)
    return httpx.Response(200, json={"assets": [{"id": "a1"}], "total": 1})


class TestValidateHeaderValue:
    """Tests for validate_header_value."""

    def test_accepts_visible_ascii(self):
        """Test that printable ASCII, spaces and tabs are allowed."""
        value = "accessKey=abc 123;secretKey=\tdef-456"

        assert validate_header_value(value) == value

    @pytest.mark.parametrize("value", ["a\nb", "a\rb", "\x00", "\x7f", "é"])
    def test_rejects_invalid(self, value):
        """Test that control and non-ASCII characters are rejected."""
        with pytest.raises(InvalidCredentialEncoding):
            validate_header_value(value)


class TestBuildRequest:
    """Tests for build_request."""

    def test_without_payload(self):
        """Test a bodiless request."""
        req = build_request("GET", "https://cloud.tenable.com/assets", "accessKey=a;secretKey=b")

        assert req.headers["X-ApiKeys"] == "accessKey=a;secretKey=b"
        assert req.headers["Accept"] == "application/json"
        assert "Content-Type" not in req.headers

    def test_with_payload(self):
        """Test that a payload is sent as JSON."""
        req = build_request("POST", "https://cloud.tenable.com/x", "k", b'{"a": 1}')

        assert req.headers["Content-Type"] == "application/json"
        assert req.content == b'{"a": 1}'


class TestCheckStatus:
    """Tests for check_status."""

    def test_ok(self):
        assert check_status(Response(status=200)) is True

    def test_not_found_allowed(self):
        assert check_status(Response(status=404), allow_not_found=True) is False

    def test_not_found_disallowed(self):
        with pytest.raises(UnexpectedStatusCode):
            check_status(Response(status=404))

    def test_forbidden(self):
        with pytest.raises(InsufficientPermission):
            check_status(Response(status=403), allow_not_found=True)

    def test_rate_limited(self):
        with pytest.raises(RateLimitReached):
            check_status(Response(status=429), allow_not_found=True)


class TestHttpxTransport:
    """Tests for the blocking httpx transport."""

    def test_send(self):
        """Test that status and body are copied from the httpx response."""
        client = httpx.Client(transport=httpx.MockTransport(assets_handler))
        transport = HttpxTransport(client)

        res = transport(build_request("GET", "https://cloud.tenable.com/assets", "k"))

        assert res == Response(status=403, body=b"")
        client.close()

    def test_create_transport(self):
        """Test dispatching through a transport created with create_transport."""
        with create_transport(transport=httpx.MockTransport(assets_handler)) as transport:
            result = request(Tenable("ak", "sk").assets(), transport)

        assert result.total == 1
        assert result.assets[0].id == "a1"

    def test_network_error(self):
        """Test that httpx errors reach the caller as TransportError."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with create_transport(transport=httpx.MockTransport(handler)) as transport:
            with pytest.raises(TransportError) as exc_info:
                request(Tenable("ak", "sk").assets(), transport)

        assert isinstance(exc_info.value.inner, httpx.ConnectError)


class TestAsyncHttpxTransport:
    """Tests for the async httpx transport."""

    @pytest.mark.asyncio
    async def test_send(self):
        """Test that status and body are copied from the httpx response."""
        async with httpx.AsyncClient(transport=httpx.MockTransport(assets_handler)) as client:
            transport = AsyncHttpxTransport(client)
            req = build_request(
                "GET", "https://cloud.tenable.com/assets", "accessKey=ak;secretKey=sk"
            )

            res = await transport(req)

        assert res.status == 200
        assert b'"total":1' in res.body.replace(b" ", b"")

    @pytest.mark.asyncio
    async def test_create_async_transport(self):
        """Test dispatching through a transport created with create_async_transport."""
        async with create_async_transport(
            transport=httpx.MockTransport(assets_handler)
        ) as transport:
            result = await request_async(Tenable("ak", "sk").assets(), transport)

        assert result.total == 1
