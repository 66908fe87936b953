"""HTTP helpers shared by endpoints, dispatch and the bundled transports."""

import re
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from contextlib import asynccontextmanager, contextmanager
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from tenable_api.errors import (
    DeserializationError,
    InsufficientPermission,
    InvalidCredentialEncoding,
    RateLimitReached,
    RequestBuildError,
    UnexpectedStatusCode,
)

AUTH_HEADER = "X-ApiKeys"
ACCEPT_HEADER = "Accept"
JSON_CONTENT_TYPE = "application/json"

# Visible ASCII plus space and horizontal tab.
_HEADER_VALUE = re.compile(r"[\t\x20-\x7e]*")
_SCHEMES = ("http", "https")

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Response:
    """Server response handed back by a transport."""

    status: int
    body: bytes = b""


Transport = Callable[[httpx.Request], Response]
AsyncTransport = Callable[[httpx.Request], Awaitable[Response]]


def validate_header_value(value: str) -> str:
    """Ensure a credential string can be sent as an HTTP header value.

    Raises:
        InvalidCredentialEncoding: If the value holds control or non-ASCII characters.
    """
    if _HEADER_VALUE.fullmatch(value) is None:
        raise InvalidCredentialEncoding()
    return value


def build_request(
    method: str,
    url: str,
    auth: str,
    payload: bytes | None = None,
) -> httpx.Request:
    """Build a request carrying the API keys and the JSON accept header.

    Args:
        method: HTTP method.
        url: Absolute request URL.
        auth: Credential string sent as the ``X-ApiKeys`` header.
        payload: Optional JSON encoded body.

    Returns:
        Prepared httpx.Request, ready to be sent by a transport.

    Raises:
        InvalidCredentialEncoding: If ``auth`` is not a valid header value.
        RequestBuildError: If httpx rejects the request parts, or the URL is not
            an absolute http(s) URL.
    """
    headers = {
        AUTH_HEADER: validate_header_value(auth),
        ACCEPT_HEADER: JSON_CONTENT_TYPE,
    }
    if payload is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE

    try:
        request = httpx.Request(method, url, headers=headers, content=payload)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise RequestBuildError(f"Unable to build Http Request: {e}") from e

    if not request.url.is_absolute_url or request.url.scheme not in _SCHEMES:
        raise RequestBuildError(f"Unable to build Http Request: invalid URI {url!r}")
    return request


def check_status(response: Response, *, allow_not_found: bool = False) -> bool:
    """Map the response status to an outcome.

    Args:
        response: Server response.
        allow_not_found: Whether 404 is a valid "absent" outcome for the endpoint.

    Returns:
        True for 200, False for an allowed 404.

    Raises:
        InsufficientPermission: For 403.
        RateLimitReached: For 429.
        UnexpectedStatusCode: For any other status.
    """
    status = response.status
    if status == HTTPStatus.OK:
        return True
    if status == HTTPStatus.FORBIDDEN:
        raise InsufficientPermission()
    if status == HTTPStatus.TOO_MANY_REQUESTS:
        raise RateLimitReached()
    if allow_not_found and status == HTTPStatus.NOT_FOUND:
        return False
    raise UnexpectedStatusCode(status)


def decode_json(response: Response, model: type[ModelT]) -> ModelT:
    """Decode a JSON response body into ``model``.

    Raises:
        DeserializationError: If the body is not valid JSON for the model.
    """
    try:
        return model.model_validate_json(response.body)
    except ValidationError as e:
        raise DeserializationError(e) from e


class HttpxTransport:
    """Transport sending prepared requests with a caller owned ``httpx.Client``."""

    def __init__(self, client: httpx.Client):
        self.client = client

    def __call__(self, request: httpx.Request) -> Response:
        response = self.client.send(request)
        logger.debug(f"Response: {response.status_code} for {request.method} {request.url}")
        return Response(status=response.status_code, body=response.content)


class AsyncHttpxTransport:
    """Transport sending prepared requests with a caller owned ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def __call__(self, request: httpx.Request) -> Response:
        response = await self.client.send(request)
        logger.debug(f"Response: {response.status_code} for {request.method} {request.url}")
        return Response(status=response.status_code, body=response.content)


@contextmanager
def create_transport(
    timeout: int = 30,
    **kwargs: Any,
) -> Generator[HttpxTransport, None, None]:
    """Create a blocking transport over an httpx client with sensible defaults.

    Args:
        timeout: Request timeout in seconds.
        **kwargs: Additional arguments passed to httpx.Client.

    Yields:
        HttpxTransport bound to the open client.
    """
    kwargs.pop("timeout", None)

    with httpx.Client(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        **kwargs,
    ) as client:
        yield HttpxTransport(client)


@asynccontextmanager
async def create_async_transport(
    timeout: int = 30,
    **kwargs: Any,
) -> AsyncGenerator[AsyncHttpxTransport, None]:
    """Create an async transport over an httpx client with sensible defaults.

    Args:
        timeout: Request timeout in seconds.
        **kwargs: Additional arguments passed to httpx.AsyncClient.

    Yields:
        AsyncHttpxTransport bound to the open client.
    """
    kwargs.pop("timeout", None)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        **kwargs,
    ) as client:
        yield AsyncHttpxTransport(client)
