"""Send endpoint requests through a caller supplied transport.

Each dispatch builds the request, hands it to the transport exactly once, and
decodes the response. The ``*_with_backoff`` variants repeat this whenever
the server answers 429, waiting longer every time.

Fails in the following cases:

* Unable to create a valid request (``RequestBuildError``)
* Server responded with an error code (``InsufficientPermission``,
  ``RateLimitReached``, ``UnexpectedStatusCode``)
* Unable to deserialize the server response (``DeserializationError``)
* The transport raised (``TransportError``)
"""

from datetime import timedelta
from typing import TypeVar

from loguru import logger

from tenable_api.backoff import INITIAL_WAIT, AsyncWait, Wait, async_retrying, retrying
from tenable_api.endpoints.base import Endpoint
from tenable_api.errors import TransportError
from tenable_api.utils.http_client import AsyncTransport, Transport

OutputT = TypeVar("OutputT")


def request(endpoint: Endpoint[OutputT], transport: Transport) -> OutputT:
    """Execute a request using the given blocking transport.

    Args:
        endpoint: Request to send, created by one of the ``Tenable`` factory methods.
        transport: Function sending an ``httpx.Request`` and returning a ``Response``.

    Returns:
        The endpoint's decoded result.
    """
    req = endpoint.build_request()
    logger.debug(f"Request: {req.method} {req.url}")
    try:
        res = transport(req)
    except TransportError:
        raise
    except Exception as e:
        raise TransportError(e) from e
    return endpoint.decode_response(res)


def request_with_backoff(
    endpoint: Endpoint[OutputT],
    transport: Transport,
    wait: Wait,
    *,
    initial_wait: timedelta = INITIAL_WAIT,
) -> OutputT:
    """Execute a request, backing off automatically when the rate limit is hit.

    Args:
        endpoint: Request to send.
        transport: Function sending an ``httpx.Request`` and returning a ``Response``.
        wait: Function blocking for the given duration, e.g. ``tenable_api.sleep``.
        initial_wait: First wait after a rate limited response.

    Raises:
        MaximumWaitTimeReached: If the wait grew beyond the representable range.
    """
    return retrying(wait, initial_wait)(request, endpoint, transport)


async def request_async(endpoint: Endpoint[OutputT], transport: AsyncTransport) -> OutputT:
    """Execute a request using the given async transport.

    Args:
        endpoint: Request to send.
        transport: Coroutine function sending an ``httpx.Request`` and returning a ``Response``.

    Returns:
        The endpoint's decoded result.
    """
    req = endpoint.build_request()
    logger.debug(f"Request: {req.method} {req.url}")
    try:
        res = await transport(req)
    except TransportError:
        raise
    except Exception as e:
        raise TransportError(e) from e
    return endpoint.decode_response(res)


async def request_with_backoff_async(
    endpoint: Endpoint[OutputT],
    transport: AsyncTransport,
    wait: AsyncWait,
    *,
    initial_wait: timedelta = INITIAL_WAIT,
) -> OutputT:
    """Execute an async request, backing off automatically when the rate limit is hit.

    Args:
        endpoint: Request to send.
        transport: Coroutine function sending an ``httpx.Request`` and returning a ``Response``.
        wait: Coroutine function suspending for the given duration, e.g.
            ``tenable_api.async_sleep``.
        initial_wait: First wait after a rate limited response.

    Raises:
        MaximumWaitTimeReached: If the wait grew beyond the representable range.
    """
    return await async_retrying(wait, initial_wait)(request_async, endpoint, transport)
