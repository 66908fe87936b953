"""tenable-api - An API abstraction for the Tenable.io vulnerability management API.

Requests are described by endpoint objects and sent through a transport
function supplied by the caller, keeping network I/O out of this package.
"""

from loguru import logger

__version__ = "0.1.0"

from tenable_api.backoff import async_sleep, sleep
from tenable_api.client import Tenable
from tenable_api.config import Settings
from tenable_api.dispatch import (
    request,
    request_async,
    request_with_backoff,
    request_with_backoff_async,
)
from tenable_api.endpoints.base import Endpoint
from tenable_api.errors import (
    DeserializationError,
    InsufficientPermission,
    InvalidCredentialEncoding,
    MaximumWaitTimeReached,
    RateLimitReached,
    RequestBuildError,
    TenableError,
    TransportError,
    UnexpectedStatusCode,
)
from tenable_api.utils.http_client import Response

logger.disable("tenable_api")

__all__ = [
    "DeserializationError",
    "Endpoint",
    "InsufficientPermission",
    "InvalidCredentialEncoding",
    "MaximumWaitTimeReached",
    "RateLimitReached",
    "RequestBuildError",
    "Response",
    "Settings",
    "Tenable",
    "TenableError",
    "TransportError",
    "UnexpectedStatusCode",
    "__version__",
    "async_sleep",
    "request",
    "request_async",
    "request_with_backoff",
    "request_with_backoff_async",
    "sleep",
]
