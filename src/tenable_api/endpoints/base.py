"""Base class for Tenable API endpoints.

An endpoint describes one API operation: how to turn itself into an HTTP
request, and how to turn the server response into its concrete result type.
Adding support for another operation means subclassing ``Endpoint``::

    @dataclass(frozen=True)
    class ScannersRequest(Endpoint[Scanners]):
        method: ClassVar[str] = "GET"

        @property
        def path(self) -> str:
            return "/scanners"

        def decode_response(self, response: Response) -> Scanners:
            check_status(response)
            return decode_json(response, Scanners)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

import httpx

from tenable_api.utils.http_client import Response, build_request

if TYPE_CHECKING:
    from tenable_api.client import Tenable

OutputT = TypeVar("OutputT")


@dataclass(frozen=True)
class Endpoint(ABC, Generic[OutputT]):
    """Immutable request object bound to a ``Tenable`` client."""

    tenable: "Tenable"

    method: ClassVar[str] = "GET"

    @property
    @abstractmethod
    def path(self) -> str:
        """Path appended to the client's base URI."""

    @property
    def url(self) -> str:
        """Absolute request URL."""
        return f"{self.tenable.uri}{self.path}"

    def payload(self) -> bytes | None:
        """JSON encoded request body, if the endpoint sends one."""
        return None

    def build_request(self) -> httpx.Request:
        """Create the HTTP request to hand over to a transport.

        Raises:
            InvalidCredentialEncoding: If the client's keys are not a valid header value.
            RequestBuildError: If the request cannot be built.
        """
        return build_request(self.method, self.url, self.tenable.auth, self.payload())

    @abstractmethod
    def decode_response(self, response: Response) -> OutputT:
        """Parse the transport response to the endpoint's concrete type.

        Raises:
            InsufficientPermission: Server responded with 403.
            RateLimitReached: Server responded with 429.
            UnexpectedStatusCode: Server responded with a status the endpoint does not handle.
            DeserializationError: Body does not match the expected model.
        """
