"""Exceptions raised by the Tenable API client.

Every failure of a dispatch is raised to the immediate caller as one of the
classes below. Only ``RateLimitReached`` is ever handled automatically, and
only by the backoff variants of dispatch.
"""

from http import HTTPStatus


class TenableError(Exception):
    """Base exception for Tenable API client errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RequestBuildError(TenableError):
    """Unable to build the HTTP request."""

    def __init__(self, message: str = "Unable to build Http Request."):
        super().__init__(message)


class InvalidCredentialEncoding(RequestBuildError):
    """AccessKey or SecretKey contains characters not allowed in a header value."""

    def __init__(self, message: str = "AccessKey or SecretKey contains invalid characters."):
        super().__init__(message)


class InsufficientPermission(TenableError):
    """User is not allowed to perform this operation."""

    def __init__(self) -> None:
        super().__init__(
            "User is not allowed to perform this operation.",
            HTTPStatus.FORBIDDEN,
        )


class RateLimitReached(TenableError):
    """Rate limit reached."""

    def __init__(self) -> None:
        super().__init__(
            "Rate Limit reached. Try again later.",
            HTTPStatus.TOO_MANY_REQUESTS,
        )


class MaximumWaitTimeReached(TenableError):
    """The backoff wait grew beyond the largest representable duration."""

    def __init__(self) -> None:
        super().__init__(
            "The Backoff function reached a number too high to represent while waiting."
        )


class UnexpectedStatusCode(TenableError):
    """API returned a status code the endpoint does not handle."""

    def __init__(self, status_code: int):
        super().__init__(
            f"API returned unexpected status code: {int(status_code)}.",
            int(status_code),
        )


class TransportError(TenableError):
    """Error raised by the caller supplied transport.

    The original exception is kept as ``inner`` and chained as ``__cause__``.
    """

    def __init__(self, inner: BaseException):
        super().__init__(f"Error in inner request client: {inner}")
        self.inner = inner


class DeserializationError(TenableError):
    """Unable to transform the response body to its concrete type."""

    def __init__(self, inner: Exception):
        super().__init__(f"Unable to transform response to concrete type: {inner}")
        self.inner = inner
