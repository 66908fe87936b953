"""Utility functions and helpers for tenable-api."""

from tenable_api.utils.http_client import (
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    Response,
    Transport,
    build_request,
    check_status,
    create_async_transport,
    create_transport,
    decode_json,
    validate_header_value,
)

__all__ = [
    "AsyncHttpxTransport",
    "AsyncTransport",
    "HttpxTransport",
    "Response",
    "Transport",
    "build_request",
    "check_status",
    "create_async_transport",
    "create_transport",
    "decode_json",
    "validate_header_value",
]
