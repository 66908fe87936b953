"""Pytest configuration and fixtures for tenable-api tests."""

import json
from datetime import timedelta

import httpx
import pytest

from tenable_api.client import Tenable
from tenable_api.utils.http_client import Response

ACCESS_KEY = "0" * 64
SECRET_KEY = "1" * 64
ASSET_ID = "00000000-0000-0000-0000-000000000000"


class FakeTransport:
    """Transport replaying canned responses and recording requests.

    Responses are consumed in order; the last one is repeated forever.
    Exceptions in the list are raised instead of returned.
    """

    def __init__(self, *responses: Response | Exception):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def _next(self, request: httpx.Request) -> Response:
        self.requests.append(request)
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, Exception):
            raise item
        return item

    def __call__(self, request: httpx.Request) -> Response:
        return self._next(request)

    @property
    def calls(self) -> int:
        return len(self.requests)


class AsyncFakeTransport(FakeTransport):
    """Awaitable variant of FakeTransport."""

    async def __call__(self, request: httpx.Request) -> Response:  # type: ignore[override]
        return self._next(request)


@pytest.fixture
def tenable():
    """Client with well formed credentials."""
    return Tenable(ACCESS_KEY, SECRET_KEY)


@pytest.fixture
def transport_factory():
    """Factory for blocking fake transports."""
    return FakeTransport


@pytest.fixture
def async_transport_factory():
    """Factory for async fake transports."""
    return AsyncFakeTransport


@pytest.fixture
def waits():
    """Durations passed to the wait primitive."""
    return []


@pytest.fixture
def record_wait(waits):
    """Blocking wait primitive that only records the duration."""

    def _wait(duration: timedelta) -> None:
        waits.append(duration)

    return _wait


@pytest.fixture
def record_wait_async(waits):
    """Async wait primitive that only records the duration."""

    async def _wait(duration: timedelta) -> None:
        waits.append(duration)

    return _wait


@pytest.fixture
def sample_assets_response():
    """Sample GET /assets response."""
    return {
        "assets": [
            {
                "id": ASSET_ID,
                "has_agent": False,
                "last_seen": "2024-01-15T10:30:00.000Z",
                "last_scan_target": "192.0.2.10",
                "sources": [
                    {
                        "name": "NESSUS_SCAN",
                        "first_seen": "2023-11-01T08:00:00.000Z",
                        "last_seen": "2024-01-15T10:30:00.000Z",
                    }
                ],
                "acr_score": 7,
                "acr_drivers": [
                    {"driver_name": "device_type", "driver_value": ["general_purpose"]}
                ],
                "exposure_score": 650,
                "scan_frequency": [{"interval": 90, "frequency": 12, "licensed": True}],
                "ipv4": ["192.0.2.10"],
                "ipv6": [],
                "fqdn": ["web01.example.com"],
                "netbios_name": ["WEB01"],
                "operating_system": ["Linux Kernel 5.15"],
                "agent_name": [],
                "aws_ec2_name": [],
                "mac_address": ["00:00:5e:00:53:01"],
            },
            {
                "id": "00000000-0000-0000-0000-000000000001",
                "has_agent": True,
                "ipv4": ["192.0.2.11"],
                "fqdn": ["db01.example.com"],
            },
        ],
        "total": 2,
    }


@pytest.fixture
def sample_asset_response():
    """Sample GET /assets/{asset_uuid} response."""
    return {
        "id": ASSET_ID,
        "has_agent": True,
        "created_at": "2023-11-01T08:00:00.000Z",
        "updated_at": "2024-01-15T10:30:00.000Z",
        "first_seen": "2023-11-01T08:00:00.000Z",
        "last_seen": "2024-01-15T10:30:00.000Z",
        "last_authenticated_scan_date": "2024-01-15T10:30:00.000Z",
        "sources": [{"name": "NESSUS_AGENT"}],
        "tags": [
            {
                "tag_uuid": "11111111-1111-1111-1111-111111111111",
                "tag_key": "Environment",
                "tag_value": "Production",
                "added_by": "22222222-2222-2222-2222-222222222222",
                "added_at": "2023-12-01T00:00:00.000Z",
            }
        ],
        "network_id": ["00000000-0000-0000-0000-000000000000"],
        "ipv4": ["192.0.2.10"],
        "fqdn": ["web01.example.com"],
        "hostname": ["web01"],
        "operating_system": ["Linux Kernel 5.15"],
        "aws_region": ["us-east-1"],
        "installed_software": ["cpe:/a:openbsd:openssh:8.9"],
        "unknown_future_field": "ignored",
    }


@pytest.fixture
def ok_response():
    """Build a 200 response with a JSON body."""

    def _ok(data: object) -> Response:
        return Response(status=200, body=json.dumps(data).encode())

    return _ok
