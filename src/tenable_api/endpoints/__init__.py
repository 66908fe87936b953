"""Endpoint definitions for tenable-api."""

from tenable_api.endpoints.assets import (
    AcrUpdateRequest,
    AssetByUuidRequest,
    AssetRequests,
    AssetsMoveRequest,
    AssetsRequest,
)
from tenable_api.endpoints.base import Endpoint

__all__ = [
    "AcrUpdateRequest",
    "AssetByUuidRequest",
    "AssetRequests",
    "AssetsMoveRequest",
    "AssetsRequest",
    "Endpoint",
]
