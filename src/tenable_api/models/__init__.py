"""Data models for tenable-api."""

from tenable_api.models.acr import (
    AccessGroupsPrincipals,
    AccessGroupsRules,
    Acr,
    AcrAsset,
    AcrUpdateReason,
)
from tenable_api.models.assets import Asset, AssetByUuid, Assets, Tags
from tenable_api.models.assets_move import AssetsMoveDef, MovedAssets
from tenable_api.models.common import AcrDriver, ScanFrequency, Source

__all__ = [
    "AccessGroupsPrincipals",
    "AccessGroupsRules",
    "Acr",
    "AcrAsset",
    "AcrDriver",
    "AcrUpdateReason",
    "Asset",
    "AssetByUuid",
    "Assets",
    "AssetsMoveDef",
    "MovedAssets",
    "ScanFrequency",
    "Source",
    "Tags",
]
