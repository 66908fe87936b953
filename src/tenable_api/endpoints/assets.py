"""Asset endpoints of the Tenable.io API.

API Documentation: https://developer.tenable.com/reference#assets
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from pydantic import TypeAdapter

from tenable_api.endpoints.base import Endpoint
from tenable_api.models.acr import Acr
from tenable_api.models.assets import AssetByUuid, Assets
from tenable_api.models.assets_move import AssetsMoveDef, MovedAssets
from tenable_api.utils.http_client import Response, check_status, decode_json

if TYPE_CHECKING:
    from tenable_api.client import Tenable

_ACR_LIST = TypeAdapter(list[Acr])


@dataclass(frozen=True)
class AssetsRequest(Endpoint[Assets]):
    """Request object for ``Tenable.assets``."""

    @property
    def path(self) -> str:
        return "/assets"

    def decode_response(self, response: Response) -> Assets:
        check_status(response)
        return decode_json(response, Assets)


@dataclass(frozen=True)
class AssetByUuidRequest(Endpoint[AssetByUuid | None]):
    """Request object for ``Tenable.asset_by_uuid``."""

    asset_uuid: str

    @property
    def path(self) -> str:
        return f"/assets/{self.asset_uuid}"

    def decode_response(self, response: Response) -> AssetByUuid | None:
        if not check_status(response, allow_not_found=True):
            return None
        return decode_json(response, AssetByUuid)


@dataclass(frozen=True)
class AcrUpdateRequest(Endpoint[None]):
    """Request object for ``Tenable.acr_update``."""

    acrs: Sequence[Acr]

    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return "/api/v2/assets/bulk-jobs/acr"

    def payload(self) -> bytes:
        return _ACR_LIST.dump_json(list(self.acrs), exclude_none=True)

    def decode_response(self, response: Response) -> None:
        check_status(response)


@dataclass(frozen=True)
class AssetsMoveRequest(Endpoint[MovedAssets | None]):
    """Request object for ``Tenable.assets_move``."""

    assets_move_def: AssetsMoveDef

    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return "/api/v2/assets/bulk-jobs/move-to-network"

    def payload(self) -> bytes:
        return self.assets_move_def.model_dump_json(exclude_none=True).encode()

    def decode_response(self, response: Response) -> MovedAssets | None:
        if not check_status(response, allow_not_found=True):
            return None
        return decode_json(response, MovedAssets)


class AssetRequests:
    """Factory methods for the asset endpoints, mixed into ``Tenable``."""

    def assets(self: "Tenable") -> AssetsRequest:
        """List up to 5,000 assets.

        Use the assets export endpoint to export data for all assets.
        Requires BASIC [16] user permissions.
        """
        return AssetsRequest(self)

    def asset_by_uuid(self: "Tenable", asset_uuid: str) -> AssetByUuidRequest:
        """Return details of the specified asset, or None when it does not exist.

        Requires BASIC [16] user permissions.
        """
        return AssetByUuidRequest(self, asset_uuid)

    def acr_update(self: "Tenable", acrs: Sequence[Acr]) -> AcrUpdateRequest:
        """Overwrite the Tenable provided Asset Criticality Rating for assets.

        Tenable assigns each asset an ACR from 1 to 10 representing its relative
        risk. Requires a Lumin license and ADMINISTRATOR [64] user permissions.
        The ACRs are copied, so later changes to them do not affect the request.
        """
        return AcrUpdateRequest(self, tuple(acr.model_copy(deep=True) for acr in acrs))

    def assets_move(self: "Tenable", assets_move_def: AssetsMoveDef) -> AssetsMoveRequest:
        """Move assets from one network to another.

        Creates an asynchronous job in Tenable.io. The result is None when the
        networks are not found. Requires ADMINISTRATOR [64] user permissions.
        The definition is copied, so later changes to it do not affect the request.
        """
        return AssetsMoveRequest(self, assets_move_def.model_copy(deep=True))
