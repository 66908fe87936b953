"""Models for moving assets between networks."""

from pydantic import BaseModel, Field


class AssetsMoveDef(BaseModel):
    """What to move, from which network, and where to."""

    source: str = Field(..., description="UUID of the network currently holding the assets")
    destination: str = Field(..., description="UUID of the network to move the assets to")
    targets: str = Field(
        ...,
        description="IPv4 addresses to move: comma separated list, range or CIDR",
    )


class MovedAssets(BaseModel):
    """Result of a move operation."""

    asset_count: int | None = Field(default=None, description="Number of assets affected")
