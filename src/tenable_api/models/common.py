"""Building blocks shared by several Tenable asset models."""

from pydantic import BaseModel, Field


class Source(BaseModel):
    """Entity that reported the asset details.

    Sources include sensors, connectors and API imports. System generated names
    are AWS, NESSUS_AGENT, PVS, NESSUS_SCAN and WAS; organizations may use
    custom names for imports.
    """

    name: str | None = Field(default=None, description="Name of the reporting source")
    first_seen: str | None = Field(
        default=None,
        description="ISO timestamp when the source first reported the asset",
    )
    last_seen: str | None = Field(
        default=None,
        description="ISO timestamp when the source last reported the asset",
    )


class AcrDriver(BaseModel):
    """Key driver used to calculate the Tenable provided ACR."""

    driver_name: str | None = Field(default=None, description="Type of characteristic")
    driver_value: list[str] | None = Field(default=None, description="Characteristic value")


class ScanFrequency(BaseModel):
    """How often scans ran against an asset during an interval."""

    interval: int | None = Field(
        default=None,
        description="Number of days over which Tenable searches for scans of the asset",
    )
    frequency: int | None = Field(
        default=None,
        description="Number of scans that ran against the asset during the interval",
    )
    licensed: bool | None = Field(
        default=None,
        description="Whether the asset was licensed at the time of the scans",
    )
