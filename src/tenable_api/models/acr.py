"""Asset Criticality Rating (ACR) update models."""

from enum import StrEnum

from pydantic import BaseModel, Field


class AcrUpdateReason(StrEnum):
    """Reasons accepted for overwriting an ACR."""

    BUSINESS_CRITICAL = "Business Critical"
    IN_SCOPE_FOR_COMPLIANCE = "In Scope For Compliance"
    EXISTING_MITIGATION_CONTROL = "Existing Mitigation Control"
    DEV_ONLY = "Dev only"
    KEY_DRIVERS_DOES_NOT_MATCH = "Key drivers does not match"
    OTHER = "Other"


class AcrAsset(BaseModel):
    """Identifier of an asset whose ACR is updated.

    Each object should carry a single property; combine several objects to
    match assets by different properties.
    """

    id: str | None = Field(default=None, description="Asset UUID")
    fqdn: list[str] | None = Field(default=None, description="Fully qualified domain names")
    mac_address: str | None = Field(default=None, description="MAC address")
    netbios_name: str | None = Field(default=None, description="NetBIOS name")
    ipv4: list[str] | None = Field(default=None, description="IPv4 addresses")


class Acr(BaseModel):
    """ACR overwrite for a set of assets."""

    acr_score: int = Field(
        ...,
        ge=0,
        description="ACR to assign to the assets, an integer from 1 to 10",
    )
    reason: list[AcrUpdateReason] | None = Field(
        default=None,
        description="Reasons for the update (Overwrite Reasoning in the UI)",
    )
    note: str | None = Field(default=None, description="Notes clarifying the update")
    asset: list[AcrAsset] = Field(
        default_factory=list,
        description="Assets to update; at least one is required by the API",
    )


class AccessGroupsRules(BaseModel):
    """Asset rule of an access group."""

    type: str | None = Field(default=None, description="Asset rule type")
    operator: str | None = Field(
        default=None,
        description="How terms are matched: eq, match, starts or ends",
    )
    terms: list[str] | None = Field(
        default=None,
        description="Values matched against asset data, up to 100,000 per rule",
    )


class AccessGroupsPrincipals(BaseModel):
    """User or user group granted access by an access group."""

    type: str | None = Field(default=None, description="Principal type: user or group")
    principal_id: str | None = Field(default=None, description="UUID of the user or group")
    principal_name: str | None = Field(
        default=None,
        description="Name of the user or group, ignored when principal_id is set",
    )
