"""Asset models returned by the ``/assets`` endpoints."""

from pydantic import BaseModel, Field

from tenable_api.models.common import AcrDriver, ScanFrequency, Source


class Asset(BaseModel):
    """Asset summary as listed by ``GET /assets``."""

    id: str | None = Field(default=None, description="Asset UUID, unique key for the asset")
    has_agent: bool | None = Field(
        default=None,
        description="Whether a Nessus agent scan detected the asset",
    )
    last_seen: str | None = Field(
        default=None,
        description="ISO timestamp of the scan that most recently detected the asset",
    )
    last_scan_target: str | None = Field(
        default=None,
        description="IPv4, IPv6 or FQDN the scanner last used to evaluate the asset",
    )
    sources: list[Source] | None = Field(default=None, description="Sources of the scans")
    acr_score: int | None = Field(
        default=None,
        description="Asset Criticality Rating, 1 to 10 (Lumin only)",
    )
    acr_drivers: list[AcrDriver] | None = Field(
        default=None,
        description="Key drivers of the Tenable provided ACR (Lumin only)",
    )
    exposure_score: int | None = Field(
        default=None,
        description="Asset Exposure Score (Lumin only)",
    )
    scan_frequency: list[ScanFrequency] | None = Field(
        default=None,
        description="Scan frequency during specified intervals (Lumin only)",
    )
    ipv4: list[str] | None = Field(default=None, description="IPv4 addresses")
    ipv6: list[str] | None = Field(default=None, description="IPv6 addresses")
    fqdn: list[str] | None = Field(default=None, description="Fully qualified domain names")
    netbios_name: list[str] | None = Field(default=None, description="NetBIOS names")
    operating_system: list[str] | None = Field(default=None, description="Operating systems")
    agent_name: list[str] | None = Field(default=None, description="Nessus agent names")
    aws_ec2_name: list[str] | None = Field(default=None, description="AWS EC2 instance names")
    mac_address: list[str] | None = Field(default=None, description="MAC addresses")


class Assets(BaseModel):
    """Response of ``GET /assets``, up to 5,000 assets."""

    assets: list[Asset] | None = Field(default=None, description="Assets with details")
    total: int | None = Field(default=None, description="Total number of assets")


class Tags(BaseModel):
    """Category tag assigned to an asset."""

    tag_uuid: str | None = Field(default=None, description="Tag UUID")
    tag_key: str | None = Field(default=None, description="Tag category")
    tag_value: str | None = Field(default=None, description="Tag value")
    added_by: str | None = Field(default=None, description="UUID of the user who assigned it")
    added_at: str | None = Field(default=None, description="ISO timestamp of the assignment")


class AssetByUuid(BaseModel):
    """Asset details as returned by ``GET /assets/{asset_uuid}``.

    Cloud provider and third party identifiers are lists because an asset
    record can merge data from several scans and connectors.
    """

    id: str | None = Field(default=None, description="Asset UUID, unique key for the asset")
    has_agent: bool | None = Field(
        default=None,
        description="Whether a Nessus agent scan detected the asset",
    )
    created_at: str | None = Field(default=None, description="When the record was created")
    updated_at: str | None = Field(default=None, description="When the record was updated")
    first_seen: str | None = Field(default=None, description="When a scan first found the asset")
    last_seen: str | None = Field(default=None, description="When a scan last found the asset")
    last_scan_target: str | None = Field(
        default=None,
        description="IPv4, IPv6 or FQDN the scanner last used to evaluate the asset",
    )
    last_authenticated_scan_date: str | None = Field(
        default=None,
        description="Date of the last credentialed scan",
    )
    last_licensed_scan_date: str | None = Field(
        default=None,
        description="Date of the last scan that identified the asset as licensed",
    )
    sources: list[Source] | None = Field(default=None, description="Sources of the scans")
    tags: list[Tags] | None = Field(default=None, description="Category tags")
    acr_score: int | None = Field(
        default=None,
        description="Asset Criticality Rating, 1 to 10 (Lumin only)",
    )
    acr_drivers: list[AcrDriver] | None = Field(
        default=None,
        description="Key drivers of the Tenable provided ACR (Lumin only)",
    )
    exposure_score: int | None = Field(default=None, description="Asset Exposure Score")
    scan_frequency: list[ScanFrequency] | None = Field(
        default=None,
        description="Scan frequency during specified intervals",
    )
    network_id: list[str] | None = Field(default=None, description="Network object IDs")
    ipv4: list[str] | None = Field(default=None, description="IPv4 addresses")
    ipv6: list[str] | None = Field(default=None, description="IPv6 addresses")
    fqdn: list[str] | None = Field(default=None, description="Fully qualified domain names")
    mac_address: list[str] | None = Field(default=None, description="MAC addresses")
    netbios_name: list[str] | None = Field(default=None, description="NetBIOS names")
    operating_system: list[str] | None = Field(default=None, description="Operating systems")
    system_type: list[str] | None = Field(
        default=None,
        description="System types reported by plugin 54615",
    )
    tenable_uuid: list[str] | None = Field(default=None, description="Agent UUIDs")
    hostname: list[str] | None = Field(default=None, description="Hostnames")
    agent_name: list[str] | None = Field(default=None, description="Nessus agent names")
    bios_uuid: list[str] | None = Field(default=None, description="BIOS UUIDs")

    # AWS
    aws_ec2_instance_id: list[str] | None = None
    aws_ec2_instance_ami_id: list[str] | None = None
    aws_owner_id: list[str] | None = None
    aws_availability_zone: list[str] | None = None
    aws_region: list[str] | None = None
    aws_vpc_id: list[str] | None = None
    aws_ec2_instance_group_name: list[str] | None = None
    aws_ec2_instance_state_name: list[str] | None = None
    aws_ec2_instance_type: list[str] | None = None
    aws_subnet_id: list[str] | None = None
    aws_ec2_product_code: list[str] | None = None
    aws_ec2_name: list[str] | None = None

    # Azure and GCP
    azure_vm_id: list[str] | None = None
    azure_resource_id: list[str] | None = None
    gcp_project_id: list[str] | None = None
    gcp_zone: list[str] | None = None
    gcp_instance_id: list[str] | None = None

    # Third party identifiers
    ssh_fingerprint: list[str] | None = None
    mcafee_epo_guid: list[str] | None = None
    mcafee_epo_agent_guid: list[str] | None = None
    qualys_asset_id: list[str] | None = None
    qualys_host_id: list[str] | None = None
    servicenow_sysid: list[str] | None = None

    installed_software: list[str] | None = Field(
        default=None,
        description="CPE 2.2 values of applications detected on the asset",
    )
