"""Tests for ACR and asset move request models."""

import json

import pytest
from pydantic import ValidationError

from tenable_api.models import (
    AccessGroupsPrincipals,
    AccessGroupsRules,
    Acr,
    AcrAsset,
    AcrUpdateReason,
    AssetsMoveDef,
)


class TestAcrUpdateReason:
    """Tests for AcrUpdateReason enum."""

    def test_wire_values(self):
        """Test that reasons serialize to the strings the API expects."""
        assert AcrUpdateReason.BUSINESS_CRITICAL == "Business Critical"
        assert AcrUpdateReason.IN_SCOPE_FOR_COMPLIANCE == "In Scope For Compliance"
        assert AcrUpdateReason.EXISTING_MITIGATION_CONTROL == "Existing Mitigation Control"
        assert AcrUpdateReason.DEV_ONLY == "Dev only"
        assert AcrUpdateReason.KEY_DRIVERS_DOES_NOT_MATCH == "Key drivers does not match"
        assert AcrUpdateReason.OTHER == "Other"

    def test_parse_from_value(self):
        """Test looking up a reason by its wire value."""
        assert AcrUpdateReason("Dev only") is AcrUpdateReason.DEV_ONLY


class TestAcr:
    """Tests for Acr model."""

    def test_create_acr(self):
        """Test creating an ACR update."""
        acr = Acr(
            acr_score=8,
            reason=[AcrUpdateReason.BUSINESS_CRITICAL],
            note="Payment gateway",
            asset=[AcrAsset(id="00000000-0000-0000-0000-000000000000")],
        )

        assert acr.acr_score == 8
        assert acr.reason == [AcrUpdateReason.BUSINESS_CRITICAL]
        assert acr.asset[0].id == "00000000-0000-0000-0000-000000000000"

    def test_score_required(self):
        """Test that the score has no default."""
        with pytest.raises(ValidationError):
            Acr()

    def test_negative_score_rejected(self):
        """Test that the score is non-negative."""
        with pytest.raises(ValidationError):
            Acr(acr_score=-1)

    def test_asset_defaults_to_empty(self):
        """Test that the asset list defaults to empty."""
        assert Acr(acr_score=1).asset == []

    def test_reason_from_strings(self):
        """Test parsing reasons from their wire values."""
        acr = Acr.model_validate({"acr_score": 3, "reason": ["Other", "Dev only"]})

        assert acr.reason == [AcrUpdateReason.OTHER, AcrUpdateReason.DEV_ONLY]

    def test_dump_omits_unset_fields(self):
        """Test that absent optional fields are left out of the body."""
        acr = Acr(acr_score=5, asset=[AcrAsset(fqdn=["web01.example.com"])])

        body = json.loads(acr.model_dump_json(exclude_none=True))

        assert body == {"acr_score": 5, "asset": [{"fqdn": ["web01.example.com"]}]}


class TestAssetsMoveDef:
    """Tests for AssetsMoveDef model."""

    def test_all_fields_required(self):
        """Test that source, destination and targets are required."""
        with pytest.raises(ValidationError):
            AssetsMoveDef(source="a", destination="b")

    def test_dump(self):
        """Test serializing a move definition."""
        definition = AssetsMoveDef(
            source="00000000-0000-0000-0000-000000000000",
            destination="33333333-3333-3333-3333-333333333333",
            targets="192.0.2.0/24",
        )

        assert json.loads(definition.model_dump_json()) == {
            "source": "00000000-0000-0000-0000-000000000000",
            "destination": "33333333-3333-3333-3333-333333333333",
            "targets": "192.0.2.0/24",
        }


class TestAccessGroups:
    """Tests for access group rule and principal models."""

    def test_parse_rule(self):
        """Test parsing an asset rule."""
        rule = AccessGroupsRules.model_validate(
            {"type": "ipv4", "operator": "eq", "terms": ["192.0.2.0/24", "198.51.100.7"]}
        )

        assert rule.type == "ipv4"
        assert rule.operator == "eq"
        assert rule.terms == ["192.0.2.0/24", "198.51.100.7"]

    def test_parse_principal(self):
        """Test parsing a principal."""
        principal = AccessGroupsPrincipals.model_validate_json(
            b'{"type": "group", "principal_id": "44444444-4444-4444-4444-444444444444",'
            b' "principal_name": "SOC"}'
        )

        assert principal.type == "group"
        assert principal.principal_id == "44444444-4444-4444-4444-444444444444"
        assert principal.principal_name == "SOC"

    def test_all_fields_optional(self):
        """Test that empty objects parse and dump without unset fields."""
        assert AccessGroupsRules().model_dump(exclude_none=True) == {}
        assert AccessGroupsPrincipals.model_validate({}).type is None
