"""Unit tests for the CustomEntry aggregate and the CatalogDomain descriptor."""

from datetime import datetime, timezone

import pytest

from workforce_intake.domain.exceptions import ValidationError
from workforce_intake.domain.model.catalog_item import CatalogItem
from workforce_intake.domain.model.custom_entry import CustomEntry
from workforce_intake.domain.taxonomy.companies import COMPANY_DOMAIN, BusinessPillar
from workforce_intake.domain.taxonomy.locations import LOCATION_DOMAIN, Region

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T1 = datetime(2024, 1, 2, tzinfo=timezone.utc)


class TestCustomEntryCreate:

    def test_create_strips_name_and_stamps_both_timestamps(self):
        entry = CustomEntry.create("u1", "  Acme Corp ", BusinessPillar.CUSTOM, now=T0)
        assert entry.name == "Acme Corp"
        assert entry.created_at == T0
        assert entry.updated_at == T0
        assert entry.id

    def test_ids_are_unique(self):
        a = CustomEntry.create("u1", "A", BusinessPillar.CUSTOM)
        b = CustomEntry.create("u1", "B", BusinessPillar.CUSTOM)
        assert a.id != b.id

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            CustomEntry.create("u1", "   ", BusinessPillar.CUSTOM)

    def test_missing_user_rejected(self):
        with pytest.raises(ValidationError, match="User ID is required"):
            CustomEntry.create("", "Acme", BusinessPillar.CUSTOM)


class TestCustomEntryReassign:

    def test_reassign_changes_group_and_updated_at_only(self):
        entry = CustomEntry.create("u1", "Acme", BusinessPillar.CUSTOM, now=T0)
        entry.reassign(BusinessPillar.OUTSOURCE_SERVICE, now=T1)
        assert entry.group == BusinessPillar.OUTSOURCE_SERVICE
        assert entry.updated_at == T1
        assert entry.created_at == T0

    def test_has_name_ignores_case_and_padding(self):
        entry = CustomEntry.create("u1", "Acme", BusinessPillar.CUSTOM)
        assert entry.has_name(" ACME ")
        assert not entry.has_name("Acme2")

    def test_catalog_item_projection_has_no_code(self):
        entry = CustomEntry.create("u1", "Atlantis", Region.EUROPE)
        assert entry.to_catalog_item() == CatalogItem(name="Atlantis", group=Region.EUROPE)


class TestCatalogDomain:

    def test_location_sentinel_is_not_assignable(self):
        assert Region.GLOBAL not in LOCATION_DOMAIN.assignable_groups()
        assert Region.CUSTOM in LOCATION_DOMAIN.assignable_groups()

    def test_company_domain_has_no_sentinel(self):
        assert COMPANY_DOMAIN.sentinel_group is None
        assert COMPANY_DOMAIN.assignable_groups() == list(BusinessPillar)

    def test_parse_unknown_group_folds_into_custom(self):
        assert LOCATION_DOMAIN.parse_group("Antarctica") == Region.CUSTOM
        assert LOCATION_DOMAIN.parse_group("Europe") == Region.EUROPE

    def test_require_group_accepts_values_and_members(self):
        assert LOCATION_DOMAIN.require_group("Africa") == Region.AFRICA
        assert LOCATION_DOMAIN.require_group(Region.AFRICA) == Region.AFRICA

    def test_require_group_rejects_sentinel(self):
        with pytest.raises(ValidationError, match="cannot hold custom entries"):
            LOCATION_DOMAIN.require_group(Region.GLOBAL)

    def test_require_group_rejects_unknown(self):
        with pytest.raises(ValidationError, match="Unknown country group"):
            LOCATION_DOMAIN.require_group("Atlantis")
