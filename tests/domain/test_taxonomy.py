"""Unit tests for the compiled-in taxonomies."""

import pytest

from workforce_intake.domain.exceptions import ValidationError
from workforce_intake.domain.model.catalog_item import CatalogItem
from workforce_intake.domain.taxonomy.companies import COMPANY_TAXONOMY, BusinessPillar
from workforce_intake.domain.taxonomy.locations import LOCATION_TAXONOMY, Region
from workforce_intake.domain.taxonomy.taxonomy import Taxonomy
from tests.fakes import Letter


class TestCompanyTaxonomy:

    def test_groups_in_declared_order(self):
        assert COMPANY_TAXONOMY.list_groups() == (
            BusinessPillar.HOLDING_COMPANY,
            BusinessPillar.INTEGRATED_COMMUNITY_SOLUTIONS,
            BusinessPillar.OUTSOURCE_SERVICE,
            BusinessPillar.PROPERTY_DEVELOPMENT,
            BusinessPillar.PROPERTY_INVESTMENT,
            BusinessPillar.CUSTOM,
        )

    def test_item_count(self):
        assert len(COMPANY_TAXONOMY.list_items()) == 22

    def test_companies_have_no_code(self):
        assert all(item.code is None for item in COMPANY_TAXONOMY.list_items())

    def test_get_by_name_ignores_case(self):
        item = COMPANY_TAXONOMY.get_by_name("jlg capital sdn bhd")
        assert item is not None
        assert item.name == "JLG Capital Sdn Bhd"
        assert item.group == BusinessPillar.PROPERTY_INVESTMENT

    def test_infer_group_falls_back_to_custom(self):
        assert COMPANY_TAXONOMY.infer_group("Acme Corp", BusinessPillar.CUSTOM) == BusinessPillar.CUSTOM
        assert (
            COMPANY_TAXONOMY.infer_group("Hatchlabs Sdn Bhd", BusinessPillar.CUSTOM)
            == BusinessPillar.INTEGRATED_COMMUNITY_SOLUTIONS
        )

    def test_items_in_group(self):
        names = [i.name for i in COMPANY_TAXONOMY.items_in_group(BusinessPillar.OUTSOURCE_SERVICE)]
        assert names == [
            "Coaction Events Sdn Bhd",
            "JLG Corporate Edge Sdn Bhd",
            "JLG Services Sdn Bhd",
        ]


class TestLocationTaxonomy:

    def test_get_by_code(self):
        item = LOCATION_TAXONOMY.get_by_code("my")
        assert item.name == "Malaysia"
        assert item.group == Region.ASIA_PACIFIC

    def test_get_by_unknown_code(self):
        assert LOCATION_TAXONOMY.get_by_code("ZZ") is None
        assert LOCATION_TAXONOMY.get_by_code("") is None

    def test_every_country_has_a_code(self):
        assert all(item.code for item in LOCATION_TAXONOMY.list_items())

    def test_grouped_keeps_reserved_groups_empty(self):
        grouped = LOCATION_TAXONOMY.grouped()
        assert list(grouped) == list(Region)
        assert grouped[Region.GLOBAL] == []
        assert grouped[Region.CUSTOM] == []
        assert len(grouped[Region.SOUTH_AMERICA]) == 12


class TestTaxonomyValidation:

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate taxonomy item"):
            Taxonomy(
                groups=tuple(Letter),
                items=(
                    CatalogItem(name="Acme", group=Letter.A),
                    CatalogItem(name="ACME", group=Letter.B),
                ),
            )

    def test_item_outside_groups_rejected(self):
        with pytest.raises(ValidationError, match="not part of this taxonomy"):
            Taxonomy(groups=(Letter.A,), items=(CatalogItem(name="Bolt", group=Letter.B),))

    def test_blank_item_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            CatalogItem(name="  ", group=Letter.A)
