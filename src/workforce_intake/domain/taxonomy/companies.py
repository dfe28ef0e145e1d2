"""Company taxonomy: group companies by business pillar."""

from __future__ import annotations

from enum import Enum

from workforce_intake.domain.model.catalog_domain import CatalogDomain
from workforce_intake.domain.model.catalog_item import CatalogItem
from workforce_intake.domain.taxonomy.taxonomy import Taxonomy


class BusinessPillar(Enum):
    HOLDING_COMPANY = "Holding Company"
    INTEGRATED_COMMUNITY_SOLUTIONS = "Integrated Community Solutions"
    OUTSOURCE_SERVICE = "Outsource Service"
    PROPERTY_DEVELOPMENT = "Property Development"
    PROPERTY_INVESTMENT = "Property Investment"
    CUSTOM = "Custom"


def _companies(pillar: BusinessPillar, *names: str) -> list[CatalogItem]:
    return [CatalogItem(name=name, group=pillar) for name in names]


COMPANY_TAXONOMY = Taxonomy(
    groups=tuple(BusinessPillar),
    items=tuple(
        _companies(
            BusinessPillar.HOLDING_COMPANY,
            "JLG Investment Holdings Sdn Bhd",
        )
        + _companies(
            BusinessPillar.INTEGRATED_COMMUNITY_SOLUTIONS,
            "Damansara Assets Sdn Bhd",
            "Hatchlabs Sdn Bhd",
            "JLG Centrix Sdn Bhd",
            "JLG Duraclean Sdn Bhd",
            "JLG Healthserv Sdn Bhd",
            "JLG Integra Berhad",
            "JLG Metro Sdn Bhd",
            "JLG Neo Eats Sdn Bhd",
            "JLG Property Management Sdn Bhd",
            "JLG Securitas Sdn Bhd",
            "JLG Zaquin Sdn Bhd",
            "TMR LC Services Sdn Bhd",
            "Valtro Services Sdn Bhd",
        )
        + _companies(
            BusinessPillar.OUTSOURCE_SERVICE,
            "Coaction Events Sdn Bhd",
            "JLG Corporate Edge Sdn Bhd",
            "JLG Services Sdn Bhd",
        )
        + _companies(
            BusinessPillar.PROPERTY_DEVELOPMENT,
            "JLG Buildworks Sdn Bhd",
            "JLG Development Sdn Bhd",
            "JLG Projects Sdn Bhd",
        )
        + _companies(
            BusinessPillar.PROPERTY_INVESTMENT,
            "JLG Capital Sdn Bhd",
            "JLG REIT Managers Sdn Bhd",
        )
    ),
)

COMPANY_DOMAIN = CatalogDomain(
    key="companies",
    label="company",
    group_type=BusinessPillar,
    taxonomy=COMPANY_TAXONOMY,
    custom_group=BusinessPillar.CUSTOM,
    placeholder="Select Company...",
)
