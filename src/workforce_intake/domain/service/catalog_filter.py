"""Domain service: filtering a merged catalog by a free-text query.

Pure functions, no I/O. Matching is a case-insensitive substring test on
item names; the location domain's global option is matched against its
keywords instead of its name and is never filtered out by an empty query.
"""

from __future__ import annotations

from workforce_intake.domain.model.catalog_domain import CatalogDomain
from workforce_intake.domain.model.catalog_item import CatalogGroup
from workforce_intake.domain.model.merged_catalog import MergedCatalog

GLOBAL_KEYWORDS = ("global", "multi-region")


def filter_catalog(
    domain: CatalogDomain,
    catalog: MergedCatalog,
    query: str,
) -> tuple[CatalogGroup, ...]:
    """Return the groups to display for *query*, in taxonomy order."""
    needle = query.casefold()
    by_group = {g.group: g for g in catalog.groups}
    result: list[CatalogGroup] = []

    for group in domain.taxonomy.list_groups():
        if group == domain.sentinel_group:
            if _shows_global_option(needle):
                result.append(CatalogGroup(group=group, items=(domain.global_option,)))
            continue

        catalog_group = by_group.get(group)
        if catalog_group is None:
            continue
        if not needle:
            result.append(catalog_group)
            continue

        matches = tuple(item for item in catalog_group.items if item.matches(needle))
        if matches:
            result.append(CatalogGroup(group=group, items=matches))

    return tuple(result)


def has_exact_match(domain: CatalogDomain, catalog: MergedCatalog, query: str) -> bool:
    """True if *query* names an existing item, ignoring case and padding."""
    name = query.strip()
    if catalog.find(name) is not None:
        return True
    option = domain.global_option
    return option is not None and name.casefold() == option.key


def _shows_global_option(needle: str) -> bool:
    if not needle:
        return True
    # The query must be a fragment of one of the keywords, not the reverse.
    return any(needle in keyword for keyword in GLOBAL_KEYWORDS)
