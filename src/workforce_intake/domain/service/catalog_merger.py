"""Domain service: Catalog Merger.

Folds a user's custom entries into a domain's taxonomy. A custom entry can
never shadow a canonical item: when names collide (ignoring case) the
static item is kept and the custom one dropped.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from workforce_intake.domain.model.catalog_domain import CatalogDomain
from workforce_intake.domain.model.catalog_item import CatalogGroup, CatalogItem
from workforce_intake.domain.model.custom_entry import CustomEntry
from workforce_intake.domain.model.merged_catalog import MergedCatalog


class CatalogMerger:

    def __init__(self, domain: CatalogDomain) -> None:
        self._domain = domain

    def merge_taxonomy(self, custom_entries: Iterable[CustomEntry] = ()) -> MergedCatalog:
        """Merge the domain's own taxonomy with *custom_entries*."""
        return self.merge(self._domain.taxonomy.list_items(), custom_entries)

    def merge(
        self,
        static_items: Iterable[CatalogItem],
        custom_entries: Iterable[CustomEntry],
    ) -> MergedCatalog:
        """Build the grouped catalog.

        Steps:
        1. Keep every static item, in input order.
        2. Project each custom entry to an item and append it, unless its
           name is already taken.
        3. Bucket by group, in taxonomy group order, dropping empty groups.
        """
        seen: set[str] = set()
        ordered: list[CatalogItem] = []

        for item in static_items:
            if item.key in seen:
                continue
            seen.add(item.key)
            ordered.append(item)

        for entry in custom_entries:
            item = self._project(entry)
            if item.key in seen:
                continue
            seen.add(item.key)
            ordered.append(item)

        buckets: dict[Enum, list[CatalogItem]] = {
            group: [] for group in self._domain.taxonomy.list_groups()
        }
        for item in ordered:
            buckets.setdefault(item.group, []).append(item)

        return MergedCatalog(
            groups=tuple(
                CatalogGroup(group=group, items=tuple(items))
                for group, items in buckets.items()
                if items
            )
        )

    # --- Internal helpers -----------------------------------------------------

    def _project(self, entry: CustomEntry) -> CatalogItem:
        item = entry.to_catalog_item()
        # The global group only ever holds the synthetic option.
        if item.group == self._domain.sentinel_group:
            return CatalogItem(name=item.name, group=self._domain.custom_group)
        return item
