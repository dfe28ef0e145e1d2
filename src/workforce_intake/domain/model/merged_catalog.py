"""MergedCatalog: taxonomy items plus a user's custom items, grouped."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from workforce_intake.domain.model.catalog_item import CatalogGroup, CatalogItem


@dataclass(frozen=True)
class MergedCatalog:
    """Read-only, request-scoped catalog.

    Groups appear in taxonomy order and only when they hold at least one
    item. Within a group, static items precede custom ones.
    """

    groups: tuple[CatalogGroup, ...]

    @property
    def items(self) -> list[CatalogItem]:
        return [item for group in self.groups for item in group.items]

    def get_group(self, group: Enum) -> CatalogGroup | None:
        for catalog_group in self.groups:
            if catalog_group.group == group:
                return catalog_group
        return None

    def find(self, name: str) -> CatalogItem | None:
        """Return the item whose name equals *name* ignoring case, or None."""
        key = name.casefold()
        for item in self.items:
            if item.key == key:
                return item
        return None

    def __len__(self) -> int:
        return sum(len(group) for group in self.groups)
