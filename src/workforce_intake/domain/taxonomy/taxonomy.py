"""Taxonomy: the fixed set of groups and canonical items for one domain.

Taxonomies are compiled into the package as module-level constants and
never change at runtime. Construction validates the table once, at import.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from workforce_intake.domain.exceptions import ValidationError
from workforce_intake.domain.model.catalog_item import CatalogItem


@dataclass(frozen=True)
class Taxonomy:
    """Immutable group -> items table.

    Invariants:
    - every item belongs to one of ``groups``
    - item names are unique, ignoring case
    """

    groups: tuple[Enum, ...]
    items: tuple[CatalogItem, ...]

    def __post_init__(self) -> None:
        known = set(self.groups)
        seen: set[str] = set()
        for item in self.items:
            if item.group not in known:
                raise ValidationError(
                    f"Item '{item.name}' has group {item.group.value!r} "
                    f"which is not part of this taxonomy"
                )
            if item.key in seen:
                raise ValidationError(f"Duplicate taxonomy item '{item.name}'")
            seen.add(item.key)

    # --- Contract -------------------------------------------------------------

    def list_groups(self) -> tuple[Enum, ...]:
        return self.groups

    def list_items(self) -> tuple[CatalogItem, ...]:
        return self.items

    # --- Lookups --------------------------------------------------------------

    def get_by_name(self, name: str) -> CatalogItem | None:
        key = name.strip().casefold()
        for item in self.items:
            if item.key == key:
                return item
        return None

    def get_by_code(self, code: str) -> CatalogItem | None:
        wanted = code.strip().upper()
        if not wanted:
            return None
        for item in self.items:
            if item.code and item.code.upper() == wanted:
                return item
        return None

    def items_in_group(self, group: Enum) -> list[CatalogItem]:
        return [item for item in self.items if item.group == group]

    def infer_group(self, name: str, default: Enum) -> Enum:
        """Return the group of the taxonomy item called *name*, else *default*."""
        item = self.get_by_name(name)
        return item.group if item is not None else default

    def grouped(self) -> dict[Enum, list[CatalogItem]]:
        """Map every group, in order, to its items (possibly empty)."""
        result: dict[Enum, list[CatalogItem]] = {group: [] for group in self.groups}
        for item in self.items:
            result[item.group].append(item)
        return result
