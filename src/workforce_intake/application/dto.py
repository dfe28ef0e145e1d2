"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the presentation and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from workforce_intake.domain.model.catalog_item import CatalogGroup


@dataclass(frozen=True)
class Selection:
    """Output: what the caller receives when a value is committed.

    ``name`` is None when the global option was chosen, meaning "no
    specific location, applies globally".
    """

    name: str | None
    group: Enum
    code: str | None = None


@dataclass(frozen=True)
class CatalogView:
    """Output: the grouped, filtered list shown while the picker is open."""

    query: str
    groups: tuple[CatalogGroup, ...]
    has_exact_match: bool
    offer_add_custom: bool

    @property
    def total_items(self) -> int:
        return sum(len(group) for group in self.groups)

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0 and not self.offer_add_custom
