"""Value Objects for catalog entries.

A CatalogItem is what the picker shows and what the caller receives on
selection. Static items come from a Taxonomy; dynamic items are read-only
projections of a user's CustomEntry records.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from workforce_intake.domain.exceptions import ValidationError


@dataclass(frozen=True)
class CatalogItem:
    """A selectable item in a catalog domain.

    ``name`` is the natural key; two items with names differing only in
    case are the same item. ``code`` is only used by the location domain.
    """

    name: str
    group: Enum
    code: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Catalog item name is required")
        if not isinstance(self.group, Enum):
            raise ValidationError(
                f"Catalog item group must be an Enum member, got {type(self.group).__name__}"
            )

    @property
    def key(self) -> str:
        """Case-insensitive natural key."""
        return self.name.casefold()

    def matches(self, query: str) -> bool:
        """True if the item name contains *query*, ignoring case."""
        return query.casefold() in self.key


@dataclass(frozen=True)
class CatalogGroup:
    """One group of a catalog, with its items in display order."""

    group: Enum
    items: tuple[CatalogItem, ...]

    @property
    def names(self) -> list[str]:
        return [item.name for item in self.items]

    def __len__(self) -> int:
        return len(self.items)
