"""CustomEntry aggregate: a user-registered item missing from the taxonomy.

At most one entry exists per ``(user_id, name)`` pair, names compared
case-insensitively. Resubmitting a name with a different group mutates the
existing record instead of creating a second one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from workforce_intake.domain.exceptions import ValidationError
from workforce_intake.domain.model.catalog_item import CatalogItem


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CustomEntry:
    """Aggregate root for a user's custom catalog entry.

    Use ``CustomEntry.create()`` for new entries. The ``__init__`` is kept
    plain so repositories can reconstitute stored records as-is.
    """

    id: str
    user_id: str
    name: str
    group: Enum
    created_at: datetime
    updated_at: datetime

    # --- Factory (used for NEW entries only) ----------------------------------

    @staticmethod
    def create(
        user_id: str,
        name: str,
        group: Enum,
        now: datetime | None = None,
    ) -> CustomEntry:
        """Create a new entry, enforcing its invariants."""
        if not user_id or not user_id.strip():
            raise ValidationError("User ID is required for a custom entry")
        if not name or not name.strip():
            raise ValidationError("Custom entry name is required")

        stamp = now or utc_now()
        return CustomEntry(
            id=str(uuid4()),
            user_id=user_id,
            name=name.strip(),
            group=group,
            created_at=stamp,
            updated_at=stamp,
        )

    # --- Mutations ------------------------------------------------------------

    def reassign(self, group: Enum, now: datetime | None = None) -> None:
        """Move the entry to another group and bump ``updated_at``."""
        self.group = group
        self.updated_at = now or utc_now()

    # --- Queries --------------------------------------------------------------

    def has_name(self, name: str) -> bool:
        return self.name.casefold() == name.strip().casefold()

    def to_catalog_item(self) -> CatalogItem:
        """Project to a read-only catalog item (custom entries carry no code)."""
        return CatalogItem(name=self.name, group=self.group)
