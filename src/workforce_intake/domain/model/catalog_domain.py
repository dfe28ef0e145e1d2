"""CatalogDomain: the descriptor that parameterises the picker.

The company and location pickers share one implementation; everything that
differs between them (group enum, taxonomy, reserved groups, storage key)
lives on this descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from workforce_intake.domain.exceptions import ValidationError
from workforce_intake.domain.model.catalog_item import CatalogItem
from workforce_intake.domain.taxonomy.taxonomy import Taxonomy


@dataclass(frozen=True)
class CatalogDomain:
    """Static description of one catalog domain.

    ``global_option`` is the synthetic "applies everywhere" item. When set,
    its group is reserved: it is never filtered by name and custom entries
    cannot be assigned to it.
    """

    key: str
    label: str
    group_type: type[Enum]
    taxonomy: Taxonomy
    custom_group: Enum
    global_option: CatalogItem | None = None
    placeholder: str = "Select..."

    def __post_init__(self) -> None:
        groups = self.taxonomy.list_groups()
        if self.custom_group not in groups:
            raise ValidationError(
                f"Custom group {self.custom_group.value!r} missing from {self.key} taxonomy"
            )
        if self.global_option is not None and self.global_option.group not in groups:
            raise ValidationError(
                f"Global group {self.global_option.group.value!r} missing from {self.key} taxonomy"
            )

    @property
    def sentinel_group(self) -> Enum | None:
        return self.global_option.group if self.global_option is not None else None

    def is_sentinel(self, item: CatalogItem) -> bool:
        return self.global_option is not None and item == self.global_option

    def assignable_groups(self) -> list[Enum]:
        """Groups a custom entry may be assigned to."""
        return [g for g in self.taxonomy.list_groups() if g != self.sentinel_group]

    def parse_group(self, value: str) -> Enum:
        """Resolve a stored group value.

        Unknown values come from older or hand-edited records; they are
        folded into the custom group rather than rejected.
        """
        try:
            return self.group_type(value)
        except ValueError:
            return self.custom_group

    def require_group(self, value: str | Enum) -> Enum:
        """Resolve a group chosen by a caller, rejecting anything unassignable."""
        if isinstance(value, self.group_type):
            group = value
        else:
            try:
                group = self.group_type(value)
            except ValueError as exc:
                raise ValidationError(f"Unknown {self.label} group: {value!r}") from exc
        if group not in self.assignable_groups():
            raise ValidationError(f"Group {group.value!r} cannot hold custom entries")
        return group

    def infer_group(self, name: str) -> Enum:
        return self.taxonomy.infer_group(name, default=self.custom_group)
