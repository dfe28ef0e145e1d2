"""Abstract repositories for the CustomEntry aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Two roles exist: the primary (remote) repository, which
enforces the one-entry-per-user-and-name constraint itself, and the local
cache used when the primary cannot be reached.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from workforce_intake.domain.model.custom_entry import CustomEntry


class CustomEntryRepository(ABC):
    """Primary store. Implementations raise StorageError subclasses."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[CustomEntry]:
        """Return every entry owned by the user, ordered by name."""

    @abstractmethod
    def insert(self, user_id: str, name: str, group: Enum) -> CustomEntry:
        """Create a new entry.

        Raises DuplicateEntryError when the user already has an entry with
        that name, StoreUnavailableError for any other failure.
        """

    @abstractmethod
    def update_group(self, user_id: str, name: str, group: Enum) -> None:
        """Change the group of an existing entry and bump ``updated_at``."""


class CustomEntryCache(ABC):
    """Local durable fallback, one record per user."""

    @abstractmethod
    def load(self, user_id: str) -> list[CustomEntry]:
        """Return the cached entries for a user.

        Raises CacheCorruptedError when the stored data cannot be parsed.
        """

    @abstractmethod
    def upsert(self, user_id: str, name: str, group: Enum) -> CustomEntry:
        """Replace the entry matching *name* (ignoring case) or append one."""
