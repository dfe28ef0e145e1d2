"""Application service: Custom Entry Store.

Two-tier persistence for custom entries. Every operation tries the primary
(remote) repository first and falls back to the local cache when the
primary fails. The picker must keep working while the remote is down, so
no storage error ever leaves this class.

Outcomes of ``save``:
  - insert succeeded          -> the persisted entry
  - duplicate (user, name)    -> group updated in place, returns None
  - any other remote failure  -> written to the local cache, returns None
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from workforce_intake.domain.exceptions import (
    CacheCorruptedError,
    DuplicateEntryError,
    StorageError,
)
from workforce_intake.domain.model.custom_entry import CustomEntry
from workforce_intake.domain.repository.custom_entry_repository import (
    CustomEntryCache,
    CustomEntryRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CustomEntryStore:

    def __init__(
        self,
        repository: CustomEntryRepository,
        cache: CustomEntryCache,
    ) -> None:
        self._repository = repository
        self._cache = cache

    # --- Public operations ----------------------------------------------------

    async def list(self, user_id: str) -> list[CustomEntry]:
        """Return the user's entries; never raises."""
        return await self._with_fallback(
            "list",
            lambda: self._repository.list_for_user(user_id),
            lambda: self._read_local(user_id),
        )

    async def save(self, user_id: str, name: str, group: Enum) -> CustomEntry | None:
        """Persist a new entry, or update the existing one with that name."""
        try:
            return await self._with_fallback(
                "save",
                lambda: self._repository.insert(user_id, name, group),
                lambda: self._write_local(user_id, name, group),
            )
        except DuplicateEntryError:
            logger.info(
                "Entry %r already exists for user %s; updating its group instead",
                name,
                user_id,
            )
            await self.update(user_id, name, group)
            return None

    async def update(self, user_id: str, name: str, group: Enum) -> bool:
        """Change an existing entry's group. True only if the remote took it."""

        def remote() -> bool:
            self._repository.update_group(user_id, name, group)
            return True

        def local() -> bool:
            self._write_local(user_id, name, group)
            return False

        try:
            return await self._with_fallback("update", remote, local)
        except DuplicateEntryError:
            # An update cannot create a second row; treat like any other failure.
            logger.warning("Unexpected duplicate on update of %r; using local cache", name)
            return local()

    # --- Fallback combinator --------------------------------------------------

    async def _with_fallback(
        self,
        operation: str,
        remote: Callable[[], T],
        local: Callable[[], T | None],
    ) -> T | None:
        """Run *remote* off the event loop; on failure run *local* instead.

        DuplicateEntryError is re-raised: it is a definite answer from the
        remote, not an outage, and callers pick the update path for it.
        """
        try:
            return await asyncio.to_thread(remote)
        except DuplicateEntryError:
            raise
        except StorageError as exc:
            logger.warning(
                "Remote %s failed (%s); falling back to local cache", operation, exc
            )
            return local()

    # --- Local cache helpers --------------------------------------------------

    def _read_local(self, user_id: str) -> list[CustomEntry]:
        try:
            return self._cache.load(user_id)
        except CacheCorruptedError as exc:
            logger.warning("Ignoring unreadable local cache for %s: %s", user_id, exc)
            return []
        except StorageError as exc:
            logger.error("Local cache read failed for %s: %s", user_id, exc)
            return []

    def _write_local(self, user_id: str, name: str, group: Enum) -> None:
        try:
            self._cache.upsert(user_id, name, group)
        except StorageError as exc:
            logger.error("Local cache write failed for %s: %s", user_id, exc)
