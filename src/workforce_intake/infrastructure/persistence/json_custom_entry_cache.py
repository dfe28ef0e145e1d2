"""JSON-file-backed implementation of CustomEntryCache.

One file per user and domain, named after the namespaced key
``custom_<domain>_<user_id>``. The whole list is rewritten on every
upsert through a temporary file and ``os.replace``, so a reader never sees
a half-written file.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from pathlib import Path
from urllib.parse import quote

from workforce_intake.domain.exceptions import CacheCorruptedError, StorageError
from workforce_intake.domain.model.catalog_domain import CatalogDomain
from workforce_intake.domain.model.custom_entry import CustomEntry, utc_now
from workforce_intake.domain.repository.custom_entry_repository import CustomEntryCache

logger = logging.getLogger(__name__)


class JsonCustomEntryCache(CustomEntryCache):

    def __init__(
        self,
        directory: Path,
        domain: CatalogDomain,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._directory = directory
        self._domain = domain
        self._clock = clock

    def cache_key(self, user_id: str) -> str:
        return f"custom_{self._domain.key}_{user_id}"

    def path_for(self, user_id: str) -> Path:
        return self._directory / f"{quote(self.cache_key(user_id), safe='')}.json"

    # --- CustomEntryCache interface -------------------------------------------

    def load(self, user_id: str) -> list[CustomEntry]:
        entries: list[CustomEntry] = []
        for raw in self._load_raw(user_id):
            try:
                entries.append(self._to_domain(raw))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping malformed cached entry for %s: %s", user_id, exc)
        return entries

    def upsert(self, user_id: str, name: str, group: Enum) -> CustomEntry:
        try:
            entries = self.load(user_id)
        except CacheCorruptedError as exc:
            logger.warning("Overwriting unreadable cache for %s: %s", user_id, exc)
            entries = []

        now = self._clock()
        for entry in entries:
            if entry.has_name(name):
                entry.reassign(group, now=now)
                target = entry
                break
        else:
            target = CustomEntry.create(user_id, name, group, now=now)
            entries.append(target)

        self._persist_raw(user_id, [self._to_raw(e) for e in entries])
        return target

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(entry: CustomEntry) -> dict:
        return {
            "id": entry.id,
            "user_id": entry.user_id,
            "name": entry.name,
            "group": entry.group.value,
            "created_at": entry.created_at.isoformat(),
            "updated_at": entry.updated_at.isoformat(),
        }

    def _to_domain(self, raw: dict) -> CustomEntry:
        for field in ("user_id", "name"):
            value = raw[field]
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{field} must be a non-blank string, got {value!r}")
        return CustomEntry(
            id=raw["id"],
            user_id=raw["user_id"],
            name=raw["name"].strip(),
            group=self._domain.parse_group(raw["group"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self, user_id: str) -> list[dict]:
        path = self.path_for(user_id)
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise CacheCorruptedError(f"{path.name}: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Could not read {path}: {exc}") from exc
        if not isinstance(data, list):
            raise CacheCorruptedError(f"{path.name}: expected a list, got {type(data).__name__}")
        return data

    def _persist_raw(self, user_id: str, records: list[dict]) -> None:
        path = self.path_for(user_id)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp, path)
        except OSError as exc:
            raise StorageError(f"Could not write {path}: {exc}") from exc
