"""SQLAlchemy-backed implementation of CustomEntryRepository.

Every SQLAlchemyError is translated into a domain StorageError. Only a
unique-index violation, recognised by its driver error code, becomes a
DuplicateEntryError; a generic IntegrityError (NOT NULL, foreign key, an
unrecognised driver) is reported as StoreUnavailableError so it takes the
local-cache path rather than the update path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from workforce_intake.domain.exceptions import DuplicateEntryError, StoreUnavailableError
from workforce_intake.domain.model.catalog_domain import CatalogDomain
from workforce_intake.domain.model.custom_entry import CustomEntry, utc_now
from workforce_intake.domain.repository.custom_entry_repository import CustomEntryRepository
from workforce_intake.infrastructure.persistence.sql_models import TABLE_BINDINGS

logger = logging.getLogger(__name__)

PG_UNIQUE_VIOLATION = "23505"
# SQLITE_CONSTRAINT_PRIMARYKEY, SQLITE_CONSTRAINT_UNIQUE
SQLITE_UNIQUE_VIOLATIONS = frozenset({1555, 2067})


def is_unique_violation(exc: IntegrityError) -> bool:
    """True if the driver reported a unique/primary-key violation."""
    orig = exc.orig
    if orig is None:
        return False

    # psycopg2 exposes pgcode, psycopg 3 sqlstate, pg8000 a field dict.
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is None and orig.args and isinstance(orig.args[0], dict):
        code = orig.args[0].get("C")
    if code == PG_UNIQUE_VIOLATION:
        return True

    return getattr(orig, "sqlite_errorcode", None) in SQLITE_UNIQUE_VIOLATIONS


class SqlCustomEntryRepository(CustomEntryRepository):

    def __init__(
        self,
        session_factory: Callable[[], Session],
        domain: CatalogDomain,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_factory = session_factory
        self._domain = domain
        self._binding = TABLE_BINDINGS[domain.key]
        self._clock = clock

    # --- CustomEntryRepository interface --------------------------------------

    def list_for_user(self, user_id: str) -> list[CustomEntry]:
        model = self._binding.model
        stmt = (
            select(model)
            .where(model.user_id == user_id)
            .order_by(self._name_column())
        )
        session = self._session_factory()
        try:
            rows = session.scalars(stmt).all()
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"Could not list {self._domain.key}: {exc}") from exc
        finally:
            session.close()

        entries: list[CustomEntry] = []
        for row in rows:
            try:
                entries.append(self._to_domain(row))
            except ValueError as exc:
                logger.warning("Skipping unusable %s row %s: %s", self._domain.key, row.id, exc)
        return entries

    def insert(self, user_id: str, name: str, group: Enum) -> CustomEntry:
        entry = CustomEntry.create(user_id, name, group, now=self._clock())
        session = self._session_factory()
        try:
            session.add(self._to_row(entry))
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            if is_unique_violation(exc):
                raise DuplicateEntryError(
                    f"'{entry.name}' already exists for user {user_id}"
                ) from exc
            raise StoreUnavailableError(f"Could not insert '{entry.name}': {exc}") from exc
        except SQLAlchemyError as exc:
            session.rollback()
            raise StoreUnavailableError(f"Could not insert '{entry.name}': {exc}") from exc
        finally:
            session.close()
        return entry

    def update_group(self, user_id: str, name: str, group: Enum) -> None:
        model = self._binding.model
        stmt = (
            update(model)
            .where(model.user_id == user_id)
            .where(func.lower(self._name_column()) == name.strip().lower())
            .values({self._binding.group_column: group.value, "updated_at": self._clock()})
            .execution_options(synchronize_session=False)
        )
        session = self._session_factory()
        try:
            result = session.execute(stmt)
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise StoreUnavailableError(f"Could not update '{name}': {exc}") from exc
        finally:
            session.close()

        if result.rowcount == 0:
            logger.warning("No %s entry %r for user %s to update", self._domain.key, name, user_id)

    # --- Serialization --------------------------------------------------------

    def _name_column(self):
        return getattr(self._binding.model, self._binding.name_column)

    def _to_row(self, entry: CustomEntry):
        return self._binding.model(
            id=entry.id,
            user_id=entry.user_id,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
            **{
                self._binding.name_column: entry.name,
                self._binding.group_column: entry.group.value,
            },
        )

    def _to_domain(self, row) -> CustomEntry:
        name = getattr(row, self._binding.name_column)
        if not name or not name.strip():
            raise ValueError("blank name")
        return CustomEntry(
            id=row.id,
            user_id=row.user_id,
            name=name.strip(),
            group=self._domain.parse_group(getattr(row, self._binding.group_column)),
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
