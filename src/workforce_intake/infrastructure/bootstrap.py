"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from workforce_intake.application.custom_entry_store import CustomEntryStore
from workforce_intake.application.dto import Selection
from workforce_intake.application.selector_controller import SelectorController
from workforce_intake.domain.model.catalog_domain import CatalogDomain
from workforce_intake.domain.taxonomy.companies import COMPANY_DOMAIN
from workforce_intake.domain.taxonomy.locations import LOCATION_DOMAIN
from workforce_intake.infrastructure.config import Settings, load_settings
from workforce_intake.infrastructure.persistence.json_custom_entry_cache import (
    JsonCustomEntryCache,
)
from workforce_intake.infrastructure.persistence.sql_custom_entry_repository import (
    SqlCustomEntryRepository,
)
from workforce_intake.infrastructure.persistence.sql_models import Base

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

DOMAINS: dict[str, CatalogDomain] = {
    COMPANY_DOMAIN.key: COMPANY_DOMAIN,
    LOCATION_DOMAIN.key: LOCATION_DOMAIN,
}

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


@lru_cache(maxsize=None)
def _engine(database_url: str, timeout: int) -> Engine:
    connect_args = {}
    if database_url.startswith("postgresql+pg8000"):
        # fail in `timeout` seconds instead of hanging on an unreachable host
        connect_args["timeout"] = timeout
    logger.info("[DB] Using %s", database_url.split("@")[-1])
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def engine(settings: Settings | None = None) -> Engine:
    settings = settings or load_settings()
    if settings.database_url.startswith("sqlite:///"):
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    return _engine(settings.database_url, settings.db_timeout)


def session_factory(settings: Settings | None = None) -> Callable[[], Session]:
    return sessionmaker(bind=engine(settings), autoflush=False)


def init_database(settings: Settings | None = None) -> None:
    Base.metadata.create_all(engine(settings))


def custom_entry_store(domain: CatalogDomain, settings: Settings | None = None) -> CustomEntryStore:
    settings = settings or load_settings()
    return CustomEntryStore(
        repository=SqlCustomEntryRepository(session_factory(settings), domain),
        cache=JsonCustomEntryCache(settings.cache_dir, domain),
    )


def selector_controller(
    domain: CatalogDomain,
    user_id: str | None = None,
    on_commit: Callable[[Selection], None] | None = None,
    settings: Settings | None = None,
) -> SelectorController:
    store = custom_entry_store(domain, settings) if user_id and user_id.strip() else None
    return SelectorController(domain, store=store, on_commit=on_commit, user_id=user_id)
