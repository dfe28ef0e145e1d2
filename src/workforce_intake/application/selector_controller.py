"""Application service: Selector Controller.

Drives one catalog picker (company or location) through its states:

    CLOSED -> OPEN -> (CLOSED | ADDING_CUSTOM) -> CLOSED

The controller owns only transient view state: the query, the open/closed
state and the group chosen for a pending custom entry. Persisted data is
only ever touched through CustomEntryStore. Filtering is synchronous; only
``refresh()`` and ``confirm_add_custom()`` await I/O.

Without a ``user_id`` the controller runs taxonomy-only: nothing is loaded
or saved and custom values are committed for the session only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from workforce_intake.application.custom_entry_store import CustomEntryStore
from workforce_intake.application.dto import CatalogView, Selection
from workforce_intake.domain.model.catalog_domain import CatalogDomain
from workforce_intake.domain.model.catalog_item import CatalogItem
from workforce_intake.domain.model.merged_catalog import MergedCatalog
from workforce_intake.domain.service.catalog_filter import filter_catalog, has_exact_match
from workforce_intake.domain.service.catalog_merger import CatalogMerger

logger = logging.getLogger(__name__)


class SelectorState(Enum):
    CLOSED = "CLOSED"
    OPEN = "OPEN"
    ADDING_CUSTOM = "ADDING_CUSTOM"


class SelectorController:

    def __init__(
        self,
        domain: CatalogDomain,
        store: CustomEntryStore | None = None,
        on_commit: Callable[[Selection], None] | None = None,
        user_id: str | None = None,
        value: str | None = None,
        group: Enum | None = None,
    ) -> None:
        self._domain = domain
        self._store = store
        self._on_commit = on_commit
        self._user_id = (user_id or "").strip() or None
        self._merger = CatalogMerger(domain)
        self._catalog = self._merger.merge_taxonomy()

        self._state = SelectorState.CLOSED
        self._query = ""
        self._custom_group = domain.custom_group
        self._saving = False
        # Bumped on every open/close so a late save can tell the picker moved on.
        self._session = 0

        self._value = value
        if group is None and value:
            group = domain.infer_group(value)
        self._group = group

    # --- Read-only state ------------------------------------------------------

    @property
    def state(self) -> SelectorState:
        return self._state

    @property
    def query(self) -> str:
        return self._query

    @property
    def catalog(self) -> MergedCatalog:
        return self._catalog

    @property
    def custom_group(self) -> Enum:
        return self._custom_group

    @property
    def is_saving(self) -> bool:
        return self._saving

    @property
    def persists(self) -> bool:
        return self._user_id is not None and self._store is not None

    @property
    def value(self) -> str | None:
        return self._value

    @property
    def group(self) -> Enum | None:
        return self._group

    @property
    def display_value(self) -> str:
        """Text for the closed picker: the value, the global label, or a prompt."""
        if self._value:
            return self._value
        option = self._domain.global_option
        if option is not None and self._group == option.group:
            return option.name
        return self._domain.placeholder

    @property
    def view(self) -> CatalogView | None:
        """The grouped view for the current query, or None while closed."""
        if self._state == SelectorState.CLOSED:
            return None
        exact = has_exact_match(self._domain, self._catalog, self._query)
        return CatalogView(
            query=self._query,
            groups=filter_catalog(self._domain, self._catalog, self._query),
            has_exact_match=exact,
            offer_add_custom=bool(self._query) and not exact,
        )

    # --- Catalog loading ------------------------------------------------------

    async def refresh(self) -> MergedCatalog:
        """Re-read the user's custom entries and rebuild the catalog."""
        if self.persists:
            entries = await self._store.list(self._user_id)  # type: ignore[union-attr]
            self._catalog = self._merger.merge_taxonomy(entries)
        return self._catalog

    # --- Transitions ----------------------------------------------------------

    def activate(self) -> None:
        """CLOSED -> OPEN with an empty query."""
        if self._state != SelectorState.CLOSED:
            return
        self._session += 1
        self._state = SelectorState.OPEN
        self._query = ""

    def set_query(self, text: str) -> None:
        if self._state == SelectorState.CLOSED:
            return
        self._query = text or ""
        if self._state == SelectorState.ADDING_CUSTOM and not self._offers_add_custom():
            self._state = SelectorState.OPEN

    def select(self, item: CatalogItem) -> Selection | None:
        """Commit an existing item and close."""
        if self._state == SelectorState.CLOSED:
            return None
        if self._domain.is_sentinel(item):
            selection = Selection(name=None, group=item.group)
        else:
            selection = Selection(name=item.name, group=item.group, code=item.code or None)
        self._commit(selection)
        self._close()
        return selection

    def begin_add_custom(self) -> None:
        """OPEN -> ADDING_CUSTOM, only while the add-custom affordance is offered."""
        if self._state != SelectorState.OPEN or not self._offers_add_custom():
            return
        self._state = SelectorState.ADDING_CUSTOM
        self._custom_group = self._domain.custom_group

    def set_custom_group(self, group: str | Enum) -> None:
        """Choose the group for the pending custom entry.

        Raises ValidationError for groups that cannot hold custom entries.
        """
        if self._state != SelectorState.ADDING_CUSTOM:
            return
        self._custom_group = self._domain.require_group(group)

    async def confirm_add_custom(self) -> Selection | None:
        """Persist the query as a custom entry, refresh, commit and close.

        A blank query returns the picker to OPEN. A second confirm while
        one is in flight is ignored.
        """
        if self._state != SelectorState.ADDING_CUSTOM or self._saving:
            return None

        name = self._query.strip()
        if not name:
            self._state = SelectorState.OPEN
            return None

        group = self._custom_group
        session = self._session
        self._saving = True
        try:
            if self.persists:
                await self._store.save(self._user_id, name, group)  # type: ignore[union-attr]
                await self.refresh()
            else:
                logger.debug("No user; %r kept for this session only", name)
        finally:
            self._saving = False

        selection = Selection(name=name, group=group)
        self._commit(selection)
        if session == self._session:
            self._close()
        return selection

    def dismiss(self) -> None:
        """Close without committing anything."""
        if self._state == SelectorState.CLOSED:
            return
        self._close()

    # --- Internal helpers -----------------------------------------------------

    def _offers_add_custom(self) -> bool:
        return bool(self._query) and not has_exact_match(
            self._domain, self._catalog, self._query
        )

    def _commit(self, selection: Selection) -> None:
        self._value = selection.name
        self._group = selection.group
        if self._on_commit is not None:
            self._on_commit(selection)

    def _close(self) -> None:
        self._session += 1
        self._state = SelectorState.CLOSED
        self._query = ""
        self._custom_group = self._domain.custom_group
