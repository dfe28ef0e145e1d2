"""Tests for the SelectorController state machine."""

import asyncio
import threading

import pytest

from workforce_intake.application.custom_entry_store import CustomEntryStore
from workforce_intake.application.dto import Selection
from workforce_intake.application.selector_controller import (
    SelectorController,
    SelectorState,
)
from workforce_intake.domain.exceptions import ValidationError
from workforce_intake.domain.model.custom_entry import CustomEntry
from workforce_intake.domain.taxonomy.companies import COMPANY_DOMAIN, BusinessPillar
from workforce_intake.domain.taxonomy.locations import (
    GLOBAL_MULTI_REGION_OPTION,
    LOCATION_DOMAIN,
    Region,
)
from tests.fakes import (
    LETTER_DOMAIN,
    FakeCustomEntryCache,
    FakeCustomEntryRepository,
    Letter,
)


def _make_controller(domain=LETTER_DOMAIN, user_id="u1", **kwargs):
    repo = FakeCustomEntryRepository()
    store = CustomEntryStore(repo, FakeCustomEntryCache())
    committed = []
    controller = SelectorController(
        domain,
        store=store,
        on_commit=committed.append,
        user_id=user_id,
        **kwargs,
    )
    return controller, repo, committed


class TestTransitions:

    def test_starts_closed_without_view(self):
        controller, _, _ = _make_controller()
        assert controller.state == SelectorState.CLOSED
        assert controller.view is None

    def test_activate_opens_with_full_catalog(self):
        controller, _, _ = _make_controller()
        controller.activate()

        view = controller.view
        assert controller.state == SelectorState.OPEN
        assert view.query == ""
        assert view.total_items == 2
        assert not view.offer_add_custom

    def test_query_ignored_while_closed(self):
        controller, _, _ = _make_controller()
        controller.set_query("ac")
        assert controller.query == ""

    def test_dismiss_closes_without_commit(self):
        controller, _, committed = _make_controller()
        controller.activate()
        controller.set_query("ac")
        controller.dismiss()

        assert controller.state == SelectorState.CLOSED
        assert controller.query == ""
        assert committed == []

    def test_begin_add_custom_requires_offer(self):
        controller, _, _ = _make_controller()
        controller.activate()
        controller.set_query("acme")
        controller.begin_add_custom()
        assert controller.state == SelectorState.OPEN

    def test_query_edit_to_exact_match_leaves_adding_mode(self):
        controller, _, _ = _make_controller()
        controller.activate()
        controller.set_query("Acm")
        controller.begin_add_custom()
        assert controller.state == SelectorState.ADDING_CUSTOM

        controller.set_query("Acme")
        assert controller.state == SelectorState.OPEN

    def test_padded_canonical_name_is_not_offered_as_custom(self):
        controller, _, _ = _make_controller()
        controller.activate()
        controller.set_query("Acme ")

        assert controller.view.has_exact_match
        assert not controller.view.offer_add_custom
        controller.begin_add_custom()
        assert controller.state == SelectorState.OPEN


class TestSelect:

    def test_select_commits_and_closes(self):
        controller, _, committed = _make_controller()
        controller.activate()
        item = controller.catalog.find("Bolt")

        selection = controller.select(item)

        assert selection == Selection(name="Bolt", group=Letter.B)
        assert committed == [selection]
        assert controller.state == SelectorState.CLOSED
        assert controller.value == "Bolt"

    def test_select_location_carries_code(self):
        controller, _, committed = _make_controller(LOCATION_DOMAIN)
        controller.activate()
        controller.select(controller.catalog.find("Malaysia"))
        assert committed == [Selection(name="Malaysia", group=Region.ASIA_PACIFIC, code="MY")]

    def test_global_option_commits_no_name(self):
        controller, _, committed = _make_controller(LOCATION_DOMAIN)
        controller.activate()

        controller.select(GLOBAL_MULTI_REGION_OPTION)

        assert committed == [Selection(name=None, group=Region.GLOBAL)]
        assert controller.value is None
        assert controller.display_value == "Global / Multi-region"


class TestAddCustom:

    def test_offer_for_unknown_query(self):
        controller, _, _ = _make_controller()
        controller.activate()
        controller.set_query("ac")

        view = controller.view
        assert view.groups[0].names == ["Acme"]
        assert not view.has_exact_match
        assert view.offer_add_custom

    def test_confirm_saves_refreshes_and_commits(self):
        controller, repo, committed = _make_controller()
        controller.activate()
        controller.set_query("  Acme2 ")
        controller.begin_add_custom()
        controller.set_custom_group(Letter.A)

        selection = asyncio.run(controller.confirm_add_custom())

        assert selection == Selection(name="Acme2", group=Letter.A)
        assert committed == [selection]
        assert controller.state == SelectorState.CLOSED
        assert controller.catalog.get_group(Letter.A).names == ["Acme", "Acme2"]
        assert repo.calls == ["insert", "list"]

    def test_new_entry_joins_loaded_custom_entries(self):
        controller, repo, _ = _make_controller()
        repo.seed(CustomEntry.create("u1", "Zed", Letter.A))
        asyncio.run(controller.refresh())

        controller.activate()
        controller.set_query("zed2")
        controller.begin_add_custom()
        asyncio.run(controller.confirm_add_custom())

        assert controller.catalog.get_group(Letter.CUSTOM).names == ["zed2"]
        assert controller.catalog.find("Zed").group == Letter.A

    def test_blank_query_returns_to_open(self):
        controller, repo, committed = _make_controller()
        controller.activate()
        controller.set_query("   ")
        controller.begin_add_custom()
        assert controller.state == SelectorState.ADDING_CUSTOM

        assert asyncio.run(controller.confirm_add_custom()) is None
        assert controller.state == SelectorState.OPEN
        assert committed == []
        assert repo.calls == []

    def test_without_user_commits_for_session_only(self):
        controller, repo, committed = _make_controller(user_id=None)
        controller.activate()
        controller.set_query("Temp Co")
        controller.begin_add_custom()

        selection = asyncio.run(controller.confirm_add_custom())

        assert selection.name == "Temp Co"
        assert committed == [selection]
        assert repo.calls == []
        assert controller.catalog.find("Temp Co") is None

    def test_sentinel_group_rejected(self):
        controller, _, _ = _make_controller(LOCATION_DOMAIN)
        controller.activate()
        controller.set_query("Atlantis")
        controller.begin_add_custom()

        with pytest.raises(ValidationError):
            controller.set_custom_group(Region.GLOBAL)
        assert controller.custom_group == Region.CUSTOM

    def test_group_resets_when_picker_closes(self):
        controller, _, _ = _make_controller()
        controller.activate()
        controller.set_query("New")
        controller.begin_add_custom()
        controller.set_custom_group("B")
        controller.dismiss()
        assert controller.custom_group == Letter.CUSTOM


class TestConcurrentSave:

    def _start_save(self, controller, name):
        controller.activate()
        controller.set_query(name)
        controller.begin_add_custom()
        return asyncio.create_task(controller.confirm_add_custom())

    def test_second_confirm_ignored_while_saving(self):
        controller, repo, committed = _make_controller()
        repo.gate = threading.Event()

        async def scenario():
            task = self._start_save(controller, "Slow Co")
            await asyncio.sleep(0)
            assert controller.is_saving
            assert await controller.confirm_add_custom() is None
            repo.gate.set()
            return await task

        selection = asyncio.run(scenario())

        assert selection.name == "Slow Co"
        assert len(committed) == 1
        assert repo.calls.count("insert") == 1

    def test_late_save_does_not_close_reopened_picker(self):
        controller, repo, committed = _make_controller()
        repo.gate = threading.Event()

        async def scenario():
            task = self._start_save(controller, "Slow Co")
            await asyncio.sleep(0)
            controller.dismiss()
            controller.activate()
            controller.set_query("bo")
            repo.gate.set()
            return await task

        selection = asyncio.run(scenario())

        assert committed == [selection]
        assert controller.state == SelectorState.OPEN
        assert controller.query == "bo"
        assert controller.catalog.find("Slow Co") is not None


class TestDisplayValue:

    def test_placeholder_when_empty(self):
        controller, _, _ = _make_controller(COMPANY_DOMAIN)
        assert controller.display_value == "Select Company..."

    def test_initial_value_infers_group(self):
        controller, _, _ = _make_controller(
            COMPANY_DOMAIN, value="JLG Development Sdn Bhd"
        )
        assert controller.group == BusinessPillar.PROPERTY_DEVELOPMENT
        assert controller.display_value == "JLG Development Sdn Bhd"

    def test_unknown_initial_value_lands_in_custom(self):
        controller, _, _ = _make_controller(LOCATION_DOMAIN, value="Atlantis")
        assert controller.group == Region.CUSTOM

    def test_global_group_without_value_shows_global_label(self):
        controller, _, _ = _make_controller(LOCATION_DOMAIN, group=Region.GLOBAL)
        assert controller.display_value == "Global / Multi-region"


class TestBlankUser:

    def test_whitespace_user_runs_taxonomy_only(self):
        controller, repo, committed = _make_controller(user_id="   ")
        assert not controller.persists

        controller.activate()
        controller.set_query("Zed")
        controller.begin_add_custom()
        selection = asyncio.run(controller.confirm_add_custom())

        assert selection == Selection(name="Zed", group=Letter.CUSTOM)
        assert committed == [selection]
        assert repo.calls == []
