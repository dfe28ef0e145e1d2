"""CLI commands for the catalog pickers.

The same command set is built once per catalog domain, so ``company`` and
``location`` behave identically apart from their taxonomy.
"""

from __future__ import annotations

import asyncio

import click

from workforce_intake.application.dto import CatalogView, Selection
from workforce_intake.domain.exceptions import DomainException
from workforce_intake.domain.model.catalog_domain import CatalogDomain
from workforce_intake.infrastructure.bootstrap import selector_controller


def _display_view(view: CatalogView) -> None:
    """Shared formatting for a grouped catalog view."""
    if view.is_empty:
        click.echo(f"No matches for '{view.query}'.")
        return

    for group in view.groups:
        click.echo(f"{group.group.value}")
        for item in group.items:
            code = f" ({item.code})" if item.code else ""
            click.echo(f"  {item.name}{code}")

    click.echo()
    click.echo(f"{view.total_items} item(s), exact match: {'yes' if view.has_exact_match else 'no'}")
    if view.offer_add_custom:
        click.echo(f"Not listed: add '{view.query}' as a custom entry with the 'add' command.")


def _display_selection(selection: Selection) -> None:
    name = selection.name if selection.name is not None else "(none, applies globally)"
    code = f" ({selection.code})" if selection.code else ""
    click.echo(f"Selected {name}{code} in {selection.group.value}")


def build_catalog_group(domain: CatalogDomain, name: str) -> click.Group:
    """Build the ``groups``/``search``/``add``/``lookup`` commands for *domain*."""

    @click.group(name, help=f"Browse and extend the {domain.label} catalog.")
    def group() -> None:
        pass

    @group.command("groups")
    def catalog_groups() -> None:
        """List groups and how many canonical items each holds."""
        grouped = domain.taxonomy.grouped()
        click.echo(f"{'Group':<32} {'Items':>6}")
        click.echo("-" * 39)
        for catalog_group, items in grouped.items():
            click.echo(f"{catalog_group.value:<32} {len(items):>6}")

    @group.command("search")
    @click.option("--user", "user_id", default=None, help="User whose custom entries to include.")
    @click.option("--query", default="", help="Case-insensitive name fragment.")
    def catalog_search(user_id: str | None, query: str) -> None:
        """Show the grouped catalog filtered by QUERY."""
        controller = selector_controller(domain, user_id=user_id)
        asyncio.run(controller.refresh())
        controller.activate()
        controller.set_query(query)
        _display_view(controller.view)

    @group.command("add")
    @click.option("--user", "user_id", default=None, help="Owner of the custom entry.")
    @click.option("--name", "entry_name", required=True, help="Name to register.")
    @click.option(
        "--group",
        "group_value",
        type=click.Choice([g.value for g in domain.assignable_groups()]),
        default=domain.custom_group.value,
        show_default=True,
        help="Group to file the entry under.",
    )
    def catalog_add(user_id: str | None, entry_name: str, group_value: str) -> None:
        """Register NAME as a custom entry (or pick it if it already exists)."""
        controller = selector_controller(domain, user_id=user_id)
        asyncio.run(controller.refresh())
        controller.activate()
        controller.set_query(entry_name)

        view = controller.view
        if not view.offer_add_custom:
            existing = controller.catalog.find(entry_name.strip())
            option = domain.global_option
            if existing is None and option is not None and option.key == entry_name.strip().casefold():
                existing = option
            if existing is None:
                raise click.ClickException(f"Nothing to add for '{entry_name}'")
            _display_selection(controller.select(existing))
            return

        try:
            controller.begin_add_custom()
            controller.set_custom_group(group_value)
            selection = asyncio.run(controller.confirm_add_custom())
        except DomainException as exc:
            raise click.ClickException(str(exc))

        if selection is None:
            raise click.ClickException("A name is required")
        if not controller.persists:
            click.echo("No user given; entry not saved.")
        _display_selection(selection)

    @group.command("lookup")
    @click.argument("term")
    def catalog_lookup(term: str) -> None:
        """Look TERM up by name (or code) and show its group."""
        item = domain.taxonomy.get_by_name(term) or domain.taxonomy.get_by_code(term)
        if item is None:
            click.echo(f"'{term}' is not in the {domain.label} taxonomy; it would be filed under "
                       f"{domain.infer_group(term).value}.")
            return
        code = f" ({item.code})" if item.code else ""
        click.echo(f"{item.name}{code}: {item.group.value}")

    return group
