"""CLI commands for the remote store."""

from __future__ import annotations

import click
from sqlalchemy.exc import SQLAlchemyError

from workforce_intake.infrastructure.bootstrap import init_database
from workforce_intake.infrastructure.config import load_settings


@click.command("init")
def db_init() -> None:
    """Create the custom-entry tables if they do not exist."""
    settings = load_settings()
    try:
        init_database(settings)
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Could not initialise database: {exc}")

    click.echo(f"Tables ready at {settings.database_url.split('@')[-1]}")
