import click

from workforce_intake.domain.taxonomy.companies import COMPANY_DOMAIN
from workforce_intake.domain.taxonomy.locations import LOCATION_DOMAIN
from workforce_intake.infrastructure.bootstrap import configure_logging
from workforce_intake.infrastructure.cli.catalog_commands import build_catalog_group
from workforce_intake.infrastructure.cli.db_commands import db_init
from workforce_intake.infrastructure.config import load_settings


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """Intake: workforce-planning catalog pickers"""
    configure_logging("DEBUG" if verbose else load_settings().log_level)


@cli.group()
def db() -> None:
    """Manage the remote store."""


# Register subcommands
cli.add_command(build_catalog_group(COMPANY_DOMAIN, "company"))
cli.add_command(build_catalog_group(LOCATION_DOMAIN, "location"))
db.add_command(db_init)
