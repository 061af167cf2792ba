from dataclasses import replace

import click

from patternlab.infrastructure.cli.inventory_commands import inventory_run
from patternlab.infrastructure.cli.item_commands import items_charges
from patternlab.infrastructure.cli.tree_commands import tree_delete, tree_show
from patternlab.infrastructure.log_config import configure_logging
from patternlab.infrastructure.settings import Settings


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override PATTERNLAB_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """patternlab — Composite, Visitor and Command in action"""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc))
    if log_level is not None:
        settings = replace(settings, log_level=log_level)
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def tree() -> None:
    """Work with the sample file-system tree."""


@cli.group()
def items() -> None:
    """Price the sample catalog."""


@cli.group()
def inventory() -> None:
    """Run logged inventory adjustments."""


# Register subcommands
tree.add_command(tree_show)
tree.add_command(tree_delete)
items.add_command(items_charges)
inventory.add_command(inventory_run)
