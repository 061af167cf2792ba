"""CLI commands for the sample file-system tree."""

from __future__ import annotations

import click

from patternlab.application.show_tree import DeleteTreeHandler, ShowTreeHandler
from patternlab.infrastructure.bootstrap import sample_tree
from patternlab.infrastructure.settings import Settings


@click.command("show")
@click.option("--shortcut", is_flag=True, help="Add a shortcut to readme.txt under Home.")
@click.pass_obj
def tree_show(settings: Settings, shortcut: bool) -> None:
    """Print the tree structure and its total size."""
    handler = ShowTreeHandler(sample_tree(with_shortcut=shortcut), indent_unit=settings.indent_unit)
    report = handler.handle()

    click.echo("---- File Structure ----")
    for line in report.lines:
        click.echo(line)
    click.echo(f"\nTotal Size: {report.total_size} KB")


@click.command("delete")
def tree_delete() -> None:
    """Delete the whole tree, children before parents."""
    report = DeleteTreeHandler(sample_tree()).handle()

    click.echo("---- Deleting All ----")
    for line in report.lines:
        click.echo(line)
    click.echo(f"\nRemaining nodes: {report.remaining_nodes}")
