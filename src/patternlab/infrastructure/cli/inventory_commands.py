"""CLI commands for logged inventory adjustments."""

from __future__ import annotations

import click

from patternlab.application.adjust_inventory import AdjustInventoryHandler
from patternlab.application.dto import InventoryStep
from patternlab.domain.exceptions import DomainException
from patternlab.infrastructure.bootstrap import command_log, inventory
from patternlab.infrastructure.settings import Settings


def _parse_steps(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[InventoryStep]:
    steps: list[InventoryStep] = []
    for token in value:
        if token.lower() == "undo":
            steps.append(InventoryStep("undo"))
            continue
        kind, sep, qty = token.partition(":")
        try:
            quantity = int(qty)
        except ValueError:
            quantity = None
        if not sep or kind.lower() not in ("add", "remove") or quantity is None:
            raise click.BadParameter(
                f"'{token}' is not a step; use add:N, remove:N or undo", param=param
            )
        steps.append(InventoryStep(kind.lower(), quantity))
    return steps


@click.command("run")
@click.option("--product", required=True, help="Product name.")
@click.option("--price", default="0", show_default=True, help="Unit price (e.g. 5.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Starting stock.")
@click.argument("steps", nargs=-1, callback=_parse_steps)
@click.pass_obj
def inventory_run(
    settings: Settings,
    product: str,
    price: str,
    stock: int,
    steps: list[InventoryStep],
) -> None:
    """Apply STEPS (add:N, remove:N, undo) in order and show the log."""
    try:
        subject = inventory(product, price, stock, settings.currency)
        handler = AdjustInventoryHandler(subject, command_log())
        report = handler.handle(steps)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for undone in report.undone:
        click.echo(f"Undone: {undone}")
    click.echo("---- Log ----")
    if not report.entries:
        click.echo("(empty)")
    for entry in report.entries:
        click.echo(entry)
    click.echo(report.summary)
    click.echo(f"Unit price: {report.unit_price}")
