"""CLI commands for the sample catalog."""

from __future__ import annotations

import click

from patternlab.application.price_items import PriceItemsHandler
from patternlab.infrastructure.bootstrap import sample_catalog
from patternlab.infrastructure.settings import Settings


@click.command("charges")
@click.pass_obj
def items_charges(settings: Settings) -> None:
    """Show price, discount, tax and net price for every item."""
    basket = sample_catalog(settings.currency)
    handler = PriceItemsHandler()
    lines = handler.handle(basket)
    totals = handler.totals(basket, settings.currency)

    header = (
        f"{'Item':<14} {'Category':<12} {'Price':>14} {'Discount':>14} "
        f"{'Tax':>14} {'Net':>14}"
    )
    click.echo(header)
    click.echo("-" * len(header))
    for line in lines:
        click.echo(
            f"{line.name:<14} {line.category:<12} {line.price:>14} {line.discount:>14} "
            f"{line.tax:>14} {line.net:>14}"
        )
    click.echo("-" * len(header))
    click.echo(
        f"{'Total':<14} {'':<12} {str(totals.price):>14} {str(totals.discount):>14} "
        f"{str(totals.tax):>14} {str(totals.net):>14}"
    )
