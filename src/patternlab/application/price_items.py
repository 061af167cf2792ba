"""Application service: Price Items use case (query).

Runs every pricing visitor over a basket of catalog items. The items
themselves are never modified.
"""

from __future__ import annotations

from dataclasses import dataclass

from patternlab.application.dto import ItemChargesDTO
from patternlab.domain.model.catalog import (
    CatalogItem,
    DiscountVisitor,
    NetPriceVisitor,
    PriceVisitor,
    TaxVisitor,
)
from patternlab.domain.model.value_objects import Money


@dataclass(frozen=True)
class BasketTotals:
    price: Money
    discount: Money
    tax: Money
    net: Money


class PriceItemsHandler:

    def __init__(self) -> None:
        self._price = PriceVisitor()
        self._discount = DiscountVisitor()
        self._tax = TaxVisitor()
        self._net = NetPriceVisitor()

    def handle(self, items: list[CatalogItem]) -> list[ItemChargesDTO]:
        return [
            ItemChargesDTO(
                name=item.name,
                category=item.category,
                price=str(item.accept(self._price)),
                discount=str(item.accept(self._discount)),
                tax=str(item.accept(self._tax)),
                net=str(item.accept(self._net)),
            )
            for item in items
        ]

    def totals(self, items: list[CatalogItem], currency: str = "USD") -> BasketTotals:
        """Sum each visitor's results across the basket."""
        price = discount = tax = net = Money.zero(currency)
        for item in items:
            price = price + item.accept(self._price)
            discount = discount + item.accept(self._discount)
            tax = tax + item.accept(self._tax)
            net = net + item.accept(self._net)
        return BasketTotals(price=price, discount=discount, tax=tax, net=net)
