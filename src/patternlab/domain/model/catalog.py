"""Catalog items and the operations applied to them — the Visitor pattern.

The set of item variants is closed (Book, Clothes, Electronics,
Stationary); the set of operations is open. A new operation is one new
``ItemVisitor`` subclass and needs no change to any item class. The price
of that freedom: a new variant means one new ``visit_*`` method on
``ItemVisitor`` and on every existing visitor.

Both halves of that trade-off are checked early:

* a ``CatalogItem`` subclass must name a ``visit_*`` method that
  ``ItemVisitor`` declares and no other variant has claimed, otherwise the
  class statement itself raises ``TypeError``;
* a visitor that forgets one of the ``visit_*`` methods is abstract and
  cannot be instantiated.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, ClassVar, Generic, Mapping, TypeVar

from patternlab.domain.exceptions import ValidationError
from patternlab.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

T = TypeVar("T")

Echo = Callable[[str], None]


class ItemVisitor(ABC, Generic[T]):
    """One entry point per concrete catalog item."""

    @abstractmethod
    def visit_book(self, item: Book) -> T: ...

    @abstractmethod
    def visit_clothes(self, item: Clothes) -> T: ...

    @abstractmethod
    def visit_electronics(self, item: Electronics) -> T: ...

    @abstractmethod
    def visit_stationary(self, item: Stationary) -> T: ...


class CatalogItem(ABC):
    """Base class for every sellable item.

    Subclasses declare ``visit_method``; ``accept`` dispatches to exactly
    that method on the visitor and returns its result. Pass
    ``abstract=True`` in the class statement for intermediate bases that
    are not variants themselves.
    """

    visit_method: ClassVar[str]
    category: ClassVar[str]

    _variants: ClassVar[dict[str, type[CatalogItem]]] = {}

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if abstract:
            return
        method = cls.__dict__.get("visit_method")
        if method not in ItemVisitor.__abstractmethods__:
            raise TypeError(
                f"{cls.__name__} must set visit_method to one of "
                f"{sorted(ItemVisitor.__abstractmethods__)}, got {method!r}"
            )
        owner = CatalogItem._variants.get(method)
        if owner is not None:
            raise TypeError(
                f"{cls.__name__} cannot reuse {method!r}, already dispatched for {owner.__name__}"
            )
        CatalogItem._variants[method] = cls
        cls.category = cls.__dict__.get("category", cls.__name__)

    def __init__(self, name: str, price: Money | Decimal | str | int | float) -> None:
        if type(self) not in CatalogItem._variants.values():
            raise TypeError(
                f"{type(self).__name__} is not a catalog variant and cannot be instantiated"
            )
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Item name is required")
        self.name = name
        self.price = price if isinstance(price, Money) else Money.of(price)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} {self.price}>"

    def accept(self, visitor: ItemVisitor[T]) -> T:
        return getattr(visitor, self.visit_method)(self)

    @staticmethod
    def variants() -> Mapping[str, type[CatalogItem]]:
        """Registered variants keyed by the visitor method they dispatch to."""
        return dict(CatalogItem._variants)


class Book(CatalogItem):
    visit_method = "visit_book"


class Clothes(CatalogItem):
    visit_method = "visit_clothes"


class Electronics(CatalogItem):
    visit_method = "visit_electronics"


class Stationary(CatalogItem):
    visit_method = "visit_stationary"


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


class ReportingVisitor(ItemVisitor[Money]):
    """Base for visitors that compute one amount per item and report it."""

    label: ClassVar[str]

    def __init__(self, echo: Echo | None = None) -> None:
        self._echo = echo

    def _report(self, item: CatalogItem, amount: Money) -> Money:
        logger.info("%s %s for %s: %s", type(item).__name__, self.label, item.name, amount)
        if self._echo is not None:
            self._echo(f"{item.name}: {self.label} {amount}")
        return amount


class PriceVisitor(ReportingVisitor):
    """Reports the item's list price."""

    label = "price"

    def visit_book(self, item: Book) -> Money:
        return self._report(item, item.price)

    def visit_clothes(self, item: Clothes) -> Money:
        return self._report(item, item.price)

    def visit_electronics(self, item: Electronics) -> Money:
        return self._report(item, item.price)

    def visit_stationary(self, item: Stationary) -> Money:
        return self._report(item, item.price)


class RateVisitor(ReportingVisitor):
    """Applies a fixed per-variant rate to the item's price."""

    book_rate: ClassVar[Decimal]
    clothes_rate: ClassVar[Decimal]
    electronics_rate: ClassVar[Decimal]
    stationary_rate: ClassVar[Decimal]

    def visit_book(self, item: Book) -> Money:
        return self._report(item, item.price.scale(self.book_rate))

    def visit_clothes(self, item: Clothes) -> Money:
        return self._report(item, item.price.scale(self.clothes_rate))

    def visit_electronics(self, item: Electronics) -> Money:
        return self._report(item, item.price.scale(self.electronics_rate))

    def visit_stationary(self, item: Stationary) -> Money:
        return self._report(item, item.price.scale(self.stationary_rate))


class DiscountVisitor(RateVisitor):
    label = "discount"

    book_rate = Decimal("0.02")
    clothes_rate = Decimal("0.08")
    electronics_rate = Decimal("0.12")
    stationary_rate = Decimal("0.11")


class TaxVisitor(RateVisitor):
    label = "tax"

    book_rate = Decimal("0.05")
    clothes_rate = Decimal("0.12")
    electronics_rate = Decimal("0.18")
    stationary_rate = Decimal("0.09")


class NetPriceVisitor(ReportingVisitor):
    """Price after discount, with tax added back on.

    Built purely out of the other visitors: no item class knows it exists.
    """

    label = "net"

    def __init__(self, echo: Echo | None = None) -> None:
        super().__init__(echo)
        self._discount = DiscountVisitor()
        self._tax = TaxVisitor()

    def visit_book(self, item: Book) -> Money:
        return self._net(item)

    def visit_clothes(self, item: Clothes) -> Money:
        return self._net(item)

    def visit_electronics(self, item: Electronics) -> Money:
        return self._net(item)

    def visit_stationary(self, item: Stationary) -> Money:
        return self._net(item)

    def _net(self, item: CatalogItem) -> Money:
        net = item.price - item.accept(self._discount) + item.accept(self._tax)
        return self._report(item, net)
