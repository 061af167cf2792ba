"""Inventory — the mutable subject that inventory actions operate on.

One Inventory tracks the stock on hand for a single product. Actions in
``patternlab.domain.commands`` hold a reference to it and mutate it in
place; nothing takes a private snapshot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from patternlab.domain.exceptions import InsufficientStockError, ValidationError
from patternlab.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Inventory:
    """Stock level for one product.

    Invariants:
    - ``current_stock`` is never negative
    - stock only moves in positive integer quantities
    """

    product_name: str
    price: Money
    current_stock: int = 0

    def __post_init__(self) -> None:
        if not self.product_name or not self.product_name.strip():
            raise ValidationError("Product name is required")
        if isinstance(self.current_stock, bool) or not isinstance(self.current_stock, int):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.current_stock).__name__}"
            )
        if self.current_stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.current_stock}")

    def add(self, quantity: int) -> None:
        """Receive ``quantity`` units into stock."""
        qty = Quantity(quantity).value
        self.current_stock += qty
        logger.info("Added %d of %s (stock now %d)", qty, self.product_name, self.current_stock)

    def remove(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock.

        Raises InsufficientStockError rather than letting stock go negative.
        """
        qty = Quantity(quantity).value
        if qty > self.current_stock:
            raise InsufficientStockError(
                f"Insufficient stock for {self.product_name} "
                f"(need {qty}, have {self.current_stock})"
            )
        self.current_stock -= qty
        logger.info("Removed %d of %s (stock now %d)", qty, self.product_name, self.current_stock)

    def describe(self) -> str:
        return f"Product: {self.product_name} - Stock: {self.current_stock}"
