"""Inventory actions — the Command pattern.

Each action pairs a shared ``Inventory`` with a quantity and knows how to
apply itself and how to take itself back. Actions carry no state of their
own beyond that pairing, so ``revert`` always works against whatever the
inventory holds *now*.

Applying the same action twice applies it twice; the log in
``patternlab.domain.service.command_log`` is what keeps track of what has
been done.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from patternlab.domain.model.inventory import Inventory
from patternlab.domain.model.value_objects import Quantity


@dataclass(frozen=True, eq=False)
class InventoryAction(ABC):
    """Base class for all reversible inventory actions."""

    inventory: Inventory
    quantity: int

    def __post_init__(self) -> None:
        Quantity(self.quantity)

    @abstractmethod
    def apply(self) -> None:
        """Perform the forward mutation on the bound inventory."""

    @abstractmethod
    def revert(self) -> None:
        """Perform the exact inverse of ``apply``."""

    @abstractmethod
    def describe(self) -> str:
        """One-line summary for the audit trail."""


@dataclass(frozen=True, eq=False)
class AddInventory(InventoryAction):

    def apply(self) -> None:
        self.inventory.add(self.quantity)

    def revert(self) -> None:
        self.inventory.remove(self.quantity)

    def describe(self) -> str:
        return f"Add {self.quantity} x {self.inventory.product_name}"


@dataclass(frozen=True, eq=False)
class RemoveInventory(InventoryAction):

    def apply(self) -> None:
        self.inventory.remove(self.quantity)

    def revert(self) -> None:
        self.inventory.add(self.quantity)

    def describe(self) -> str:
        return f"Remove {self.quantity} x {self.inventory.product_name}"
