"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TreeReportDTO:
    """Output: the rendered tree plus its aggregate size."""

    lines: list[str]
    total_size: int


@dataclass(frozen=True)
class DeletionReportDTO:
    """Output: deletion messages in the order they happened."""

    lines: list[str]
    remaining_nodes: int


@dataclass(frozen=True)
class ItemChargesDTO:
    """Output: every visitor's result for one catalog item."""

    name: str
    category: str
    price: str  # formatted, e.g. "100.00 USD"
    discount: str
    tax: str
    net: str


@dataclass(frozen=True)
class InventoryStep:
    """Input: one step of an inventory script.

    ``kind`` is ``"add"``, ``"remove"`` or ``"undo"``; ``quantity`` is
    ignored for undo.
    """

    kind: str
    quantity: int = 0


@dataclass(frozen=True)
class InventoryReportDTO:
    """Output: inventory state after a script has run."""

    product_name: str
    unit_price: str  # formatted, e.g. "5.00 USD"
    current_stock: int
    summary: str
    entries: list[str]
    undone: list[str]
