"""Application service: Adjust Inventory use case.

Turns a script of add / remove / undo steps into inventory actions and
runs them through a command log. Steps run in order; the first failing
step stops the script with the earlier steps still applied.
"""

from __future__ import annotations

from patternlab.application.dto import InventoryReportDTO, InventoryStep
from patternlab.domain.commands import AddInventory, InventoryAction, RemoveInventory
from patternlab.domain.exceptions import ValidationError
from patternlab.domain.model.inventory import Inventory
from patternlab.domain.service.command_log import CommandLog

_ACTIONS: dict[str, type[InventoryAction]] = {
    "add": AddInventory,
    "remove": RemoveInventory,
}


class AdjustInventoryHandler:

    def __init__(self, inventory: Inventory, log: CommandLog) -> None:
        self._inventory = inventory
        self._log = log

    def handle(self, steps: list[InventoryStep]) -> InventoryReportDTO:
        undone: list[str] = []

        for step in steps:
            if step.kind == "undo":
                action = self._log.undo_last()
                if action is not None:
                    undone.append(action.describe())
                continue

            action_type = _ACTIONS.get(step.kind)
            if action_type is None:
                raise ValidationError(f"Unknown inventory step: '{step.kind}'")
            self._log.record(action_type(self._inventory, step.quantity))

        return InventoryReportDTO(
            product_name=self._inventory.product_name,
            unit_price=str(self._inventory.price),
            current_stock=self._inventory.current_stock,
            summary=self._inventory.describe(),
            entries=self._log.audit_trail(),
            undone=undone,
        )
