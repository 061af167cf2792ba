"""Unit tests for inventory actions."""

import pytest

from patternlab.domain.commands import AddInventory, RemoveInventory
from patternlab.domain.exceptions import InsufficientStockError, ValidationError


class TestAddInventory:

    def test_apply_then_revert_restores_stock(self, abc_inventory):
        action = AddInventory(abc_inventory, 100)
        action.apply()
        assert abc_inventory.current_stock == 112
        action.revert()
        assert abc_inventory.current_stock == 12

    def test_applying_twice_doubles_the_effect(self, abc_inventory):
        action = AddInventory(abc_inventory, 10)
        action.apply()
        action.apply()
        assert abc_inventory.current_stock == 32

    def test_describe(self, abc_inventory):
        assert AddInventory(abc_inventory, 100).describe() == "Add 100 x ABC"


class TestRemoveInventory:

    def test_apply_then_revert_restores_stock(self, abc_inventory):
        action = RemoveInventory(abc_inventory, 5)
        action.apply()
        assert abc_inventory.current_stock == 7
        action.revert()
        assert abc_inventory.current_stock == 12

    def test_over_removal_rejected(self, abc_inventory):
        with pytest.raises(InsufficientStockError):
            RemoveInventory(abc_inventory, 20).apply()
        assert abc_inventory.current_stock == 12


class TestActionSemantics:

    def test_actions_share_the_live_inventory(self, abc_inventory):
        add = AddInventory(abc_inventory, 100)
        add.apply()
        # Changed behind the action's back.
        abc_inventory.remove(5)
        add.revert()
        assert abc_inventory.current_stock == 12 + 100 - 5 - 100

    def test_revert_uses_same_guard_as_apply(self, abc_inventory):
        add = AddInventory(abc_inventory, 10)
        add.apply()
        abc_inventory.remove(20)
        with pytest.raises(InsufficientStockError):
            add.revert()
        assert abc_inventory.current_stock == 2

    def test_action_is_immutable(self, abc_inventory):
        action = AddInventory(abc_inventory, 1)
        with pytest.raises(AttributeError):
            action.quantity = 2

    @pytest.mark.parametrize("qty", [0, -3])
    def test_non_positive_quantity_rejected_at_construction(self, abc_inventory, qty):
        with pytest.raises(ValidationError, match="must be positive"):
            RemoveInventory(abc_inventory, qty)
