"""Unit tests for the Inventory subject."""

import pytest

from patternlab.domain.exceptions import InsufficientStockError, ValidationError
from patternlab.domain.model.inventory import Inventory
from patternlab.domain.model.value_objects import Money


class TestInventoryAdd:

    def test_add_increases_stock(self, abc_inventory):
        abc_inventory.add(100)
        assert abc_inventory.current_stock == 112

    def test_add_zero_rejected(self, abc_inventory):
        with pytest.raises(ValidationError, match="must be positive"):
            abc_inventory.add(0)

    def test_add_non_integer_rejected(self, abc_inventory):
        with pytest.raises(ValidationError, match="must be an integer"):
            abc_inventory.add(1.5)


class TestInventoryRemove:

    def test_remove_decreases_stock(self, abc_inventory):
        abc_inventory.remove(2)
        assert abc_inventory.current_stock == 10

    def test_remove_all_stock(self, abc_inventory):
        abc_inventory.remove(12)
        assert abc_inventory.current_stock == 0

    def test_remove_more_than_stock_rejected(self, abc_inventory):
        with pytest.raises(InsufficientStockError, match="need 13, have 12"):
            abc_inventory.remove(13)
        assert abc_inventory.current_stock == 12

    def test_insufficient_stock_is_a_validation_error(self, abc_inventory):
        with pytest.raises(ValidationError):
            abc_inventory.remove(100)


class TestInventoryConstruction:

    def test_starts_empty_by_default(self):
        inv = Inventory(product_name="Bhujiya", price=Money.of("5"))
        assert inv.current_stock == 0

    def test_negative_opening_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Inventory(product_name="X", price=Money.of("1"), current_stock=-1)

    def test_blank_product_name_rejected(self):
        with pytest.raises(ValidationError, match="Product name is required"):
            Inventory(product_name=" ", price=Money.of("1"))

    def test_describe(self, abc_inventory):
        assert abc_inventory.describe() == "Product: ABC - Stock: 12"
