"""Integration tests for the PriceItems use case."""

from patternlab.application.price_items import PriceItemsHandler
from patternlab.domain.model.catalog import Book, Clothes, Electronics, Stationary
from patternlab.domain.model.value_objects import Money


def _basket():
    return [
        Book("Science", 100),
        Clothes("T-Shirt", 500),
        Electronics("Headphones", 200),
        Stationary("Notebook", 40),
    ]


class TestPriceItems:

    def test_one_line_per_item_in_order(self):
        lines = PriceItemsHandler().handle(_basket())
        assert [line.name for line in lines] == ["Science", "T-Shirt", "Headphones", "Notebook"]
        assert [line.category for line in lines] == ["Book", "Clothes", "Electronics", "Stationary"]

    def test_formatted_amounts(self):
        line = PriceItemsHandler().handle([Electronics("Headphones", 200)])[0]
        assert line.price == "200.00 USD"
        assert line.discount == "24.00 USD"
        assert line.tax == "36.00 USD"
        assert line.net == "212.00 USD"

    def test_empty_basket(self):
        handler = PriceItemsHandler()
        assert handler.handle([]) == []
        assert handler.totals([]).net == Money.zero()

    def test_totals(self):
        totals = PriceItemsHandler().totals(_basket())
        assert totals.price == Money.of("840")
        # 2 + 40 + 24 + 4.40
        assert totals.discount == Money.of("70.40")
        # 5 + 60 + 36 + 3.60
        assert totals.tax == Money.of("104.60")
        assert totals.net == Money.of("874.20")
