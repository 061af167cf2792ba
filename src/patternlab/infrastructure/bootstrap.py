"""Composition root — builds the sample object graphs the CLI works on.

The CLI never constructs domain objects itself; it asks this module.
"""

from __future__ import annotations

from patternlab.domain.model.catalog import Book, CatalogItem, Clothes, Electronics, Stationary
from patternlab.domain.model.filesystem import File, Folder, Shortcut
from patternlab.domain.model.inventory import Inventory
from patternlab.domain.model.value_objects import Money
from patternlab.domain.service.command_log import CommandLog


def sample_tree(with_shortcut: bool = False) -> Folder:
    """Home{Documents{readme.txt, data.csv}, Pictures{photo.jpg}}."""
    readme = File("readme.txt", 5)
    documents = Folder("Documents", [readme, File("data.csv", 300)])
    pictures = Folder("Pictures", [File("photo.jpg", 1500)])
    home = Folder("Home", [documents, pictures])
    if with_shortcut:
        home.add(Shortcut("readme-link", readme))
    return home


def sample_catalog(currency: str = "USD") -> list[CatalogItem]:
    return [
        Book("Science", Money.of(100, currency)),
        Clothes("T-Shirt", Money.of(500, currency)),
        Electronics("Headphones", Money.of(200, currency)),
        Stationary("Notebook", Money.of(40, currency)),
    ]


def inventory(product_name: str, price: str, stock: int, currency: str = "USD") -> Inventory:
    return Inventory(product_name=product_name, price=Money.of(price, currency), current_stock=stock)


def command_log() -> CommandLog:
    return CommandLog()
