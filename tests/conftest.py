"""Shared fixtures: small in-memory object graphs, rebuilt for every test."""

from __future__ import annotations

import pytest

from patternlab.domain.model.filesystem import File, Folder
from patternlab.domain.model.inventory import Inventory
from patternlab.domain.model.value_objects import Money
from patternlab.domain.service.command_log import CommandLog


@pytest.fixture
def home() -> Folder:
    """Home{Documents{readme.txt(5), data.csv(300)}, Pictures{photo.jpg(1500)}}"""
    documents = Folder("Documents", [File("readme.txt", 5), File("data.csv", 300)])
    pictures = Folder("Pictures", [File("photo.jpg", 1500)])
    return Folder("Home", [documents, pictures])


@pytest.fixture
def abc_inventory() -> Inventory:
    return Inventory(product_name="ABC", price=Money.of("5.00"), current_stock=12)


@pytest.fixture
def log() -> CommandLog:
    return CommandLog()
