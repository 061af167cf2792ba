"""File-system tree — the Composite pattern.

Files and folders share one interface, ``FileSystemItem``, so a folder can
hold any mix of files, folders (to any depth) and other node kinds and
treat them uniformly. Every recursive operation is a plain delegation to
the children; nothing here asks a child what concrete type it is.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterator

from patternlab.domain.exceptions import DomainException, NodeDeletedError, ValidationError

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]

INDENT_UNIT = "  "


class FileSystemItem(ABC):
    """Common interface for every node in the tree.

    A node belongs to at most one folder. Once ``delete()`` has run the
    node is detached and terminal: any further operation raises
    ``NodeDeletedError``.
    """

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Item name is required")
        self.name = name
        self.parent: Folder | None = None
        self._deleted = False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

    @property
    def is_deleted(self) -> bool:
        return self._deleted

    @property
    def children(self) -> tuple[FileSystemItem, ...]:
        """Direct children in insertion order; leaves have none."""
        return ()

    # --- Operations every node kind implements --------------------------------

    @abstractmethod
    def size(self) -> int:
        """Total size in KB, recomputed on every call."""

    @abstractmethod
    def structure(self, indent: str = "", indent_unit: str = INDENT_UNIT) -> Iterator[str]:
        """Yield the display lines of this subtree in pre-order."""

    @abstractmethod
    def delete(self, echo: Echo = print) -> None:
        """Delete this node (and, for containers, everything below it)."""

    # --- Shared behaviour -----------------------------------------------------

    def print_structure(
        self,
        indent: str = "",
        echo: Echo = print,
        indent_unit: str = INDENT_UNIT,
    ) -> None:
        for line in self.structure(indent, indent_unit):
            echo(line)

    def walk(self) -> Iterator[FileSystemItem]:
        """Iterate over the extant nodes of this subtree in pre-order."""
        if self._deleted:
            return
        yield self
        for child in self.children:
            yield from child.walk()

    def ancestors(self) -> Iterator[Folder]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    # --- Internal helpers -----------------------------------------------------

    def _ensure_alive(self) -> None:
        if self._deleted:
            raise NodeDeletedError(f"'{self.name}' has already been deleted")

    def _mark_deleted(self) -> None:
        if self.parent is not None:
            self.parent._detach(self)
        self._deleted = True


class File(FileSystemItem):
    """Leaf node with a fixed size."""

    def __init__(self, name: str, size: int) -> None:
        super().__init__(name)
        if isinstance(size, bool) or not isinstance(size, int):
            raise ValidationError(f"File size must be an integer, got {type(size).__name__}")
        if size < 0:
            raise ValidationError(f"File size cannot be negative, got {size}")
        self._size = size

    def size(self) -> int:
        self._ensure_alive()
        return self._size

    def structure(self, indent: str = "", indent_unit: str = INDENT_UNIT) -> Iterator[str]:
        self._ensure_alive()
        yield f"{indent}- {self.name} ({self._size} KB)"

    def delete(self, echo: Echo = print) -> None:
        self._ensure_alive()
        self._mark_deleted()
        logger.debug("Deleted file %s", self.name)
        echo(f"Deleting file: {self.name}")


class Folder(FileSystemItem):
    """Container node holding an ordered list of child items."""

    def __init__(self, name: str, children: tuple[FileSystemItem, ...] | list[FileSystemItem] = ()) -> None:
        super().__init__(name)
        self._children: list[FileSystemItem] = []
        try:
            for child in children:
                self.add(child)
        except DomainException:
            for child in tuple(self._children):
                self._detach(child)
            raise

    @property
    def children(self) -> tuple[FileSystemItem, ...]:
        return tuple(self._children)

    def add(self, item: FileSystemItem) -> FileSystemItem:
        """Attach ``item`` as the last child and return it.

        Raises ValidationError if the item already has a parent or if
        attaching it would turn the tree into a cycle.
        """
        self._ensure_alive()
        item._ensure_alive()
        if item.parent is not None:
            raise ValidationError(
                f"'{item.name}' is already inside folder '{item.parent.name}'"
            )
        if item is self or any(folder is item for folder in self.ancestors()):
            raise ValidationError(
                f"Cannot add '{item.name}' to '{self.name}': it would contain itself"
            )
        self._children.append(item)
        item.parent = self
        return item

    def remove(self, item: FileSystemItem) -> None:
        """Detach a direct child without deleting it."""
        self._ensure_alive()
        if not any(child is item for child in self._children):
            raise ValidationError(f"'{item.name}' is not inside folder '{self.name}'")
        self._detach(item)

    def size(self) -> int:
        self._ensure_alive()
        total = 0
        for child in self._children:
            total += child.size()
        return total

    def structure(self, indent: str = "", indent_unit: str = INDENT_UNIT) -> Iterator[str]:
        self._ensure_alive()
        yield f"{indent}+ {self.name}/"
        for child in self._children:
            yield from child.structure(indent + indent_unit, indent_unit)

    def delete(self, echo: Echo = print) -> None:
        """Delete every child bottom-up, then this folder."""
        self._ensure_alive()
        # Children detach themselves while being deleted.
        for child in tuple(self._children):
            child.delete(echo)
        self._mark_deleted()
        logger.debug("Deleted folder %s", self.name)
        echo(f"Deleting folder: {self.name}")

    def _detach(self, item: FileSystemItem) -> None:
        self._children = [child for child in self._children if child is not item]
        item.parent = None


class Shortcut(FileSystemItem):
    """Link to another item.

    Takes no space of its own and deleting it leaves the target alone.
    Added alongside File and Folder without touching Folder at all.
    """

    def __init__(self, name: str, target: FileSystemItem) -> None:
        super().__init__(name)
        if not isinstance(target, FileSystemItem):
            raise ValidationError("Shortcut target must be a file-system item")
        self.target = target

    def size(self) -> int:
        self._ensure_alive()
        return 0

    def structure(self, indent: str = "", indent_unit: str = INDENT_UNIT) -> Iterator[str]:
        self._ensure_alive()
        suffix = " (broken)" if self.target.is_deleted else ""
        yield f"{indent}~ {self.name} -> {self.target.name}{suffix}"

    def delete(self, echo: Echo = print) -> None:
        self._ensure_alive()
        self._mark_deleted()
        logger.debug("Deleted shortcut %s", self.name)
        echo(f"Deleting shortcut: {self.name}")
