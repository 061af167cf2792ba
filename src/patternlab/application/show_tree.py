"""Application services: render and delete a file-system tree."""

from __future__ import annotations

from patternlab.application.dto import DeletionReportDTO, TreeReportDTO
from patternlab.domain.model.filesystem import INDENT_UNIT, FileSystemItem


class ShowTreeHandler:

    def __init__(self, root: FileSystemItem, indent_unit: str = INDENT_UNIT) -> None:
        self._root = root
        self._indent_unit = indent_unit

    def handle(self) -> TreeReportDTO:
        lines: list[str] = []
        self._root.print_structure(echo=lines.append, indent_unit=self._indent_unit)
        return TreeReportDTO(lines=lines, total_size=self._root.size())


class DeleteTreeHandler:

    def __init__(self, root: FileSystemItem) -> None:
        self._root = root

    def handle(self) -> DeletionReportDTO:
        """Delete the whole tree, collecting the messages bottom-up."""
        lines: list[str] = []
        self._root.delete(echo=lines.append)
        return DeletionReportDTO(
            lines=lines,
            remaining_nodes=sum(1 for _ in self._root.walk()),
        )
