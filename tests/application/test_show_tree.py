"""Integration tests for the tree use cases."""

from patternlab.application.show_tree import DeleteTreeHandler, ShowTreeHandler
from patternlab.domain.model.filesystem import File, Folder


class TestShowTree:

    def test_report_lines_and_total(self, home):
        report = ShowTreeHandler(home).handle()
        assert report.total_size == 1805
        assert report.lines[0] == "+ Home/"
        assert report.lines[-1] == "    - photo.jpg (1500 KB)"
        assert len(report.lines) == 6

    def test_custom_indent_unit(self):
        report = ShowTreeHandler(Folder("r", [File("a", 1)]), indent_unit="....").handle()
        assert report.lines == ["+ r/", "....- a (1 KB)"]

    def test_showing_does_not_change_the_tree(self, home):
        ShowTreeHandler(home).handle()
        assert len(list(home.walk())) == 6


class TestDeleteTree:

    def test_delete_reports_bottom_up_and_leaves_nothing(self, home):
        report = DeleteTreeHandler(home).handle()
        assert report.lines[-1] == "Deleting folder: Home"
        assert report.lines.index("Deleting file: readme.txt") < report.lines.index(
            "Deleting folder: Documents"
        )
        assert report.remaining_nodes == 0
