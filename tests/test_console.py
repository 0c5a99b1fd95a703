"""Tests for rich console output."""

import io

from rich.console import Console as RichConsole

from github_paginate.models.links import PageLinks, Relation
from github_paginate.output.console import Console


def make_console(verbose: bool = False) -> tuple[Console, io.StringIO]:
    """Create an output console writing plain text to a buffer."""
    buffer = io.StringIO()
    rich_console = RichConsole(file=buffer, width=200, color_system=None)
    return Console(verbose=verbose, console=rich_console), buffer


class TestConsole:
    """Tests for Console output helpers."""

    def test_print_verbose_disabled(self):
        """Test that verbose messages are hidden by default."""
        console, buffer = make_console()
        console.print_verbose("Parsed 2 link(s)")
        assert buffer.getvalue() == ""

    def test_print_verbose_enabled(self):
        """Test that verbose messages show in verbose mode."""
        console, buffer = make_console(verbose=True)
        console.print_verbose("Parsed 2 link(s)")
        assert "Parsed 2 link(s)" in buffer.getvalue()

    def test_print_error_escapes_markup(self):
        """Test that error text is not read as markup."""
        console, buffer = make_console()
        console.print_error("Malformed Link header segment: '[/b]'")
        assert "Error: Malformed Link header segment: '[/b]'" in buffer.getvalue()

    def test_print_warning(self):
        """Test warning output."""
        console, buffer = make_console()
        console.print_warning("No GitHub token found")
        assert "Warning: No GitHub token found" in buffer.getvalue()

    def test_print_links_escapes_cells(self):
        """Test that URLs and attributes with brackets are printed verbatim."""
        console, buffer = make_console()
        console.print_links(
            [(Relation.NEXT, {"url": "https://x/?page[number]=2", "page[number]": "2"})]
        )
        output = buffer.getvalue()
        assert "https://x/?page[number]=2" in output
        assert "page[number]=2" in output

    def test_print_links_unknown_relation_and_custom_entry(self):
        """Test rows for raw relations and transformed entries."""
        console, buffer = make_console()
        console.print_links([("item", {"url": "https://x/1"}), "[bold]"])
        output = buffer.getvalue()
        assert "item" in output
        assert "'[bold]'" in output

    def test_print_page_summary(self):
        """Test next page and total page output."""
        console, buffer = make_console()
        console.print_page_summary(
            PageLinks.from_header(
                '<https://x/?page=2>; rel="next", <https://x/?page=9>; rel="last"'
            )
        )
        output = buffer.getvalue()
        assert "Next page: https://x/?page=2" in output
        assert "Total pages: 9" in output
