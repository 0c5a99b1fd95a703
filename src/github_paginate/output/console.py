"""Rich console output for parsed Link headers."""

from typing import Any, Optional

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from github_paginate.models.links import PageLinks, Relation


def relation_label(relation: Any) -> str:
    """Display name of a relation, canonical or not."""
    return relation.value if isinstance(relation, Relation) else str(relation)


class Console:
    """Wrapper for rich console output.

    Header values and URLs are escaped before printing; query strings such as
    ``page[number]=2`` would otherwise be read as rich markup.
    """

    def __init__(self, verbose: bool = False, console: Optional[RichConsole] = None):
        self.console = console or RichConsole()
        self.verbose = verbose

    def print_verbose(self, message: str):
        """Print only in verbose mode."""
        if self.verbose:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_header(self, source: str):
        """Print a header naming where the links came from."""
        self.console.print()
        self.console.print(
            Panel(
                f"[bold blue]Link Header[/bold blue]\n[dim]{escape(source)}[/dim]",
                expand=False,
            )
        )
        self.console.print()

    def print_original(self, link_header: str):
        """Print the raw Link header kept next to the parsed links."""
        self.console.print(f"[bold]link:[/bold] {escape(link_header)}")

    def print_links(self, links: list[Any], title: str = "Links"):
        """Print parsed link entries as a table."""
        table = Table(title=title, expand=False)
        table.add_column("Relation", style="cyan")
        table.add_column("URL")
        table.add_column("Attributes", style="dim")

        for entry in links:
            if isinstance(entry, tuple) and len(entry) == 2 and isinstance(entry[1], dict):
                relation, record = entry
                attributes = ", ".join(
                    f"{name}={value}" for name, value in record.items() if name != "url"
                )
                table.add_row(
                    escape(relation_label(relation)),
                    escape(record.get("url", "")),
                    escape(attributes),
                )
            else:
                table.add_row("", escape(repr(entry)), "")

        self.console.print(table)

    def print_page_summary(self, links: PageLinks):
        """Print next/last pagination details."""
        if links.has_next:
            self.console.print(f"[green]Next page:[/green] {escape(links.next_url)}")
        else:
            self.console.print("[dim]No next page[/dim]")

        if links.total_pages is not None:
            self.console.print(f"Total pages: {links.total_pages}")
