"""CLI interface for GitHub Paginate."""

import asyncio
import logging
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler

from github_paginate import __version__
from github_paginate.config import get_config
from github_paginate.exceptions import GitHubPaginateError
from github_paginate.models.links import PageLinks
from github_paginate.output.console import Console as OutputConsole
from github_paginate.output.json_writer import links_to_json
from github_paginate.services.github_rest_client import GitHubRestClient
from github_paginate.utils.link_header import (
    LINK_HEADER,
    PARSED_LINK_HEADER,
    parse_link_headers,
)

app = typer.Typer(
    name="github-paginate",
    help="Parse pagination Link headers from REST APIs",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-paginate version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """GitHub Paginate - Parse pagination Link headers from REST APIs."""
    pass


@app.command()
def parse(
    header: str = typer.Argument(..., help="Raw Link header value"),
    keep_original: bool = typer.Option(
        False,
        "--keep-original",
        help="Keep the raw link value and show the parsed links as parsed_link",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on relations other than next/prev/first/last",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print parsed links as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
):
    """Parse a raw Link header value.

    With --keep-original the JSON output is the header map holding both the
    raw "link" value and the "parsed_link" entries.

    Examples:
        github-paginate parse '<https://api.github.com/users?page=2>; rel="next"'
        github-paginate parse '<https://x/?cursor=abc>; rel="item"' --json
        github-paginate parse '<https://x/?page=2>; rel="next"' --keep-original --json
    """
    _configure_logging(verbose)
    output_console = OutputConsole(verbose=verbose, console=console)

    try:
        headers = parse_link_headers(
            {LINK_HEADER: header},
            keep_original_link=keep_original,
            strict_relations=strict,
        )
    except GitHubPaginateError as e:
        output_console.print_error(str(e))
        raise typer.Exit(1)

    links = headers[PARSED_LINK_HEADER if keep_original else LINK_HEADER]

    if as_json:
        typer.echo(links_to_json(headers if keep_original else links))
        return

    output_console.print_verbose(f"Parsed {len(links)} link(s)")
    if keep_original:
        output_console.print_original(headers[LINK_HEADER])
        output_console.print_links(links, title=PARSED_LINK_HEADER)
    else:
        output_console.print_links(links)
    output_console.print_page_summary(PageLinks.from_parsed(links))


@app.command()
def fetch(
    endpoint: str = typer.Argument(..., help="API endpoint or absolute URL"),
    per_page: Optional[int] = typer.Option(
        None,
        "--per-page",
        help="Items per page",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print parsed links as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
):
    """Fetch one page of an endpoint and show its pagination links.

    Examples:
        github-paginate fetch /users/torvalds/repos
        github-paginate fetch /users/torvalds/repos --per-page 10 --json
    """
    _configure_logging(verbose)
    config = get_config()
    output_console = OutputConsole(verbose=verbose, console=console)

    if not config.is_authenticated and not as_json:
        output_console.print_warning(
            "No GitHub token found. Using unauthenticated access (60 requests/hour)."
        )

    try:
        links = asyncio.run(_fetch_links(endpoint, per_page))
    except (GitHubPaginateError, httpx.HTTPError) as e:
        output_console.print_error(str(e))
        raise typer.Exit(1)

    if as_json:
        typer.echo(links_to_json(links))
        return

    output_console.print_header(endpoint)
    output_console.print_verbose(f"Parsed {len(links)} link(s)")
    output_console.print_links(links)
    output_console.print_page_summary(PageLinks.from_parsed(links))


async def _fetch_links(endpoint: str, per_page: Optional[int]) -> list:
    """Fetch the first page of an endpoint and return its parsed links."""
    async with GitHubRestClient() as client:
        page = await client.get_page(client.paginated_url(endpoint, per_page))
        return page.entries


if __name__ == "__main__":
    app()
