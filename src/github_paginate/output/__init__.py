"""Output handlers for GitHub Paginate."""

from github_paginate.output.console import Console
from github_paginate.output.json_writer import links_to_json

__all__ = [
    "links_to_json",
    "Console",
]
