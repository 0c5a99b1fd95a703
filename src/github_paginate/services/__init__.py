"""Services for paginated GitHub API access."""

from github_paginate.services.github_rest_client import GitHubRestClient, Page

__all__ = [
    "GitHubRestClient",
    "Page",
]
