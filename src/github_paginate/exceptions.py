"""Exceptions for GitHub Paginate.

Exception Hierarchy:
    GitHubPaginateError (base)
    ├── ConfigurationError (invalid parser option, raised before parsing)
    ├── LinkHeaderError (Link header could not be parsed)
    │   ├── MalformedSegmentError (segment without a single <url> token)
    │   ├── MissingRelationError (segment without a rel attribute)
    │   └── UnknownRelationError (non-canonical rel, strict mode only)
    └── GitHubAPIError (HTTP API errors with status codes)
        ├── GitHubRateLimitError (403 rate limit from API response)
        └── GitHubNotFoundError (404 not found)

Usage:
    - LinkHeaderError subclasses always carry the offending segment, so a
      failed parse can be debugged from the exception alone.
    - A LinkHeaderError aborts the whole header; no partial results are returned.
"""

from typing import Any

__all__ = [
    "GitHubPaginateError",
    "ConfigurationError",
    "LinkHeaderError",
    "MalformedSegmentError",
    "MissingRelationError",
    "UnknownRelationError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
]


class GitHubPaginateError(Exception):
    """Base exception for all GitHub Paginate errors."""

    pass


class ConfigurationError(GitHubPaginateError):
    """Raised when a parser option has an invalid value."""

    def __init__(self, option: str, value: Any, reason: str):
        super().__init__(f"Argument `{option}` {reason}, got {value!r}")
        self.option = option
        self.value = value


class LinkHeaderError(GitHubPaginateError):
    """Base exception for Link header parse failures."""

    def __init__(self, message: str, segment: str):
        super().__init__(f"{message}: {segment!r}")
        self.segment = segment


class MalformedSegmentError(LinkHeaderError):
    """Raised when a segment does not hold exactly one ``<url>`` token."""

    def __init__(self, segment: str):
        super().__init__("Malformed Link header segment", segment)


class MissingRelationError(LinkHeaderError):
    """Raised when a segment has no ``rel`` attribute."""

    def __init__(self, segment: str):
        super().__init__("Link header segment has no rel attribute", segment)


class UnknownRelationError(LinkHeaderError):
    """Raised in strict mode for a ``rel`` outside next/prev/first/last."""

    def __init__(self, relation: str, segment: str):
        super().__init__(f"Unknown link relation {relation!r}", segment)
        self.relation = relation


class GitHubAPIError(GitHubPaginateError):
    """Base exception for GitHub API errors (HTTP responses with error status codes)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API returns a rate limit error (HTTP 403)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 403,
        response_body: dict | None = None,
        reset_time: float | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.reset_time = reset_time


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a GitHub resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
