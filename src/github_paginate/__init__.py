"""GitHub Paginate - Parse pagination Link headers from REST APIs.

This SDK turns an RFC 8288 ``Link`` response header into structured,
queryable link entries:
- Relation (next, prev, first, last, or any other raw relation name)
- Target URL and link attributes
- The URL's query parameters (page, per_page, cursor, ...) merged in

Example usage:
    ```python
    from github_paginate import parse_link_header

    links = parse_link_header(
        '<https://api.github.com/user/repos?page=2>; rel="next", '
        '<https://api.github.com/user/repos?page=5>; rel="last"'
    )
    # [(Relation.NEXT, {"url": "...?page=2", "page": "2"}),
    #  (Relation.LAST, {"url": "...?page=5", "page": "5"})]
    ```
"""

from github_paginate.config import Config
from github_paginate.exceptions import (
    ConfigurationError,
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubPaginateError,
    GitHubRateLimitError,
    LinkHeaderError,
    MalformedSegmentError,
    MissingRelationError,
    UnknownRelationError,
)
from github_paginate.hooks import attach, parsed_headers
from github_paginate.models import PageLinks, Relation, RelationId
from github_paginate.services import GitHubRestClient, Page
from github_paginate.utils import LinkHeaderOptions, parse_link_header, parse_link_headers

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "parse_link_header",
    "parse_link_headers",
    "LinkHeaderOptions",
    # httpx integration
    "attach",
    "parsed_headers",
    "GitHubRestClient",
    "Page",
    # Configuration
    "Config",
    # Exceptions
    "GitHubPaginateError",
    "ConfigurationError",
    "LinkHeaderError",
    "MalformedSegmentError",
    "MissingRelationError",
    "UnknownRelationError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    # Models
    "Relation",
    "RelationId",
    "PageLinks",
]
