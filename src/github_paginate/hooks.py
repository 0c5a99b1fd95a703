"""httpx integration: parse Link headers as a response step."""

import logging
from typing import Any, Optional, TypeVar

import httpx

from github_paginate.utils.link_header import parse_link_headers
from github_paginate.utils.options import validate_options

logger = logging.getLogger(__name__)

PARSED_HEADERS_EXTENSION = "parsed_headers"

ClientT = TypeVar("ClientT", httpx.Client, httpx.AsyncClient)


def attach(client: ClientT, **options: Any) -> ClientT:
    """Register a response hook that parses the Link header of every response.

    The parsed header map is stored in ``response.extensions["parsed_headers"]``
    since ``httpx.Headers`` only holds strings. Options are validated here, so a
    bad option fails before any request is sent.

    Example:
        ```python
        client = attach(httpx.AsyncClient(), keep_original_link=True)
        response = await client.get("https://api.github.com/users/torvalds/repos")
        links = parsed_headers(response)["parsed_link"]
        ```
    """
    opts = dict(validate_options(**options))

    def _parse(response: httpx.Response) -> None:
        response.extensions[PARSED_HEADERS_EXTENSION] = parse_link_headers(
            dict(response.headers), **opts
        )

    if isinstance(client, httpx.AsyncClient):

        async def _async_hook(response: httpx.Response) -> None:
            _parse(response)

        client.event_hooks["response"].append(_async_hook)
    else:
        client.event_hooks["response"].append(_parse)

    logger.debug("Attached Link header parsing to %s", type(client).__name__)
    return client


def parsed_headers(response: httpx.Response) -> Optional[dict[str, Any]]:
    """Get the parsed header map of a response from an attached client."""
    return response.extensions.get(PARSED_HEADERS_EXTENSION)
