"""GitHub REST API client with parsed pagination links."""

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import Any, Optional

import httpx
from pydantic import BaseModel, Field
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from github_paginate.config import Config, get_config
from github_paginate.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from github_paginate.models.links import PageLinks
from github_paginate.utils.link_header import (
    LINK_HEADER,
    PARSED_LINK_HEADER,
    parse_link_headers,
)

logger = logging.getLogger(__name__)


class Page(BaseModel):
    """One page of a paginated response."""

    url: str
    data: Any = None
    headers: dict[str, Any] = Field(default_factory=dict)
    entries: list[Any] = Field(default_factory=list)
    links: PageLinks = Field(default_factory=PageLinks)

    @property
    def items(self) -> list[Any]:
        """Items on this page (search results are nested in ``items``)."""
        if isinstance(self.data, dict) and "items" in self.data:
            return self.data["items"]
        if isinstance(self.data, list):
            return self.data
        return [] if self.data is None else [self.data]


class GitHubRestClient:
    """Async client for GitHub REST API."""

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "github-paginate/0.1.0",
        }
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @retry(
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
    )
    async def _request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """Make an API request with retries."""
        client = await self._get_client()
        response = await client.request(method, endpoint, **kwargs)

        # Handle errors
        if response.status_code == 404:
            raise GitHubNotFoundError(
                f"Resource not found: {endpoint}",
                status_code=404,
                response_body=response.json() if response.content else None,
            )
        elif response.status_code == 403:
            # Check if it's a rate limit error
            body = response.json() if response.content else {}
            if "rate limit" in body.get("message", "").lower():
                reset = response.headers.get("x-ratelimit-reset")
                raise GitHubRateLimitError(
                    "Rate limit exceeded",
                    status_code=403,
                    response_body=body,
                    reset_time=float(reset) if reset else None,
                )
            raise GitHubAPIError(
                f"Forbidden: {body.get('message', 'Unknown error')}",
                status_code=403,
                response_body=body,
            )
        elif response.status_code >= 500:
            raise GitHubAPIError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
            )
        elif response.status_code >= 400:
            body = response.json() if response.content else {}
            raise GitHubAPIError(
                f"API error: {body.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_body=body,
            )

        return response

    def _build_page(self, response: httpx.Response) -> Page:
        """Parse the Link header of a response into a Page."""
        options = self.config.link_options()
        headers = parse_link_headers(dict(response.headers), **options)

        key = PARSED_LINK_HEADER if options["keep_original_link"] else LINK_HEADER
        parsed = headers.get(key)
        links = PageLinks.from_parsed(parsed) if isinstance(parsed, list) else PageLinks()

        return Page(
            url=str(response.url),
            data=response.json() if response.content else None,
            headers=headers,
            entries=parsed if isinstance(parsed, list) else [],
            links=links,
        )

    def paginated_url(self, endpoint: str, per_page: Optional[int] = None) -> str:
        """Append the per_page parameter to an endpoint."""
        per_page = per_page or self.config.default_per_page
        separator = "&" if "?" in endpoint else "?"
        return f"{endpoint}{separator}per_page={per_page}"

    async def get(self, endpoint: str, **kwargs) -> Any:
        """Make a GET request and return JSON response."""
        response = await self._request("GET", endpoint, **kwargs)
        return response.json()

    async def get_page(self, endpoint: str, **kwargs) -> Page:
        """Fetch a single page with its parsed pagination links."""
        response = await self._request("GET", endpoint, **kwargs)
        return self._build_page(response)

    async def iter_pages(
        self,
        endpoint: str,
        max_pages: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> AsyncIterator[Page]:
        """Iterate over the pages of an endpoint by following ``next`` links.

        Args:
            endpoint: API endpoint (pagination params will be appended)
            max_pages: Maximum number of pages to fetch (None for all)
            per_page: Items per page (defaults to the configured page size)

        Yields:
            Each fetched Page, in order
        """
        url: Optional[str] = self.paginated_url(endpoint, per_page)
        fetched = 0

        while url and (max_pages is None or fetched < max_pages):
            page = await self.get_page(url)
            fetched += 1
            logger.debug("Fetched page %d of %s", fetched, endpoint)
            yield page

            url = page.links.next_url

            # Small delay to be nice to the API
            if url:
                await asyncio.sleep(0.1)

    async def get_paginated(
        self,
        endpoint: str,
        max_pages: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> list[Any]:
        """Fetch all pages of a paginated endpoint.

        Returns:
            List of all items across all pages
        """
        all_items = []
        async for page in self.iter_pages(endpoint, max_pages=max_pages, per_page=per_page):
            all_items.extend(page.items)
        return all_items
