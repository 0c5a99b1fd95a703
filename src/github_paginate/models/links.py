"""Link relation and pagination link models."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class Relation(str, Enum):
    """Canonical pagination link relations."""

    NEXT = "next"
    PREV = "prev"
    FIRST = "first"
    LAST = "last"


# A relation outside the canonical set is carried as its raw string
RelationId = Relation | str


class PageLinks(BaseModel):
    """Pagination view over parsed Link header entries.

    Only the first entry for each relation is kept, so a header with
    repeated relations (e.g. several ``rel="item"`` links) is not fully
    represented here. Use the parsed sequence directly in that case.
    """

    records: dict[str, dict[str, str]] = Field(default_factory=dict)

    @classmethod
    def from_parsed(cls, links: list[tuple[RelationId, Any]]) -> "PageLinks":
        """Create from the output of ``parse_link_header`` with the identity transform."""
        records: dict[str, dict[str, str]] = {}
        for relation, record in links:
            key = relation.value if isinstance(relation, Relation) else str(relation)
            records.setdefault(key, dict(record))
        return cls(records=records)

    @classmethod
    def from_header(cls, link_header: Optional[str]) -> "PageLinks":
        """Parse a raw Link header value. An empty header yields no links."""
        from github_paginate.utils.link_header import parse_link_header

        if not link_header:
            return cls()
        return cls.from_parsed(parse_link_header(link_header))

    def get(self, relation: RelationId) -> Optional[dict[str, str]]:
        """Get the first record for a relation."""
        key = relation.value if isinstance(relation, Relation) else relation
        return self.records.get(key)

    def _url(self, relation: Relation) -> Optional[str]:
        record = self.get(relation)
        return record["url"] if record else None

    @property
    def next_url(self) -> Optional[str]:
        """URL of the next page."""
        return self._url(Relation.NEXT)

    @property
    def prev_url(self) -> Optional[str]:
        """URL of the previous page."""
        return self._url(Relation.PREV)

    @property
    def first_url(self) -> Optional[str]:
        """URL of the first page."""
        return self._url(Relation.FIRST)

    @property
    def last_url(self) -> Optional[str]:
        """URL of the last page."""
        return self._url(Relation.LAST)

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.get(Relation.NEXT) is not None

    @property
    def total_pages(self) -> Optional[int]:
        """Total pages, taken from the ``page`` parameter of the last link."""
        record = self.get(Relation.LAST)
        if not record or "page" not in record:
            return None

        try:
            return int(record["page"])
        except ValueError:
            return None
