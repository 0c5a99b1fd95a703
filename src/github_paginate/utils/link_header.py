"""Link header parsing for paginated REST APIs.

Parses an :rfc:`8288` ``Link`` header such as::

    <https://api.github.com/user/repos?page=3&per_page=100>; rel="next",
    <https://api.github.com/user/repos?page=50&per_page=100>; rel="last"

into an ordered list of ``(relation, record)`` pairs, where ``record`` holds
the link's attributes, its ``url`` and the url's query parameters::

    [
        (Relation.NEXT, {"url": "...", "page": "3", "per_page": "100"}),
        (Relation.LAST, {"url": "...", "page": "50", "per_page": "100"}),
    ]
"""

import logging
import re
from typing import Any, Callable, Mapping, Optional
from urllib.parse import parse_qsl, urlsplit

from github_paginate.exceptions import (
    MalformedSegmentError,
    MissingRelationError,
    UnknownRelationError,
)
from github_paginate.models.links import Relation, RelationId
from github_paginate.utils.options import identity, validate_options

logger = logging.getLogger(__name__)

LINK_HEADER = "link"
PARSED_LINK_HEADER = "parsed_link"

# Quoted attribute values may contain commas, so only split before a new <url>
_SEGMENT_SPLIT = re.compile(r",\s*(?=<)")
_URL_TOKEN = re.compile(r"<([^>]*)>")
_QUOTED = re.compile(r'"[^"]*"')
_ATTRIBUTE = re.compile(r';\s*([^=;]+)="([^"]*)"')


def split_segments(link_header: str) -> list[str]:
    """Split a raw Link header into one segment per linked URL."""
    return _SEGMENT_SPLIT.split(link_header)


def parse_segment(segment: str) -> tuple[str, dict[str, str]]:
    """Extract the URL and the ``key="value"`` attributes of one segment.

    Text after the URL that does not look like an attribute is ignored.

    Raises:
        MalformedSegmentError: If the segment does not hold exactly one
            non-empty ``<url>`` token.
    """
    # Blank out quoted values so a "<...>" inside an attribute is not a URL token
    unquoted = _QUOTED.sub(lambda m: " " * len(m.group()), segment)
    tokens = list(_URL_TOKEN.finditer(unquoted))
    if len(tokens) != 1:
        raise MalformedSegmentError(segment)

    start, end = tokens[0].span(1)
    url = segment[start:end].strip()
    if not url:
        raise MalformedSegmentError(segment)

    attributes = {}
    for match in _ATTRIBUTE.finditer(segment, end + 1):
        name, value = match.groups()
        attributes[name.strip()] = value

    return url, attributes


def parse_query(url: str) -> dict[str, str]:
    """Decode the query string of a URL. Unparseable URLs have no query."""
    try:
        query = urlsplit(url).query
    except ValueError:
        logger.debug("Could not parse link URL %r, ignoring its query", url)
        return {}

    return dict(parse_qsl(query, keep_blank_values=True))


def resolve_relation(rel: str, segment: str, strict: bool = False) -> RelationId:
    """Resolve a ``rel`` value to a Relation, or keep the raw string.

    Raises:
        UnknownRelationError: If ``strict`` and ``rel`` is not a canonical relation.
    """
    try:
        return Relation(rel)
    except ValueError:
        if strict:
            raise UnknownRelationError(rel, segment) from None
        return rel


def build_link(
    segment: str,
    pagination_transform: Callable[[tuple[RelationId, dict[str, str]]], Any] = identity,
    strict_relations: bool = False,
) -> Any:
    """Parse one segment into a transformed ``(relation, record)`` entry."""
    url, attributes = parse_segment(segment)

    if "rel" not in attributes:
        raise MissingRelationError(segment)
    relation = resolve_relation(attributes.pop("rel"), segment, strict=strict_relations)

    # Explicit attributes, including a literal url attribute, are never overwritten
    attributes.setdefault("url", url)
    for name, value in parse_query(url).items():
        attributes.setdefault(name, value)

    return pagination_transform((relation, attributes))


def parse_link_header(link_header: str, **options: Any) -> list[Any]:
    """Parse a raw Link header value into an ordered list of link entries.

    Args:
        link_header: The raw header value
        **options: ``pagination_transform`` and ``strict_relations``
            (see ``LinkHeaderOptions``)

    Returns:
        One transformed ``(relation, record)`` entry per link, in header order

    Raises:
        ConfigurationError: If an option is invalid
        LinkHeaderError: If any segment cannot be parsed
    """
    opts = validate_options(**options)
    return _parse(link_header, opts.pagination_transform, opts.strict_relations)


def _parse(
    link_header: str,
    pagination_transform: Callable[[Any], Any],
    strict_relations: bool,
) -> list[Any]:
    segments = split_segments(link_header)
    logger.debug("Parsing Link header with %d segment(s)", len(segments))
    return [
        build_link(segment, pagination_transform, strict_relations) for segment in segments
    ]


def _find_link_key(headers: Mapping[str, Any]) -> Optional[str]:
    """Find the Link header key, ignoring case."""
    for key in headers:
        if isinstance(key, str) and key.lower() == LINK_HEADER:
            return key
    return None


def _single_value(value: Any) -> Optional[str]:
    """Unwrap a header value that holds exactly one string."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and len(value) == 1 and isinstance(value[0], str):
        return value[0]
    return None


def parse_link_headers(headers: Mapping[str, Any], **options: Any) -> dict[str, Any]:
    """Response step that replaces the Link header with its parsed entries.

    Options are validated before the header is looked at. If the response has
    no Link header, or it holds more than one value, the headers are returned
    unchanged. The given mapping is never mutated; a copy is returned.

    Args:
        headers: Response header map
        **options:
            pagination_transform: Function applied to each ``(relation, record)``
                entry (default: identity)
            keep_original_link: If True, keep the raw ``link`` value and store the
                parsed entries under ``parsed_link`` instead (default: False)
            strict_relations: If True, fail on relations other than
                next/prev/first/last (default: False)

    Returns:
        A new header map with the parsed entries in place
    """
    opts = validate_options(**options)
    updated = dict(headers)

    key = _find_link_key(headers)
    if key is None:
        return updated

    link_header = _single_value(headers[key])
    if link_header is None:
        logger.debug("Link header is not a single string, leaving it unparsed")
        return updated

    links = _parse(link_header, opts.pagination_transform, opts.strict_relations)

    if opts.keep_original_link:
        updated.setdefault(PARSED_LINK_HEADER, links)
    else:
        updated[key] = links
    return updated
