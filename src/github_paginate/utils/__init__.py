"""Utility modules for GitHub Paginate."""

from github_paginate.utils.link_header import (
    build_link,
    parse_link_header,
    parse_link_headers,
    parse_query,
    parse_segment,
    resolve_relation,
    split_segments,
)
from github_paginate.utils.options import LinkHeaderOptions, identity, validate_options

__all__ = [
    "parse_link_header",
    "parse_link_headers",
    "split_segments",
    "parse_segment",
    "parse_query",
    "resolve_relation",
    "build_link",
    "LinkHeaderOptions",
    "identity",
    "validate_options",
]
