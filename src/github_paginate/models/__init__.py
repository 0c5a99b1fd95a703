"""Data models for GitHub Paginate."""

from github_paginate.models.links import PageLinks, Relation, RelationId

__all__ = [
    "Relation",
    "RelationId",
    "PageLinks",
]
