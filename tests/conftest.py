"""Pytest configuration and fixtures."""

import os

import pytest

from github_paginate.config import Config, set_config

GITHUB_HEADER = (
    '<https://api.github.com/user/repos?page=3&per_page=100>; rel="next", '
    '<https://api.github.com/user/repos?page=50&per_page=100>; rel="last"'
)


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    # Support both GITHUB_PAGINATE_TOKEN (preferred) and GITHUB_TOKEN (fallback)
    token = os.getenv("GITHUB_PAGINATE_TOKEN") or os.getenv("GITHUB_TOKEN", "test_token")
    config = Config(
        github_token=token,
        github_api_url="https://api.github.com",
    )
    set_config(config)
    return config


@pytest.fixture
def link_header():
    """A GitHub style Link header with next and last links."""
    return GITHUB_HEADER
