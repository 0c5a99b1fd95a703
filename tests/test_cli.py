"""Tests for the command line interface."""

import json
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from github_paginate import __version__
from github_paginate.cli import app
from github_paginate.config import Config, set_config
from github_paginate.exceptions import GitHubNotFoundError
from github_paginate.models.links import Relation

runner = CliRunner()


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        """Test printing the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestParseCommand:
    """Tests for the parse command."""

    def test_parse_json(self, link_header):
        """Test printing parsed links as JSON."""
        result = runner.invoke(app, ["parse", link_header, "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [relation for relation, _ in data] == ["next", "last"]
        assert data[0][1]["page"] == "3"
        assert data[1][1]["url"] == "https://api.github.com/user/repos?page=50&per_page=100"

    def test_parse_table(self, link_header):
        """Test printing parsed links as a table."""
        result = runner.invoke(app, ["parse", link_header])

        assert result.exit_code == 0
        assert "next" in result.output
        assert "last" in result.output
        assert "Total pages: 50" in result.output

    def test_parse_unknown_relation(self):
        """Test that unknown relations are shown by name."""
        result = runner.invoke(app, ["parse", '<https://x/>; rel="item"', "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == [["item", {"url": "https://x/"}]]

    def test_parse_strict_unknown_relation(self):
        """Test that --strict rejects unknown relations."""
        result = runner.invoke(app, ["parse", '<https://x/>; rel="item"', "--strict"])

        assert result.exit_code == 1
        assert "Unknown link relation" in result.output

    def test_parse_malformed(self):
        """Test that a malformed header exits with an error."""
        result = runner.invoke(app, ["parse", 'rel="next"'])

        assert result.exit_code == 1
        assert "Malformed Link header segment" in result.output

    def test_parse_bracketed_query(self):
        """Test that bracketed query parameters are printed as-is."""
        header = '<https://api.x.com/items?page[number]=2&page[size]=10>; rel="next"'
        result = runner.invoke(app, ["parse", header])

        assert result.exit_code == 0
        assert "Next page: https://api.x.com/items?page[number]=2&page[size]=10" in result.output

    def test_parse_markup_like_query(self):
        """Test that a query that looks like a closing tag does not crash."""
        result = runner.invoke(app, ["parse", '<https://x/?q=[/b]>; rel="next"'])

        assert result.exit_code == 0
        assert "Next page: https://x/?q=[/b]" in result.output

    def test_parse_keep_original_json(self):
        """Test that --keep-original keeps the raw value next to the parsed links."""
        header = '<https://x/?page=2>; rel="next"'
        result = runner.invoke(app, ["parse", header, "--keep-original", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "link": header,
            "parsed_link": [["next", {"url": "https://x/?page=2", "page": "2"}]],
        }

    def test_parse_keep_original_table(self):
        """Test that --keep-original prints the raw value and parsed_link table."""
        result = runner.invoke(app, ["parse", '<https://x/?page=2>; rel="next"', "--keep-original"])

        assert result.exit_code == 0
        assert 'link: <https://x/?page=2>; rel="next"' in result.output
        assert "parsed_link" in result.output

    def test_parse_verbose(self, link_header):
        """Test that --verbose reports the number of links."""
        result = runner.invoke(app, ["parse", link_header, "--verbose"])

        assert result.exit_code == 0
        assert "Parsed 2 link(s)" in result.output


class TestFetchCommand:
    """Tests for the fetch command."""

    def test_fetch_json(self, test_config):
        """Test fetching a page and printing its links."""
        links = [(Relation.NEXT, {"url": "https://api.github.com/items?page=2", "page": "2"})]
        with patch("github_paginate.cli._fetch_links", new=AsyncMock(return_value=links)):
            result = runner.invoke(app, ["fetch", "/items", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            ["next", {"url": "https://api.github.com/items?page=2", "page": "2"}]
        ]

    def test_fetch_error(self, test_config):
        """Test that API errors exit with an error."""
        error = GitHubNotFoundError("Resource not found: /missing")
        with patch("github_paginate.cli._fetch_links", new=AsyncMock(side_effect=error)):
            result = runner.invoke(app, ["fetch", "/missing"])

        assert result.exit_code == 1
        assert "Resource not found" in result.output

    def test_fetch_unauthenticated_warning(self):
        """Test the warning printed without a token."""
        set_config(Config(github_token=None))
        with patch("github_paginate.cli._fetch_links", new=AsyncMock(return_value=[])):
            result = runner.invoke(app, ["fetch", "/items"])

        assert result.exit_code == 0
        assert "Warning: No GitHub token found" in result.output
        assert "No next page" in result.output
