"""Tests for the groups command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from isbnctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestGroupsCommand:
    def test_lists_groups(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["groups"])
        assert result.exit_code == 0
        assert "English language" in result.output

    def test_prefix_filter(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "groups", "--prefix", "979"])
        assert result.exit_code == 0
        items = json.loads(result.output)["data"]["items"]
        assert {item["prefix"] for item in items} == {979}

    def test_invalid_prefix(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["groups", "--prefix", "977"])
        assert result.exit_code == 2

    def test_quiet_search(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "groups", "--search", "taiwan"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["978-626", "978-957", "978-986"]
