"""Tests for the hyphenate command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from isbnctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestHyphenateCommand:
    def test_quiet_prints_bare_isbn(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "hyphenate", "1-4088-5589-5"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "978-1-4088-5589-8"

    def test_integer_like_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "hyphenate", "9780306406157", "080442957X"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["978-0-306-40615-7", "978-0-8044-2957-3"]

    def test_table_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["hyphenate", "9798627974040"])
        assert result.exit_code == 0
        assert "979-8-6279-7404-0" in result.output

    def test_unrecognized_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "hyphenate", "9786700000007"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "UNRECOGNIZED_ISBN"
        assert data["data"]["items"][0]["reason"] == "unknown_group"
