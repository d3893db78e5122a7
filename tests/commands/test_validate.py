"""Tests for the validate command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from isbnctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestValidateCommand:
    def test_valid_isbn10(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "0-306-40615-2"])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "9781408855898", "1408855895"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["valid_count"] == 2

    def test_invalid_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "978-1-4088-5589-9"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Invalid ISBN '978-1-4088-5589-9'" in result.stderr

    def test_invalid_json_goes_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "123"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "INVALID_ISBN"

    def test_requires_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate"])
        assert result.exit_code == 2

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "--examples"])
        assert result.exit_code == 0
        assert "isbnctl validate 0-306-40615-2" in result.output

    def test_examples_indented_once(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "--examples"])
        lines = result.output.splitlines()
        assert lines[0] == "Examples for 'cli validate':"
        assert "  isbnctl validate 0-306-40615-2" in lines
