"""Tests for the root isbnctl CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from isbnctl import __version__
from isbnctl.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "isbnctl" in result.output
    for name in ("validate", "hyphenate", "inspect", "groups"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_cli_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "isbnctl hyphenate" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/does-not-exist.toml", "--version"])
    assert result.exit_code == 0


def test_missing_config_is_an_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "missing.toml", "validate", "0306406152"])
    assert result.exit_code == 1
    assert "Config file not found: missing.toml" in result.output


def test_config_file_applied(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text("quiet = true\n")
    result = cli_runner.invoke(cli, ["-c", str(config), "hyphenate", "0306406152"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "978-0-306-40615-7"
