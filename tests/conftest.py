"""Shared pytest fixtures for isbnctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from isbnctl.domain.registry import RegistrationGroup, RegistrationTable, Rule


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def small_table() -> RegistrationTable:
    """A hand-built table with nested keys (``9781`` and ``97812``).

    The real dataset is prefix-free, so nested keys only exist here to
    exercise longest-prefix selection.
    """
    return RegistrationTable(
        [
            RegistrationGroup(
                prefix=978,
                group=1,
                name="Short group",
                rules=(Rule(0, 9, 2), Rule(100, 399, 3), Rule(4000, 5499, 4)),
            ),
            RegistrationGroup(
                prefix=978,
                group=12,
                name="Long group",
                rules=(Rule(0, 49, 2), Rule(500, 999, 3)),
            ),
            RegistrationGroup(
                prefix=979,
                group=8,
                name="Sparse group",
                rules=(Rule(4000, 8499, 4),),
            ),
        ]
    )


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so config
    discovery never picks up a stray ``isbnctl.toml``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ISBNCTL_CONFIG", raising=False)
    for name in ("ISBNCTL_JSON_OUTPUT", "ISBNCTL_QUIET", "ISBNCTL_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo ``configure_logging`` calls made by CLI invocations and tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    isbn = logging.getLogger("isbnctl")
    isbn_level = isbn.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    isbn.setLevel(isbn_level)
