"""Command: list registration groups from the embedded table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isbnctl.commands._base import IsbnCommand

if TYPE_CHECKING:
    from isbnctl.commands._context import AppContext


@click.command(
    cls=IsbnCommand,
    examples="""\
  isbnctl groups
  isbnctl groups --prefix 979
  isbnctl groups --search english""",
)
@click.option(
    "--prefix",
    type=click.Choice(["978", "979"]),
    default=None,
    help="Only groups under this prefix.",
)
@click.option("--search", default=None, help="Case-insensitive agency name filter.")
@click.pass_obj
def groups(app: AppContext, prefix: str | None, search: str | None) -> None:
    """List registration groups and their agencies."""
    app.emit(app.service.groups(prefix=int(prefix) if prefix else None, search=search))
