"""Command: checksum validation of ISBN-10/13 values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isbnctl.commands._base import IsbnCommand

if TYPE_CHECKING:
    from isbnctl.commands._context import AppContext


@click.command(
    cls=IsbnCommand,
    examples="""\
  isbnctl validate 0-306-40615-2
  isbnctl validate 978-1-4088-5589-8 1-4088-5589-5
  isbnctl --json validate 9781408855898""",
)
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def validate(app: AppContext, values: tuple[str, ...]) -> None:
    """Check length and check digit of each VALUE.

    Exits with status 1 if any value is invalid. Registration groups are
    not consulted; use ``inspect`` for a full parse.
    """
    app.emit(app.service.validate(list(values)))
