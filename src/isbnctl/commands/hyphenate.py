"""Command: render ISBNs in canonical hyphenated ISBN-13 form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isbnctl.commands._base import IsbnCommand

if TYPE_CHECKING:
    from isbnctl.commands._context import AppContext


@click.command(
    cls=IsbnCommand,
    examples="""\
  isbnctl hyphenate 9781408855898
  isbnctl hyphenate 1408855895 0306406152
  isbnctl -q hyphenate 080442957X""",
)
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def hyphenate(app: AppContext, values: tuple[str, ...]) -> None:
    """Print the hyphenated ISBN-13 for each VALUE.

    ISBN-10 values are converted to ISBN-13 first.
    """
    app.emit(app.service.hyphenate(list(values)))
