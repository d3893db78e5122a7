"""Command: full element breakdown of a single ISBN."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isbnctl.commands._base import IsbnCommand

if TYPE_CHECKING:
    from isbnctl.commands._context import AppContext


@click.command(
    "inspect",
    cls=IsbnCommand,
    examples="""\
  isbnctl inspect 978-1-4088-5589-8
  isbnctl -v inspect 1-4088-5589-5
  isbnctl --json inspect 9798627974040""",
)
@click.argument("value")
@click.pass_obj
def inspect_cmd(app: AppContext, value: str) -> None:
    """Show registration group, elements, GTIN, and ISBN-10 form of VALUE."""
    app.emit(app.service.inspect(value))
