"""Rich Console factory and theme for isbnctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ISBN_THEME = Theme(
    {
        "isbn.ok": "bold green",
        "isbn.error": "bold red",
        "isbn.warning": "bold yellow",
        "isbn.op": "bold cyan",
        "isbn.key": "dim",
        "isbn.value": "bold blue",
        "isbn.input": "dim",
        "isbn.reason": "yellow",
        "isbn.element.prefix": "cyan",
        "isbn.element.group": "green",
        "isbn.element.registrant": "magenta",
        "isbn.element.publication": "blue",
        "isbn.element.check": "bold",
    }
)

ELEMENT_STYLES: tuple[str, ...] = (
    "isbn.element.prefix",
    "isbn.element.group",
    "isbn.element.registrant",
    "isbn.element.publication",
    "isbn.element.check",
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ISBN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
