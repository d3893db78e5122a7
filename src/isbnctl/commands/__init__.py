"""Subcommand modules for isbnctl.

Provides register_commands() which uses deferred imports to keep
``isbnctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from isbnctl.commands.groups import groups
    from isbnctl.commands.hyphenate import hyphenate
    from isbnctl.commands.inspect_cmd import inspect_cmd
    from isbnctl.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(hyphenate)
    cli.add_command(inspect_cmd)
    cli.add_command(groups)
