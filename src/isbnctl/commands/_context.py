"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isbnctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from isbnctl.config.settings import IsbnSettings
    from isbnctl.services.isbn import IsbnService
    from isbnctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registration table is only loaded when a command first asks for
    the service, so ``--help`` and ``--version`` stay cheap.
    """

    def __init__(self, settings: IsbnSettings) -> None:
        self.settings = settings
        self._service: IsbnService | None = None

        from isbnctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> IsbnService:
        """The ISBN service (created lazily on first access)."""
        if self._service is None:
            from isbnctl.services.isbn import IsbnService

            self._service = IsbnService()
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
            show_isbn10=self.settings.output.show_isbn10,
        )
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        click.echo(output)
