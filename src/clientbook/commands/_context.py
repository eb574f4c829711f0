"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``. Provides lazy Workspace loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clientbook.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from clientbook.config.settings import ClientbookSettings
    from clientbook.infrastructure.workspace import Workspace
    from clientbook.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace is loaded on first use so ``--help`` and ``--version``
    never read the data file.
    """

    def __init__(self, settings: ClientbookSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from clientbook.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        """The loaded workspace (created lazily on first access)."""
        if self._workspace is None:
            from clientbook.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
            self._workspace.load()
        return self._workspace

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.display.width,
        )

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> None:
        """Format and output a ServiceResult.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output (in JSON mode they are in the payload).
        * Failure: writes to stderr and, unless *exit_on_error* is False,
          exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return

        click.echo(output, err=True)
        if exit_on_error:
            raise SystemExit(1)

    def emit_displayed(self) -> None:
        """Print the current displayed client list as a table.

        Skipped in JSON and quiet modes, where the result payload is the
        whole output.
        """
        settings = self.output_settings
        if settings.json_output or settings.quiet:
            return
        from clientbook.output.renderers import render_clients

        click.echo(render_clients(self.workspace.view.displayed, width=settings.width))
