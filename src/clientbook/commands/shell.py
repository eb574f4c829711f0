"""Command: interactive read-eval loop over the stored book."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from clientbook.commands._base import ClientbookCommand

if TYPE_CHECKING:
    from clientbook.commands._context import AppContext

logger = logging.getLogger(__name__)

PROMPT = "clientbook"


@click.command(
    cls=ClientbookCommand,
    examples="""\
  clientbook shell
  clientbook --data-file ~/clients.json shell
  printf 'list\\nrank total\\n' | clientbook shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Read command lines until 'exit' or end of input.

    Failed commands are reported and the loop continues.
    """
    from clientbook.services.shell import ShellService

    service = ShellService(app.workspace)
    app.emit_displayed()
    while True:
        try:
            line = click.prompt(PROMPT, default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            logger.debug("End of input")
            break
        if not line.strip():
            continue

        result = service.run_line(line)
        app.emit(result, exit_on_error=False)
        if result.ok and result.list_changed and "items" not in result.data:
            app.emit_displayed()
        if result.exit:
            break
