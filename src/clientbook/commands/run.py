"""Command: run one clientbook command line against the stored book."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clientbook.commands._base import ClientbookCommand

if TYPE_CHECKING:
    from clientbook.commands._context import AppContext


@click.command(
    cls=ClientbookCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  clientbook run list
  clientbook run add name/John Doe phone/98765432 email/johnd@example.com \\
      address/311, Clementi Ave 2 tag/friends pref/Shampoo freq/7
  clientbook run edit 1 tag/ priority/3
  clientbook run find john shampoo
  clientbook --json run rank total

  Each run starts from the stored book sorted by name. Use
  `clientbook shell` when an index refers to an earlier find or rank.""",
)
@click.argument("line", nargs=-1, required=True)
@click.pass_obj
def run(app: AppContext, line: tuple[str, ...]) -> None:
    """Execute one command LINE and print the result.

    The book is reloaded for every run, so filters and rankings do not
    carry over. Index-based commands see the default name ordering.
    """
    from clientbook.services.shell import ShellService

    result = ShellService(app.workspace).run_line(" ".join(line))
    app.emit(result)
    if result.list_changed and "items" not in result.data:
        app.emit_displayed()
