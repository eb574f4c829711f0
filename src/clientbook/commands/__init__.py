"""Subcommand modules for clientbook.

Provides register_commands() which uses deferred imports to keep
``clientbook --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from clientbook.commands.run import run
    from clientbook.commands.shell import shell

    cli.add_command(run)
    cli.add_command(shell)
