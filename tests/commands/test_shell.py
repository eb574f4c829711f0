"""Tests for the interactive shell CLI command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from clientbook.cli import cli

ADD_LINE = "add name/John Doe phone/98765432 email/johnd@example.com address/x tag/friends"


@pytest.mark.usefixtures("_isolated_book")
class TestShellCommand:
    def test_runs_until_exit(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shell"], input=f"{ADD_LINE}\nlist\nexit\nlist\n")
        assert result.exit_code == 0
        assert "New client added: John Doe" in result.output
        assert "Exiting clientbook as requested ..." in result.output
        assert result.output.count("Listed all clients") == 1

    def test_stops_at_end_of_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shell"], input="list\n")
        assert result.exit_code == 0
        assert "Listed all clients" in result.output

    def test_failures_do_not_stop_the_loop(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shell"], input="delete 1\nfilter pref/ \nclear\n")
        assert result.exit_code == 0
        assert "out of range" in result.stderr
        assert "exactly one filter condition" in result.stderr
        assert "Address book has been cleared!" in result.stdout

    def test_view_state_persists_within_session(self, cli_runner: CliRunner) -> None:
        second = "add name/Amy Tan phone/81234567 email/a@bc.com address/y tag/vip"
        lines = [ADD_LINE, second, "find vip", "delete 1", "list", "exit"]
        result = cli_runner.invoke(cli, ["shell"], input="\n".join(lines) + "\n")
        assert result.exit_code == 0
        assert "Deleted Client: Amy Tan" in result.output

    def test_blank_lines_ignored(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shell"], input="\n\nexit\n")
        assert result.exit_code == 0
        assert "ERROR" not in result.output
