"""Tests for ShellService — parse, execute and persist one input line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from clientbook.config.settings import ClientbookSettings
from clientbook.infrastructure.storage import StorageError
from clientbook.infrastructure.workspace import Workspace
from clientbook.services.command import MESSAGE_INVALID_INDEX
from clientbook.services.commands import MESSAGE_ONLY_ONE_FILTER_ALLOWED
from clientbook.services.shell import ShellService

ADD_JOHN = (
    "add name/John Doe phone/98765432 email/johnd@example.com "
    "address/311, Clementi Ave 2, #02-25 tag/friends pref/Shampoo freq/7"
)


def _stored(workspace: Workspace) -> list[dict[str, object]]:
    return json.loads(workspace.store.path.read_text(encoding="utf-8"))["clients"]


class TestParseFailures:
    def test_unknown_command(self, workspace: Workspace) -> None:
        result = ShellService(workspace).run_line("teleport 1")
        assert not result.ok
        assert result.op == "teleport"
        assert result.error is not None
        assert result.error.code == "UNKNOWN_COMMAND"
        assert result.error.message == "Unknown command"

    def test_blank_line(self, workspace: Workspace) -> None:
        result = ShellService(workspace).run_line("")
        assert result.op == "input"
        assert result.error is not None
        assert result.error.code == "INVALID_FORMAT"

    def test_invalid_field(self, workspace: Workspace) -> None:
        result = ShellService(workspace).run_line("add name/x phone/1 email/a@bc.com address/y")
        assert result.error is not None
        assert result.error.code == "INVALID_FORMAT"
        assert "Phone numbers" in result.error.message

    def test_failure_does_not_save(self, workspace: Workspace) -> None:
        ShellService(workspace).run_line("delete 1")
        assert not workspace.store.path.exists()


class TestPersistence:
    def test_mutation_saves(self, workspace: Workspace) -> None:
        result = ShellService(workspace).run_line(ADD_JOHN)
        assert result.ok
        assert result.warnings == []
        stored = _stored(workspace)
        assert stored[0]["name"] == "John Doe"
        assert stored[0]["productPreference"] == {"label": "Shampoo", "frequency": 7}

    def test_view_commands_do_not_save(self, workspace: Workspace) -> None:
        ShellService(workspace).run_line("list")
        assert not workspace.store.path.exists()

    def test_autosave_off(self, book_root: Path) -> None:
        (book_root / "clientbook.toml").write_text("[storage]\nautosave = false\n")
        ws = Workspace(ClientbookSettings.from_cli(root=book_root))
        ws.load()
        assert ShellService(ws).run_line(ADD_JOHN).ok
        assert not ws.store.path.exists()

    def test_save_failure_becomes_warning(
        self, workspace: Workspace, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail(_clients: object) -> None:
            raise StorageError("Could not save data to nowhere: disk full")

        monkeypatch.setattr(workspace.store, "save", fail)
        result = ShellService(workspace).run_line(ADD_JOHN)
        assert result.ok
        assert result.warnings == ["Could not save data to nowhere: disk full"]
        assert len(workspace.registry) == 1

    def test_reload_restores_clients(
        self, workspace: Workspace, settings: ClientbookSettings
    ) -> None:
        ShellService(workspace).run_line(ADD_JOHN)
        ShellService(workspace).run_line("desc 1 Met at the expo")
        fresh = Workspace(settings)
        fresh.load()
        assert fresh.registry == workspace.registry


class TestEndToEnd:
    def test_add_list_edit_delete(self, workspace: Workspace) -> None:
        shell = ShellService(workspace)

        added = shell.run_line(ADD_JOHN)
        assert added.ok
        assert added.data["client"]["totalPurchase"] == 7

        listed = shell.run_line("list")
        assert listed.data["count"] == 1
        assert listed.data["items"][0]["name"] == "John Doe"

        edited = shell.run_line("edit 1 tag/")
        assert edited.ok
        assert workspace.view.get(1).tags == frozenset()
        assert _stored(workspace)[0]["tags"] == []

        deleted = shell.run_line("delete 1")
        assert deleted.ok
        assert len(workspace.registry) == 0

        again = shell.run_line("delete 1")
        assert not again.ok
        assert again.error is not None
        assert again.error.code == "INVALID_INDEX"
        assert again.error.message == MESSAGE_INVALID_INDEX

    @pytest.mark.parametrize("line", ["filter pref/ ", "filter priority/1 pref/tea"])
    def test_bad_filter_leaves_view(self, workspace: Workspace, line: str) -> None:
        shell = ShellService(workspace)
        shell.run_line(ADD_JOHN)
        shell.run_line("filter pref/shampoo")
        version = workspace.view.version
        predicate = workspace.view.predicate

        result = shell.run_line(line)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FILTER"
        assert result.error.message == MESSAGE_ONLY_ONE_FILTER_ALLOWED
        assert workspace.view.version == version
        assert workspace.view.predicate == predicate
