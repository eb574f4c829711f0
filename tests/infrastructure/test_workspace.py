"""Tests for Workspace — registry, view and store wired together."""

from __future__ import annotations

from clientbook.config.settings import ClientbookSettings
from clientbook.domain.client import Client
from clientbook.domain.fields import Priority
from clientbook.domain.predicates import PriorityPredicate
from clientbook.infrastructure.workspace import Workspace


class TestWorkspace:
    def test_paths_from_settings(self, settings: ClientbookSettings) -> None:
        ws = Workspace(settings)
        assert ws.store.path == settings.root / "data" / "clients.json"
        assert ws.autosave is True

    def test_view_follows_registry(self, workspace: Workspace, alice: Client) -> None:
        workspace.registry.add(alice)
        assert workspace.view.displayed == (alice,)

    def test_save_then_load(
        self, settings: ClientbookSettings, typical_clients: list[Client]
    ) -> None:
        first = Workspace(settings)
        first.registry.replace_all(typical_clients)
        first.save()

        second = Workspace(settings)
        second.load()
        assert list(second.registry) == typical_clients

    def test_load_keeps_view_state(self, workspace: Workspace) -> None:
        workspace.view.set_filter(PriorityPredicate(Priority.VIP))
        workspace.load()
        assert workspace.view.predicate == PriorityPredicate(Priority.VIP)
