"""Workspace — the single dependency injected into every service.

Owns the client registry, the view pipeline over it, and the JSON store.
Loading replaces the registry contents; saving persists them. Neither
touches the view's filter or ordering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clientbook.domain.registry import ClientRegistry
from clientbook.domain.view import ClientView
from clientbook.infrastructure.storage import JsonClientStore

if TYPE_CHECKING:
    from clientbook.config.settings import ClientbookSettings


class Workspace:
    """In-memory client registry plus its view and backing store."""

    def __init__(self, settings: ClientbookSettings) -> None:
        self._settings = settings
        self.registry = ClientRegistry()
        self.view = ClientView(self.registry)
        self.store = JsonClientStore(settings.resolved_data_file)

    @property
    def autosave(self) -> bool:
        return self._settings.storage.autosave

    def load(self) -> None:
        """Replace the registry contents with what the store holds."""
        self.registry.replace_all(self.store.load())

    def save(self) -> None:
        """Persist the registry. Raises StorageError on failure."""
        self.store.save(list(self.registry))
