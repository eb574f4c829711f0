"""ClientView — the filtered, sorted display sequence over a registry.

The displayed sequence is always recomputed from the full registry,
the active predicate and the active ordering, so filters never compound
and the result is never stale. The view never mutates the registry.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from clientbook.domain.client import Client
from clientbook.domain.predicates import SHOW_ALL
from clientbook.domain.registry import ClientRegistry

Predicate = Callable[[Client], bool]
ViewListener = Callable[["ClientView"], None]


@dataclass(frozen=True)
class Ordering:
    """A named sort key. Python's sort is stable, so ties keep registry order."""

    name: str
    key: Callable[[Client], Any]
    reverse: bool = False

    def apply(self, clients: list[Client]) -> list[Client]:
        return sorted(clients, key=self.key, reverse=self.reverse)


BY_NAME = Ordering("name", key=lambda c: c.name.full_name.lower())
BY_TOTAL = Ordering("total", key=lambda c: c.total_purchase, reverse=True)

RANK_ORDERINGS: dict[str, Ordering] = {
    "name": BY_NAME,
    "total": BY_TOTAL,
}


class ClientView:
    """Observable display pipeline: registry → filter → sort."""

    def __init__(self, registry: ClientRegistry) -> None:
        self._registry = registry
        self._predicate: Predicate = SHOW_ALL
        self._ordering: Ordering = BY_NAME
        self._listeners: list[ViewListener] = []
        self._version = 0
        registry.subscribe(lambda _registry: self._changed())

    @property
    def predicate(self) -> Predicate:
        return self._predicate

    @property
    def ordering(self) -> Ordering:
        return self._ordering

    @property
    def version(self) -> int:
        return self._version

    @property
    def displayed(self) -> tuple[Client, ...]:
        """Registry contents after the active predicate and ordering."""
        filtered = [c for c in self._registry.as_read_only() if self._predicate(c)]
        return tuple(self._ordering.apply(filtered))

    def __len__(self) -> int:
        return len(self.displayed)

    def get(self, index: int) -> Client:
        """Resolve a 1-based *index* against the displayed sequence."""
        shown = self.displayed
        if index <= 0 or index > len(shown):
            msg = f"Index {index} is out of range for {len(shown)} displayed clients"
            raise IndexError(msg)
        return shown[index - 1]

    def set_filter(self, predicate: Predicate) -> None:
        """Replace the active predicate. Applied to the full registry."""
        if predicate is None:
            msg = "predicate must not be None"
            raise TypeError(msg)
        self._predicate = predicate
        self._changed()

    def set_ordering(self, ordering: Ordering) -> None:
        """Reorder the current filtered subset without touching the predicate."""
        if ordering is None:
            msg = "ordering must not be None"
            raise TypeError(msg)
        self._ordering = ordering
        self._changed()

    def reset(self) -> None:
        """Restore the match-all predicate and the default name ordering."""
        self._predicate = SHOW_ALL
        self._ordering = BY_NAME
        self._changed()

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        self._version += 1
        for listener in list(self._listeners):
            listener(self)
