"""ClientRegistry — an ordered collection of identity-unique clients.

INVARIANT: No two elements are weakly equal (``Client.is_same_client``).
Every successful mutation bumps ``version`` and notifies subscribers.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import overload

from clientbook.domain.client import Client
from clientbook.domain.errors import ClientNotFoundError, DuplicateClientError

Listener = Callable[["ClientRegistry"], None]


def _require_client(client: Client | None) -> Client:
    if client is None:
        msg = "client must not be None"
        raise TypeError(msg)
    return client


class ReadOnlyClients(Sequence[Client]):
    """Live, mutation-free view over a registry's contents."""

    def __init__(self, items: list[Client]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> Client: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Client]: ...

    def __getitem__(self, index: int | slice) -> Client | Sequence[Client]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return repr(self._items)


class ClientRegistry:
    """Identity-unique, insertion-ordered client store."""

    def __init__(self, clients: Iterable[Client] = ()) -> None:
        self._items: list[Client] = []
        self._listeners: list[Listener] = []
        self._version = 0
        initial = list(clients)
        if initial:
            self.replace_all(initial)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        """Counter incremented on every successful mutation."""
        return self._version

    def contains(self, client: Client) -> bool:
        """True if some element has the same identity as *client*."""
        _require_client(client)
        return any(existing.is_same_client(client) for existing in self._items)

    def as_read_only(self) -> ReadOnlyClients:
        return ReadOnlyClients(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Client]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClientRegistry):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ClientRegistry({self._items!r})"

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, client: Client) -> None:
        """Append *client*. Raises DuplicateClientError if its identity exists."""
        if self.contains(client):
            raise DuplicateClientError
        self._items.append(client)
        self._changed()

    def replace(self, target: Client, edited: Client) -> None:
        """Substitute *edited* at *target*'s position."""
        _require_client(target)
        _require_client(edited)
        position = self._index_of(target)
        if position is None:
            raise ClientNotFoundError
        if not target.is_same_client(edited) and any(
            existing.is_same_client(edited)
            for i, existing in enumerate(self._items)
            if i != position
        ):
            raise DuplicateClientError
        self._items[position] = edited
        self._changed()

    def remove(self, client: Client) -> None:
        """Remove the first element with *client*'s identity."""
        _require_client(client)
        position = self._index_of(client)
        if position is None:
            raise ClientNotFoundError
        del self._items[position]
        self._changed()

    def replace_all(self, clients: Iterable[Client]) -> None:
        """Replace the whole contents. Nothing changes if *clients* has duplicates."""
        if clients is None:
            msg = "clients must not be None"
            raise TypeError(msg)
        incoming = [_require_client(c) for c in clients]
        if not _all_unique(incoming):
            raise DuplicateClientError
        self._items[:] = incoming
        self._changed()

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        self._version += 1
        for listener in list(self._listeners):
            listener(self)

    def _index_of(self, client: Client) -> int | None:
        for i, existing in enumerate(self._items):
            if existing.is_same_client(client):
                return i
        return None


def _all_unique(clients: list[Client]) -> bool:
    for i, client in enumerate(clients):
        for other in clients[i + 1 :]:
            if client.is_same_client(other):
                return False
    return True
