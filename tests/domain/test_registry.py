"""Tests for ClientRegistry — identity-unique ordered storage."""

from __future__ import annotations

import pytest

from clientbook.domain.client import Client
from clientbook.domain.errors import ClientNotFoundError, DuplicateClientError
from clientbook.domain.registry import ClientRegistry


class TestQueries:
    def test_empty(self) -> None:
        registry = ClientRegistry()
        assert len(registry) == 0
        assert list(registry) == []

    def test_contains_uses_identity(self, make_client) -> None:
        registry = ClientRegistry([make_client()])
        assert registry.contains(make_client(email="other@example.com", tags=()))
        assert not registry.contains(make_client(phone="81234567"))

    def test_contains_none(self) -> None:
        with pytest.raises(TypeError):
            ClientRegistry().contains(None)  # type: ignore[arg-type]

    def test_equality_is_order_sensitive(self, alice: Client, benson: Client) -> None:
        assert ClientRegistry([alice, benson]) == ClientRegistry([alice, benson])
        assert ClientRegistry([alice, benson]) != ClientRegistry([benson, alice])

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(ClientRegistry())

    def test_repr(self, alice: Client) -> None:
        assert "Alice Pauline" in repr(ClientRegistry([alice]))


class TestAdd:
    def test_appends(self, alice: Client, benson: Client) -> None:
        registry = ClientRegistry()
        registry.add(benson)
        registry.add(alice)
        assert list(registry) == [benson, alice]

    def test_duplicate_rejected(self, alice: Client, make_client) -> None:
        registry = ClientRegistry([alice])
        with pytest.raises(DuplicateClientError):
            registry.add(make_client(email="new@example.com"))
        assert len(registry) == 1

    def test_none_rejected(self) -> None:
        with pytest.raises(TypeError):
            ClientRegistry().add(None)  # type: ignore[arg-type]


class TestReplace:
    def test_keeps_position_and_size(self, typical_clients: list[Client], make_client) -> None:
        registry = ClientRegistry(typical_clients)
        target = typical_clients[1]
        edited = target.replace(name=make_client(name="Zed Zee").name)
        registry.replace(target, edited)
        assert len(registry) == 3
        assert list(registry)[1] == edited

    def test_same_identity_different_fields(self, alice: Client, make_client) -> None:
        registry = ClientRegistry([alice])
        edited = make_client(email="changed@example.com")
        registry.replace(alice, edited)
        assert list(registry) == [edited]

    def test_missing_target(self, alice: Client, benson: Client) -> None:
        registry = ClientRegistry([alice])
        with pytest.raises(ClientNotFoundError):
            registry.replace(benson, benson)

    def test_conflict_with_other_element(self, alice: Client, benson: Client) -> None:
        registry = ClientRegistry([alice, benson])
        clash = alice.replace(name=benson.name, phone=benson.phone, address=benson.address)
        with pytest.raises(DuplicateClientError):
            registry.replace(alice, clash)
        assert list(registry) == [alice, benson]


class TestRemoveAndReplaceAll:
    def test_remove(self, alice: Client, benson: Client) -> None:
        registry = ClientRegistry([alice, benson])
        registry.remove(alice)
        assert list(registry) == [benson]

    def test_remove_missing(self, alice: Client) -> None:
        with pytest.raises(ClientNotFoundError):
            ClientRegistry().remove(alice)

    def test_replace_all(self, alice: Client, benson: Client, carl: Client) -> None:
        registry = ClientRegistry([alice])
        registry.replace_all([benson, carl])
        assert list(registry) == [benson, carl]

    def test_replace_all_duplicates_leaves_registry(self, alice: Client, benson: Client) -> None:
        registry = ClientRegistry([benson])
        with pytest.raises(DuplicateClientError):
            registry.replace_all([alice, alice.replace(tags=frozenset())])
        assert list(registry) == [benson]

    def test_replace_all_none(self) -> None:
        with pytest.raises(TypeError):
            ClientRegistry().replace_all(None)  # type: ignore[arg-type]

    def test_iteration_is_a_snapshot(self, alice: Client, benson: Client) -> None:
        registry = ClientRegistry([alice, benson])
        seen = []
        for client in registry:
            seen.append(client)
            if client is alice:
                registry.remove(benson)
        assert seen == [alice, benson]


class TestReadOnlyView:
    def test_is_live(self, alice: Client, benson: Client) -> None:
        registry = ClientRegistry([alice])
        view = registry.as_read_only()
        registry.add(benson)
        assert len(view) == 2
        assert view[1] == benson
        assert view[0:1] == (alice,)

    def test_has_no_mutators(self) -> None:
        view = ClientRegistry().as_read_only()
        assert not hasattr(view, "append")
        assert not hasattr(view, "add")


class TestChangeNotification:
    def test_version_bumps_on_mutation(self, alice: Client, benson: Client) -> None:
        registry = ClientRegistry()
        registry.add(alice)
        registry.add(benson)
        registry.remove(alice)
        assert registry.version == 3

    def test_failed_mutation_is_silent(self, alice: Client) -> None:
        registry = ClientRegistry([alice])
        calls: list[ClientRegistry] = []
        registry.subscribe(calls.append)
        with pytest.raises(DuplicateClientError):
            registry.add(alice)
        assert calls == []
        assert registry.version == 1

    def test_unsubscribe(self, alice: Client, benson: Client) -> None:
        registry = ClientRegistry()
        calls: list[ClientRegistry] = []
        unsubscribe = registry.subscribe(calls.append)
        registry.add(alice)
        unsubscribe()
        registry.add(benson)
        assert calls == [registry]
