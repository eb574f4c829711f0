"""Shared pytest fixtures for clientbook tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from clientbook.config.settings import ClientbookSettings
from clientbook.domain.client import Client
from clientbook.domain.fields import (
    Address,
    Description,
    Email,
    Frequency,
    Name,
    Phone,
    Priority,
    ProductPreference,
    Tag,
)
from clientbook.infrastructure.workspace import Workspace

ClientFactory = Callable[..., Client]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's CLIENTBOOK_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("CLIENTBOOK_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo the handler swap done by configure_logging() in CLI tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("clientbook").setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def book_root(tmp_path: Path) -> Path:
    """Temporary directory holding a minimal clientbook.toml."""
    (tmp_path / "clientbook.toml").write_text('[storage]\ndata_file = "data/clients.json"\n')
    return tmp_path


@pytest.fixture
def settings(book_root: Path) -> ClientbookSettings:
    config = book_root / "clientbook.toml"
    return ClientbookSettings.from_cli(root=book_root, config_path=str(config))


@pytest.fixture
def workspace(settings: ClientbookSettings) -> Workspace:
    """Empty, loaded workspace on a temp directory."""
    ws = Workspace(settings)
    ws.load()
    return ws


@pytest.fixture
def _isolated_book(book_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp book root so the CLI uses an isolated data file.

    Use via ``@pytest.mark.usefixtures("_isolated_book")`` on command test
    classes.
    """
    monkeypatch.chdir(book_root)


# ---------------------------------------------------------------------------
# Client builders
# ---------------------------------------------------------------------------


def _build_client(
    name: str = "Alice Pauline",
    phone: str = "94351253",
    email: str = "alice@example.com",
    address: str = "123, Jurong West Ave 6, #08-111",
    tags: tuple[str, ...] = ("friends",),
    preference: str | None = None,
    frequency: int | None = None,
    description: str | None = None,
    priority: int | None = None,
    **overrides: Any,
) -> Client:
    product_preference = None
    if preference is not None:
        product_preference = (
            ProductPreference(preference)
            if frequency is None
            else ProductPreference(preference, Frequency(frequency))
        )
    client = Client(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address),
        tags=frozenset(Tag(t) for t in tags),
        product_preference=product_preference,
        description=Description(description) if description is not None else None,
        priority=Priority(priority) if priority is not None else None,
    )
    return client.replace(**overrides) if overrides else client


@pytest.fixture
def make_client() -> ClientFactory:
    """Factory for valid clients; keyword arguments override the defaults."""
    return _build_client


@pytest.fixture
def alice() -> Client:
    return _build_client(preference="Shampoo", frequency=7, priority=3)


@pytest.fixture
def benson() -> Client:
    return _build_client(
        name="Benson Meier",
        phone="98765432",
        email="johnd@example.com",
        address="311, Clementi Ave 2, #02-25",
        tags=("owesMoney", "friends"),
        preference="Coffee beans",
    )


@pytest.fixture
def carl() -> Client:
    return _build_client(
        name="Carl Kurz",
        phone="95352563",
        email="heinz@example.com",
        address="wall street",
        tags=(),
        priority=1,
    )


@pytest.fixture
def typical_clients(alice: Client, benson: Client, carl: Client) -> list[Client]:
    return [carl, alice, benson]


@pytest.fixture
def populated(workspace: Workspace, typical_clients: list[Client]) -> Workspace:
    """Workspace holding the typical clients (not saved to disk)."""
    workspace.registry.replace_all(typical_clients)
    return workspace
