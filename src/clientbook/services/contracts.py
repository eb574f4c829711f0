"""Typed payload contracts for command results.

These models validate payload shapes before they leave the service
layer so renderers and ``--json`` consumers can rely on the keys.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from clientbook.domain.client import Client
from clientbook.domain.records import ClientRecord


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


class ClientItem(ClientRecord):
    """One client as shown to the user, with its display index and total."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    index: int | None = None
    total_purchase: int = Field(alias="totalPurchase")


def client_item(client: Client, *, index: int | None = None) -> dict[str, Any]:
    record = ClientRecord.from_client(client).model_dump()
    return dump_validated(
        ClientItem,
        {**record, "index": index, "total_purchase": client.total_purchase},
    )


class ClientListData(BaseModel):
    """Payload contract for list-shaped results (list, find, filter, rank)."""

    count: int
    items: list[ClientItem]


def client_list(clients: Sequence[Client]) -> dict[str, Any]:
    items = [client_item(c, index=i) for i, c in enumerate(clients, start=1)]
    return dump_validated(ClientListData, {"count": len(items), "items": items})
