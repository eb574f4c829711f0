"""Tri-state edits and the immutable edit descriptor.

Every editable field is one of:
- ``UNSET``: the field was not mentioned; keep the current value.
- ``CLEAR``: the field was mentioned with no value; remove it.
- ``SetTo(value)``: replace the current value.

Plain ``None`` cannot tell "leave untouched" from "erase", so it is
never used to mean either.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from clientbook.domain.client import Client
from clientbook.domain.fields import (
    Address,
    Description,
    Email,
    Name,
    Phone,
    Priority,
    ProductPreference,
    Tag,
)


class EditState(Enum):
    UNSET = "unset"
    CLEAR = "clear"


UNSET = EditState.UNSET
CLEAR = EditState.CLEAR


@dataclass(frozen=True)
class SetTo[T]:
    value: T


type Edit[T] = EditState | SetTo[T]


def resolve[T](edit: Edit[T], current: T | None) -> T | None:
    """Apply *edit* to *current*."""
    if edit is UNSET:
        return current
    if edit is CLEAR:
        return None
    assert isinstance(edit, SetTo)
    return edit.value


def from_optional[T](value: T | None) -> Edit[T]:
    """Map a parsed optional value onto an edit: None clears, anything else sets."""
    return CLEAR if value is None else SetTo(value)


@dataclass(frozen=True)
class EditDescriptor:
    """Immutable partial update for a client.

    Identity fields, email and tags can only be set. Product preference
    can only be set (a blank ``pref/`` is rejected while parsing).
    Description and priority can also be cleared.
    """

    name: Edit[Name] = UNSET
    phone: Edit[Phone] = UNSET
    email: Edit[Email] = UNSET
    address: Edit[Address] = UNSET
    tags: Edit[frozenset[Tag]] = UNSET
    product_preference: Edit[ProductPreference] = UNSET
    description: Edit[Description] = UNSET
    priority: Edit[Priority] = UNSET

    def edited_fields(self) -> list[str]:
        return [name for name, edit in self._edits() if edit is not UNSET]

    def is_any_field_edited(self) -> bool:
        return bool(self.edited_fields())

    def apply(self, client: Client) -> Client:
        """Build the edited client. The original is left untouched."""
        tags = resolve(self.tags, client.tags)
        return Client(
            name=resolve(self.name, client.name),  # type: ignore[arg-type]
            phone=resolve(self.phone, client.phone),  # type: ignore[arg-type]
            email=resolve(self.email, client.email),  # type: ignore[arg-type]
            address=resolve(self.address, client.address),  # type: ignore[arg-type]
            tags=tags if tags is not None else frozenset(),
            product_preference=resolve(self.product_preference, client.product_preference),
            description=resolve(self.description, client.description),
            priority=resolve(self.priority, client.priority),
        )

    def _edits(self) -> list[tuple[str, Edit[object]]]:
        return [
            ("name", self.name),
            ("phone", self.phone),
            ("email", self.email),
            ("address", self.address),
            ("tags", self.tags),
            ("product_preference", self.product_preference),
            ("description", self.description),
            ("priority", self.priority),
        ]
