"""The immutable client aggregate.

Two equality notions:
- Weak (``is_same_client``): identity fields name, phone, address.
  Used for duplicate detection.
- Strong (``==``): every field. Used for collection equality.

INVARIANT: ``total_purchase`` is always derived from the product
preference and can never be set independently.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

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

_MANDATORY_FIELDS = ("name", "phone", "email", "address", "tags")


@dataclass(frozen=True)
class Client:
    """A client record. Editing always produces a new instance."""

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag]
    product_preference: ProductPreference | None = None
    description: Description | None = None
    priority: Priority | None = None

    def __post_init__(self) -> None:
        for field_name in _MANDATORY_FIELDS:
            if getattr(self, field_name) is None:
                msg = f"Client field {field_name!r} must not be None"
                raise TypeError(msg)
        object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def total_purchase(self) -> int:
        if self.product_preference is None:
            return 0
        return self.product_preference.frequency.count

    def is_same_client(self, other: Client | None) -> bool:
        """Return True if *other* has the same identity fields."""
        if other is self:
            return True
        return (
            other is not None
            and other.name == self.name
            and other.phone == self.phone
            and other.address == self.address
        )

    def replace(self, **changes: Any) -> Client:
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)

    def sorted_tags(self) -> list[Tag]:
        """Tags in a stable display order."""
        return sorted(self.tags, key=lambda tag: tag.name.lower())

    def summary(self) -> str:
        """One-line description used in command feedback."""
        parts = [
            f"{self.name}",
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Address: {self.address}",
            f"Tags: {''.join(str(tag) for tag in self.sorted_tags())}",
        ]
        if self.product_preference is not None:
            parts.append(f"Product Preference: {self.product_preference}")
        if self.description is not None:
            parts.append(f"Description: {self.description}")
        if self.priority is not None:
            parts.append(f"Priority: {self.priority}")
        return "; ".join(parts)
