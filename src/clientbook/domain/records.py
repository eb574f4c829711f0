"""Serializable client record — the persisted and payload schema.

``{name, phone, email, address, tags, productPreference?: {label,
frequency}, description?, priority?}``

Records are plain data; :meth:`ClientRecord.to_client` runs every value
type's validation and raises ``ValueError`` on bad input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

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


class PreferenceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    frequency: int = 1


class ClientRecord(BaseModel):
    """One client as stored on disk."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    phone: str
    email: str
    address: str
    tags: list[str] = Field(default_factory=list)
    product_preference: PreferenceRecord | None = Field(default=None, alias="productPreference")
    description: str | None = None
    priority: int | None = None

    @classmethod
    def from_client(cls, client: Client) -> ClientRecord:
        preference = client.product_preference
        return cls(
            name=client.name.full_name,
            phone=client.phone.value,
            email=client.email.value,
            address=client.address.value,
            tags=[tag.name for tag in client.sorted_tags()],
            product_preference=(
                PreferenceRecord(label=preference.label, frequency=preference.frequency.count)
                if preference is not None
                else None
            ),
            description=client.description.text if client.description is not None else None,
            priority=int(client.priority) if client.priority is not None else None,
        )

    def to_client(self) -> Client:
        preference = None
        if self.product_preference is not None:
            preference = ProductPreference(
                self.product_preference.label,
                Frequency(self.product_preference.frequency),
            )
        description = None
        if self.description is not None and self.description.strip():
            description = Description(self.description)
        return Client(
            name=Name(self.name),
            phone=Phone(self.phone),
            email=Email(self.email),
            address=Address(self.address),
            tags=frozenset(Tag(t) for t in self.tags),
            product_preference=preference,
            description=description,
            priority=Priority.from_int(self.priority) if self.priority is not None else None,
        )

    def dump(self) -> dict[str, object]:
        """JSON-ready dict using the camelCase wire names, optional fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
