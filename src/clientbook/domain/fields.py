"""Validated value types that make up a client record.

Every type is immutable and validates on construction, raising
``ValueError`` with its fixed constraint message. The parsers in
:mod:`clientbook.parsing.fields` check the ``is_valid_*`` predicates
first so that users see the same message either way.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

NAME_CONSTRAINTS = (
    "Names should only contain letters and single spaces between words, and it should not be blank"
)
PHONE_CONSTRAINTS = (
    "Phone numbers should be exactly 8 digits, start with 3, 6, 8 or 9, "
    "and should not start with 99"
)
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
    "1. The local-part should only contain alphanumeric characters and these special "
    "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
    "with any special characters.\n"
    "2. This is followed by a '@' and then a domain name. The domain name is made up of "
    "domain labels separated by periods.\n"
    "The domain name must:\n"
    "    - end with a domain label at least 2 characters long\n"
    "    - have each domain label start and end with alphanumeric characters\n"
    "    - have each domain label consist of alphanumeric characters, separated only by "
    "hyphens, if any."
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"
FREQUENCY_CONSTRAINTS = "Frequency should be a non-negative integer no larger than 2147483647"
PREFERENCE_CONSTRAINTS = "Product preference cannot be empty or whitespace only"
PRIORITY_CONSTRAINTS = "Priority should be an integer from 1 (lowest) to 4 (highest)"

MAX_FREQUENCY = 2_147_483_647
DEFAULT_FREQUENCY = 1

_NAME_PATTERN = re.compile(r"^[A-Za-z]+( [A-Za-z]+)*$")
_PHONE_PATTERN = re.compile(r"^[3689]\d{7}$")
_LOCAL_PART = r"[A-Za-z0-9]+(?:[+_.\-][A-Za-z0-9]+)*"
_DOMAIN_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_LAST_LABEL = r"[A-Za-z0-9][A-Za-z0-9-]*[A-Za-z0-9]"
_EMAIL_PATTERN = re.compile(rf"^{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*{_LAST_LABEL}$")
_TAG_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


# --- Predicates ---


def is_valid_name(text: str) -> bool:
    return _NAME_PATTERN.match(text) is not None


def is_valid_phone(text: str) -> bool:
    return _PHONE_PATTERN.match(text) is not None and not text.startswith("99")


def is_valid_email(text: str) -> bool:
    return _EMAIL_PATTERN.match(text) is not None


def is_valid_address(text: str) -> bool:
    return bool(text) and not text[0].isspace()


def is_valid_tag(text: str) -> bool:
    return _TAG_PATTERN.match(text) is not None


def is_valid_frequency(value: int) -> bool:
    return 0 <= value <= MAX_FREQUENCY


def _require(valid: bool, message: str) -> None:
    if not valid:
        raise ValueError(message)


# --- Identity fields ---


@dataclass(frozen=True)
class Name:
    """A client's full name, stored title-cased."""

    full_name: str

    def __post_init__(self) -> None:
        _require(is_valid_name(self.full_name), NAME_CONSTRAINTS)
        normalized = " ".join(word.capitalize() for word in self.full_name.split(" "))
        object.__setattr__(self, "full_name", normalized)

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Phone:
    value: str

    def __post_init__(self) -> None:
        _require(is_valid_phone(self.value), PHONE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str

    def __post_init__(self) -> None:
        _require(is_valid_address(self.value), ADDRESS_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


# --- Data fields ---


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        _require(is_valid_email(self.value), EMAIL_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    name: str

    def __post_init__(self) -> None:
        _require(is_valid_tag(self.name), TAG_CONSTRAINTS)

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True)
class Frequency:
    """Number of recorded purchases of the preferred product."""

    count: int

    def __post_init__(self) -> None:
        _require(is_valid_frequency(self.count), FREQUENCY_CONSTRAINTS)

    def __str__(self) -> str:
        return str(self.count)


@dataclass(frozen=True)
class ProductPreference:
    """A preferred product label and how often it has been bought.

    A preference recorded without an explicit frequency counts as one
    purchase.
    """

    label: str
    frequency: Frequency = field(default_factory=lambda: Frequency(DEFAULT_FREQUENCY))

    def __post_init__(self) -> None:
        _require(bool(self.label.strip()), PREFERENCE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True, eq=False)
class Description:
    """Free-form notes about a client. Equality ignores surrounding whitespace."""

    text: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Description):
            return NotImplemented
        return self.text.strip() == other.text.strip()

    def __hash__(self) -> int:
        return hash(self.text.strip())

    def __str__(self) -> str:
        return self.text


class Priority(IntEnum):
    """Client priority levels, lowest to highest."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    VIP = 4

    @classmethod
    def from_int(cls, level: int) -> Priority:
        try:
            return cls(level)
        except ValueError:
            raise ValueError(PRIORITY_CONSTRAINTS) from None

    def __str__(self) -> str:
        return f"{self.value} ({self.name})"

    # IntEnum formats as a bare int otherwise.
    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
