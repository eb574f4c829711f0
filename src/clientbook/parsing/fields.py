"""Field parsers: raw text to validated value types.

Every parser trims surrounding whitespace and raises :class:`ParseError`
carrying the field's fixed constraint message when the text is invalid.
"""

from __future__ import annotations

from collections.abc import Iterable

from clientbook.domain.fields import (
    ADDRESS_CONSTRAINTS,
    EMAIL_CONSTRAINTS,
    FREQUENCY_CONSTRAINTS,
    NAME_CONSTRAINTS,
    PHONE_CONSTRAINTS,
    PREFERENCE_CONSTRAINTS,
    PRIORITY_CONSTRAINTS,
    TAG_CONSTRAINTS,
    Address,
    Description,
    Email,
    Frequency,
    Name,
    Phone,
    Priority,
    ProductPreference,
    Tag,
    is_valid_address,
    is_valid_email,
    is_valid_frequency,
    is_valid_name,
    is_valid_phone,
    is_valid_tag,
)
from clientbook.parsing.errors import MESSAGE_INVALID_INDEX, ParseError

MESSAGE_FREQUENCY_WITHOUT_PREFERENCE = (
    "Frequency is not allowed as an alone parameter.\n"
    "Please include the product preference you would like to set the frequency of."
)


def parse_index(text: str) -> int:
    """Parse a 1-based index."""
    trimmed = text.strip()
    if not (trimmed.isascii() and trimmed.isdigit()) or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX, code="INVALID_INDEX")
    return int(trimmed)


def parse_name(text: str) -> Name:
    trimmed = text.strip()
    if not is_valid_name(trimmed):
        raise ParseError(NAME_CONSTRAINTS)
    return Name(trimmed)


def parse_phone(text: str) -> Phone:
    trimmed = text.strip()
    if not is_valid_phone(trimmed):
        raise ParseError(PHONE_CONSTRAINTS)
    return Phone(trimmed)


def parse_email(text: str) -> Email:
    trimmed = text.strip()
    if not is_valid_email(trimmed):
        raise ParseError(EMAIL_CONSTRAINTS)
    return Email(trimmed)


def parse_address(text: str) -> Address:
    trimmed = text.strip()
    if not is_valid_address(trimmed):
        raise ParseError(ADDRESS_CONSTRAINTS)
    return Address(trimmed)


def parse_tag(text: str) -> Tag:
    trimmed = text.strip()
    if not is_valid_tag(trimmed):
        raise ParseError(TAG_CONSTRAINTS)
    return Tag(trimmed)


def parse_tags(values: Iterable[str]) -> frozenset[Tag]:
    """Parse tag values. A single blank ``tag/`` means "no tags"."""
    items = list(values)
    if len(items) == 1 and not items[0].strip():
        return frozenset()
    return frozenset(parse_tag(v) for v in items)


def parse_frequency(text: str | None) -> Frequency | None:
    """Parse a purchase count. Absent or blank text means "not provided"."""
    if text is None or not text.strip():
        return None
    trimmed = text.strip()
    if not (trimmed.isascii() and trimmed.isdigit()) or not is_valid_frequency(int(trimmed)):
        raise ParseError(FREQUENCY_CONSTRAINTS)
    return Frequency(int(trimmed))


def parse_product_preference(
    label: str | None,
    frequency: str | None = None,
) -> ProductPreference | None:
    """Parse ``pref/`` and ``freq/`` values together.

    Returns None when neither prefix was given. A frequency without a
    preference, or a blank preference label, is rejected. A preference
    without a frequency counts one purchase.
    """
    if label is None:
        if frequency is not None:
            raise ParseError(MESSAGE_FREQUENCY_WITHOUT_PREFERENCE)
        return None
    trimmed = label.strip()
    if not trimmed:
        raise ParseError(PREFERENCE_CONSTRAINTS)
    parsed_frequency = parse_frequency(frequency)
    if parsed_frequency is None:
        return ProductPreference(trimmed)
    return ProductPreference(trimmed, parsed_frequency)


def parse_description(text: str | None) -> Description | None:
    """Blank text means "no description"."""
    if text is None or not text.strip():
        return None
    return Description(text.strip())


def parse_priority(text: str | None) -> Priority | None:
    """Blank text means "no priority"."""
    if text is None or not text.strip():
        return None
    trimmed = text.strip()
    if not (trimmed.isascii() and trimmed.isdigit()):
        raise ParseError(PRIORITY_CONSTRAINTS)
    try:
        return Priority.from_int(int(trimmed))
    except ValueError:
        raise ParseError(PRIORITY_CONSTRAINTS) from None
