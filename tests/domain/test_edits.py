"""Tests for tri-state edits and EditDescriptor."""

from __future__ import annotations

import pytest

from clientbook.domain.client import Client
from clientbook.domain.edits import (
    CLEAR,
    UNSET,
    EditDescriptor,
    SetTo,
    from_optional,
    resolve,
)
from clientbook.domain.fields import (
    Description,
    Frequency,
    Name,
    Phone,
    Priority,
    ProductPreference,
    Tag,
)


class TestResolve:
    def test_unset_keeps(self) -> None:
        assert resolve(UNSET, 3) == 3

    def test_clear_erases(self) -> None:
        assert resolve(CLEAR, 3) is None

    def test_set_replaces(self) -> None:
        assert resolve(SetTo(5), 3) == 5
        assert resolve(SetTo(5), None) == 5

    def test_from_optional(self) -> None:
        assert from_optional(None) is CLEAR
        assert from_optional("x") == SetTo("x")


class TestEditDescriptor:
    def test_nothing_edited(self) -> None:
        descriptor = EditDescriptor()
        assert not descriptor.is_any_field_edited()
        assert descriptor.edited_fields() == []

    def test_clear_counts_as_edit(self) -> None:
        assert EditDescriptor(priority=CLEAR).edited_fields() == ["priority"]

    def test_apply_sets_fields(self, alice: Client) -> None:
        descriptor = EditDescriptor(
            name=SetTo(Name("alice tan")),
            phone=SetTo(Phone("81234567")),
            tags=SetTo(frozenset({Tag("vip")})),
        )
        edited = descriptor.apply(alice)
        assert edited.name.full_name == "Alice Tan"
        assert edited.phone.value == "81234567"
        assert edited.tags == frozenset({Tag("vip")})
        assert edited.email == alice.email
        assert edited.product_preference == alice.product_preference

    def test_apply_empty_tag_set_clears_tags(self, alice: Client) -> None:
        edited = EditDescriptor(tags=SetTo(frozenset())).apply(alice)
        assert edited.tags == frozenset()

    def test_apply_leaves_original(self, alice: Client) -> None:
        EditDescriptor(description=SetTo(Description("x"))).apply(alice)
        assert alice.description is None

    def test_preference_replaces_total(self, alice: Client) -> None:
        edited = EditDescriptor(
            product_preference=SetTo(ProductPreference("Tea")),
        ).apply(alice)
        assert edited.product_preference == ProductPreference("Tea", Frequency(1))
        assert edited.total_purchase == 1


class TestPriorityMerge:
    """Every combination of current and requested priority resolves."""

    @pytest.mark.parametrize("current", [None, *Priority])
    def test_unset_keeps_current(self, make_client, current: Priority | None) -> None:
        client = make_client(priority=current)
        assert EditDescriptor(phone=SetTo(Phone("81234567"))).apply(client).priority == current

    @pytest.mark.parametrize("current", [None, *Priority])
    def test_clear_removes(self, make_client, current: Priority | None) -> None:
        assert EditDescriptor(priority=CLEAR).apply(make_client(priority=current)).priority is None

    @pytest.mark.parametrize("current", [None, *Priority])
    @pytest.mark.parametrize("requested", list(Priority))
    def test_set_overrides(
        self, make_client, current: Priority | None, requested: Priority
    ) -> None:
        client = make_client(priority=current)
        assert EditDescriptor(priority=SetTo(requested)).apply(client).priority is requested
