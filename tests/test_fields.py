"""Tests for validated field value types and the value parsing helpers."""

from __future__ import annotations

import pytest

from src.model.fields import Address, Email, InvalidValueError, Name, Phone, Remark, Tag
from src.parser.values import (
    MESSAGE_INVALID_INDEX,
    parse_address,
    parse_email,
    parse_index,
    parse_name,
    parse_phone,
    parse_remark,
    parse_tags,
)


def test_valid_values_strip_whitespace() -> None:
    assert Name("  Alice Tan ").value == "Alice Tan"
    assert str(Phone(" 98765432 ")) == "98765432"
    assert Email("a.b@c.d").value == "a.b@c.d"
    assert Address("Blk 1, #01-01").value == "Blk 1, #01-01"
    assert Remark("").value == ""
    assert Tag("friends").value == "friends"


@pytest.mark.parametrize(
    ("factory", "raw"),
    [
        (Name, ""),
        (Name, "   "),
        (Name, "peter*"),
        (Phone, "12"),
        (Phone, "91a234"),
        (Email, "noatsign"),
        (Email, "@example.com"),
        (Address, " "),
        (Tag, "best friend"),
    ],
)
def test_invalid_values_raise(factory: type, raw: str) -> None:
    with pytest.raises(InvalidValueError) as exc_info:
        factory(raw)
    assert str(exc_info.value) == factory.MESSAGE_CONSTRAINTS


def test_values_are_immutable_and_hashable() -> None:
    assert Name("Bob") == Name("Bob")
    assert Name("Bob") != Name("bob")
    assert len({Tag("a"), Tag("a"), Tag("b")}) == 2
    assert Name("bob").sort_key() == Name("BOB").sort_key()


def test_optional_parsers_pass_none_through() -> None:
    assert parse_name(None) is None
    assert parse_phone(None) is None
    assert parse_email(None) is None
    assert parse_address(None) is None
    assert parse_remark(None) is None
    assert parse_name("Bob") == Name("Bob")
    assert parse_remark("likes tea") == Remark("likes tea")
    with pytest.raises(InvalidValueError):
        parse_email("bad")


def test_parse_tags_collapses_duplicates() -> None:
    assert parse_tags(["friends", "friends", "work"]) == frozenset({Tag("friends"), Tag("work")})
    assert parse_tags([]) == frozenset()


def test_parse_index() -> None:
    index = parse_index(" 3 ")
    assert index.one_based == 3
    assert index.zero_based == 2


@pytest.mark.parametrize("raw", ["0", "-1", "+1", "1.5", "abc", "", "１"])
def test_parse_index_rejects(raw: str) -> None:
    with pytest.raises(InvalidValueError, match=MESSAGE_INVALID_INDEX):
        parse_index(raw)
