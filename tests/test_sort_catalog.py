"""Tests for sort keyword parsing and the fixed sort catalog."""

from __future__ import annotations

import itertools

import pytest

from src.parser.catalog import MESSAGE_SORT_USAGE, SORT_CATALOG
from src.parser.sort_argument import (
    InvalidSortArgumentError,
    SortArgument,
    SortDirection,
    SortField,
)


def test_catalog_has_every_field_direction_pair() -> None:
    entries = SORT_CATALOG.all()
    assert len(entries) == 12
    assert len(set(entries)) == 12
    for sort_field, direction in itertools.product(SortField, SortDirection):
        assert SORT_CATALOG.contains(SortArgument(sort_field, direction))


def test_catalog_contains_every_entry() -> None:
    assert all(SORT_CATALOG.contains(entry) for entry in SORT_CATALOG.all())


def test_catalog_rejects_non_arguments() -> None:
    assert not SORT_CATALOG.contains(None)
    assert not SORT_CATALOG.contains("n/")
    assert not SORT_CATALOG.contains(SortArgument.try_parse("alice"))


def test_usage_string_is_bracketed_and_ordered() -> None:
    expected = (
        "[n/] [p/] [e/] [a/] "
        "[n/desc] [p/desc] [e/desc] [a/desc] "
        "[n/asc] [p/asc] [e/asc] [a/asc]"
    )
    assert SORT_CATALOG.usage_string() == expected
    assert MESSAGE_SORT_USAGE == expected


@pytest.mark.parametrize(
    ("token", "sort_field", "direction"),
    [
        ("n/", SortField.name, SortDirection.default),
        ("p/asc", SortField.phone, SortDirection.ascending),
        ("e/desc", SortField.email, SortDirection.descending),
        ("a/ascending", SortField.address, SortDirection.ascending),
        ("N/DESC", SortField.name, SortDirection.descending),
        ("  a/  ", SortField.address, SortDirection.default),
    ],
)
def test_parse_sort_tokens(token: str, sort_field: SortField, direction: SortDirection) -> None:
    arg = SortArgument.parse(token)
    assert arg.field == sort_field
    assert arg.direction == direction
    assert arg.literal == token
    assert SORT_CATALOG.contains(arg)


@pytest.mark.parametrize("token", ["", "alice", "n", "x/", "n/up", "n/asc/", "/asc", "nn/"])
def test_parse_rejects_other_tokens(token: str) -> None:
    assert SortArgument.try_parse(token) is None
    with pytest.raises(InvalidSortArgumentError):
        SortArgument.parse(token)


def test_equality_ignores_literal_spelling() -> None:
    a = SortArgument.parse("n/desc")
    b = SortArgument.parse("N/Descending")
    assert a == b
    assert hash(a) == hash(b)
    assert str(a) == "n/desc"
    assert str(b) == "N/Descending"
    assert a != SortArgument.parse("n/asc")


def test_canonical_literals() -> None:
    assert str(SortArgument.of(SortField.phone, SortDirection.default)) == "p/"
    assert str(SortArgument.of(SortField.email, SortDirection.ascending)) == "e/asc"
