"""Tests for the contact record's keyword predicates and text form."""

from __future__ import annotations

import pytest

from src.model.fields import InvalidValueError, Tag
from src.model.person import Person

ALICE = Person.create(
    "Alice Pauline",
    "94351253",
    "alice@example.com",
    "123, Jurong West Ave 6",
    tags=["friends", "colleagues"],
)


def test_create_validates_fields() -> None:
    with pytest.raises(InvalidValueError):
        Person.create("Alice", "12", "alice@example.com", "street")


def test_name_keyword_match_is_whole_word() -> None:
    assert ALICE.is_name_match_any_keyword(["pauline"])
    assert ALICE.is_name_match_any_keyword(["bob", "ALICE"])
    assert not ALICE.is_name_match_any_keyword(["pau"])
    assert not ALICE.is_name_match_any_keyword([])


def test_tag_keyword_match() -> None:
    assert ALICE.is_tag_set_joint_keyword_set(["Friends"])
    assert not ALICE.is_tag_set_joint_keyword_set(["family"])


def test_search_keywords_match_any_data() -> None:
    assert ALICE.is_search_keywords_match_any_data(["jurong"])
    assert ALICE.is_search_keywords_match_any_data(["4351"])
    assert ALICE.is_search_keywords_match_any_data(["EXAMPLE.COM"])
    assert ALICE.is_search_keywords_match_any_data(["colleag"])
    assert not ALICE.is_search_keywords_match_any_data(["zzz", ""])


def test_same_state_ignores_tags_and_remark() -> None:
    twin = Person.create(
        "Alice Pauline",
        "94351253",
        "alice@example.com",
        "123, Jurong West Ave 6",
        remark="met at work",
    )
    assert ALICE.is_same_state_as(twin)
    assert ALICE.is_same_state_as(ALICE)
    assert not ALICE.is_same_state_as(None)


def test_as_text() -> None:
    assert ALICE.as_text() == (
        "Alice Pauline Phone: 94351253 Email: alice@example.com "
        "Address: 123, Jurong West Ave 6 Tags: [colleagues][friends]"
    )
    assert Tag("friends") in ALICE.tags


@pytest.mark.parametrize("keyword", ["alcie", "ALICE", "paulin", "Pualine", "alise"])
def test_name_close_to_keyword_accepts_near_misses(keyword: str) -> None:
    assert ALICE.is_name_close_to_any_keyword(["zzz", keyword])


@pytest.mark.parametrize("keywords", [[], [""], ["bob"], ["jurong"], ["al"], ["alexander"]])
def test_name_close_to_keyword_rejects_distant_words(keywords: list[str]) -> None:
    assert not ALICE.is_name_close_to_any_keyword(keywords)
