"""Helpers shared by command argument parsers.

Optional raw values pass through as `None`; present values become validated field types. Invalid
values raise `InvalidValueError` from the field type, unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.model.fields import Address, Email, InvalidValueError, Name, Phone, Remark, Tag

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."


@dataclass(frozen=True)
class Index:
    """A list position, stored zero-based."""

    zero_based: int

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        if one_based < 1:
            raise InvalidValueError(MESSAGE_INVALID_INDEX)
        return cls(zero_based=one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1


def parse_index(one_based: str) -> Index:
    """Parse a one-based index; surrounding whitespace is ignored.

    Raises:
        InvalidValueError: If the text is not a non-zero unsigned integer.
    """

    value = (one_based or "").strip()
    if not value.isascii() or not value.isdigit() or int(value) == 0:
        raise InvalidValueError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(value))


def parse_name(name: str | None) -> Name | None:
    return Name(name) if name is not None else None


def parse_phone(phone: str | None) -> Phone | None:
    return Phone(phone) if phone is not None else None


def parse_email(email: str | None) -> Email | None:
    return Email(email) if email is not None else None


def parse_address(address: str | None) -> Address | None:
    return Address(address) if address is not None else None


def parse_remark(remark: str | None) -> Remark | None:
    return Remark(remark) if remark is not None else None


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    """Parse tag names into a set; duplicates collapse."""

    return frozenset(Tag(name) for name in tags)
