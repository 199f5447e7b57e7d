"""Sort keyword value type.

A sort keyword names a contact field by prefix, optionally followed by a direction word:
`n/` (name, default), `p/asc` (phone, ascending), `e/desc` (email, descending), `a/...` (address).
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from enum import StrEnum


class InvalidSortArgumentError(ValueError):
    """Raised when a token is not a recognized sort keyword."""


class SortField(StrEnum):
    """Contact fields a listing can be ordered by."""

    name = "name"
    phone = "phone"
    email = "email"
    address = "address"


class SortDirection(StrEnum):
    """Requested ordering direction."""

    default = "default"
    ascending = "ascending"
    descending = "descending"


FIELD_PREFIXES: dict[SortField, str] = {
    SortField.name: "n/",
    SortField.phone: "p/",
    SortField.email: "e/",
    SortField.address: "a/",
}

DIRECTION_SYNONYMS: dict[SortDirection, tuple[str, ...]] = {
    SortDirection.default: ("",),
    SortDirection.ascending: ("asc", "ascending"),
    SortDirection.descending: ("desc", "descending"),
}

_PREFIX_TO_FIELD: dict[str, SortField] = {p: f for f, p in FIELD_PREFIXES.items()}

_WORD_TO_DIRECTION: dict[str, SortDirection] = {
    word: direction for direction, words in DIRECTION_SYNONYMS.items() for word in words
}

_SORT_TOKEN_RE = re.compile(r"(?P<prefix>[a-z]/)(?P<direction>[a-z]*)")


@dataclass(frozen=True)
class SortArgument:
    """One recognized sort keyword.

    Equality and hashing use only `(field, direction)`; `literal` remembers the exact token the
    argument was parsed from.
    """

    field: SortField
    direction: SortDirection
    literal: str = dataclasses.field(default="", compare=False)

    @classmethod
    def of(cls, sort_field: SortField, direction: SortDirection) -> SortArgument:
        """Build the canonical argument (canonical literal) for a field and direction."""

        return cls(sort_field, direction, canonical_literal(sort_field, direction))

    @classmethod
    def try_parse(cls, token: str) -> SortArgument | None:
        """Parse a sort keyword, returning `None` for anything that is not one."""

        match = _SORT_TOKEN_RE.fullmatch((token or "").strip().lower())
        if not match:
            return None

        sort_field = _PREFIX_TO_FIELD.get(match.group("prefix"))
        direction = _WORD_TO_DIRECTION.get(match.group("direction"))
        if sort_field is None or direction is None:
            return None
        return cls(sort_field, direction, token)

    @classmethod
    def parse(cls, token: str) -> SortArgument:
        """Parse a sort keyword.

        Raises:
            InvalidSortArgumentError: If `token` is not a sort keyword.
        """

        parsed = cls.try_parse(token)
        if parsed is None:
            raise InvalidSortArgumentError(f"not a sort argument: {token!r}")
        return parsed

    def __str__(self) -> str:
        return self.literal or canonical_literal(self.field, self.direction)


def canonical_literal(sort_field: SortField, direction: SortDirection) -> str:
    """Shortest spelling of a sort keyword, e.g. `n/`, `n/asc`, `n/desc`."""

    return FIELD_PREFIXES[sort_field] + DIRECTION_SYNONYMS[direction][0]
