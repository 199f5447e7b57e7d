"""The fixed catalog of sort keywords.

The catalog is built once at import time and never mutated. It is the single source for both
sort keyword recognition and the sort part of user-facing help text. `all()` and
`usage_string()` share one order, the help-text order: every default keyword, then every
descending one, then every ascending one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from src.parser.sort_argument import SortArgument, SortDirection, SortField

_FIELD_ORDER: tuple[SortField, ...] = (
    SortField.name,
    SortField.phone,
    SortField.email,
    SortField.address,
)

# Help text lists every field's default keyword first, then descending, then ascending.
_DIRECTION_ORDER: tuple[SortDirection, ...] = (
    SortDirection.default,
    SortDirection.descending,
    SortDirection.ascending,
)


def _bracketed(text: str) -> str:
    return f"[{text}]"


@dataclass(frozen=True)
class SortCatalog:
    """An ordered, immutable set of recognized sort keywords."""

    entries: tuple[SortArgument, ...]

    def all(self) -> tuple[SortArgument, ...]:
        """Every catalog entry, in presentation order."""

        return self.entries

    def contains(self, candidate: object) -> bool:
        """Membership by `(field, direction)`; the literal spelling is ignored."""

        if not isinstance(candidate, SortArgument):
            return False
        return candidate in self.entries

    def usage_string(self) -> str:
        """Every entry in brackets, joined by single spaces, in catalog order."""

        return " ".join(_bracketed(str(entry)) for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SortArgument]:
        return iter(self.entries)


def _build_catalog() -> SortCatalog:
    return SortCatalog(
        entries=tuple(
            SortArgument.of(sort_field, direction)
            for direction in _DIRECTION_ORDER
            for sort_field in _FIELD_ORDER
        )
    )


SORT_CATALOG: SortCatalog = _build_catalog()

MESSAGE_SORT_USAGE: str = SORT_CATALOG.usage_string()
