"""Orderings over contact records.

Both comparisons are pure three-way comparisons returning -1, 0 or 1. Text fields compare
case-insensitively.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any

from src.parser.sort_argument import SortArgument, SortDirection, SortField

if TYPE_CHECKING:
    from src.model.fields import FieldValue
    from src.model.person import Person

_DEFAULT_PRECEDENCE: tuple[SortField, ...] = (
    SortField.name,
    SortField.phone,
    SortField.email,
    SortField.address,
)


def _field_value(person: Person, sort_field: SortField) -> FieldValue:
    return getattr(person, sort_field.value)


def _compare_values(a: FieldValue, b: FieldValue) -> int:
    left, right = a.sort_key(), b.sort_key()
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def compare_default(a: Person, b: Person) -> int:
    """Natural order: name, then phone, then email, then address."""

    for sort_field in _DEFAULT_PRECEDENCE:
        result = _compare_values(_field_value(a, sort_field), _field_value(b, sort_field))
        if result != 0:
            return result
    return 0


def compare_by_sort_argument(a: Person, b: Person, sort_argument: SortArgument | None) -> int:
    """Compare on the single field named by `sort_argument`.

    Default and ascending keep the field order; descending reverses it. Ties compare equal (no
    secondary key). Without a sort argument the natural order is used.
    """

    if sort_argument is None:
        return compare_default(a, b)

    result = _compare_values(
        _field_value(a, sort_argument.field),
        _field_value(b, sort_argument.field),
    )
    if sort_argument.direction == SortDirection.descending:
        return -result
    return result


def sort_key(sort_argument: SortArgument | None = None) -> Callable[[Person], Any]:
    """A `key=` function for `sorted`/`list.sort` implementing the chosen ordering."""

    return cmp_to_key(lambda a, b: compare_by_sort_argument(a, b, sort_argument))


def sort_records(records: Iterable[Person], sort_argument: SortArgument | None = None) -> list[Person]:
    """Return a new, stably sorted list of records."""

    return sorted(records, key=sort_key(sort_argument))
