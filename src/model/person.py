"""Contact record used by the find/sort pipeline."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from src.model.comparator import compare_by_sort_argument
from src.model.fields import Address, Email, Name, Phone, Remark, Tag

if TYPE_CHECKING:
    from src.parser.sort_argument import SortArgument


def _lowered(keywords: Iterable[str]) -> list[str]:
    return [k.lower() for k in keywords if k]


def _edit_distance(a: str, b: str) -> int:
    """Levenshtein distance where swapping two adjacent characters counts as one edit."""

    rows = [list(range(len(b) + 1))]
    for i in range(1, len(a) + 1):
        row = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            row[j] = min(row[j - 1] + 1, rows[i - 1][j] + 1, rows[i - 1][j - 1] + cost)
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                row[j] = min(row[j], rows[i - 2][j - 2] + 1)
        rows.append(row)
    return rows[-1][-1]


def _max_typos(keyword: str) -> int:
    # Short words tolerate a single typo.
    return 1 if len(keyword) <= 4 else 2


class Person(BaseModel):
    """An immutable contact. All fields are present and already validated."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Name
    phone: Phone
    email: Email
    address: Address
    remark: Remark = Field(default_factory=lambda: Remark(""))
    tags: frozenset[Tag] = Field(default_factory=frozenset)

    @classmethod
    def create(
            cls,
            name: str,
            phone: str,
            email: str,
            address: str,
            *,
            remark: str = "",
            tags: Iterable[str] = (),
    ) -> Person:
        """Build a person from raw strings.

        Raises:
            InvalidValueError: If any raw value fails its field validation.
        """

        return cls(
            name=Name(name),
            phone=Phone(phone),
            email=Email(email),
            address=Address(address),
            remark=Remark(remark),
            tags=frozenset(Tag(t) for t in tags),
        )

    def is_name_match_any_keyword(self, keywords: Iterable[str]) -> bool:
        """Whether any keyword equals a whole word of the name (case-insensitive)."""

        words = set(self.name.value.lower().split())
        return any(k in words for k in _lowered(keywords))

    def is_name_close_to_any_keyword(self, keywords: Iterable[str]) -> bool:
        """Whether any keyword is a near miss of a word of the name (case-insensitive)."""

        words = self.name.value.lower().split()
        return any(
            _edit_distance(k, w) <= _max_typos(k)
            for k in _lowered(keywords)
            for w in words
        )

    def is_tag_set_joint_keyword_set(self, keywords: Iterable[str]) -> bool:
        """Whether any keyword names one of the tags (case-insensitive)."""

        tag_names = {t.value.lower() for t in self.tags}
        return any(k in tag_names for k in _lowered(keywords))

    def is_search_keywords_match_any_data(self, keywords: Iterable[str]) -> bool:
        """Whether any keyword occurs inside any searchable field (case-insensitive)."""

        haystacks = [
            self.name.value.lower(),
            self.phone.value.lower(),
            self.email.value.lower(),
            self.address.value.lower(),
            *(t.value.lower() for t in self.tags),
        ]
        return any(k in h for k in _lowered(keywords) for h in haystacks)

    def is_same_state_as(self, other: Person | None) -> bool:
        if other is self:
            return True
        return (
                other is not None
                and other.name == self.name
                and other.phone == self.phone
                and other.email == self.email
                and other.address == self.address
        )

    def as_text(self) -> str:
        """Format the person as text, showing all contact details."""

        tags = "".join(f"[{t.value}]" for t in sorted(self.tags, key=lambda t: t.value))
        return (
            f"{self.name} Phone: {self.phone} Email: {self.email} "
            f"Address: {self.address} Tags: {tags}"
        )

    def compare_to(self, other: Person, sort_argument: SortArgument | None = None) -> int:
        """Three-way comparison; `None` selects the default natural order."""

        return compare_by_sort_argument(self, other, sort_argument)
