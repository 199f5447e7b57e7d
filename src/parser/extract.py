"""Pull typed tokens (integer, phone, email) out of unstructured text.

Only the leftmost match is used. Removing a token strips both remaining halves and rejoins them
with exactly one space, so `"call 91234567  now"` becomes `"call now"`. When one half is empty
there is no separator, and removing a token that is the whole text gives `""`.

The phone and email patterns are the ones `Phone` and `Email` validate with. When a token could
match more than one kind (a phone number is also an integer), callers pick the extractor for the
kind they expect.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from src.model.fields import Email, Phone

INT_PATTERN = re.compile(r"-?\d+", flags=re.ASCII)


class TokenNotFoundError(ValueError):
    """Raised when the text contains no token of the requested kind."""


@dataclass(frozen=True)
class ExtractionResult:
    """The matched token and the text left once it is removed."""

    matched_text: str
    residual: str


@dataclass(frozen=True)
class TokenExtractor:
    """Leftmost-match scanner for one token kind."""

    kind: str
    pattern: re.Pattern[str]

    def _search(self, text: str) -> re.Match[str]:
        match = self.pattern.search(text)
        if match is None:
            raise TokenNotFoundError(f"no {self.kind} found")
        return match

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def first(self, text: str) -> str:
        """Return the first matching token.

        Raises:
            TokenNotFoundError: If there is no match.
        """

        return self._search(text).group()

    def extract(self, text: str) -> ExtractionResult:
        """Return the first matching token together with the residual text.

        Raises:
            TokenNotFoundError: If there is no match.
        """

        match = self._search(text)
        before = text[: match.start()].strip()
        after = text[match.end():].strip()
        residual = " ".join(part for part in (before, after) if part)
        return ExtractionResult(matched_text=match.group(), residual=residual)

    def remove_first(self, text: str) -> str:
        return self.extract(text).residual


INT_EXTRACTOR = TokenExtractor(kind="integer", pattern=INT_PATTERN)
PHONE_EXTRACTOR = TokenExtractor(kind="phone", pattern=Phone.PATTERN)
EMAIL_EXTRACTOR = TokenExtractor(kind="email", pattern=Email.PATTERN)


def try_extract_int(text: str) -> bool:
    """Whether `text` contains an (optionally signed) decimal integer."""

    return INT_EXTRACTOR.matches(text)


def first_int(text: str) -> int:
    """Return the value of the first integer in `text`.

    Raises:
        TokenNotFoundError: If `text` contains no integer.
    """

    return int(INT_EXTRACTOR.first(text))


def remove_first_int(text: str) -> str:
    return INT_EXTRACTOR.remove_first(text)


def extract_first_int(text: str) -> ExtractionResult:
    return INT_EXTRACTOR.extract(text)


def try_extract_phone(text: str) -> bool:
    return PHONE_EXTRACTOR.matches(text)


def first_phone(text: str) -> str:
    return PHONE_EXTRACTOR.first(text)


def remove_first_phone(text: str) -> str:
    return PHONE_EXTRACTOR.remove_first(text)


def extract_first_phone(text: str) -> ExtractionResult:
    return PHONE_EXTRACTOR.extract(text)


def try_extract_email(text: str) -> bool:
    return EMAIL_EXTRACTOR.matches(text)


def first_email(text: str) -> str:
    return EMAIL_EXTRACTOR.first(text)


def remove_first_email(text: str) -> str:
    return EMAIL_EXTRACTOR.remove_first(text)


def extract_first_email(text: str) -> ExtractionResult:
    return EMAIL_EXTRACTOR.extract(text)
