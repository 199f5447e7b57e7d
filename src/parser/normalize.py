"""Argument-line tokenization."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(args: str | None) -> list[str]:
    """Split an argument line on runs of whitespace.

    Blank input yields no tokens. Tokens are otherwise kept as typed (no case folding), since
    keywords are matched case-insensitively further down.
    """

    value = (args or "").strip()
    if not value:
        return []
    return _WHITESPACE_RE.split(value)
