"""Split a tokenized argument line into search keywords and sort arguments.

Keywords come first; once a sort keyword appears, every remaining token must also be a sort
keyword. A stray word after sorting syntax starts is an error, never a silent extra keyword.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from src.parser.catalog import SORT_CATALOG
from src.parser.sort_argument import SortArgument

logger = logging.getLogger(__name__)

SortResolution = Literal["first", "last"]


class MalformedSortError(ValueError):
    """Raised when a non-sort token follows a sort keyword.

    `message` is the caller-supplied text, unchanged, so it can be shown to the user as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ParsedArgumentLine:
    """Classification result. Both sequences keep input order."""

    keywords: tuple[str, ...]
    sort_arguments: tuple[SortArgument, ...]

    def primary_sort_argument(self, resolution: SortResolution = "first") -> SortArgument | None:
        """The sort argument a consumer should apply (`None` when none were given).

        Repeated or conflicting sort keywords are kept by classification; this picks either the
        first or the last one.
        """

        if not self.sort_arguments:
            return None
        if resolution == "last":
            return self.sort_arguments[-1]
        return self.sort_arguments[0]


def classify(tokens: Iterable[str], error_message: str) -> ParsedArgumentLine:
    """Partition `tokens` into keywords and sort arguments.

    Raises:
        MalformedSortError: If a non-sort token appears after a sort keyword. The error carries
            `error_message` verbatim.
    """

    keywords: list[str] = []
    sort_arguments: list[SortArgument] = []

    for token in tokens:
        candidate = SortArgument.try_parse(token)
        if not SORT_CATALOG.contains(candidate):
            if sort_arguments:
                logger.info("malformed sort token=%r after=%d sort args", token, len(sort_arguments))
                raise MalformedSortError(error_message)
            keywords.append(token)
            continue
        sort_arguments.append(candidate)

    logger.debug("classified keywords=%d sort_args=%d", len(keywords), len(sort_arguments))
    return ParsedArgumentLine(keywords=tuple(keywords), sort_arguments=tuple(sort_arguments))
