"""Find command arguments: search keywords followed by optional sort keywords.

Example: `alice bob n/desc` searches for "alice" or "bob" and orders matches by name, descending.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from src.model.comparator import sort_records
from src.model.person import Person
from src.parser.catalog import MESSAGE_SORT_USAGE
from src.parser.classifier import SortResolution, classify
from src.parser.normalize import tokenize
from src.parser.sort_argument import SortArgument

logger = logging.getLogger(__name__)


class FindArgumentsError(ValueError):
    """Raised when a find command has no arguments at all."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"

FIND_COMMAND_WORD = "find"

FIND_MESSAGE_USAGE = (
    f"{FIND_COMMAND_WORD}: Finds all persons whose details contain any of the specified keywords "
    "(case-insensitive) and displays them as a list, optionally sorted.\n"
    f"Parameters: KEYWORD [MORE_KEYWORDS]... {MESSAGE_SORT_USAGE}\n"
    f"Example: {FIND_COMMAND_WORD} alice bob charlie n/desc"
)


@dataclass(frozen=True)
class FindQuery:
    """Parsed find arguments plus the sort argument that will actually be applied."""

    keywords: tuple[str, ...]
    sort_arguments: tuple[SortArgument, ...]
    sort_argument: SortArgument | None

    def matches(self, person: Person) -> bool:
        if not self.keywords:
            return True
        return person.is_search_keywords_match_any_data(self.keywords)

    def apply(self, people: Iterable[Person]) -> list[Person]:
        """Filter `people` by keywords, then order them."""

        return sort_records((p for p in people if self.matches(p)), self.sort_argument)


def parse_find_args(args: str, *, resolution: SortResolution = "first") -> FindQuery:
    """Parse the argument line of a find command.

    Raises:
        FindArgumentsError: If the line is blank.
        MalformedSortError: If a keyword follows a sort keyword.

    Both errors carry the formatted find usage as their message.
    """

    error_message = MESSAGE_INVALID_COMMAND_FORMAT.format(FIND_MESSAGE_USAGE)

    tokens = tokenize(args)
    if not tokens:
        raise FindArgumentsError(error_message)

    parsed = classify(tokens, error_message)
    sort_argument = parsed.primary_sort_argument(resolution)

    logger.debug(
        "find keywords=%d sort_args=%d sort=%s",
        len(parsed.keywords),
        len(parsed.sort_arguments),
        sort_argument,
    )
    return FindQuery(
        keywords=parsed.keywords,
        sort_arguments=parsed.sort_arguments,
        sort_argument=sort_argument,
    )
