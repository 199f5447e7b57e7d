"""Application composition root.

This module wires configuration into the find pipeline for callers that hold a contact list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from src.config.logging import configure_logging
from src.config.settings import Settings, load_settings
from src.model.person import Person
from src.parser.find import FindQuery, parse_find_args

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class App:
    """Shared settings for command handlers."""

    settings: Settings

    def parse_find(self, args: str) -> FindQuery:
        return parse_find_args(args, resolution=self.settings.sort_resolution)

    def find(self, args: str, people: Iterable[Person]) -> list[Person]:
        """Parse find arguments and return the matching people in order.

        Raises:
            FindArgumentsError: If the arguments are blank.
            MalformedSortError: If a keyword follows a sort keyword.
        """

        query = self.parse_find(args)
        found = query.apply(people)
        logger.info("find matched=%d sort=%s", len(found), query.sort_argument)
        return found


def create_app(settings: Settings | None = None) -> App:
    """Create the application container, loading settings from the environment if not given."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    return App(settings=settings)
