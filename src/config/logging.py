"""Process-wide logging setup for applications embedding the parser."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at `level`, falling back to `LOG_LEVEL`, then INFO.

    Parser loggers emit token counts and sort choices at DEBUG; rejected lines are logged at INFO.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
