"""Logging configuration for the command-line process."""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def configure_logging(*, level: str) -> None:
    """Send log records to stderr so prompts and hash output stay on stdout."""

    normalized_level = level.strip().upper() if level.strip() else "WARNING"
    resolved_level = getattr(logging, normalized_level, logging.WARNING)

    logging.basicConfig(
        level=resolved_level,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )
    for name in _QUIET_LOGGERS:
        # Engine logs echo bound parameters, including the encoded hash.
        logging.getLogger(name).setLevel(logging.WARNING)
