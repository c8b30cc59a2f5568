"""Logging configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger("semver_release")
    logger.setLevel(level.upper())

    if any(getattr(h, "_semver_release", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._semver_release = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
