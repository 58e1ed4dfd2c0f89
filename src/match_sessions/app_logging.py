"""Logging configuration helpers."""

import logging


def configure_logging(level: str = "INFO") -> None:
    """Configure the match_sessions logger with a single stream handler.

    Repeated calls only adjust the level, so app factories used in tests do
    not stack handlers.
    """
    logger = logging.getLogger("match_sessions")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
