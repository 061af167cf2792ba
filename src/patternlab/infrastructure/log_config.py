"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_HANDLER_NAME = "patternlab-cli"


def configure_logging(level: str) -> logging.Logger:
    """Send ``patternlab.*`` log records to the current stderr at ``level``.

    Safe to call more than once: a handler left by an earlier call is
    replaced, never duplicated.
    """
    logger = logging.getLogger("patternlab")
    logger.setLevel(level)
    for old in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
