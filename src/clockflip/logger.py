from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, debug: bool = False) -> logging.Logger:
    """Logger for the cli; DEBUG to stderr when debug is on, WARNING otherwise."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    # swap our handler on every call so it follows the current sys.stderr
    for h in list(logger.handlers):
        if h.get_name() == name:
            logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(name)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
