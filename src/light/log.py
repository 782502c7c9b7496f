from __future__ import annotations

import logging
import sys


def setup_logging(name: str = "light", level: int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``name`` logger.

    Calling this again replaces the handler, so the stream is whatever
    ``sys.stderr`` is at call time.
    """

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(sh)
    logger.propagate = False
    return logger
