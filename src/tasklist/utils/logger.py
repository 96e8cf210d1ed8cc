"""Application logger.

Everything logs to one rotating file in the platform log directory
(``tasklist.log``); nothing is written to the terminal.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "tasklist"
LOG_FILE_NAME = "tasklist.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


@lru_cache(maxsize=1)
def get_logger() -> logging.Logger:
    """Return the shared ``tasklist`` logger, attaching its file handler once."""
    log_dir = Path(user_log_dir(LOGGER_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    logger = logging.getLogger(LOGGER_NAME)
    for stale in list(logger.handlers):
        logger.removeHandler(stale)
        stale.close()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger
