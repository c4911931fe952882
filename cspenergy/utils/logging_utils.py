from __future__ import annotations

import logging

from cspenergy.config import LOG_LEVEL

LOGGER_NAME = "cspenergy"


def get_logger() -> logging.Logger:
    """Return the package logger, attaching a console handler on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] [%(name)s] %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)
    return logger
