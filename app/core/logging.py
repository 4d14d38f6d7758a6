"""Application logger for the directory store."""

import logging
import sys

from app.config import settings

LOGGER_NAME = "transplantify"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging() -> logging.Logger:
    """
    Configure the ``transplantify`` logger.

    Store operations log mutations at INFO, rollbacks at DEBUG and
    tolerated inconsistencies (orphaned reviews, media trimmed by tier)
    at WARNING. Pillow and the multipart parser log every chunk at DEBUG,
    so they are held at WARNING unless the level is raised explicitly.
    """
    level = _level(settings.LOG_LEVEL)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    for name in filter(None, (n.strip() for n in settings.LOG_QUIET_LIBRARIES.split(","))):
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.debug(f"Logging configured with level: {logging.getLevelName(level)}")
    return logger


logger = setup_logging()
