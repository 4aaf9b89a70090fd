"""Logging configuration helpers."""

import logging

from meal_merge.config import Settings

LOGGER_NAME = "meal_merge"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach one stream handler to the package logger.

    The level follows ``settings.debug`` on every call; the handler is only
    installed once and tags lines with the configured environment.
    """
    resolved = settings or Settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if resolved.debug else logging.INFO)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            f"%(levelname)s: [{resolved.environment}] %(name)s: %(message)s"
        )
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
