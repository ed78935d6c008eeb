"""Logging configuration helpers."""

import logging

LOGGER_NAME = "macro_coherence"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Configure the package logger; the level follows the debug flag.

    The stream handler is attached once. Later calls only adjust the level,
    so an app rebuilt with different settings does not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
