"""
Logger helpers. The library never configures logging on import.
"""

import logging
from typing import Optional, Union

ROOT_LOGGER = "yoda_core"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    from yoda_core.config import settings

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level if level is not None else settings.log_level)
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a yoda_core module."""
    return logging.getLogger(name)
