"""
Logging for orderhub.

Modules that own resources (engine, container) log through `get_logger`,
which attaches one pipe-delimited stream handler per logger name. Domain
and data modules use plain `logging.getLogger(__name__)` and inherit
whatever the host application configures.
"""
import logging
from typing import Union


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Return the named logger, attaching the orderhub handler on first use.

    Args:
        name: Logger name (usually module name)
        level: Level applied only when the handler is first attached

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
