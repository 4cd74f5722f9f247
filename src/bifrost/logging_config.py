"""Logging setup for applications and scripts that use bifrost."""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", logger_name: Optional[str] = "bifrost") -> logging.Logger:
    """Attach a stream handler to the bifrost logger.

    Args:
        level: Logging level name, e.g. "DEBUG" or "INFO"
        logger_name: Logger to configure (defaults to the package logger)

    Returns:
        The configured logger
    """
    target = logging.getLogger(logger_name)
    target.setLevel(level.upper())

    if not any(getattr(h, "_bifrost_handler", False) for h in target.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._bifrost_handler = True
        target.addHandler(handler)

    return target
