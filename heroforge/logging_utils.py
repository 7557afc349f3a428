"""
Logging setup for the heroforge service.

Everything logs under the ``heroforge`` logger; modules take a child logger
such as ``heroforge.workflow``.
"""
import logging
import sys
from typing import Optional

from .config import LOG_LEVEL

_logger: Optional[logging.Logger] = None


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Initialize the ``heroforge`` logger.

    Safe to call more than once; later calls only adjust the level.

    Returns:
        The configured logger instance.
    """
    global _logger

    if _logger is None:
        _logger = logging.getLogger("heroforge")
        _logger.handlers.clear()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        _logger.addHandler(handler)
        _logger.propagate = False

    _logger.setLevel((level or LOG_LEVEL).upper())
    return _logger
