"""
Centralized logging configuration for the circulation store.

Repository code logs through RepositoryLogger so every line names the
collection and operation it concerns. Scripts call setup_logging() once.
"""

import logging
import sys
from typing import Optional

from .config import Config

# Parent of every repository logger; --debug lowers only this subtree
PACKAGE_LOGGER = "circulation"


def set_global_debug_mode(enabled: bool) -> None:
    """Turn DEBUG output for the circulation package on or off."""
    level = logging.DEBUG if enabled else logging.NOTSET
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


class RepositoryLogger:
    """
    Logger that tags every message with the collection and operation.

    Example output: "[newspaper] [get_by_id] Fetched 1 record"
    """

    def __init__(self, name: str, collection: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.collection = collection
        self.operation: Optional[str] = None

    def bind(self, operation: str) -> "RepositoryLogger":
        """Return a logger for the same collection tagged with an operation."""
        bound = RepositoryLogger(self.logger.name, self.collection)
        bound.operation = operation
        return bound

    def _prefix(self, message: str) -> str:
        tags = [f"[{tag}]" for tag in (self.collection, self.operation) if tag]
        return " ".join(tags + [message])

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._prefix(message), **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(self._prefix(message), **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(self._prefix(message), **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(self._prefix(message), **kwargs)


def setup_logging(level: Optional[str] = None, format: Optional[str] = None) -> None:
    """
    Configure global logging settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to Config.LOG_LEVEL.
        format: Log format ("simple" or "json"). Defaults to Config.LOG_FORMAT.
    """
    level = level or Config.LOG_LEVEL
    format = format or Config.LOG_FORMAT
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)

    if format == "json":
        # JSON format for log aggregators
        formatter = logging.Formatter(
            '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # pymongo is chatty at DEBUG (heartbeats, pool events)
    if log_level <= logging.DEBUG:
        logging.getLogger("pymongo").setLevel(logging.INFO)

    set_global_debug_mode(Config.DEBUG_MODE)


def get_logger(name: str, collection: Optional[str] = None) -> RepositoryLogger:
    """Get a repository logger for the given module and collection."""
    return RepositoryLogger(name, collection)
