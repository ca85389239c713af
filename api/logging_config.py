"""
Logging configuration for the catalog API.

Every record carries the id of the request that produced it.
"""

import logging
import os
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Optional

from movie_catalog.utils import setup_logger

API_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] - %(message)s"

# Request id of the request being served in the current context
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    """Add request_id to log records ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def setup_api_logger(
    name: str = "movie_catalog_api",
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Set up the API logger.

    Args:
        name: Logger name
        log_dir: Directory for log files (defaults to $LOG_DIR, else ./logs)

    Returns:
        Logger echoing INFO and above to stdout
    """
    if log_dir is None and os.getenv("LOG_DIR"):
        log_dir = Path(os.environ["LOG_DIR"])
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO
    return setup_logger(
        name,
        log_dir=log_dir,
        level=level,
        console_level=logging.INFO,
        fmt=API_LOG_FORMAT,
        log_filter=RequestIdFilter(),
    )


def generate_request_id() -> str:
    """Generate a short unique request ID."""
    return uuid.uuid4().hex[:8]


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


logger = setup_api_logger()
