"""
Utility functions for the movie catalog.

Provides logging setup and terminal display helpers for the CLI.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TypeVar

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str,
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    console_level: Optional[int] = logging.WARNING,
    fmt: str = LOG_FORMAT,
    log_filter: Optional[logging.Filter] = None,
) -> logging.Logger:
    """
    Set up a logger writing to a daily file and, optionally, stdout.

    Args:
        name: Logger name (used for both logger and log file)
        log_dir: Directory for log files (defaults to ./logs)
        level: Logging level
        console_level: Minimum level echoed to stdout; None disables the console
        fmt: Record format
        log_filter: Filter attached to every handler (e.g. to add record fields)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Handlers are attached once per process
    if logger.handlers:
        return logger

    log_dir = log_dir or Path.cwd() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{name}_{datetime.now().strftime('%Y%m%d')}.log"

    handlers = [(logging.FileHandler(log_file), level)]
    if console_level is not None:
        handlers.append((logging.StreamHandler(sys.stdout), console_level))

    formatter = logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S")
    for handler, handler_level in handlers:
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        if log_filter is not None:
            handler.addFilter(log_filter)
        logger.addHandler(handler)

    return logger


def unique_in_order(values: List[T]) -> List[T]:
    """Drop repeated values, keeping the first occurrence of each."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def format_number(n: int) -> str:
    """Format number with commas for readability."""
    return f"{n:,}"


def print_header(text: str, char: str = "=", width: int = 60) -> None:
    """Print a header with decorative lines."""
    print(char * width)
    print(text.center(width))
    print(char * width)


def print_status_table(data: dict, title: str = "Status") -> None:
    """Print a formatted status table."""
    print(f"\n{title}")
    print("-" * 40)
    max_key_len = max(len(str(k)) for k in data.keys()) if data else 10
    for key, value in data.items():
        print(f"  {key:<{max_key_len + 2}}: {value}")
    print()
