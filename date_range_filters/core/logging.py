"""Logging configuration for filter registration and lookup events."""

import logging
import sys

from date_range_filters.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Parent logger for every module in the package
library_logger = logging.getLogger("date_range_filters")
library_logger.addHandler(logging.NullHandler())


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stdout handler to the library logger.

    Applications that configure logging themselves don't need this; it is
    meant for scripts and local debugging.

    Args:
        level: Log level name (defaults to ``Settings.LOG_LEVEL``).

    Returns:
        The configured library logger.
    """
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    library_logger.setLevel(level_name)

    # Add handler only once, even if called repeatedly
    if not any(
        isinstance(handler, logging.StreamHandler) and handler.stream is sys.stdout
        for handler in library_logger.handlers
    ):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        )
        library_logger.addHandler(console_handler)

    for handler in library_logger.handlers:
        handler.setLevel(level_name)

    return library_logger


def describe_model(model: type) -> str:
    """
    Return a short model label for log messages.

    Args:
        model: Model class.

    Returns:
        Class name, qualified with the table name when there is one
        (e.g., "Book(books)").
    """
    table_name = getattr(model, "__tablename__", None)
    if table_name:
        return f"{model.__name__}({table_name})"
    return model.__name__
