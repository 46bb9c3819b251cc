"""Unit tests for logging configuration."""

import logging
import sys

import pytest

from date_range_filters.core.logging import (
    configure_logging,
    describe_model,
    library_logger,
)
from tests.models import Book


@pytest.fixture
def restore_library_logger():
    """Restore the library logger after configure_logging."""
    handlers = list(library_logger.handlers)
    level = library_logger.level
    yield
    library_logger.handlers = handlers
    library_logger.setLevel(level)


def test_configure_logging_adds_single_handler(restore_library_logger) -> None:
    """Test repeated calls don't stack handlers."""
    configure_logging("DEBUG")
    configure_logging("DEBUG")

    stdout_handlers = [
        handler
        for handler in library_logger.handlers
        if isinstance(handler, logging.StreamHandler) and handler.stream is sys.stdout
    ]
    assert len(stdout_handlers) == 1
    assert library_logger.level == logging.DEBUG


def test_configure_logging_uses_settings_level(
    restore_library_logger, monkeypatch
) -> None:
    """Test the default level comes from settings."""
    from date_range_filters.core.config import get_settings

    monkeypatch.setenv("DATE_RANGE_LOG_LEVEL", "warning")
    get_settings.cache_clear()

    logger = configure_logging()

    assert logger is library_logger
    assert logger.level == logging.WARNING


def test_describe_model() -> None:
    """Test model labels."""

    class Plain:
        pass

    assert describe_model(Book) == "Book(books)"
    assert describe_model(Plain) == "Plain"


def test_registration_is_logged(filter_registry, caplog) -> None:
    """Test registrations are logged at DEBUG."""
    from date_range_filters import define_date_range_filters

    with caplog.at_level(logging.DEBUG, logger="date_range_filters"):
        define_date_range_filters(Book, "created", registry=filter_registry)

    assert "Registered filters" in caplog.text
    assert "Book(books)" in caplog.text
