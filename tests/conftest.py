"""Shared fixtures for date range filter tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from date_range_filters import FilterRegistry
from date_range_filters.core.config import get_settings
from tests.constants import (
    NOW,
    ONE_SECOND,
    ONE_WEEK_AGO,
    THREE_YEARS_AGO,
)
from tests.models import Author, Base, Book

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test with default settings (UTC ambient time zone)."""
    monkeypatch.delenv("DATE_RANGE_TIMEZONE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def filter_registry():
    """Empty registry, isolated from the process-wide one."""
    return FilterRegistry()


@pytest.fixture(scope="session")
def test_engine():
    """Create test database engine."""
    engine = create_engine(TEST_DATABASE_URL, echo=False)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_db(test_engine):
    """Create test database session, rolled back after each test."""
    connection = test_engine.connect()
    transaction = connection.begin()
    testing_session_local = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=connection,
    )
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture
def authors(test_db):
    """Two authors, without books."""
    author1 = Author(name="author1", created_at=NOW)
    author2 = Author(name="author2", created_at=NOW)
    test_db.add_all([author1, author2])
    test_db.flush()
    return author1, author2


@pytest.fixture
def books(test_db, authors):
    """Books created in 2000, three years ago and a week ago.

    author1 wrote the first two, author2 the last one.
    """
    author1, author2 = authors
    book_2000 = Book(
        name="book_2000",
        created_at=NOW.replace(year=2000, month=1, day=1, hour=0),
        updated_at=NOW,
        author=author1,
    )
    book_3y_ago = Book(
        name="book_3y_ago",
        created_at=THREE_YEARS_AGO + ONE_SECOND,
        updated_at=NOW,
        author=author1,
    )
    book_1w_ago = Book(
        name="book_1w_ago",
        created_at=ONE_WEEK_AGO + ONE_SECOND,
        updated_at=NOW,
        author=author2,
    )
    test_db.add_all([book_2000, book_3y_ago, book_1w_ago])
    test_db.flush()
    return book_2000, book_3y_ago, book_1w_ago
