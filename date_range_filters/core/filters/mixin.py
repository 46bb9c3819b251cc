"""Opt-in mixin exposing registered date range filters on a model."""

from typing import Any

from sqlalchemy import select

from date_range_filters.core.filters.registry import (
    FilterRegistry,
    QueryFilter,
    registry as default_registry,
)


class DateRangeFiltersMixin:
    """Mixin for declarative models with date range filters.

    Filters are registered separately (see ``date_range_filters`` and
    ``delegated_date_range_filters``); the mixin only adds lookups.
    Set ``__filter_registry__`` to read from a registry other than the
    process-wide one.
    """

    __filter_registry__ = None

    @classmethod
    def _date_filter_registry(cls) -> FilterRegistry:
        if cls.__filter_registry__ is not None:
            return cls.__filter_registry__
        return default_registry

    @classmethod
    def date_filter(cls, filter_name: str) -> QueryFilter:
        """Get a registered filter by full name (e.g., "created_after").

        Raises:
            UnknownFilterError: If the filter isn't registered on the model.
        """
        return cls._date_filter_registry().get(cls, filter_name)

    @classmethod
    def apply_date_filter(cls, filter_name: str, *args: Any, query: Any = None) -> Any:
        """
        Apply a registered filter.

        Args:
            filter_name: Full filter name (e.g., "created_between").
            *args: Filter arguments (one bound, or two for ``*_between``).
            query: Query to narrow (default: ``select(cls)``).

        Returns:
            The filtered query.
        """
        if query is None:
            query = select(cls)
        return cls.date_filter(filter_name)(query, *args)

    @classmethod
    def date_filter_names(cls) -> list[str]:
        """Names of all filters registered on the model."""
        return cls._date_filter_registry().names(cls)
