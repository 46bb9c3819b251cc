"""Date range filters generated from a timestamp column.

Given a name such as ``created``, :func:`define_date_range_filters` builds
four filters and registers them on the model:

- ``created_after(query, date_or_time)``
- ``created_before(query, date_or_time)``
- ``created_between(query, after, before)``
- ``created_on(query, date_or_time)``

By default they compare against the ``created_at`` column. Every filter
takes the query to narrow as its first argument (a legacy ``Query`` or a
``Select``) and returns a new query; ``None`` bounds leave the query as is,
so callers can pass optional request parameters straight through.

Example:
    @date_range_filters("created")
    @date_range_filters("updated")
    class Book(DateRangeFiltersMixin, Base):
        ...

    class Author(DateRangeFiltersMixin, Base):
        ...

    define_date_range_filters(
        Author,
        "with_any_books_created",
        attribute=lambda: Book.created_at,
        relation=lambda query: query.join(Author.books),
    )

    Book.apply_date_filter("created_between", date(2024, 1, 1), date(2024, 1, 31))
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import ColumnElement

from date_range_filters.core.filters.naming import filter_name
from date_range_filters.core.filters.normalize import (
    day_bounds,
    to_lower_bound,
    to_upper_bound,
)
from date_range_filters.core.filters.registry import (
    DateRangeFilterSet,
    FilterRegistry,
    registry as default_registry,
)
from date_range_filters.core.logging import describe_model

logger = logging.getLogger(__name__)

Q = TypeVar("Q")

# Zero-argument callable returning the column, or an attribute name on the model
AttributeLocator = Callable[[], ColumnElement[Any]] | str
BaseRelation = Callable[[Any], Any]


def identity(query: Q) -> Q:
    """Default base relation: leave the query unchanged."""
    return query


def resolve_attribute(model: type, attribute: AttributeLocator) -> ColumnElement[Any]:
    """Resolve an attribute locator at filter call time.

    Args:
        model: Model the filters were registered on.
        attribute: Attribute name or zero-argument callable.

    Returns:
        Column expression to compare against.
    """
    if isinstance(attribute, str):
        return getattr(model, attribute)
    return attribute()


def named_filter(func: Callable[..., Any], name: str, model: type) -> Callable[..., Any]:
    """Give a generated filter its public name for tracebacks and logs."""
    func.__name__ = name
    func.__qualname__ = f"{model.__name__}.{name}"
    return func


def define_date_range_filters(
    model: type,
    name: str,
    attribute: AttributeLocator | None = None,
    relation: BaseRelation | None = None,
    *,
    registry: FilterRegistry | None = None,
) -> DateRangeFilterSet:
    """
    Define ``{name}_after``, ``{name}_before``, ``{name}_between`` and
    ``{name}_on`` filters on ``model``.

    Args:
        model: Model class that owns the filters.
        name: Semantic name (e.g., "created").
        attribute: Column to compare against, either an attribute name or a
            zero-argument callable returning a column expression. Resolved
            each time a filter runs (default: ``"{name}_at"``).
        relation: Callable applied to the query before the comparison is
            added, e.g. to join a related table (default: identity).
        registry: Registry to install the filters in (default: process-wide).

    Returns:
        The registered filter set.
    """
    locator: AttributeLocator = attribute if attribute is not None else f"{name}_at"
    reshape: BaseRelation = relation if relation is not None else identity
    target_registry = registry if registry is not None else default_registry

    def after(query: Q, date_or_time: Any) -> Q:
        if date_or_time is None:
            return query
        lower = to_lower_bound(date_or_time)
        column = resolve_attribute(model, locator)
        return reshape(query).filter(column >= lower)

    def before(query: Q, date_or_time: Any) -> Q:
        if date_or_time is None:
            return query
        upper = to_upper_bound(date_or_time)
        column = resolve_attribute(model, locator)
        return reshape(query).filter(column <= upper)

    def between(query: Q, after_value: Any, before_value: Any) -> Q:
        if after_value is None and before_value is None:
            return query
        # Reshape once so joins aren't repeated for the second bound
        column = resolve_attribute(model, locator)
        criteria = []
        if after_value is not None:
            criteria.append(column >= to_lower_bound(after_value))
        if before_value is not None:
            criteria.append(column <= to_upper_bound(before_value))
        return reshape(query).filter(*criteria)

    def on(query: Q, date_or_time: Any) -> Q:
        if date_or_time is None:
            return query
        start, end = day_bounds(date_or_time)
        return between(query, start, end)

    filter_set = DateRangeFilterSet(
        model=model,
        name=name,
        after=named_filter(after, filter_name(name, "after"), model),
        before=named_filter(before, filter_name(name, "before"), model),
        between=named_filter(between, filter_name(name, "between"), model),
        on=named_filter(on, filter_name(name, "on"), model),
    )
    logger.debug(
        f"Defining date range filters '{name}' on {describe_model(model)} "
        f"(attribute={locator if isinstance(locator, str) else 'callable'})"
    )
    return target_registry.register(filter_set)


def date_range_filters(
    name: str,
    attribute: AttributeLocator | None = None,
    relation: BaseRelation | None = None,
    *,
    registry: FilterRegistry | None = None,
) -> Callable[[type], type]:
    """
    Class decorator form of :func:`define_date_range_filters`.

    Args:
        name: Semantic name (e.g., "created").
        attribute: Column locator (default: ``"{name}_at"``).
        relation: Base relation (default: identity).
        registry: Registry to install the filters in.

    Returns:
        Decorator that registers the filters and returns the class unchanged.
    """

    def decorator(model: type) -> type:
        define_date_range_filters(
            model, name, attribute, relation, registry=registry
        )
        return model

    return decorator
