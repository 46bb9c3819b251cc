"""Date range filters that delegate to a related model's filters.

Lets a model reuse the filters another model already defines. The target
filter runs against ``select(target)``; its criteria (joins included) are
merged into the local query, which keeps returning local rows.

Example:
    @date_range_filters("created")
    class Book(Base):
        ...

    # Author.books_created_* -> Book.created_*
    delegate_date_range_filters(
        Author, "books_created", lambda query: query.join(Author.books), to=Book
    )
    # Author.with_any_books_written_* -> Book.created_*
    delegate_date_range_filters(
        Author,
        "with_any_books_written",
        lambda query: query.join(Author.books),
        to=Book,
        scope="created",
    )
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from sqlalchemy import Select, inspect, select, tuple_

from date_range_filters.core.filters.date_range import (
    BaseRelation,
    identity,
    named_filter,
)
from date_range_filters.core.filters.naming import filter_name, infer_target_scope
from date_range_filters.core.filters.registry import (
    DateRangeFilterSet,
    FilterRegistry,
    registry as default_registry,
)
from date_range_filters.core.logging import describe_model

logger = logging.getLogger(__name__)

Q = TypeVar("Q")


@dataclass(frozen=True)
class DelegationBinding:
    """Where a delegated filter set forwards to."""

    local_name: str
    target: type
    target_scope: str

    def target_filter_name(self, operation: str) -> str:
        return filter_name(self.target_scope, operation)


def merge_query(query: Q, target: type, statement: Select[Any]) -> Q:
    """
    Merge the criteria of ``statement`` into ``query``.

    ``query`` keeps its own entity; it is narrowed to rows whose ``target``
    primary key is among the rows ``statement`` selects. ``query`` must
    already have ``target`` in its FROM clause (usually via a join).

    Args:
        query: Local query.
        target: Model selected by ``statement``.
        statement: Target-scoped statement carrying the filter criteria.

    Returns:
        The narrowed local query.
    """
    primary_key = inspect(target).primary_key
    matching = statement.with_only_columns(*primary_key).correlate(None)
    if len(primary_key) == 1:
        return query.filter(primary_key[0].in_(matching))
    return query.filter(tuple_(*primary_key).in_(matching))


def delegate_date_range_filters(
    model: type,
    local_name: str,
    relation: BaseRelation | None = None,
    *,
    to: type,
    scope: str | None = None,
    registry: FilterRegistry | None = None,
) -> DateRangeFilterSet:
    """
    Define ``{local_name}_after``, ``{local_name}_before`` and
    ``{local_name}_between`` on ``model`` by delegating to ``to``.

    The target filters are looked up when a delegated filter runs, so they
    may be defined before or after this call.

    Args:
        model: Local model class.
        local_name: Name of the filters on ``model`` (e.g., "books_created").
        relation: Callable that brings the target into the local query,
            typically a join (default: identity).
        to: Target model whose filters are reused.
        scope: Filter name on the target. When omitted, ``local_name`` with
            any ``"{plural target name}_"`` prefix removed.
        registry: Registry to read target filters from and install the
            delegated ones in (default: process-wide).

    Returns:
        The registered filter set (without an ``on`` filter).
    """
    reshape: BaseRelation = relation if relation is not None else identity
    target_registry = registry if registry is not None else default_registry
    binding = DelegationBinding(
        local_name=local_name,
        target=to,
        target_scope=scope or infer_target_scope(local_name, to),
    )

    def merged(query: Q, operation: str, date_or_time: Any) -> Q:
        target_filter = target_registry.get(
            binding.target, binding.target_filter_name(operation)
        )
        statement = target_filter(select(binding.target), date_or_time)
        return merge_query(query, binding.target, statement)

    def after(query: Q, date_or_time: Any) -> Q:
        if date_or_time is None:
            return query
        return merged(reshape(query), "after", date_or_time)

    def before(query: Q, date_or_time: Any) -> Q:
        if date_or_time is None:
            return query
        return merged(reshape(query), "before", date_or_time)

    def between(query: Q, after_value: Any, before_value: Any) -> Q:
        if after_value is None and before_value is None:
            return query
        query = reshape(query)
        if after_value is not None:
            query = merged(query, "after", after_value)
        if before_value is not None:
            query = merged(query, "before", before_value)
        return query

    logger.debug(
        f"Delegating date range filters '{local_name}' on {describe_model(model)} "
        f"to '{binding.target_scope}' on {describe_model(to)}"
    )
    return target_registry.register(
        DateRangeFilterSet(
            model=model,
            name=local_name,
            after=named_filter(after, filter_name(local_name, "after"), model),
            before=named_filter(before, filter_name(local_name, "before"), model),
            between=named_filter(between, filter_name(local_name, "between"), model),
        )
    )


def delegated_date_range_filters(
    local_name: str,
    relation: BaseRelation | None = None,
    *,
    to: type,
    scope: str | None = None,
    registry: FilterRegistry | None = None,
) -> Callable[[type], type]:
    """Class decorator form of :func:`delegate_date_range_filters`."""

    def decorator(model: type) -> type:
        delegate_date_range_filters(
            model, local_name, relation, to=to, scope=scope, registry=registry
        )
        return model

    return decorator
