"""Date range filters for SQLAlchemy models."""

from date_range_filters.core.filters.date_range import (
    date_range_filters,
    define_date_range_filters,
)
from date_range_filters.core.filters.delegation import (
    DelegationBinding,
    delegate_date_range_filters,
    delegated_date_range_filters,
    merge_query,
)
from date_range_filters.core.filters.mixin import DateRangeFiltersMixin
from date_range_filters.core.filters.registry import (
    DateRangeFilterSet,
    FilterRegistry,
    registry,
)

__all__ = [
    "DateRangeFilterSet",
    "DateRangeFiltersMixin",
    "DelegationBinding",
    "FilterRegistry",
    "date_range_filters",
    "define_date_range_filters",
    "delegate_date_range_filters",
    "delegated_date_range_filters",
    "merge_query",
    "registry",
]
