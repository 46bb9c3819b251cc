"""Generate after/before/between/on date range filters for SQLAlchemy models."""

from date_range_filters.core.exceptions import (
    DateRangeFilterError,
    InvalidTemporalValueError,
    UnknownFilterError,
)
from date_range_filters.core.filters import (
    DateRangeFilterSet,
    DateRangeFiltersMixin,
    DelegationBinding,
    FilterRegistry,
    date_range_filters,
    define_date_range_filters,
    delegate_date_range_filters,
    delegated_date_range_filters,
    merge_query,
    registry,
)
from date_range_filters.core.logging import configure_logging
from date_range_filters.core.timezone import get_ambient_timezone, use_timezone

__version__ = "0.1.0"

__all__ = [
    "DateRangeFilterError",
    "DateRangeFilterSet",
    "DateRangeFiltersMixin",
    "DelegationBinding",
    "FilterRegistry",
    "InvalidTemporalValueError",
    "UnknownFilterError",
    "configure_logging",
    "date_range_filters",
    "define_date_range_filters",
    "delegate_date_range_filters",
    "delegated_date_range_filters",
    "get_ambient_timezone",
    "merge_query",
    "registry",
    "use_timezone",
]
