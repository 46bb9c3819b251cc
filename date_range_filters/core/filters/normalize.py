"""Date and time normalization for range filter bounds.

Calendar dates widen to whole days in the ambient time zone; date-times
keep their instant and are only converted into the ambient zone.
"""

from datetime import date, datetime, time, tzinfo
from typing import Any

from date_range_filters.core.exceptions import InvalidTemporalValueError
from date_range_filters.core.timezone import get_ambient_timezone

# "YYYY-MM-DD"
ISO_DATE_LENGTH = 10


def coerce_temporal(value: Any) -> date | datetime:
    """Coerce a filter argument into a date or datetime.

    Accepts ``date``, ``datetime`` and ISO 8601 strings. A string holding
    only a calendar date becomes a ``date``; anything else is parsed as a
    ``datetime``.

    Raises:
        InvalidTemporalValueError: If the value can't be coerced.
    """
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) <= ISO_DATE_LENGTH and ":" not in text:
                return date.fromisoformat(text)
            return datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidTemporalValueError(value, str(e)) from e
    raise InvalidTemporalValueError(value)


def to_ambient(value: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert a datetime into the ambient zone.

    Naive datetimes are read as wall-clock time in that zone.
    """
    if tz is None:
        tz = get_ambient_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def start_of_day(day: date, tz: tzinfo | None = None) -> datetime:
    """First instant of ``day`` in the ambient zone."""
    if tz is None:
        tz = get_ambient_timezone()
    return datetime.combine(day, time.min, tzinfo=tz)


def end_of_day(day: date, tz: tzinfo | None = None) -> datetime:
    """Last instant of ``day`` in the ambient zone (23:59:59.999999)."""
    if tz is None:
        tz = get_ambient_timezone()
    return datetime.combine(day, time.max, tzinfo=tz)


def to_lower_bound(value: Any) -> datetime:
    """Inclusive lower bound: start of day for dates, the instant itself otherwise."""
    value = coerce_temporal(value)
    if isinstance(value, datetime):
        return to_ambient(value)
    return start_of_day(value)


def to_upper_bound(value: Any) -> datetime:
    """Inclusive upper bound: end of day for dates, the instant itself otherwise."""
    value = coerce_temporal(value)
    if isinstance(value, datetime):
        return to_ambient(value)
    return end_of_day(value)


def day_bounds(value: Any) -> tuple[datetime, datetime]:
    """Return the start and end of the calendar day containing ``value``.

    Datetimes are first converted into the ambient zone, so the day is the
    one the instant falls on there, and the time of day is discarded.
    """
    tz = get_ambient_timezone()
    value = coerce_temporal(value)
    day = to_ambient(value, tz).date() if isinstance(value, datetime) else value
    return start_of_day(day, tz), end_of_day(day, tz)
