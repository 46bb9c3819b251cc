"""Ambient time zone used to normalize calendar dates.

The zone comes from ``Settings.TIMEZONE`` unless the current context
overrides it with :func:`use_timezone`. Overrides live in a ``ContextVar``,
so concurrent requests each keep their own zone.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import tzinfo
from zoneinfo import ZoneInfo

from date_range_filters.core.config import get_settings

_timezone_override: ContextVar[tzinfo | None] = ContextVar(
    "date_range_timezone_override", default=None
)


def resolve_timezone(tz: tzinfo | str) -> tzinfo:
    """Return a tzinfo for an IANA zone name or an existing tzinfo."""
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def get_ambient_timezone() -> tzinfo:
    """Get the time zone filters normalize into."""
    override = _timezone_override.get()
    if override is not None:
        return override
    return ZoneInfo(get_settings().TIMEZONE)


@contextmanager
def use_timezone(tz: tzinfo | str) -> Iterator[tzinfo]:
    """
    Override the ambient time zone for the duration of a block.

    Args:
        tz: IANA zone name (e.g., "America/Bogota") or tzinfo.

    Yields:
        The resolved tzinfo.

    Example:
        with use_timezone("Europe/Madrid"):
            query = Book.apply_date_filter("created_on", date(2024, 3, 31))
    """
    resolved = resolve_timezone(tz)
    token = _timezone_override.set(resolved)
    try:
        yield resolved
    finally:
        _timezone_override.reset(token)
