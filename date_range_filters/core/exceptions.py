"""Exceptions raised by date range filters."""

from typing import Any


class DateRangeFilterError(Exception):
    """Base exception for filter errors with a standard format.

    Mirrors the ``{"error": {"code", "message", "details"}}`` shape used for
    API errors so callers can translate it directly into a response.

    Example:
        raise DateRangeFilterError(
            code="UNKNOWN_FILTER",
            message="Book has no filter 'created_after'",
        )
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize filter exception.

        Args:
            code: Error code (e.g., 'UNKNOWN_FILTER').
            message: Human-readable error message.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Return the error in API error format."""
        return {
            "error": {"code": self.code, "message": self.message, "details": self.details}
        }


class UnknownFilterError(DateRangeFilterError, LookupError):
    """Raised when a filter is looked up on a model that never registered it.

    Args:
        model: Model class the lookup was made on.
        filter_name: Full filter name (e.g., 'created_after').
        known: Filter names registered for the model.
    """

    def __init__(
        self, model: type, filter_name: str, known: list[str] | None = None
    ) -> None:
        self.model = model
        self.filter_name = filter_name
        super().__init__(
            code="UNKNOWN_FILTER",
            message=f"{model.__name__} has no filter '{filter_name}'",
            details={
                "model": model.__name__,
                "filter": filter_name,
                "known_filters": sorted(known or []),
            },
        )


class InvalidTemporalValueError(DateRangeFilterError, TypeError, ValueError):
    """Raised when a filter argument cannot be turned into a date or datetime.

    Subclasses both ``TypeError`` and ``ValueError`` so code that handles
    native coercion failures keeps working.

    Args:
        value: The rejected value.
        reason: Optional explanation (e.g., the parser's error message).
    """

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        message = f"Expected a date, datetime or ISO 8601 string, got {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(
            code="INVALID_TEMPORAL_VALUE",
            message=message,
            details={"value": repr(value), "type": type(value).__name__},
        )
