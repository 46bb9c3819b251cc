"""Registry mapping models to their generated filters."""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from date_range_filters.core.exceptions import UnknownFilterError
from date_range_filters.core.filters.naming import filter_name
from date_range_filters.core.logging import describe_model

logger = logging.getLogger(__name__)

QueryFilter = Callable[..., Any]


@dataclass(frozen=True)
class DateRangeFilterSet:
    """Filters generated for one (model, name) pair.

    ``on`` is None for delegated sets, which only forward ``after``,
    ``before`` and ``between``.
    """

    model: type
    name: str
    after: QueryFilter
    before: QueryFilter
    between: QueryFilter
    on: QueryFilter | None = None

    def operations(self) -> dict[str, QueryFilter]:
        """Return the filters keyed by full filter name."""
        operations = {
            filter_name(self.name, "after"): self.after,
            filter_name(self.name, "before"): self.before,
            filter_name(self.name, "between"): self.between,
        }
        if self.on is not None:
            operations[filter_name(self.name, "on")] = self.on
        return operations


class FilterRegistry:
    """Explicit lookup table of filters per model.

    Registration happens while models are being defined; after that the
    registry is only read.
    """

    def __init__(self) -> None:
        self._filters: dict[type, dict[str, QueryFilter]] = {}
        self._sets: dict[type, dict[str, DateRangeFilterSet]] = {}

    def register(self, filter_set: DateRangeFilterSet) -> DateRangeFilterSet:
        """Register every operation of ``filter_set`` on its model.

        Registering the same name twice replaces the earlier filters.
        """
        model = filter_set.model
        model_filters = self._filters.setdefault(model, {})
        operations = filter_set.operations()

        replaced = sorted(set(operations) & set(model_filters))
        if replaced:
            logger.warning(
                f"Overwriting filters {replaced} on {describe_model(model)}"
            )

        # Drop operations the previous set had but the new one doesn't ("on")
        previous = self._sets.get(model, {}).get(filter_set.name)
        if previous is not None:
            for stale_name in previous.operations():
                model_filters.pop(stale_name, None)

        model_filters.update(operations)
        self._sets.setdefault(model, {})[filter_set.name] = filter_set
        logger.debug(
            f"Registered filters {sorted(operations)} on {describe_model(model)}"
        )
        return filter_set

    def _visible_filters(self, model: type) -> dict[str, QueryFilter]:
        """Filters of ``model`` including those inherited from base classes."""
        visible: dict[str, QueryFilter] = {}
        for klass in reversed(model.__mro__):
            visible.update(self._filters.get(klass, {}))
        return visible

    def get(self, model: type, name: str) -> QueryFilter:
        """Get a filter by full name.

        Raises:
            UnknownFilterError: If ``model`` has no filter called ``name``.
        """
        model_filters = self._visible_filters(model)
        try:
            return model_filters[name]
        except KeyError:
            logger.warning(f"Filter '{name}' not found on {describe_model(model)}")
            raise UnknownFilterError(model, name, list(model_filters)) from None

    def has(self, model: type, name: str) -> bool:
        """Check whether ``model`` has a filter called ``name``."""
        return name in self._visible_filters(model)

    def names(self, model: type) -> list[str]:
        """Sorted filter names registered on ``model``."""
        return sorted(self._visible_filters(model))

    def filter_sets(self, model: type) -> list[DateRangeFilterSet]:
        """Filter sets registered on ``model``, in registration order."""
        return list(self._sets.get(model, {}).values())

    def __iter__(self) -> Iterator[type]:
        return iter(self._filters)


# Process-wide registry used unless one is passed explicitly
registry = FilterRegistry()
