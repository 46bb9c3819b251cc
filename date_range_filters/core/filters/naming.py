"""Naming conventions for generated filters."""

import re

FILTER_OPERATIONS = ("after", "before", "between", "on")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_VOWELS = "aeiou"


def filter_name(name: str, operation: str) -> str:
    """Full filter name, e.g. ``filter_name("created", "after") == "created_after"``."""
    return f"{name}_{operation}"


def underscore(class_name: str) -> str:
    """Convert a CamelCase class name to snake_case ("BookReview" -> "book_review")."""
    return _CAMEL_BOUNDARY.sub("_", class_name).lower()


def pluralize(word: str) -> str:
    """Pluralize a snake_case English noun using the regular rules only."""
    if not word:
        return word
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    if word.endswith("y") and len(word) > 1 and word[-2] not in _VOWELS:
        return word[:-1] + "ies"
    return word + "s"


def plural_name(model: type) -> str:
    """
    Plural name of a model, as used in delegated filter names.

    Models with irregular plurals can set ``__plural_name__``.

    Args:
        model: Model class (e.g., ``Book``).

    Returns:
        Plural snake_case name (e.g., "books").
    """
    explicit = getattr(model, "__plural_name__", None)
    if explicit:
        return explicit
    return pluralize(underscore(model.__name__))


def infer_target_scope(local_name: str, target: type) -> str:
    """
    Infer the filter name on ``target`` that ``local_name`` delegates to.

    Strips a leading ``"{plural target name}_"`` if present. This is a plain
    string prefix match: ``"books_created"`` with ``Book`` gives "created",
    while ``"with_any_books_written"`` is returned unchanged and needs an
    explicit scope.

    Args:
        local_name: Filter name on the local model.
        target: Model class the filters are delegated to.

    Returns:
        Filter name on the target model.
    """
    prefix = f"{plural_name(target)}_"
    if local_name.startswith(prefix) and len(local_name) > len(prefix):
        return local_name[len(prefix):]
    return local_name
