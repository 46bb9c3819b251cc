"""Helper functions for tests."""

from typing import Any

from sqlalchemy.orm import Session


def names_of(session: Session, query: Any) -> set[str]:
    """
    Execute a query and return the ``name`` of every row.

    Args:
        session: Database session.
        query: ``Select`` statement or legacy ``Query``.

    Returns:
        Set of row names.
    """
    if hasattr(query, "all"):
        rows = query.all()
    else:
        rows = session.scalars(query).all()
    return {row.name for row in rows}


def bound_values(query: Any) -> list[Any]:
    """Return the bound parameter values of a compiled query, in key order."""
    statement = getattr(query, "statement", query)
    params = statement.compile().params
    return [params[key] for key in sorted(params)]
