"""Composable SQLAlchemy predicates for optional list filters.

Each builder returns ``None`` when its input is absent or unparseable so that
:func:`combine` can drop it; a missing filter never narrows the result.
"""

from __future__ import annotations

import math
from typing import Any

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement


def parse_bool(value: str | None) -> bool | None:
    """Parse the literal strings ``"true"`` and ``"false"``; anything else is None."""
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def parse_float(value: str | None) -> float | None:
    """Parse ``value`` as a float, returning None when it is missing or malformed."""
    if value is None:
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def contains_ci(column: Any, value: str | None) -> ColumnElement[bool] | None:
    """Case-insensitive substring match, skipped for empty input."""
    if not value:
        return None
    return column.ilike(f"%{value}%")


def equals(column: Any, value: Any) -> ColumnElement[bool] | None:
    """Equality match, skipped when ``value`` is None."""
    if value is None:
        return None
    return column == value


def flag(column: Any, raw: str | None) -> ColumnElement[bool] | None:
    """Boolean column match driven by a ``"true"``/``"false"`` query string."""
    return equals(column, parse_bool(raw))


def within_bounds(
    lat_column: Any,
    lon_column: Any,
    *,
    min_lat: str | None,
    max_lat: str | None,
    min_lon: str | None,
    max_lon: str | None,
) -> ColumnElement[bool] | None:
    """Bounding-box containment, applied only when all four edges parse."""
    edges = [parse_float(v) for v in (min_lat, max_lat, min_lon, max_lon)]
    if any(edge is None for edge in edges):
        return None
    low_lat, high_lat, low_lon, high_lon = edges
    return and_(
        lat_column.between(low_lat, high_lat),
        lon_column.between(low_lon, high_lon),
    )


def combine(*clauses: ColumnElement[bool] | None) -> ColumnElement[bool]:
    """AND together every non-None clause; an empty set matches everything."""
    present = [clause for clause in clauses if clause is not None]
    if not present:
        return true()
    return and_(*present)
