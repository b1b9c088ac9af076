"""Link records and row mapping.

Pure functions, no infrastructure dependencies. The repository feeds
backend rows through :func:`link_from_row`; tests feed plain tuples.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Link:
    """A link stored for a user.

    Records have no identity beyond the ``(user_id, link)`` pair, so two
    equal instances may stand for two distinct stored rows.
    """

    user_id: int
    link: str


def validate_user_id(user_id: Any) -> int:
    """Return *user_id* unchanged if it is a non-negative ``int``.

    Raises:
        ValueError: If *user_id* is a bool, not an int, or negative.
    """
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        msg = f"user_id must be a non-negative integer, got {user_id!r}"
        raise ValueError(msg)
    if user_id < 0:
        msg = f"user_id must be a non-negative integer, got {user_id}"
        raise ValueError(msg)
    return user_id


def _exact_int(value: Any) -> int:
    # Some drivers hand back floats or Decimals for numeric columns.
    if value is None or isinstance(value, bool):
        msg = f"user_id column holds a non-integer value: {value!r}"
        raise ValueError(msg)
    if isinstance(value, float) and not value.is_integer():
        msg = f"user_id column holds a non-integral value: {value!r}"
        raise ValueError(msg)
    return int(value)


def link_from_row(row: Sequence[Any]) -> Link:
    """Map one backend row to a :class:`Link`.

    Columns are read positionally: ``user_id`` first, ``link`` second,
    matching the ``links`` table layout. Works with SQLAlchemy ``Row``
    objects and plain tuples alike.
    """
    link = row[1]
    if link is None:
        msg = "link column holds NULL"
        raise ValueError(msg)
    return Link(user_id=_exact_int(row[0]), link=str(link))


def links_from_rows(rows: Iterable[Sequence[Any]]) -> list[Link]:
    """Materialize every row of *rows* into a list of :class:`Link`."""
    return [link_from_row(row) for row in rows]
