"""Closed token sets used by the statement builders."""

from enum import Enum
from typing import Union

from fluentsql.exceptions import SQLBuilderError

__all__ = (
    "JoinType",
    "OrderDirection",
    "to_join_type",
    "to_order_direction",
)


class JoinType(str, Enum):
    """Kind of a ``JOIN`` clause.

    Dialect support (e.g. ``FULL`` on MySQL) is left to the execution layer.
    """

    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FULL = "FULL"


class OrderDirection(str, Enum):
    """Direction of an ``ORDER BY`` expression."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"


def to_join_type(kind: Union[JoinType, str]) -> JoinType:
    """Coerce a join kind to :class:`JoinType`.

    Args:
        kind: A ``JoinType`` member or its token (``"left"``, ``"INNER"``...).

    Raises:
        SQLBuilderError: If ``kind`` names no supported join.

    Returns:
        JoinType: The matching member.
    """
    if isinstance(kind, JoinType):
        return kind
    if isinstance(kind, str):
        try:
            return JoinType(kind.strip().upper())
        except ValueError:
            pass
    msg = f"Unsupported join type: {kind!r}"
    raise SQLBuilderError(msg)


def to_order_direction(direction: Union[OrderDirection, str]) -> OrderDirection:
    """Coerce an ordering direction to :class:`OrderDirection`.

    Accepts the member, its token (``"ASC"``/``"DESC"``) or its name
    (``"ascending"``/``"descending"``), case-insensitively.

    Raises:
        SQLBuilderError: If ``direction`` is not a known direction.

    Returns:
        OrderDirection: The matching member.
    """
    if isinstance(direction, OrderDirection):
        return direction
    if isinstance(direction, str):
        token = direction.strip().upper()
        for member in OrderDirection:
            if token in {member.value, member.name}:
                return member
    msg = f"Unsupported order direction: {direction!r}"
    raise SQLBuilderError(msg)
