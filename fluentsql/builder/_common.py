"""Argument checks shared by the statement builders."""

from typing import Any

from fluentsql.exceptions import SQLBuilderError

__all__ = ("require_count", "require_items", "require_table")


def require_table(table: Any) -> str:
    """Return ``table`` if it is a non-empty string.

    Raises:
        SQLBuilderError: If no usable table name was given.
    """
    if not isinstance(table, str) or not table.strip():
        msg = f"A statement needs a non-empty target table, got {table!r}"
        raise SQLBuilderError(msg)
    return table


def require_count(value: Any, clause: str) -> int:
    """Return ``value`` if it is a non-negative integer.

    Raises:
        SQLBuilderError: If ``value`` is a bool, not an int, or negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{clause} expects an integer, got {value!r}"
        raise SQLBuilderError(msg)
    if value < 0:
        msg = f"{clause} must be non-negative, got {value}"
        raise SQLBuilderError(msg)
    return value


def require_items(items: Any, clause: str) -> list[str]:
    """Return ``items`` as a list of fragments.

    Raises:
        SQLBuilderError: If ``items`` is a bare string rather than a sequence of strings.
    """
    if isinstance(items, str):
        msg = f"{clause} expects a sequence of strings, got a bare string {items!r}"
        raise SQLBuilderError(msg)
    return list(items)
