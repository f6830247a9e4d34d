"""Fluent SQL statement builders.

Each builder accumulates clause state through chained calls and renders one
semicolon-terminated statement from :meth:`build`. Table names, fields,
conditions and values are emitted verbatim: nothing is quoted, escaped or
parameterized, so callers must only pass fragments that are safe to
interpolate.
"""

from fluentsql.builder._delete import DeleteBuilder
from fluentsql.builder._enums import JoinType, OrderDirection
from fluentsql.builder._insert import InsertBuilder
from fluentsql.builder._select import SelectBuilder
from fluentsql.builder._update import UpdateBuilder

__all__ = (
    "DeleteBuilder",
    "InsertBuilder",
    "JoinType",
    "OrderDirection",
    "SelectBuilder",
    "UpdateBuilder",
    "delete",
    "insert",
    "select",
    "update",
)


def select(table: str) -> SelectBuilder:
    """Create a SELECT builder.

    Args:
        table: The table to select from.

    Returns:
        SelectBuilder: A new SelectBuilder instance.
    """
    return SelectBuilder(table)


def insert(table: str) -> InsertBuilder:
    """Create an INSERT builder.

    Args:
        table: The table to insert into.

    Returns:
        InsertBuilder: A new InsertBuilder instance.
    """
    return InsertBuilder(table)


def update(table: str) -> UpdateBuilder:
    """Create an UPDATE builder.

    Args:
        table: The table to update.

    Returns:
        UpdateBuilder: A new UpdateBuilder instance.
    """
    return UpdateBuilder(table)


def delete(table: str) -> DeleteBuilder:
    """Create a DELETE builder.

    Args:
        table: The table to delete from.

    Returns:
        DeleteBuilder: A new DeleteBuilder instance.
    """
    return DeleteBuilder(table)
