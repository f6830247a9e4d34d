# ruff: noqa: PLR0904
"""SELECT statement builder.

Clauses may be set in any order; they always render in the fixed order
``SELECT ... FROM ... JOIN ... WHERE ... GROUP BY ... HAVING ... ORDER BY ...
LIMIT ... OFFSET ...``.
"""

import logging
from collections.abc import Sequence
from typing import NamedTuple, Optional, Union

from mypy_extensions import mypyc_attr
from typing_extensions import Self

from fluentsql.builder._common import require_count, require_items, require_table
from fluentsql.builder._enums import JoinType, OrderDirection, to_join_type, to_order_direction
from fluentsql.builder._render import join_items, render_clause, render_list_clause, terminate
from fluentsql.utils.logging import get_logger, log_with_context

__all__ = ("Join", "OrderItem", "SelectBuilder")

logger = get_logger("builder.select")


class Join(NamedTuple):
    kind: JoinType
    table: str
    condition: str
    alias: Optional[str] = None

    def render(self) -> str:
        target = f"{self.table} AS {self.alias}" if self.alias else self.table
        return f" {self.kind.value} JOIN {target} ON {self.condition}"


class OrderItem(NamedTuple):
    column: str
    direction: OrderDirection

    def render(self) -> str:
        return f"{self.column} {self.direction.value}"


@mypyc_attr(allow_interpreted_subclasses=True)
class SelectBuilder:
    """Builder for SELECT statements.

    Example:
        >>> select("users").fields(["id", "name"]).filter("name = $1").order_by("id", OrderDirection.ASCENDING).build()
        'SELECT id, name FROM users WHERE name = $1 ORDER BY id ASC;'
    """

    __slots__ = (
        "_alias",
        "_fields",
        "_filter",
        "_group_by",
        "_having",
        "_joins",
        "_limit",
        "_offset",
        "_order_by",
        "_table",
    )

    def __init__(self, table: str) -> None:
        self._table = require_table(table)
        self._alias: Optional[str] = None
        self._fields: list[str] = []
        self._joins: list[Join] = []
        self._filter: Optional[str] = None
        self._group_by: list[str] = []
        self._having: Optional[str] = None
        self._order_by: list[OrderItem] = []
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

    @property
    def table(self) -> str:
        """The table named in the ``FROM`` clause."""
        return self._table

    def as_alias(self, name: str) -> Self:
        """Alias the ``FROM`` table (``FROM <table> AS <name>``).

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._alias = name
        return self

    def fields(self, fields: Sequence[str]) -> Self:
        """Append columns to the select list.

        Without any fields the statement selects ``*``.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._fields.extend(require_items(fields, "fields"))
        return self

    def join(
        self, kind: Union[JoinType, str], table: str, condition: str, alias: Optional[str] = None
    ) -> Self:
        """Add a ``<KIND> JOIN <table> ON <condition>`` clause.

        Args:
            kind: The join kind. There is no default.
            table: The table to join.
            condition: The ``ON`` condition, emitted verbatim.
            alias: Optional alias for the joined table.

        Raises:
            SQLBuilderError: If ``kind`` is not a supported join kind.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._joins.append(Join(to_join_type(kind), table, condition, alias))
        return self

    def inner_join(self, table: str, condition: str, alias: Optional[str] = None) -> Self:
        """Add an ``INNER JOIN`` clause.

        Returns:
            Self: The current builder instance for method chaining.
        """
        return self.join(JoinType.INNER, table, condition, alias)

    def left_join(self, table: str, condition: str, alias: Optional[str] = None) -> Self:
        """Add a ``LEFT JOIN`` clause.

        Returns:
            Self: The current builder instance for method chaining.
        """
        return self.join(JoinType.LEFT, table, condition, alias)

    def right_join(self, table: str, condition: str, alias: Optional[str] = None) -> Self:
        """Add a ``RIGHT JOIN`` clause.

        Returns:
            Self: The current builder instance for method chaining.
        """
        return self.join(JoinType.RIGHT, table, condition, alias)

    def full_join(self, table: str, condition: str, alias: Optional[str] = None) -> Self:
        """Add a ``FULL JOIN`` clause.

        Returns:
            Self: The current builder instance for method chaining.
        """
        return self.join(JoinType.FULL, table, condition, alias)

    def filter(self, condition: str) -> Self:
        """Set the ``WHERE`` condition.

        A later call replaces the earlier condition. Combine predicates with
        ``AND``/``OR`` before passing them in.

        Returns:
            Self: The current builder instance for method chaining.
        """
        if self._filter is not None:
            logger.debug("Replacing WHERE condition on %s", self._table)
        self._filter = condition
        return self

    def group_by(self, columns: Sequence[str]) -> Self:
        """Append ``GROUP BY`` expressions.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._group_by.extend(require_items(columns, "GROUP BY"))
        return self

    def having(self, condition: str) -> Self:
        """Set the ``HAVING`` condition. A later call replaces the earlier one.

        Returns:
            Self: The current builder instance for method chaining.
        """
        if self._having is not None:
            logger.debug("Replacing HAVING condition on %s", self._table)
        self._having = condition
        return self

    def order_by(self, column: str, direction: Union[OrderDirection, str]) -> Self:
        """Append an ``ORDER BY`` expression.

        Raises:
            SQLBuilderError: If ``direction`` is not ascending or descending.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._order_by.append(OrderItem(column, to_order_direction(direction)))
        return self

    def limit(self, count: int) -> Self:
        """Set ``LIMIT``.

        Raises:
            SQLBuilderError: If ``count`` is not a non-negative integer.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._limit = require_count(count, "LIMIT")
        return self

    def offset(self, value: int) -> Self:
        """Set ``OFFSET``.

        Raises:
            SQLBuilderError: If ``value`` is not a non-negative integer.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._offset = require_count(value, "OFFSET")
        return self

    def build(self) -> str:
        """Render the SELECT statement.

        Returns:
            str: The semicolon-terminated SQL.
        """
        sql = f"SELECT {join_items(self._fields) or '*'} FROM {self._table}"
        if self._alias:
            sql += f" AS {self._alias}"
        sql += "".join(join.render() for join in self._joins)
        sql += render_clause("WHERE", self._filter)
        sql += render_list_clause("GROUP BY", self._group_by)
        sql += render_clause("HAVING", self._having)
        sql += render_list_clause("ORDER BY", (item.render() for item in self._order_by))
        if self._limit is not None:
            sql += f" LIMIT {self._limit}"
        if self._offset is not None:
            sql += f" OFFSET {self._offset}"
        log_with_context(logger, logging.DEBUG, "Built SELECT statement", table=self._table, joins=len(self._joins))
        return terminate(sql)

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(table={self._table!r})"
