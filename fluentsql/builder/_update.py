"""UPDATE statement builder."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Optional, Union

from mypy_extensions import mypyc_attr
from typing_extensions import Self

from fluentsql.builder._common import require_table
from fluentsql.builder._render import join_items, render_clause, terminate
from fluentsql.exceptions import SQLBuilderError
from fluentsql.utils.logging import get_logger, log_with_context

__all__ = ("UpdateBuilder",)

logger = get_logger("builder.update")


@mypyc_attr(allow_interpreted_subclasses=True)
class UpdateBuilder:
    """Builder for UPDATE statements.

    Without :meth:`filter` the statement updates every row of the table.
    """

    __slots__ = ("_assignments", "_filter", "_table")

    def __init__(self, table: str) -> None:
        self._table = require_table(table)
        # insertion-ordered; re-setting a column keeps its position
        self._assignments: dict[str, str] = {}
        self._filter: Optional[str] = None

    @property
    def table(self) -> str:
        """The table being updated."""
        return self._table

    def set(self, column: str, value: str) -> Self:
        """Add a ``column = value`` assignment.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._assignments[column] = value
        return self

    def fields(self, assignments: Union[Mapping[str, str], Iterable[tuple[str, str]]]) -> Self:
        """Add several assignments at once.

        Args:
            assignments: A mapping or a sequence of ``(column, value)`` pairs.

        Raises:
            SQLBuilderError: If an item is not a ``(column, value)`` pair.

        Returns:
            Self: The current builder instance for method chaining.
        """
        items = assignments.items() if isinstance(assignments, Mapping) else assignments
        for item in items:
            if isinstance(item, str) or not isinstance(item, Sequence) or len(item) != 2:  # noqa: PLR2004
                msg = f"UPDATE assignments must be (column, value) pairs, got {item!r}"
                raise SQLBuilderError(msg)
            column, value = item
            self.set(column, value)
        return self

    def filter(self, condition: str) -> Self:
        """Set the ``WHERE`` condition. A later call replaces the earlier one.

        Returns:
            Self: The current builder instance for method chaining.
        """
        if self._filter is not None:
            logger.debug("Replacing WHERE condition on %s", self._table)
        self._filter = condition
        return self

    def build(self) -> str:
        """Render the UPDATE statement.

        Raises:
            SQLBuilderError: If no assignment was given.

        Returns:
            str: The semicolon-terminated SQL.
        """
        if not self._assignments:
            msg = f"UPDATE {self._table} needs at least one assignment"
            raise SQLBuilderError(msg)
        assignments = join_items(f"{column} = {value}" for column, value in self._assignments.items())
        sql = f"UPDATE {self._table} SET {assignments}" + render_clause("WHERE", self._filter)
        log_with_context(
            logger, logging.DEBUG, "Built UPDATE statement", table=self._table, unconditional=not self._filter
        )
        return terminate(sql)

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(table={self._table!r})"
