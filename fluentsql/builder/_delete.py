"""DELETE statement builder."""

import logging
from typing import Optional

from mypy_extensions import mypyc_attr
from typing_extensions import Self

from fluentsql.builder._common import require_table
from fluentsql.builder._render import render_clause, terminate
from fluentsql.utils.logging import get_logger, log_with_context

__all__ = ("DeleteBuilder",)

logger = get_logger("builder.delete")


@mypyc_attr(allow_interpreted_subclasses=True)
class DeleteBuilder:
    """Builder for DELETE statements.

    Without :meth:`filter` the statement deletes every row of the table.
    """

    __slots__ = ("_filter", "_table")

    def __init__(self, table: str) -> None:
        self._table = require_table(table)
        self._filter: Optional[str] = None

    @property
    def table(self) -> str:
        """The table rows are deleted from."""
        return self._table

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
        """Render the DELETE statement.

        Returns:
            str: The semicolon-terminated SQL.
        """
        log_with_context(
            logger, logging.DEBUG, "Built DELETE statement", table=self._table, unconditional=not self._filter
        )
        return terminate(f"DELETE FROM {self._table}" + render_clause("WHERE", self._filter))

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(table={self._table!r})"
