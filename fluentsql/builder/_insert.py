"""INSERT statement builder."""

import logging
from collections.abc import Sequence

from mypy_extensions import mypyc_attr
from typing_extensions import Self

from fluentsql.builder._common import require_items, require_table
from fluentsql.builder._render import join_items, terminate
from fluentsql.exceptions import SQLBuilderError
from fluentsql.utils.logging import get_logger, log_with_context

__all__ = ("InsertBuilder",)

logger = get_logger("builder.insert")


@mypyc_attr(allow_interpreted_subclasses=True)
class InsertBuilder:
    """Builder for single-row INSERT statements.

    Columns and values are positionally aligned. Values are emitted verbatim,
    so literals must already be quoted (``"'a'"``) or be placeholders.
    """

    __slots__ = ("_fields", "_table", "_values")

    def __init__(self, table: str) -> None:
        self._table = require_table(table)
        self._fields: list[str] = []
        self._values: list[str] = []

    @property
    def table(self) -> str:
        """The table rows are inserted into."""
        return self._table

    def fields(self, fields: Sequence[str]) -> Self:
        """Append target columns.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._fields.extend(require_items(fields, "fields"))
        return self

    def values(self, values: Sequence[str]) -> Self:
        """Append values, aligned by position with :meth:`fields`.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._values.extend(require_items(values, "values"))
        return self

    def set(self, column: str, value: str) -> Self:
        """Set one column's value.

        Setting a column that is already present replaces its value in place.

        Raises:
            SQLBuilderError: If fields and values are already misaligned.

        Returns:
            Self: The current builder instance for method chaining.
        """
        self._check_alignment()
        if column in self._fields:
            self._values[self._fields.index(column)] = value
        else:
            self._fields.append(column)
            self._values.append(value)
        return self

    def _check_alignment(self) -> None:
        if len(self._fields) != len(self._values):
            msg = (
                f"INSERT INTO {self._table} has {len(self._fields)} field(s) "
                f"but {len(self._values)} value(s)"
            )
            raise SQLBuilderError(msg)

    def build(self) -> str:
        """Render the INSERT statement.

        Raises:
            SQLBuilderError: If no columns were given or the field and value counts differ.

        Returns:
            str: The semicolon-terminated SQL.
        """
        self._check_alignment()
        if not self._fields:
            msg = f"INSERT INTO {self._table} needs at least one column"
            raise SQLBuilderError(msg)
        log_with_context(logger, logging.DEBUG, "Built INSERT statement", table=self._table, columns=len(self._fields))
        return terminate(f"INSERT INTO {self._table} ({join_items(self._fields)}) VALUES ({join_items(self._values)})")

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(table={self._table!r})"
