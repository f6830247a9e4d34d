"""fluentsql: chainable SQL statement builders for PostgreSQL, MySQL and SQLite."""

from fluentsql import builder, exceptions, protocols, utils
from fluentsql.__metadata__ import __version__
from fluentsql.builder import (
    DeleteBuilder,
    InsertBuilder,
    JoinType,
    OrderDirection,
    SelectBuilder,
    UpdateBuilder,
    delete,
    insert,
    select,
    update,
)
from fluentsql.exceptions import FluentSQLError, SQLBuilderError
from fluentsql.protocols import SQLBuildable

__all__ = (
    "DeleteBuilder",
    "FluentSQLError",
    "InsertBuilder",
    "JoinType",
    "OrderDirection",
    "SQLBuildable",
    "SQLBuilderError",
    "SelectBuilder",
    "UpdateBuilder",
    "__version__",
    "builder",
    "delete",
    "exceptions",
    "insert",
    "protocols",
    "select",
    "update",
    "utils",
)
