"""Tests for DeleteBuilder."""

import pytest

from fluentsql import DeleteBuilder, delete
from fluentsql.exceptions import SQLBuilderError


class TestDeleteBuilder:
    """Test cases for DeleteBuilder."""

    def test_basic_delete(self) -> None:
        assert delete("users").build() == "DELETE FROM users;"

    def test_delete_with_filter(self) -> None:
        assert delete("users").filter("id = 1").build() == "DELETE FROM users WHERE id = 1;"

    def test_compound_condition_is_verbatim(self) -> None:
        query = delete("users").filter("name = $1 AND karma <= $2").build()

        assert query == "DELETE FROM users WHERE name = $1 AND karma <= $2;"

    def test_filter_last_call_wins(self) -> None:
        assert delete("users").filter("id = 1").filter("id = 2").build() == "DELETE FROM users WHERE id = 2;"

    def test_requires_table(self) -> None:
        with pytest.raises(SQLBuilderError):
            delete("")

    def test_chaining_and_repr(self) -> None:
        builder = delete("users")

        assert builder.filter("id = 1") is builder
        assert isinstance(builder, DeleteBuilder)
        assert builder.table == "users"
        assert repr(builder) == "DeleteBuilder(table='users')"
        assert str(builder) == builder.build()
