"""Tests for UpdateBuilder."""

import pytest

from fluentsql import UpdateBuilder, update
from fluentsql.exceptions import SQLBuilderError


class TestUpdateBuilder:
    """Test cases for UpdateBuilder."""

    def test_set_with_filter(self) -> None:
        assert update("users").set("name", "'x'").filter("id = 1").build() == "UPDATE users SET name = 'x' WHERE id = 1;"

    def test_unconditional_update(self) -> None:
        """Omitting filter() updates every row; the builder does not guard against it."""
        query = update("users").set("karma", "0").set("last_login", "'1970-01-01'").build()

        assert query == "UPDATE users SET karma = 0, last_login = '1970-01-01';"

    def test_fields_with_pairs(self) -> None:
        query = update("users").fields([("karma", "0"), ("name", "$1")]).filter("id = $2").build()

        assert query == "UPDATE users SET karma = 0, name = $1 WHERE id = $2;"

    def test_fields_with_mapping(self) -> None:
        query = update("users").fields({"karma": "0", "name": "$1"}).build()

        assert query == "UPDATE users SET karma = 0, name = $1;"

    def test_reset_column_keeps_position(self) -> None:
        query = update("users").set("karma", "0").set("name", "$1").set("karma", "1").build()

        assert query == "UPDATE users SET karma = 1, name = $1;"

    @pytest.mark.parametrize("bad", [["karma"], [("karma", "0", "extra")], ["ab"], [1], [None]])
    def test_fields_rejects_non_pairs(self, bad: list[object]) -> None:
        with pytest.raises(SQLBuilderError, match="pairs"):
            update("users").fields(bad)  # type: ignore[arg-type]

    def test_filter_last_call_wins(self) -> None:
        query = update("users").set("karma", "0").filter("name = $1").filter("last_login < $2").build()

        assert query == "UPDATE users SET karma = 0 WHERE last_login < $2;"

    def test_no_assignments_fails(self) -> None:
        with pytest.raises(SQLBuilderError, match="at least one assignment"):
            update("users").filter("id = 1").build()

    def test_chaining_and_repr(self) -> None:
        builder = update("users")

        assert builder.set("karma", "0") is builder
        assert builder.fields([("name", "'a'")]) is builder
        assert builder.filter("id = 1") is builder
        assert isinstance(builder, UpdateBuilder)
        assert repr(builder) == "UpdateBuilder(table='users')"
        assert str(builder) == builder.build() == "UPDATE users SET karma = 0, name = 'a' WHERE id = 1;"
