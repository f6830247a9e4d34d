"""Tests for join kind and ordering direction coercion."""

import pytest

from fluentsql import JoinType, OrderDirection
from fluentsql.builder._enums import to_join_type, to_order_direction
from fluentsql.exceptions import SQLBuilderError


def test_tokens() -> None:
    assert [kind.value for kind in JoinType] == ["INNER", "LEFT", "RIGHT", "FULL"]
    assert OrderDirection.ASCENDING.value == "ASC"
    assert OrderDirection.DESCENDING.value == "DESC"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (JoinType.RIGHT, JoinType.RIGHT),
        ("inner", JoinType.INNER),
        (" Full ", JoinType.FULL),
    ],
)
def test_to_join_type(value: "JoinType | str", expected: JoinType) -> None:
    assert to_join_type(value) is expected


@pytest.mark.parametrize("value", ["OUTER", "", 1, None])
def test_to_join_type_rejects_unknown(value: object) -> None:
    with pytest.raises(SQLBuilderError):
        to_join_type(value)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (OrderDirection.DESCENDING, OrderDirection.DESCENDING),
        ("asc", OrderDirection.ASCENDING),
        ("DESCENDING", OrderDirection.DESCENDING),
    ],
)
def test_to_order_direction(value: "OrderDirection | str", expected: OrderDirection) -> None:
    assert to_order_direction(value) is expected


@pytest.mark.parametrize("value", ["up", "", 0, None])
def test_to_order_direction_rejects_unknown(value: object) -> None:
    with pytest.raises(SQLBuilderError):
        to_order_direction(value)  # type: ignore[arg-type]
