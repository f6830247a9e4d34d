"""Tests for the shared rendering helpers."""

import pytest

from fluentsql.builder._render import join_items, render_clause, render_list_clause, terminate


@pytest.mark.parametrize(
    ("items", "expected"),
    [
        ([], ""),
        (["id"], "id"),
        (["id", "name", "email"], "id, name, email"),
    ],
)
def test_join_items(items: list[str], expected: str) -> None:
    assert join_items(items) == expected


def test_join_items_custom_separator() -> None:
    assert join_items(["a = 1", "b = 2"], " AND ") == "a = 1 AND b = 2"


def test_join_items_accepts_generators() -> None:
    assert join_items(f"c{i}" for i in range(3)) == "c0, c1, c2"


@pytest.mark.parametrize("body", [None, ""])
def test_render_clause_omits_empty(body: "str | None") -> None:
    assert render_clause("WHERE", body) == ""


def test_render_clause() -> None:
    assert render_clause("WHERE", "id = 1") == " WHERE id = 1"


def test_render_list_clause() -> None:
    assert render_list_clause("GROUP BY", ["a", "b"]) == " GROUP BY a, b"
    assert render_list_clause("GROUP BY", []) == ""


def test_terminate() -> None:
    assert terminate("SELECT 1") == "SELECT 1;"
