"""Pure string helpers shared by every statement builder.

All fragments are emitted verbatim. Nothing here quotes, escapes or parses
caller-supplied text.
"""

from collections.abc import Iterable
from typing import Optional

__all__ = (
    "LIST_SEPARATOR",
    "STATEMENT_TERMINATOR",
    "join_items",
    "render_clause",
    "render_list_clause",
    "terminate",
)

LIST_SEPARATOR = ", "
STATEMENT_TERMINATOR = ";"


def join_items(items: Iterable[str], separator: str = LIST_SEPARATOR) -> str:
    """Join fragments in order.

    Returns:
        str: The joined text, or an empty string for no items.
    """
    return separator.join(items)


def render_clause(keyword: str, body: Optional[str]) -> str:
    """Render ``" <keyword> <body>"`` or nothing when ``body`` is absent.

    Returns:
        str: The clause with its leading space, or ``""``.
    """
    if body is None or body == "":
        return ""
    return f" {keyword} {body}"


def render_list_clause(keyword: str, items: Iterable[str]) -> str:
    """Render a keyword-prefixed comma list, omitted when ``items`` is empty.

    Returns:
        str: The clause with its leading space, or ``""``.
    """
    return render_clause(keyword, join_items(items))


def terminate(sql: str) -> str:
    """Append the statement terminator.

    Returns:
        str: ``sql`` followed by a single ``;``.
    """
    return f"{sql}{STATEMENT_TERMINATOR}"
