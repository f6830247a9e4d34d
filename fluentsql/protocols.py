"""Structural types shared by the statement builders."""

from typing import Protocol, runtime_checkable

__all__ = ("SQLBuildable",)


@runtime_checkable
class SQLBuildable(Protocol):
    """Anything that renders one complete SQL statement."""

    def build(self) -> str:
        """Render the statement.

        Returns:
            str: A single semicolon-terminated SQL statement.
        """
        ...
