"""Parameterized WHERE clause construction.

Predicates and their bound values are accumulated together so the rendered
SQL only ever contains ``$n`` placeholders, never caller-supplied values.
"""

from __future__ import annotations

from typing import Any


class WhereClauseBuilder:
    """Builds a conjunctive WHERE clause over (predicate, value) pairs.

    Example:
        >>> builder = WhereClauseBuilder().equals("tenant_id", "diku")
        >>> builder.build()
        ('WHERE tenant_id = $1', ['diku'])
    """

    def __init__(self, start_index: int = 1):
        """Initialize the builder.

        Args:
            start_index: Placeholder number of the first bound value, for
                statements that bind other values before the WHERE clause
        """
        self._predicates: list[str] = []
        self._params: list[Any] = []
        self._start_index = start_index

    def _next_placeholder(self) -> str:
        return f"${self._start_index + len(self._params)}"

    def equals(self, column: str, value: Any) -> WhereClauseBuilder:
        """Add ``column = value``; a None value adds nothing."""
        if value is None:
            return self
        self._predicates.append(f"{column} = {self._next_placeholder()}")
        self._params.append(value)
        return self

    def is_null(self, column: str) -> WhereClauseBuilder:
        self._predicates.append(f"{column} IS NULL")
        return self

    @property
    def params(self) -> list[Any]:
        return list(self._params)

    def is_empty(self) -> bool:
        return not self._predicates

    def build(self) -> tuple[str, list[Any]]:
        """Render the clause and its bound values.

        Returns:
            ``("", [])`` when no predicate was added, otherwise
            ``("WHERE p1 AND p2 ...", [v1, v2, ...])``
        """
        if not self._predicates:
            return "", []
        return "WHERE " + " AND ".join(self._predicates), self.params
