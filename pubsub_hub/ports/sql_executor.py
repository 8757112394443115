"""SQL executor port - parameterized access to the relational store."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class SqlExecutorPort(ABC):
    """Abstract interface for executing parameterized SQL.

    Templates use positional ``$n`` placeholders; values are always bound
    through ``params`` and never rendered into the query text.
    """

    @abstractmethod
    async def fetch(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """Run a query and return its rows as column-name keyed dicts.

        Raises:
            PersistenceError: If the store rejects the query
        """
        ...

    @abstractmethod
    async def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Run a write statement and return the affected-row count.

        Raises:
            PersistenceError: If the store rejects the statement
        """
        ...
