"""PostgreSQL implementation of the SQL executor port using asyncpg."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import asyncpg

from ..domain.exceptions import DuplicateRecordError, PersistenceError
from ..ports.logger import LoggerPort
from ..ports.sql_executor import SqlExecutorPort
from .config import DatabaseConfig


class AsyncpgExecutor(SqlExecutorPort):
    """SqlExecutorPort backed by an asyncpg connection pool.

    asyncpg natively uses ``$n`` placeholders, so templates are passed
    through unchanged and parameters are bound by the server.
    """

    def __init__(self, config: DatabaseConfig | None = None, logger: LoggerPort | None = None):
        self._config = config or DatabaseConfig()
        self._logger = logger
        self._pool: asyncpg.Pool | None = None

    async def connect(self) -> None:
        """Create the connection pool."""
        if self._pool is not None:
            return
        try:
            self._pool = await asyncpg.create_pool(
                dsn=self._config.dsn,
                min_size=self._config.min_pool_size,
                max_size=self._config.max_pool_size,
                command_timeout=self._config.command_timeout,
            )
        except (asyncpg.PostgresError, OSError) as e:
            raise PersistenceError(f"Failed to connect to database: {e}", operation="connect") from e
        if self._logger:
            self._logger.info(
                "Database pool created",
                min_size=self._config.min_pool_size,
                max_size=self._config.max_pool_size,
            )

    async def close(self) -> None:
        """Close the connection pool."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None

    async def fetch(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        pool = self._require_pool("fetch")
        try:
            async with pool.acquire() as conn:
                rows = await conn.fetch(sql, *params)
        except asyncpg.PostgresError as e:
            raise self._map_error(e, "fetch") from e
        return [dict(row) for row in rows]

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        pool = self._require_pool("execute")
        try:
            async with pool.acquire() as conn:
                status = await conn.execute(sql, *params)
        except asyncpg.PostgresError as e:
            raise self._map_error(e, "execute") from e
        return parse_row_count(status)

    def _require_pool(self, operation: str) -> asyncpg.Pool:
        if self._pool is None:
            raise PersistenceError(
                "Database executor not connected - call connect() first", operation=operation
            )
        return self._pool

    @staticmethod
    def _map_error(error: asyncpg.PostgresError, operation: str) -> PersistenceError:
        if isinstance(error, asyncpg.UniqueViolationError):
            return DuplicateRecordError(
                f"Unique constraint violation: {error}", operation=operation
            )
        if isinstance(error, asyncpg.PostgresConnectionError):
            return PersistenceError(
                "Database connection lost during statement", operation=operation
            )
        return PersistenceError(f"Database error: {type(error).__name__}: {error}", operation=operation)


def parse_row_count(status: str) -> int:
    """Parse the affected-row count from an asyncpg command tag.

    asyncpg returns strings like ``"INSERT 0 1"``, ``"UPDATE 5"`` or
    ``"DELETE 3"``; the count is always the last token.
    """
    try:
        parts = status.split()
        if len(parts) >= 2:
            return int(parts[-1])
    except (ValueError, IndexError, AttributeError):
        pass
    return 0
