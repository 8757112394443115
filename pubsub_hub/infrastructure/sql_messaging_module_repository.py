"""SQL implementation of the messaging module registry."""

from __future__ import annotations

from typing import Any

from ..domain.enums import ModuleRole
from ..domain.exceptions import (
    MessagingModuleNotFoundError,
    PersistenceError,
)
from ..domain.models import MessagingModule, MessagingModuleFilter
from ..ports.logger import LoggerPort
from ..ports.repository import MessagingModuleRepository
from ..ports.sql_executor import SqlExecutorPort
from .query_builder import WhereClauseBuilder

_COLUMNS = "id, event_type_id, module_id, tenant_id, role, is_applied, subscriber_callback"


class SqlMessagingModuleRepository(MessagingModuleRepository):
    """Registry adapter that stores registrations in a relational table.

    Every statement is parameterized. ``subscriber_callback`` is a nullable
    column: an absent callback is written as NULL and read back as ``""``.
    """

    def __init__(
        self,
        executor: SqlExecutorPort,
        schema: str = "pubsub_config",
        table: str = "messaging_module",
        logger: LoggerPort | None = None,
    ):
        """Initialize the repository.

        Args:
            executor: Parameterized SQL executor
            schema: Schema holding the registry table
            table: Registry table name
            logger: Optional logger for debugging
        """
        self._executor = executor
        self._table = f"{schema}.{table}"
        self._logger = logger

    async def get(self, module_filter: MessagingModuleFilter) -> list[MessagingModule]:
        where, params = self._build_where_clause(module_filter).build()
        query = f"SELECT {_COLUMNS} FROM {self._table} {where}".rstrip()
        rows = await self._run("get", self._executor.fetch(query, params))
        if self._logger:
            self._logger.debug("Messaging modules fetched", count=len(rows), table=self._table)
        return [self._map_row(row) for row in rows]

    async def get_by_id(self, module_id: str) -> MessagingModule | None:
        query = f"SELECT {_COLUMNS} FROM {self._table} WHERE id = $1"
        rows = await self._run("get_by_id", self._executor.fetch(query, [module_id]))
        return self._map_row(rows[0]) if rows else None

    async def save(self, module: MessagingModule) -> str:
        query = (
            f"INSERT INTO {self._table} ({_COLUMNS}) "
            "VALUES ($1, $2, $3, $4, $5, $6, $7)"
        )
        params = [module.id, *self._column_values(module)]
        await self._run("save", self._executor.execute(query, params), module_id=module.id)
        return module.id

    async def update(self, module_id: str, module: MessagingModule) -> MessagingModule:
        query = (
            f"UPDATE {self._table} SET event_type_id = $1, module_id = $2, tenant_id = $3, "
            "role = $4, is_applied = $5, subscriber_callback = $6 WHERE id = $7"
        )
        params = [*self._column_values(module), module_id]
        updated = await self._run("update", self._executor.execute(query, params), module_id=module_id)
        if updated != 1:
            raise MessagingModuleNotFoundError(module_id)
        return module.model_copy(
            update={"id": module_id, "subscriber_callback": module.subscriber_callback or ""}
        )

    async def delete(self, module_id: str) -> bool:
        query = f"DELETE FROM {self._table} WHERE id = $1"
        deleted = await self._run("delete", self._executor.execute(query, [module_id]), module_id=module_id)
        return deleted == 1

    async def delete_by_filter(self, module_filter: MessagingModuleFilter) -> int:
        builder = self._build_where_clause(module_filter)
        if builder.is_empty():
            raise ValueError("Refusing to delete messaging modules with an empty filter")
        where, params = builder.build()
        query = f"DELETE FROM {self._table} {where}"
        return await self._run("delete_by_filter", self._executor.execute(query, params))

    async def _run(self, operation: str, statement: Any, module_id: str | None = None) -> Any:
        """Await a store call, wrapping non-persistence failures."""
        try:
            return await statement
        except PersistenceError as e:
            self._log_failure(operation, module_id, e)
            raise
        except Exception as e:
            self._log_failure(operation, module_id, e)
            raise PersistenceError(
                f"Failed to {operation.replace('_', ' ')} messaging module", operation=operation
            ) from e

    def _log_failure(self, operation: str, module_id: str | None, error: Exception) -> None:
        if self._logger:
            self._logger.error(
                "Messaging module operation failed",
                operation=operation,
                module_id=module_id,
                error=str(error),
            )

    @staticmethod
    def _column_values(module: MessagingModule) -> list[Any]:
        """Values for every column except ``id``, in column order."""
        return [
            module.event_type_id,
            module.module_id,
            module.tenant_id,
            module.module_role.value,
            module.applied,
            module.subscriber_callback or None,
        ]

    @staticmethod
    def _build_where_clause(module_filter: MessagingModuleFilter) -> WhereClauseBuilder:
        builder = (
            WhereClauseBuilder()
            .equals("event_type_id", module_filter.event_type_id)
            .equals("module_id", module_filter.module_id)
            .equals("tenant_id", module_filter.tenant_id)
            .equals("role", module_filter.module_role.value if module_filter.module_role else None)
            .equals("is_applied", module_filter.applied)
        )
        if module_filter.subscriber_callback == "":
            builder.is_null("subscriber_callback")
        else:
            builder.equals("subscriber_callback", module_filter.subscriber_callback)
        return builder

    @staticmethod
    def _map_row(row: dict[str, Any]) -> MessagingModule:
        return MessagingModule(
            id=row["id"],
            event_type_id=row["event_type_id"],
            module_id=row["module_id"],
            tenant_id=row["tenant_id"],
            module_role=ModuleRole(row["role"]),
            applied=row["is_applied"],
            subscriber_callback=row["subscriber_callback"] or "",
        )
