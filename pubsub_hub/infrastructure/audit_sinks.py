"""Audit sink adapters."""

from __future__ import annotations

from ..domain.models import AuditMessage
from ..ports.audit_sink import AuditSinkPort
from ..ports.sql_executor import SqlExecutorPort

_AUDIT_COLUMNS = (
    "id, event_id, event_type, tenant_id, correlation_id, created_by, "
    "published_by, audit_date, state, error_message"
)


class SqlAuditSink(AuditSinkPort):
    """Appends audit messages to the audit table through the SQL executor."""

    def __init__(
        self,
        executor: SqlExecutorPort,
        schema: str = "pubsub_config",
        table: str = "audit_message",
    ):
        self._executor = executor
        self._table = f"{schema}.{table}"

    async def save(self, message: AuditMessage) -> None:
        query = (
            f"INSERT INTO {self._table} ({_AUDIT_COLUMNS}) "
            "VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)"
        )
        await self._executor.execute(
            query,
            [
                message.id,
                message.event_id,
                message.event_type,
                message.tenant_id,
                message.correlation_id,
                message.created_by,
                message.published_by,
                message.audit_date,
                message.state.value,
                message.error_message,
            ],
        )


class InMemoryAuditSink(AuditSinkPort):
    """Audit sink keeping messages in a list, for testing and development."""

    def __init__(self) -> None:
        self.messages: list[AuditMessage] = []

    async def save(self, message: AuditMessage) -> None:
        self.messages.append(message)

    def messages_for(self, event_id: str) -> list[AuditMessage]:
        """All audit messages recorded for one event id."""
        return [message for message in self.messages if message.event_id == event_id]

    def clear(self) -> None:
        self.messages.clear()
