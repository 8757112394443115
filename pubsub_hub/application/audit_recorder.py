"""Fire-and-forget recording of publish outcomes."""

from __future__ import annotations

import asyncio

from ..domain.enums import AuditState
from ..domain.models import AuditMessage, Event
from ..ports.audit_sink import AuditSinkPort
from ..ports.logger import LoggerPort


class AuditRecorder:
    """Hands audit messages to the sink without making the caller wait.

    The recorder is the single source of truth for "was this event
    published". Sink failures are logged and swallowed; writes are never
    retried.
    """

    def __init__(self, sink: AuditSinkPort, logger: LoggerPort | None = None):
        self._sink = sink
        self._logger = logger
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def record(
        self,
        event: Event,
        tenant_id: str | None,
        state: AuditState,
        reason: str | None = None,
    ) -> asyncio.Task[None] | None:
        """Schedule one audit write and return immediately.

        Must be called from within a running event loop. Returns None when the
        audit message could not even be built; that failure is only logged.
        """
        try:
            message = AuditMessage.for_event(event, tenant_id, state, reason)
        except Exception as e:
            if self._logger:
                self._logger.exception(
                    "Failed to build audit message", exc_info=e, event_id=event.id
                )
            return None
        task = asyncio.create_task(self._write(message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _write(self, message: AuditMessage) -> None:
        try:
            await self._sink.save(message)
        except Exception as e:
            if self._logger:
                self._logger.exception(
                    "Failed to save audit message",
                    exc_info=e,
                    event_id=message.event_id,
                    tenant_id=message.tenant_id,
                    state=message.state.value,
                )

    async def wait_pending(self) -> None:
        """Wait until every scheduled audit write has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
