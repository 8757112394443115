"""Publishing pipeline: channel naming, broker send and audit per attempt.

Every attempt ends in exactly one audit record and a resolved
``PublishResult``; broker failures and unexpected faults are reported
through the result instead of being raised at the caller.
"""

from __future__ import annotations

import asyncio

from ..domain.enums import AuditState
from ..domain.exceptions import BrokerSendError
from ..domain.models import Event, PublishResult
from ..domain.patterns import ChannelNames
from ..infrastructure.serialization import serialize_event
from ..infrastructure.worker_pool import PublishingWorkerPool, current_task_cancelling
from ..ports.broker import BrokerSenderPort
from ..ports.logger import LoggerPort
from .audit_recorder import AuditRecorder

EVENT_NOT_SENT = "Event was not sent"
ERROR_PUBLISHING_EVENT = "Error publishing event"


class PublishingService:
    """Publishes tenant-scoped events on a shared bounded worker pool.

    No retries are performed: each call is exactly one attempt. The pool and
    broker handle are shared by all tenants and event types.
    """

    def __init__(
        self,
        environment_id: str,
        broker: BrokerSenderPort,
        audit_recorder: AuditRecorder,
        worker_pool: PublishingWorkerPool | None = None,
        logger: LoggerPort | None = None,
    ):
        """Initialize the service.

        Args:
            environment_id: Deployment environment, first component of every channel
            broker: Send primitive for serialized events
            audit_recorder: Receives one outcome per attempt
            worker_pool: Pool executing sends. Defaults to a pool of 20 workers.
            logger: Optional logger, one line per attempt
        """
        self._environment_id = environment_id
        self._broker = broker
        self._audit = audit_recorder
        self._pool = worker_pool or PublishingWorkerPool(logger=logger)
        self._logger = logger

    @property
    def is_running(self) -> bool:
        return self._pool.is_running

    async def start(self) -> None:
        await self._pool.start()

    async def stop(self) -> None:
        """Finish queued attempts, stop the pool and flush pending audit writes."""
        await self._pool.stop()
        await self._audit.wait_pending()

    async def __aenter__(self) -> PublishingService:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def publish(self, event: Event, tenant_id: str) -> PublishResult:
        """Publish ``event`` for ``tenant_id`` and wait for the outcome.

        Raises:
            PublisherNotRunningError: If the service has not been started
        """
        future = await self.submit(event, tenant_id)
        # A cancelled caller must not abort the attempt or its audit record
        return await asyncio.shield(future)

    async def submit(self, event: Event, tenant_id: str) -> asyncio.Future[PublishResult]:
        """Queue a publish attempt and return the future of its outcome."""
        return await self._pool.submit(lambda: self._attempt(event, tenant_id))

    async def _attempt(self, event: Event, tenant_id: str) -> PublishResult:
        channel: str | None = None
        try:
            channel = ChannelNames.name_for(self._environment_id, tenant_id, event.event_type)
            payload = serialize_event(event)
            await self._broker.send(channel, payload)
        except BrokerSendError as e:
            return self._rejected(event, tenant_id, channel, EVENT_NOT_SENT, e)
        except asyncio.CancelledError as e:
            # Always audited; propagated only when the worker itself is cancelled
            result = self._rejected(event, tenant_id, channel, ERROR_PUBLISHING_EVENT, e)
            if current_task_cancelling():
                raise
            return result
        except Exception as e:
            return self._rejected(event, tenant_id, channel, ERROR_PUBLISHING_EVENT, e)

        if self._logger:
            self._logger.info(
                f"Sent {event.event_type} event with id '{event.id}' to channel {channel}",
                event_id=event.id,
                tenant_id=tenant_id,
                channel=channel,
            )
        self._audit.record(event, tenant_id, AuditState.PUBLISHED)
        return PublishResult(
            event_id=event.id,
            tenant_id=tenant_id,
            channel=channel,
            state=AuditState.PUBLISHED,
        )

    def _rejected(
        self,
        event: Event,
        tenant_id: str | None,
        channel: str | None,
        reason: str,
        error: BaseException,
    ) -> PublishResult:
        tenant_id = _tenant_label(tenant_id)
        if self._logger:
            self._logger.error(
                reason,
                event_id=event.id,
                tenant_id=tenant_id,
                channel=channel,
                error=repr(error),
            )
        self._audit.record(event, tenant_id, AuditState.REJECTED, reason)
        return PublishResult(
            event_id=event.id,
            tenant_id=tenant_id,
            channel=channel,
            state=AuditState.REJECTED,
            reason=reason,
            error=str(error),
            cause=error,
        )


def _tenant_label(tenant_id: object) -> str | None:
    """Tenant id as recorded for a rejected attempt, whatever the caller passed."""
    if tenant_id is None or isinstance(tenant_id, str):
        return tenant_id
    return str(tenant_id)
