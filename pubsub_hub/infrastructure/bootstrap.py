"""Bootstrap module wiring configuration, adapters and services.

The worker pool, broker handle and database pool are created once here and
shared by every tenant and event type for the lifetime of the process.
"""

from __future__ import annotations

from contextlib import AsyncExitStack

from ..application.audit_recorder import AuditRecorder
from ..application.publishing_service import PublishingService
from ..ports.audit_sink import AuditSinkPort
from ..ports.broker import BrokerSenderPort
from ..ports.logger import LoggerPort
from ..ports.repository import MessagingModuleRepository
from .asyncpg_executor import AsyncpgExecutor
from .audit_sinks import InMemoryAuditSink, SqlAuditSink
from .config import PubSubConfig
from .in_memory_repository import InMemoryMessagingModuleRepository
from .nats_broker import NATSBrokerSender
from .simple_logger import SimpleLogger
from .sql_messaging_module_repository import SqlMessagingModuleRepository
from .worker_pool import PublishingWorkerPool


class PubSubHub:
    """Process-wide container for the hub's services and their resources."""

    def __init__(
        self,
        config: PubSubConfig,
        logger: LoggerPort,
        broker: BrokerSenderPort,
        repository: MessagingModuleRepository,
        audit_sink: AuditSinkPort,
        publishing_service: PublishingService,
        executor: AsyncpgExecutor | None = None,
    ):
        self.config = config
        self.logger = logger
        self.broker = broker
        self.repository = repository
        self.audit_sink = audit_sink
        self.publishing_service = publishing_service
        self.executor = executor

    async def start(self) -> None:
        """Open connections and start the publishing workers.

        If any step fails, what was already opened is closed again in
        reverse order before the error propagates.
        """
        async with AsyncExitStack() as stack:
            if self.executor is not None:
                await self.executor.connect()
                stack.push_async_callback(self.executor.close)
            await self.broker.connect()
            stack.push_async_callback(self.broker.disconnect)
            await self.publishing_service.start()
            stack.pop_all()
        self.logger.info(
            "Pub/sub hub started",
            environment_id=self.config.environment_id,
            pool_size=self.config.publishing_pool_size,
        )

    async def stop(self) -> None:
        """Drain publishing, then close connections in reverse order."""
        await self.publishing_service.stop()
        await self.broker.disconnect()
        if self.executor is not None:
            await self.executor.close()
        self.logger.info("Pub/sub hub stopped", environment_id=self.config.environment_id)

    async def __aenter__(self) -> PubSubHub:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()


def build_hub(
    config: PubSubConfig | None = None,
    *,
    in_memory_store: bool = False,
    broker: BrokerSenderPort | None = None,
    logger: LoggerPort | None = None,
) -> PubSubHub:
    """Create a hub from configuration.

    Args:
        config: Hub configuration. Loaded from the environment if not provided.
        in_memory_store: Keep registrations and audit messages in memory
            instead of PostgreSQL
        broker: Override of the NATS broker sender
        logger: Override of the default ``SimpleLogger``
    """
    config = config or PubSubConfig.from_env()
    logger = logger or SimpleLogger(level=config.log_level)

    executor: AsyncpgExecutor | None = None
    repository: MessagingModuleRepository
    audit_sink: AuditSinkPort
    if in_memory_store:
        repository = InMemoryMessagingModuleRepository()
        audit_sink = InMemoryAuditSink()
    else:
        db = config.database
        executor = AsyncpgExecutor(db, logger=logger)
        repository = SqlMessagingModuleRepository(
            executor, schema=db.schema_name, table=db.module_table, logger=logger
        )
        audit_sink = SqlAuditSink(executor, schema=db.schema_name, table=db.audit_table)

    broker = broker or NATSBrokerSender(config.environment_id, config.nats, logger=logger)
    pool = PublishingWorkerPool(
        size=config.publishing_pool_size,
        queue_size=config.publishing_queue_size,
        logger=logger,
    )
    publishing_service = PublishingService(
        environment_id=config.environment_id,
        broker=broker,
        audit_recorder=AuditRecorder(audit_sink, logger=logger),
        worker_pool=pool,
        logger=logger,
    )
    return PubSubHub(
        config=config,
        logger=logger,
        broker=broker,
        repository=repository,
        audit_sink=audit_sink,
        publishing_service=publishing_service,
        executor=executor,
    )
