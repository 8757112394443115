"""Infrastructure layer - Concrete implementations of ports."""

from .asyncpg_executor import AsyncpgExecutor
from .audit_sinks import InMemoryAuditSink, SqlAuditSink
from .config import DatabaseConfig, NATSConnectionConfig, PubSubConfig
from .in_memory_repository import InMemoryMessagingModuleRepository
from .nats_broker import NATSBrokerSender
from .query_builder import WhereClauseBuilder
from .serialization import deserialize_event, serialize_event
from .simple_logger import ContextFormatter, SimpleLogger
from .sql_messaging_module_repository import SqlMessagingModuleRepository
from .worker_pool import PublishingWorkerPool

__all__ = [
    "AsyncpgExecutor",
    "ContextFormatter",
    "DatabaseConfig",
    "InMemoryAuditSink",
    "InMemoryMessagingModuleRepository",
    "NATSBrokerSender",
    "NATSConnectionConfig",
    "PubSubConfig",
    "PublishingWorkerPool",
    "SimpleLogger",
    "SqlAuditSink",
    "SqlMessagingModuleRepository",
    "WhereClauseBuilder",
    "deserialize_event",
    "serialize_event",
]
