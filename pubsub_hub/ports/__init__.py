"""Ports layer - Interfaces for external communication."""

from .audit_sink import AuditSinkPort
from .broker import BrokerSenderPort
from .logger import LoggerPort
from .repository import MessagingModuleRepository
from .sql_executor import SqlExecutorPort

__all__ = [
    "AuditSinkPort",
    "BrokerSenderPort",
    "LoggerPort",
    "MessagingModuleRepository",
    "SqlExecutorPort",
]
