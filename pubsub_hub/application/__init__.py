"""Application layer - Service orchestration and use cases."""

from .audit_recorder import AuditRecorder
from .publishing_service import ERROR_PUBLISHING_EVENT, EVENT_NOT_SENT, PublishingService
from .routing import find_publishers, find_subscribers

__all__ = [
    "ERROR_PUBLISHING_EVENT",
    "EVENT_NOT_SENT",
    "AuditRecorder",
    "PublishingService",
    "find_publishers",
    "find_subscribers",
]
