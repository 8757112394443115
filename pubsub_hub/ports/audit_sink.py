"""Audit sink port - append-only persistence for publish outcomes."""

from abc import ABC, abstractmethod

from ..domain.models import AuditMessage


class AuditSinkPort(ABC):
    """Abstract interface for storing audit messages."""

    @abstractmethod
    async def save(self, message: AuditMessage) -> None:
        """Append one audit message."""
        ...
