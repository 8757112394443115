"""Repository port for messaging module registrations.

This module defines the subscription registry interface following hexagonal
architecture principles.
"""

from abc import ABC, abstractmethod

from ..domain.models import MessagingModule, MessagingModuleFilter


class MessagingModuleRepository(ABC):
    """Abstract repository for publisher/subscriber registrations.

    This is a port interface that must be implemented by infrastructure adapters.
    """

    @abstractmethod
    async def get(self, module_filter: MessagingModuleFilter) -> list[MessagingModule]:
        """Return all registrations matching every present filter field."""
        ...

    @abstractmethod
    async def get_by_id(self, module_id: str) -> MessagingModule | None:
        """Return the registration with the given id, or None."""
        ...

    @abstractmethod
    async def save(self, module: MessagingModule) -> str:
        """Insert a registration and return its id.

        Raises:
            PersistenceError: If the insert fails (e.g. duplicate id)
        """
        ...

    @abstractmethod
    async def update(self, module_id: str, module: MessagingModule) -> MessagingModule:
        """Replace every field of the registration addressed by ``module_id``.

        Raises:
            MessagingModuleNotFoundError: If not exactly one row was updated
        """
        ...

    @abstractmethod
    async def delete(self, module_id: str) -> bool:
        """Delete by id; True iff exactly one registration was removed."""
        ...

    @abstractmethod
    async def delete_by_filter(self, module_filter: MessagingModuleFilter) -> int:
        """Delete every registration matching the filter and return the count.

        Raises:
            ValueError: If the filter is empty
        """
        ...
