"""In-memory implementation of the MessagingModuleRepository.

This is an infrastructure adapter that implements the registry port for
testing and development purposes.
"""

from ..domain.exceptions import DuplicateRecordError, MessagingModuleNotFoundError
from ..domain.models import MessagingModule, MessagingModuleFilter
from ..ports.repository import MessagingModuleRepository


class InMemoryMessagingModuleRepository(MessagingModuleRepository):
    """In-memory registry with the same observable behavior as the SQL adapter."""

    def __init__(self) -> None:
        """Initialize the in-memory storage."""
        # Insertion ordered, keyed by registration id
        self._storage: dict[str, MessagingModule] = {}

    async def get(self, module_filter: MessagingModuleFilter) -> list[MessagingModule]:
        return [module for module in self._storage.values() if module_filter.matches(module)]

    async def get_by_id(self, module_id: str) -> MessagingModule | None:
        return self._storage.get(module_id)

    async def save(self, module: MessagingModule) -> str:
        if module.id in self._storage:
            raise DuplicateRecordError(
                f"MessagingModule with id '{module.id}' already exists", operation="save"
            )
        self._storage[module.id] = self._normalize(module, module.id)
        return module.id

    async def update(self, module_id: str, module: MessagingModule) -> MessagingModule:
        if module_id not in self._storage:
            raise MessagingModuleNotFoundError(module_id)
        stored = self._normalize(module, module_id)
        self._storage[module_id] = stored
        return stored

    async def delete(self, module_id: str) -> bool:
        return self._storage.pop(module_id, None) is not None

    async def delete_by_filter(self, module_filter: MessagingModuleFilter) -> int:
        if module_filter.is_empty():
            raise ValueError("Refusing to delete messaging modules with an empty filter")
        matching = [key for key, module in self._storage.items() if module_filter.matches(module)]
        for key in matching:
            del self._storage[key]
        return len(matching)

    @staticmethod
    def _normalize(module: MessagingModule, module_id: str) -> MessagingModule:
        """Store a copy the way a row reads back: absent callback as ``""``."""
        return module.model_copy(
            update={"id": module_id, "subscriber_callback": module.subscriber_callback or ""}
        )

    def clear(self) -> None:
        """Clear all stored registrations (useful for testing)."""
        self._storage.clear()

    def get_all(self) -> list[MessagingModule]:
        """Get all stored registrations (useful for testing)."""
        return list(self._storage.values())
