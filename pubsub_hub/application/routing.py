"""Registry queries used by the routing layer to resolve fan-out targets."""

from ..domain.enums import ModuleRole
from ..domain.models import MessagingModule, MessagingModuleFilter
from ..ports.repository import MessagingModuleRepository


async def find_subscribers(
    repository: MessagingModuleRepository, event_type_id: str, tenant_id: str
) -> list[MessagingModule]:
    """Return the applied subscriber registrations for an event type of a tenant."""
    return await repository.get(
        MessagingModuleFilter(
            event_type_id=event_type_id,
            tenant_id=tenant_id,
            module_role=ModuleRole.SUBSCRIBER,
            applied=True,
        )
    )


async def find_publishers(
    repository: MessagingModuleRepository, event_type_id: str, tenant_id: str
) -> list[MessagingModule]:
    """Return the applied publisher registrations for an event type of a tenant."""
    return await repository.get(
        MessagingModuleFilter(
            event_type_id=event_type_id,
            tenant_id=tenant_id,
            module_role=ModuleRole.PUBLISHER,
            applied=True,
        )
    )
