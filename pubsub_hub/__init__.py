"""pubsub-hub - Tenant-aware event publishing and subscription registry."""

from .application import AuditRecorder, PublishingService, find_subscribers
from .domain import ChannelNames, Event, MessagingModule, MessagingModuleFilter, ModuleRole
from .infrastructure.bootstrap import PubSubHub, build_hub

__all__ = [
    "AuditRecorder",
    "ChannelNames",
    "Event",
    "MessagingModule",
    "MessagingModuleFilter",
    "ModuleRole",
    "PubSubHub",
    "PublishingService",
    "build_hub",
    "find_subscribers",
]
__version__ = "0.1.0"
