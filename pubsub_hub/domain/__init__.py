"""Domain layer - Core business logic and entities."""

from .enums import AuditState, ModuleRole
from .exceptions import (
    BrokerError,
    BrokerNotConnectedError,
    BrokerSendError,
    ChannelConfigurationError,
    ConfigurationError,
    DuplicateRecordError,
    MessagingModuleNotFoundError,
    PersistenceError,
    PublishError,
    PublisherNotRunningError,
    PubSubError,
    SerializationError,
)
from .models import (
    AuditMessage,
    Event,
    EventMetadata,
    MessagingModule,
    MessagingModuleFilter,
    PublishResult,
)
from .patterns import ChannelNames

__all__ = [
    # Models
    "AuditMessage",
    # Enums
    "AuditState",
    # Exceptions
    "BrokerError",
    "BrokerNotConnectedError",
    "BrokerSendError",
    "ChannelConfigurationError",
    # Patterns
    "ChannelNames",
    "ConfigurationError",
    "DuplicateRecordError",
    "Event",
    "EventMetadata",
    "MessagingModule",
    "MessagingModuleFilter",
    "MessagingModuleNotFoundError",
    "ModuleRole",
    "PersistenceError",
    "PubSubError",
    "PublishError",
    "PublishResult",
    "PublisherNotRunningError",
    "SerializationError",
]
