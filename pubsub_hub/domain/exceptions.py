"""Domain-specific exceptions for the pub/sub hub."""


class PubSubError(Exception):
    """Base exception for all pub/sub hub errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PubSubError):
    """Invalid or missing configuration."""

    pass


class ChannelConfigurationError(ConfigurationError):
    """Raised when a channel name cannot be built from its components."""

    def __init__(self, message: str, component: str | None = None, value: str | None = None):
        super().__init__(message)
        self.component = component
        self.value = value
        if component:
            self.details["component"] = component
        if value is not None:
            self.details["value"] = value


class PersistenceError(PubSubError):
    """The relational store rejected a query."""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
        if operation:
            self.details["operation"] = operation


class DuplicateRecordError(PersistenceError):
    """Raised when an insert violates a unique constraint."""

    pass


class MessagingModuleNotFoundError(PersistenceError):
    """Raised when an update addresses an id that matched no row."""

    def __init__(self, module_id: str):
        super().__init__(
            f"MessagingModule by id '{module_id}' was not found",
            operation="update",
        )
        self.module_id = module_id
        self.details["id"] = module_id


class PublishError(PubSubError):
    """A publish attempt ended in the REJECTED state."""

    def __init__(
        self,
        message: str,
        event_id: str | None = None,
        reason: str | None = None,
    ):
        super().__init__(message)
        self.event_id = event_id
        self.reason = reason
        if event_id:
            self.details["event_id"] = event_id
        if reason:
            self.details["reason"] = reason


class PublisherNotRunningError(PublishError):
    """Raised when work is submitted to a publisher that is not started."""

    def __init__(self):
        super().__init__("Publishing service is not running. Call start() first.")


class BrokerError(PubSubError):
    """Message broker communication errors."""

    def __init__(self, message: str, channel: str | None = None):
        super().__init__(message)
        self.channel = channel
        if channel:
            self.details["channel"] = channel


class BrokerSendError(BrokerError):
    """The broker answered a send with a negative acknowledgment."""

    pass


class BrokerNotConnectedError(BrokerError):
    """Raised when a send is attempted without a broker connection."""

    def __init__(self, channel: str | None = None):
        super().__init__("Broker client is not connected", channel=channel)


class SerializationError(PubSubError):
    """Serialization/deserialization errors."""

    pass
