"""Channel naming for tenant-scoped event publishing."""

from typing import ClassVar

from .exceptions import ChannelConfigurationError


class ChannelNames:
    """Deterministic mapping of (environment, tenant, event type) to a channel.

    Consumers resolve the same name independently, so the scheme must stay
    stable across releases: ``{environment}.{tenant}.{event_type}``.
    """

    DELIMITER: ClassVar[str] = "."
    # Characters NATS does not accept inside a subject token
    INVALID_CHARS: ClassVar[tuple[str, ...]] = (".", " ", "\t", "\r", "\n", "*", ">")

    @classmethod
    def name_for(cls, environment_id: str, tenant_id: str, event_type: str) -> str:
        """Build the channel identifier for an event type of a tenant.

        Raises:
            ChannelConfigurationError: If a component is empty or contains the
                delimiter or another character illegal in a channel token
        """
        components = {
            "environment_id": environment_id,
            "tenant_id": tenant_id,
            "event_type": event_type,
        }
        for component, value in components.items():
            cls.validate_component(component, value)
        return cls.DELIMITER.join(components.values())

    @classmethod
    def split(cls, channel: str) -> tuple[str, str, str]:
        """Recover (environment, tenant, event type) from a channel identifier."""
        parts = channel.split(cls.DELIMITER)
        if len(parts) != 3 or not all(parts):
            raise ChannelConfigurationError(
                f"Channel '{channel}' is not of the form environment.tenant.event_type",
                component="channel",
                value=channel,
            )
        return parts[0], parts[1], parts[2]

    @classmethod
    def validate_component(cls, component: str, value: str) -> None:
        if not isinstance(value, str) or not value:
            raise ChannelConfigurationError(
                f"Channel component '{component}' must be a non-empty string",
                component=component,
                value=value if isinstance(value, str) else None,
            )
        invalid = [char for char in cls.INVALID_CHARS if char in value]
        if invalid:
            raise ChannelConfigurationError(
                f"Channel component '{component}' contains invalid characters "
                f"{invalid!r}: {value!r}",
                component=component,
                value=value,
            )

    @classmethod
    def is_valid_component(cls, value: str) -> bool:
        """Check a component without raising."""
        try:
            cls.validate_component("component", value)
        except ChannelConfigurationError:
            return False
        return True
