"""Broker sender port - the send primitive used by the publishing pipeline."""

from abc import ABC, abstractmethod


class BrokerSenderPort(ABC):
    """Abstract interface for writing one serialized event to a channel."""

    @abstractmethod
    async def connect(self) -> None:
        """Open the broker connection."""
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the broker connection."""
        ...

    @abstractmethod
    async def is_connected(self) -> bool:
        """Check if connected to the broker."""
        ...

    @abstractmethod
    async def send(self, channel: str, payload: bytes) -> None:
        """Write ``payload`` to ``channel`` and wait for the broker's acknowledgment.

        Args:
            channel: Destination channel identifier
            payload: Serialized event

        Raises:
            BrokerSendError: The broker reported the write as failed
            BrokerNotConnectedError: No connection is available
        """
        ...
