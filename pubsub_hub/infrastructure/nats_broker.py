"""NATS adapter - Concrete implementation of BrokerSenderPort."""

import asyncio

import nats
from nats.aio.client import Client as NATSClient
from nats.errors import Error as NATSError
from nats.js import JetStreamContext
from nats.js.errors import NotFoundError

from ..domain.exceptions import BrokerNotConnectedError, BrokerSendError
from ..ports.broker import BrokerSenderPort
from ..ports.logger import LoggerPort
from .config import NATSConnectionConfig


class NATSBrokerSender(BrokerSenderPort):
    """Sends serialized events to NATS subjects named after channels.

    With JetStream enabled every send waits for the stream's publish ack;
    otherwise a core publish is followed by a flush so server-side rejection
    surfaces as an error instead of silently dropping the event.
    """

    def __init__(
        self,
        environment_id: str,
        config: NATSConnectionConfig | None = None,
        logger: LoggerPort | None = None,
    ):
        """Initialize the sender.

        Args:
            environment_id: Environment prefix of every channel, used to scope the stream
            config: Connection configuration. If not provided, uses defaults.
            logger: Optional logger for connection lifecycle messages
        """
        self._environment_id = environment_id
        self._config = config or NATSConnectionConfig()
        self._logger = logger
        self._nc: NATSClient | None = None
        self._js: JetStreamContext | None = None

    @property
    def stream_name(self) -> str:
        return f"PUBSUB_{self._environment_id.upper().replace('-', '_')}"

    async def connect(self) -> None:
        """Connect to NATS and make sure the environment's stream exists."""
        self._nc = await nats.connect(**self._config.to_connection_params())

        if self._config.enable_jetstream:
            if self._config.js_domain:
                self._js = self._nc.jetstream(domain=self._config.js_domain)
            else:
                self._js = self._nc.jetstream()
            await self._ensure_stream()

        if self._logger:
            self._logger.info(
                "Connected to NATS",
                servers=self._config.servers,
                jetstream=self._config.enable_jetstream,
            )

    async def disconnect(self) -> None:
        """Disconnect from NATS."""
        if self._nc and self._nc.is_connected:
            await self._nc.close()
        self._nc = None
        self._js = None

    async def is_connected(self) -> bool:
        return bool(self._nc and self._nc.is_connected)

    async def _ensure_stream(self) -> None:
        if not self._js:
            return
        try:
            await self._js.stream_info(self.stream_name)
        except NotFoundError:
            await self._js.add_stream(
                name=self.stream_name,
                subjects=[f"{self._environment_id}.>"],
                retention="limits",
            )

    async def send(self, channel: str, payload: bytes) -> None:
        if not self._nc or not self._nc.is_connected:
            raise BrokerNotConnectedError(channel=channel)

        try:
            if self._js:
                await self._js.publish(channel, payload, timeout=self._config.publish_timeout)
            else:
                await self._nc.publish(channel, payload)
                await self._nc.flush(timeout=self._config.publish_timeout)
        except (NATSError, asyncio.TimeoutError) as e:
            raise BrokerSendError(f"NATS rejected publish: {e!r}", channel=channel) from e
