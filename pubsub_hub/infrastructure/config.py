"""Configuration objects for the infrastructure layer."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.exceptions import ConfigurationError
from ..domain.patterns import ChannelNames

_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


class NATSConnectionConfig(BaseModel):
    """Strongly-typed configuration for the NATS broker connection."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
        validate_assignment=True,
    )

    servers: list[str] = Field(
        default_factory=lambda: ["nats://localhost:4222"],
        min_length=1,
        description="List of NATS server URLs",
    )
    max_reconnect_attempts: int = Field(
        default=10,
        ge=0,
        description="Maximum reconnection attempts",
    )
    reconnect_time_wait: float = Field(
        default=2.0,
        gt=0,
        description="Time to wait between reconnection attempts in seconds",
    )
    enable_jetstream: bool = Field(
        default=True,
        description="Publish through JetStream and wait for its acknowledgment",
    )
    js_domain: str | None = Field(
        default=None,
        description="JetStream domain",
    )
    publish_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait for a publish acknowledgment",
    )

    @field_validator("servers")
    @classmethod
    def validate_servers(cls, v: list[str]) -> list[str]:
        """Validate server URLs format."""
        for server in v:
            if not server.startswith(("nats://", "tls://", "ws://", "wss://")):
                raise ValueError(
                    f"Invalid server URL: {server}. "
                    "Must start with nats://, tls://, ws://, or wss://"
                )
        return v

    def to_connection_params(self) -> dict[str, object]:
        """Convert to parameters for ``nats.connect``."""
        return {
            "servers": self.servers,
            "max_reconnect_attempts": self.max_reconnect_attempts,
            "reconnect_time_wait": self.reconnect_time_wait,
        }


class DatabaseConfig(BaseModel):
    """Connection and layout settings for the relational store."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
        validate_assignment=True,
    )

    dsn: str = Field(
        default="postgresql://localhost:5432/pubsub",
        min_length=1,
        description="PostgreSQL connection string",
    )
    min_pool_size: int = Field(default=1, ge=1, description="Minimum pooled connections")
    max_pool_size: int = Field(default=5, ge=1, le=100, description="Maximum pooled connections")
    command_timeout: float = Field(default=30.0, gt=0, description="Statement timeout in seconds")
    schema_name: str = Field(default="pubsub_config", description="Schema holding hub tables")
    module_table: str = Field(default="messaging_module", description="Registry table")
    audit_table: str = Field(default="audit_message", description="Audit table")

    @field_validator("schema_name", "module_table", "audit_table")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        """Schema and table names are rendered into SQL, so restrict them."""
        if not _IDENTIFIER.match(v):
            raise ValueError(f"Invalid SQL identifier: {v!r}")
        return v

    @field_validator("max_pool_size")
    @classmethod
    def validate_pool_bounds(cls, v: int, info) -> int:
        if "min_pool_size" in info.data and v < info.data["min_pool_size"]:
            raise ValueError("max_pool_size must not be lower than min_pool_size")
        return v


class PubSubConfig(BaseModel):
    """Top-level configuration of the hub, fixed at startup."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
        validate_assignment=True,
    )

    environment_id: str = Field(..., description="Deployment environment used in channel names")
    publishing_pool_size: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="Number of workers sending events to the broker",
    )
    publishing_queue_size: int = Field(
        default=1000,
        ge=1,
        description="Publish attempts that may wait for a free worker",
    )
    nats: NATSConnectionConfig = Field(default_factory=NATSConnectionConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("environment_id")
    @classmethod
    def validate_environment_id(cls, v: str) -> str:
        if not ChannelNames.is_valid_component(v):
            raise ValueError(f"Invalid environment id for channel names: {v!r}")
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PubSubConfig:
        """Load configuration from environment variables.

        Raises:
            ConfigurationError: If a variable is missing or invalid
        """
        env = os.environ if environ is None else environ
        try:
            nats_config = NATSConnectionConfig(
                servers=[s.strip() for s in env.get("NATS_URL", "nats://localhost:4222").split(",")],
                enable_jetstream=_parse_bool(env.get("NATS_ENABLE_JETSTREAM", "true")),
                js_domain=env.get("NATS_JS_DOMAIN") or None,
                publish_timeout=float(env.get("NATS_PUBLISH_TIMEOUT", "5.0")),
            )
            database_config = DatabaseConfig(
                dsn=env.get("DB_DSN", "postgresql://localhost:5432/pubsub"),
                max_pool_size=int(env.get("DB_MAX_POOL_SIZE", "5")),
                schema_name=env.get("DB_SCHEMA", "pubsub_config"),
            )
            return cls(
                environment_id=env.get("ENV", "folio"),
                publishing_pool_size=int(env.get("EVENT_PUBLISHING_THREAD_POOL_SIZE", "20")),
                publishing_queue_size=int(env.get("EVENT_PUBLISHING_QUEUE_SIZE", "1000")),
                nats=nats_config,
                database=database_config,
                log_level=env.get("LOG_LEVEL", "INFO").upper(),
            )
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")
