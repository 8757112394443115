"""Domain models using Pydantic for validation."""

import uuid
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import AuditState, ModuleRole
from .exceptions import PublishError


class EventMetadata(BaseModel):
    """Routing and provenance metadata carried alongside an event."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
        populate_by_name=True,
    )

    tenant_id: str | None = Field(default=None, alias="tenantId")
    event_ttl: int = Field(default=1, ge=1, alias="eventTTL", description="TTL in minutes")
    correlation_id: str | None = Field(default=None, alias="correlationId")
    published_by: str | None = Field(default=None, alias="publishedBy")
    created_by: str | None = Field(default=None, alias="createdBy")
    created_date: datetime | None = Field(default=None, alias="createdDate")


class Event(BaseModel):
    """Domain event handed to the publishing pipeline.

    The payload is opaque to the hub; it is carried through to the broker
    unchanged as part of the JSON encoding of the event.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "d3a0c2f4-8a6c-4f4e-9b2e-0c3b1b5f6a11",
                "eventType": "ITEM_CREATED",
                "eventPayload": {"itemId": "42"},
                "eventMetadata": {"tenantId": "diku", "eventTTL": 1},
            }
        },
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), min_length=1)
    event_type: str = Field(..., min_length=1, alias="eventType", description="Event type")
    event_payload: Any = Field(default=None, alias="eventPayload", description="Opaque payload")
    event_metadata: EventMetadata | None = Field(default=None, alias="eventMetadata")

    @property
    def correlation_id(self) -> str | None:
        return self.event_metadata.correlation_id if self.event_metadata else None


class MessagingModule(BaseModel):
    """Registration of a module as publisher or subscriber of an event type.

    ``(event_type_id, module_id, tenant_id, module_role)`` is the business
    key used by filters; uniqueness over it is left to the store.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
        populate_by_name=True,
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), min_length=1, frozen=True)
    event_type_id: str = Field(..., min_length=1, alias="eventType")
    module_id: str = Field(..., min_length=1, alias="moduleId")
    tenant_id: str = Field(..., min_length=1, alias="tenantId")
    module_role: ModuleRole = Field(..., alias="moduleRole")
    applied: bool = Field(default=True)
    subscriber_callback: str | None = Field(default=None, alias="subscriberCallback")


class MessagingModuleFilter(BaseModel):
    """Optional-field query descriptor for the registry.

    Absent fields impose no constraint; present fields are ANDed together.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    event_type_id: str | None = Field(default=None, alias="eventType")
    module_id: str | None = Field(default=None, alias="moduleId")
    tenant_id: str | None = Field(default=None, alias="tenantId")
    module_role: ModuleRole | None = Field(default=None, alias="moduleRole")
    applied: bool | None = None
    subscriber_callback: str | None = Field(default=None, alias="subscriberCallback")

    def is_empty(self) -> bool:
        """True when no field constrains the query."""
        return not self.model_dump(exclude_none=True)

    def matches(self, module: MessagingModule) -> bool:
        """Evaluate the filter against a module in memory."""
        for field_name, expected in self.model_dump(exclude_none=True).items():
            actual = getattr(module, field_name)
            if field_name == "subscriber_callback":
                actual = actual or ""
            if actual != expected:
                return False
        return True


class AuditMessage(BaseModel):
    """Immutable record of the terminal outcome of one publish attempt."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    event_id: str = Field(..., alias="eventId")
    event_type: str = Field(..., alias="eventType")
    tenant_id: str | None = Field(default=None, alias="tenantId")
    correlation_id: str | None = Field(default=None, alias="correlationId")
    created_by: str | None = Field(default=None, alias="createdBy")
    published_by: str | None = Field(default=None, alias="publishedBy")
    audit_date: datetime = Field(default_factory=lambda: datetime.now(UTC), alias="auditDate")
    state: AuditState
    error_message: str | None = Field(default=None, alias="errorMessage")

    @classmethod
    def for_event(
        cls,
        event: Event,
        tenant_id: str | None,
        state: AuditState,
        reason: str | None = None,
    ) -> "AuditMessage":
        """Build the audit entry for a publish attempt of ``event``."""
        metadata = event.event_metadata
        return cls(
            event_id=event.id,
            event_type=event.event_type,
            tenant_id=tenant_id,
            correlation_id=metadata.correlation_id if metadata else None,
            created_by=metadata.created_by if metadata else None,
            published_by=metadata.published_by if metadata else None,
            state=state,
            error_message=reason,
        )


class PublishResult(BaseModel):
    """Resolved outcome of a publish attempt returned to the caller."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    event_id: str
    tenant_id: str | None = None
    channel: str | None = None
    state: AuditState
    reason: str | None = None
    error: str | None = None
    cause: BaseException | None = Field(default=None, exclude=True, repr=False)

    @field_validator("state")
    @classmethod
    def validate_state(cls, v: AuditState) -> AuditState:
        if not v.is_terminal_publish_state:
            raise ValueError(f"Publish result cannot be in state {v.value}")
        return v

    @property
    def success(self) -> bool:
        return self.state is AuditState.PUBLISHED

    def raise_for_state(self) -> None:
        """Raise ``PublishError`` chained to the cause when the attempt failed."""
        if self.success:
            return
        raise PublishError(
            f"Event '{self.event_id}' was rejected: {self.reason}",
            event_id=self.event_id,
            reason=self.reason,
        ) from self.cause
