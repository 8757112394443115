"""Tests for domain models."""

import json

import pytest
from pydantic import ValidationError

from pubsub_hub.domain.enums import AuditState, ModuleRole
from pubsub_hub.domain.exceptions import PublishError
from pubsub_hub.domain.models import (
    AuditMessage,
    Event,
    MessagingModule,
    MessagingModuleFilter,
    PublishResult,
)


class TestEvent:
    """Test cases for the Event model."""

    def test_id_defaults_to_uuid(self):
        event = Event(event_type="ET1")
        assert len(event.id) == 36

    def test_event_type_required(self):
        with pytest.raises(ValidationError):
            Event(event_type="")

    def test_accepts_camel_case_wire_names(self):
        event = Event.model_validate(
            {
                "id": "e1",
                "eventType": "ET1",
                "eventPayload": "opaque",
                "eventMetadata": {"tenantId": "t1", "eventTTL": 5, "correlationId": "c1"},
            }
        )
        assert event.event_type == "ET1"
        assert event.event_payload == "opaque"
        assert event.event_metadata.event_ttl == 5
        assert event.correlation_id == "c1"

    def test_correlation_id_without_metadata(self):
        assert Event(event_type="ET1").correlation_id is None

    def test_json_uses_wire_names(self, sample_event):
        data = json.loads(sample_event.model_dump_json(by_alias=True))
        assert data["eventType"] == "ET1"
        assert data["eventMetadata"]["tenantId"] == "t1"


class TestMessagingModule:
    """Test cases for the MessagingModule model."""

    def test_id_is_immutable(self, subscriber_module):
        with pytest.raises(ValidationError):
            subscriber_module.id = "other"

    def test_other_fields_are_mutable(self, subscriber_module):
        subscriber_module.applied = False
        assert subscriber_module.applied is False

    def test_role_accepts_wire_value(self):
        module = MessagingModule(
            event_type_id="ET1", module_id="mod-b", tenant_id="t1", module_role="PUBLISHER"
        )
        assert module.module_role is ModuleRole.PUBLISHER
        assert module.applied is True
        assert module.subscriber_callback is None

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            MessagingModule(
                event_type_id="ET1", module_id="mod-b", tenant_id="t1", module_role="OBSERVER"
            )


class TestMessagingModuleFilter:
    """Test cases for MessagingModuleFilter."""

    def test_empty_filter(self):
        assert MessagingModuleFilter().is_empty()
        assert not MessagingModuleFilter(applied=False).is_empty()

    def test_empty_filter_matches_everything(self, subscriber_module):
        assert MessagingModuleFilter().matches(subscriber_module)

    def test_fields_are_anded(self, subscriber_module):
        assert MessagingModuleFilter(
            tenant_id="t1", module_role=ModuleRole.SUBSCRIBER
        ).matches(subscriber_module)
        assert not MessagingModuleFilter(
            tenant_id="t1", module_role=ModuleRole.PUBLISHER
        ).matches(subscriber_module)

    def test_string_matching_is_exact(self, subscriber_module):
        assert not MessagingModuleFilter(tenant_id="T1").matches(subscriber_module)
        assert not MessagingModuleFilter(module_id="mod-").matches(subscriber_module)

    def test_empty_callback_matches_absent_callback(self):
        module = MessagingModule(
            event_type_id="ET1", module_id="mod-b", tenant_id="t1", module_role="PUBLISHER"
        )
        assert MessagingModuleFilter(subscriber_callback="").matches(module)


class TestAuditMessage:
    """Test cases for AuditMessage."""

    def test_for_event_copies_event_fields(self, sample_event):
        message = AuditMessage.for_event(sample_event, "t1", AuditState.REJECTED, "Event was not sent")

        assert message.event_id == "e1"
        assert message.event_type == "ET1"
        assert message.tenant_id == "t1"
        assert message.correlation_id == "corr-1"
        assert message.published_by == "mod-a"
        assert message.state is AuditState.REJECTED
        assert message.error_message == "Event was not sent"
        assert message.audit_date.tzinfo is not None

    def test_for_event_without_metadata(self):
        message = AuditMessage.for_event(Event(id="e2", event_type="ET2"), "t2", AuditState.PUBLISHED)
        assert message.correlation_id is None
        assert message.error_message is None

    def test_for_event_without_tenant(self, sample_event):
        message = AuditMessage.for_event(sample_event, None, AuditState.REJECTED, "Error publishing event")
        assert message.tenant_id is None
        assert "tenantId" in message.model_dump(by_alias=True)

    def test_is_frozen(self, sample_event):
        message = AuditMessage.for_event(sample_event, "t1", AuditState.PUBLISHED)
        with pytest.raises(ValidationError):
            message.state = AuditState.REJECTED


class TestPublishResult:
    """Test cases for PublishResult."""

    def test_success(self):
        result = PublishResult(event_id="e1", tenant_id="t1", channel="env.t1.ET1", state="PUBLISHED")
        assert result.success
        result.raise_for_state()

    def test_failure_raises_with_cause(self):
        cause = RuntimeError("broker down")
        result = PublishResult(
            event_id="e1",
            tenant_id="t1",
            state=AuditState.REJECTED,
            reason="Event was not sent",
            error=str(cause),
            cause=cause,
        )
        assert not result.success

        with pytest.raises(PublishError) as exc_info:
            result.raise_for_state()

        assert exc_info.value.__cause__ is cause
        assert exc_info.value.reason == "Event was not sent"
        assert exc_info.value.event_id == "e1"

    def test_cause_not_serialized(self):
        result = PublishResult(
            event_id="e1", tenant_id="t1", state=AuditState.REJECTED, cause=ValueError("x")
        )
        assert "cause" not in result.model_dump()

    def test_non_terminal_state_rejected(self):
        with pytest.raises(ValidationError):
            PublishResult(event_id="e1", tenant_id="t1", state=AuditState.CREATED)

    def test_tenant_is_optional(self):
        result = PublishResult(event_id="e1", tenant_id=None, state=AuditState.REJECTED)
        assert result.tenant_id is None
        assert not result.success
