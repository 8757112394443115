"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pubsub_hub.domain.enums import ModuleRole
from pubsub_hub.domain.models import Event, EventMetadata, MessagingModule
from pubsub_hub.infrastructure.audit_sinks import InMemoryAuditSink
from pubsub_hub.infrastructure.in_memory_repository import InMemoryMessagingModuleRepository


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    mock = MagicMock()
    mock.debug = MagicMock()
    mock.info = MagicMock()
    mock.warning = MagicMock()
    mock.error = MagicMock()
    mock.exception = MagicMock()
    return mock


@pytest.fixture
def mock_executor():
    """Create a mock SQL executor."""
    mock = AsyncMock()
    mock.fetch = AsyncMock(return_value=[])
    mock.execute = AsyncMock(return_value=1)
    return mock


@pytest.fixture
def mock_broker():
    """Create a mock broker sender that acknowledges every send."""
    mock = AsyncMock()
    mock.send = AsyncMock(return_value=None)
    mock.connect = AsyncMock()
    mock.disconnect = AsyncMock()
    mock.is_connected = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def in_memory_repository():
    """Create a fresh in-memory registry."""
    return InMemoryMessagingModuleRepository()


@pytest.fixture
def audit_sink():
    """Create an in-memory audit sink."""
    return InMemoryAuditSink()


@pytest.fixture
def subscriber_module():
    """Registration of mod-a as subscriber of ET1 for tenant t1."""
    return MessagingModule(
        id="m1",
        event_type_id="ET1",
        module_id="mod-a",
        tenant_id="t1",
        module_role=ModuleRole.SUBSCRIBER,
        applied=True,
        subscriber_callback="http://mod-a/handle",
    )


@pytest.fixture
def sample_event():
    """Create a sample event."""
    return Event(
        id="e1",
        event_type="ET1",
        event_payload={"itemId": "42"},
        event_metadata=EventMetadata(
            tenant_id="t1",
            correlation_id="corr-1",
            published_by="mod-a",
        ),
    )
