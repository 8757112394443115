"""Domain enums for type safety and consistency.

This module centralizes the enumeration types shared by the registry and
the publishing pipeline, so the persisted and logged wire values stay in one
place.
"""

from enum import Enum


class ModuleRole(str, Enum):
    """Role a module plays for an event type.

    The value is the wire representation stored in the registry's ``role``
    column on every write path.
    """

    PUBLISHER = "PUBLISHER"  # Module produces events of the type
    SUBSCRIBER = "SUBSCRIBER"  # Module consumes events of the type


class AuditState(str, Enum):
    """Terminal state of a publish attempt as recorded in the audit log."""

    CREATED = "CREATED"
    PUBLISHED = "PUBLISHED"
    REJECTED = "REJECTED"
    DELIVERED = "DELIVERED"

    @property
    def is_terminal_publish_state(self) -> bool:
        """States the publishing pipeline itself produces."""
        return self in (AuditState.PUBLISHED, AuditState.REJECTED)
