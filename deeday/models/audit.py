"""
Audit Models for Deeday

Every change to the roster, and every storage problem, is described
by an AuditEvent before it goes to the log. This provides:
1. A trail of who was added and removed in a session
2. Debugging information when storage misbehaves
3. One place that names every event the app can emit

DESIGN DECISION: Storage failures are never shown to the user,
so the log is the only place they become visible.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Loading
    ROSTER_LOADED = "roster_loaded"
    ROSTER_LOAD_FAILED = "roster_load_failed"

    # User actions
    MEMBER_ADDED = "member_added"
    MEMBER_REJECTED = "member_rejected"
    MEMBER_DELETED = "member_deleted"

    # Persistence
    ROSTER_SAVED = "roster_saved"
    ROSTER_SAVE_FAILED = "roster_save_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Which member is this about, if any
    member_id: Optional[str] = Field(
        default=None,
        description="ID of the member this event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "member_id": self.member_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.member_added(member_id, name)
        event = AuditEventBuilder.roster_save_failed(error_message)
    """

    @staticmethod
    def roster_loaded(member_count: int, from_storage: bool) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ROSTER_LOADED,
            description=(
                f"Roster loaded with {member_count} member(s)"
                if from_storage else "No stored roster, starting empty"
            ),
            details={
                "member_count": member_count,
                "from_storage": from_storage,
            },
        )

    @staticmethod
    def roster_load_failed(error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ROSTER_LOAD_FAILED,
            severity=AuditSeverity.WARNING,
            description="Stored roster unreadable, starting empty",
            error_message=error_message,
        )

    @staticmethod
    def member_added(member_id: str, name: str, relationship: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MEMBER_ADDED,
            member_id=member_id,
            description="Member added",
            details={
                "name": name,
                "relationship": relationship,
            },
            is_user_action=True,
        )

    @staticmethod
    def member_rejected(missing_fields: list[str]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MEMBER_REJECTED,
            severity=AuditSeverity.DEBUG,
            description="Add ignored, required fields missing",
            details={"missing_fields": missing_fields},
            is_user_action=True,
        )

    @staticmethod
    def member_deleted(member_id: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MEMBER_DELETED,
            member_id=member_id,
            description="Member deleted",
            is_user_action=True,
        )

    @staticmethod
    def roster_saved(member_count: int, size_bytes: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ROSTER_SAVED,
            severity=AuditSeverity.DEBUG,
            description=f"Roster saved with {member_count} member(s)",
            details={
                "member_count": member_count,
                "size_bytes": size_bytes,
            },
        )

    @staticmethod
    def roster_save_failed(error_message: str, member_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ROSTER_SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            description="Roster could not be saved, keeping it in memory",
            details={"member_count": member_count},
            error_message=error_message,
        )
