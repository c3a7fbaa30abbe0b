"""
Data Models Package

This package contains all Pydantic models used in Deeday.
Everything stored or displayed conforms to these schemas.
"""

from deeday.models.member import (
    BirthdayInfo,
    FamilyMember,
    MemberRow,
    LeapDayPolicy,
    RosterPhase,
    ValidationIssue,
    ValidationResult,
    new_member_id,
)
from deeday.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Member models
    "BirthdayInfo",
    "FamilyMember",
    "MemberRow",
    "LeapDayPolicy",
    "RosterPhase",
    "ValidationIssue",
    "ValidationResult",
    "new_member_id",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
