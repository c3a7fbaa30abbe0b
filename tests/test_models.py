"""
Tests for Deeday

Test strategy:
1. Unit tests for individual components (models, calculator, validator)
2. Store and board tests against in-memory storage
3. No real clock dependence (pass "today" explicitly)
"""

import pytest
from datetime import date

from pydantic import ValidationError

from deeday.models.member import (
    BirthdayInfo,
    FamilyMember,
    LeapDayPolicy,
    MemberRow,
    RosterPhase,
    ValidationIssue,
    ValidationResult,
)
from deeday.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class TestFamilyMember:
    """Tests for the FamilyMember model."""

    def test_member_creation(self):
        """Test FamilyMember model creation."""
        member = FamilyMember(
            name="Ann",
            birthdate=date(1990, 3, 20),
            relationship="Sister",
        )
        assert member.name == "Ann"
        assert member.birthdate == date(1990, 3, 20)
        assert member.id

    def test_member_ids_are_unique(self):
        """Test each new member gets its own id."""
        a = FamilyMember(name="Ann", birthdate=date(1990, 3, 20), relationship="Sister")
        b = FamilyMember(name="Ann", birthdate=date(1990, 3, 20), relationship="Sister")
        assert a.id != b.id

    def test_member_strips_whitespace(self):
        """Test that whitespace is stripped from text fields."""
        member = FamilyMember(name="  Ann  ", birthdate=date(1990, 3, 20), relationship=" Sister ")
        assert member.name == "Ann"
        assert member.relationship == "Sister"

    def test_member_parses_iso_birthdate(self):
        member = FamilyMember(name="Ann", birthdate="1990-03-20", relationship="Sister")
        assert member.birthdate == date(1990, 3, 20)

    @pytest.mark.parametrize("field", ["name", "relationship"])
    def test_member_rejects_empty_text(self, field):
        """Test that empty name or relationship is rejected."""
        data = {"name": "Ann", "birthdate": date(1990, 3, 20), "relationship": "Sister"}
        data[field] = "   "
        with pytest.raises(ValidationError):
            FamilyMember(**data)

    def test_member_is_immutable(self):
        """Test that a member cannot be changed after creation."""
        member = FamilyMember(name="Ann", birthdate=date(1990, 3, 20), relationship="Sister")
        with pytest.raises(ValidationError):
            member.id = "other"

    def test_member_json_layout(self):
        """Test the JSON dump matches the stored record layout."""
        member = FamilyMember(id="a1", name="Ann", birthdate=date(1990, 3, 20), relationship="Sister")
        assert member.model_dump(mode="json") == {
            "id": "a1",
            "name": "Ann",
            "birthdate": "1990-03-20",
            "relationship": "Sister",
        }


class TestBirthdayInfo:
    """Tests for BirthdayInfo and MemberRow."""

    def test_is_today(self):
        info = BirthdayInfo(days_until=0, age_turning=34, next_birthday=date(2024, 3, 15), message="x")
        assert info.is_today is True

    def test_rejects_negative_days(self):
        with pytest.raises(ValidationError):
            BirthdayInfo(days_until=-1, age_turning=34, next_birthday=date(2024, 3, 15), message="x")

    def test_member_row_status_line(self):
        """Test the row joins formatted date and message."""
        row = MemberRow(
            member=FamilyMember(name="Ann", birthdate=date(1990, 3, 20), relationship="Sister"),
            birthday=BirthdayInfo(
                days_until=5,
                age_turning=34,
                next_birthday=date(2024, 3, 20),
                message="5 day(s) away – turning 34",
            ),
            formatted_birthdate="March 20",
        )
        assert row.status_line == "March 20 – 5 day(s) away – turning 34"


class TestEnums:
    """Tests for the enum values."""

    def test_leap_day_policy_values(self):
        assert LeapDayPolicy("feb_28") is LeapDayPolicy.FEB_28
        assert LeapDayPolicy("mar_1") is LeapDayPolicy.MAR_1

    def test_roster_phase_values(self):
        assert RosterPhase.LOADED.value == "loaded"
        assert RosterPhase.MUTATED.value == "mutated"


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_validation_result_has_errors(self):
        """Test has_errors property."""
        result = ValidationResult(
            is_valid=False,
            issues=[
                ValidationIssue(
                    field="name",
                    issue_type="missing",
                    message="Name is required",
                    severity="error",
                ),
            ],
        )
        assert result.has_errors is True
        assert result.error_fields == ["name"]

    def test_validation_issue_severity_pattern(self):
        with pytest.raises(ValidationError):
            ValidationIssue(field="name", issue_type="missing", message="x", severity="fatal")


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.MEMBER_DELETED,
            description="Member deleted",
        )
        assert event.event_type == AuditEventType.MEMBER_DELETED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.member_added("a1", "Ann", "Sister")
        log_dict = event.to_log_dict()
        assert log_dict["event_type"] == "member_added"
        assert log_dict["member_id"] == "a1"
        assert log_dict["details"]["relationship"] == "Sister"
        assert log_dict["is_user_action"] is True

    def test_member_added_event_accepts_long_name(self):
        """Test the user's name stays out of the length-limited description."""
        name = "A" * 600
        event = AuditEventBuilder.member_added("a1", name, "Sister")
        assert event.description == "Member added"
        assert event.details["name"] == name

    def test_audit_event_builder_save_failed(self):
        """Test AuditEventBuilder.roster_save_failed."""
        event = AuditEventBuilder.roster_save_failed("quota exceeded", 3)
        assert event.severity == AuditSeverity.ERROR
        assert event.error_message == "quota exceeded"
        assert event.details["member_count"] == 3

    def test_audit_event_builder_roster_loaded(self):
        event = AuditEventBuilder.roster_loaded(0, from_storage=False)
        assert event.event_type == AuditEventType.ROSTER_LOADED
        assert event.details == {"member_count": 0, "from_storage": False}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
