"""
Core Data Models for Deeday

These models define the schemas for everything the roster holds
and everything the birthday calculator hands back to the UI.
They are designed to:
1. Enforce the roster invariants at creation time
2. Serialize to the stored JSON layout without extra glue
3. Keep dates as plain calendar dates (no time, no timezone)

DESIGN DECISION: We use Pydantic v2 for the stored records.
The same model that validates a new member also validates
records read back from storage, so both paths share one set of rules.
"""

from datetime import date
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class LeapDayPolicy(str, Enum):
    """
    Where a Feb 29 birthday falls in a year without Feb 29.

    DESIGN DECISION: The choice is explicit and configurable rather
    than whatever the date library happens to do.
    """
    FEB_28 = "feb_28"
    MAR_1 = "mar_1"


class RosterPhase(str, Enum):
    """
    Lifecycle phase of the roster store.

    CRITICAL: Only a MUTATED roster is ever written to storage.
    A freshly LOADED roster is never written back.
    """
    LOADED = "loaded"    # Read from storage, untouched by the user
    MUTATED = "mutated"  # At least one add/delete has happened


# =============================================================================
# CORE MEMBER MODEL
# =============================================================================

def new_member_id() -> str:
    """Generate a fresh opaque member id."""
    return str(uuid4())


class FamilyMember(BaseModel):
    """
    A family member on the roster.

    Field names and the ISO birthdate match the stored record layout,
    so model_dump(mode="json") is exactly what lands on disk.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: str = Field(
        default_factory=new_member_id,
        min_length=1,
        description="Opaque unique member ID"
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Display name"
    )
    birthdate: date = Field(
        ...,
        description="Birth date (yyyy-mm-dd)"
    )
    relationship: str = Field(
        ...,
        min_length=1,
        description="Free-text relationship label, e.g. Sister"
    )


class BirthdayInfo(BaseModel):
    """Result of the birthday calculation for one birthdate."""

    days_until: int = Field(
        ...,
        ge=0,
        description="Calendar days until the next birthday, 0 means today"
    )
    age_turning: int = Field(
        ...,
        description="Age reached on the next (or today's) birthday"
    )
    next_birthday: date = Field(
        ...,
        description="Date of the next (or today's) birthday"
    )
    message: str = Field(
        ...,
        description="Human-readable status line"
    )

    @property
    def is_today(self) -> bool:
        """Check if the birthday is today."""
        return self.days_until == 0


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )


class ValidationResult(BaseModel):
    """
    Result of validating add-member form input.

    When valid, the cleaned values are carried along so the
    store does not have to parse them a second time.
    """

    is_valid: bool = Field(
        ...,
        description="Overall validation result"
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )

    name: Optional[str] = None
    birthdate: Optional[date] = None
    relationship: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_fields(self) -> list[str]:
        """Names of the fields with error-level issues."""
        return [issue.field for issue in self.issues if issue.severity == "error"]


# =============================================================================
# DISPLAY MODELS
# =============================================================================

class MemberRow(BaseModel):
    """One rendered line of the birthday list."""

    member: FamilyMember
    birthday: BirthdayInfo
    formatted_birthdate: str = Field(
        ...,
        description="Month name and day, e.g. 'March 20'"
    )

    @property
    def status_line(self) -> str:
        """Birthdate and calculator message, as shown under the name."""
        return f"{self.formatted_birthdate} – {self.birthday.message}"
