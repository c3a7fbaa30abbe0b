"""
Add-Member Validation

DESIGN DECISION: All three form fields are required.
A missing field makes the add a silent no-op; the issues collected
here are for logging and for callers that want to know why,
never for an error popup.

Validation NEVER fixes input beyond trimming whitespace.
"""

from datetime import date, datetime
from typing import Optional, Union

from deeday.models.member import ValidationIssue, ValidationResult


BirthdateInput = Union[date, str, None]


class MemberValidator:
    """Validates raw add-member form input."""

    def validate(
        self,
        name: Optional[str],
        birthdate: BirthdateInput,
        relationship: Optional[str],
    ) -> ValidationResult:
        """
        Check that name, birthdate and relationship are all present.

        Birthdate may be a date or an ISO yyyy-mm-dd string; a string
        that does not parse counts as invalid.

        Returns: ValidationResult with cleaned values when valid
        """
        issues = []

        clean_name = self._clean_text(name)
        if not clean_name:
            issues.append(self._missing("name", "Name is required"))

        clean_relationship = self._clean_text(relationship)
        if not clean_relationship:
            issues.append(self._missing("relationship", "Relationship is required"))

        clean_birthdate = None
        if birthdate is None or (isinstance(birthdate, str) and not birthdate.strip()):
            issues.append(self._missing("birthdate", "Birthday is required"))
        else:
            clean_birthdate = self._parse_birthdate(birthdate)
            if clean_birthdate is None:
                issues.append(ValidationIssue(
                    field="birthdate",
                    issue_type="invalid_format",
                    message=f"Birthday must be a yyyy-mm-dd date, got {birthdate!r}",
                    severity="error",
                ))

        is_valid = not any(issue.severity == "error" for issue in issues)
        if not is_valid:
            return ValidationResult(is_valid=False, issues=issues)

        return ValidationResult(
            is_valid=True,
            issues=issues,
            name=clean_name,
            birthdate=clean_birthdate,
            relationship=clean_relationship,
        )

    @staticmethod
    def _clean_text(value: Optional[str]) -> str:
        return value.strip() if value else ""

    @staticmethod
    def _missing(field: str, message: str) -> ValidationIssue:
        return ValidationIssue(
            field=field,
            issue_type="missing",
            message=message,
            severity="error",
        )

    @staticmethod
    def _parse_birthdate(value: Union[date, str]) -> Optional[date]:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None
