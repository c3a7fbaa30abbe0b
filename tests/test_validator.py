"""Tests for add-member validation."""

from datetime import date, datetime

from deeday.validation import MemberValidator


class TestMemberValidator:
    """Tests for MemberValidator."""

    def setup_method(self):
        self.validator = MemberValidator()

    def test_valid_input(self):
        """Test all fields present gives cleaned values."""
        result = self.validator.validate(" Ann ", "1990-03-20", "Sister")
        assert result.is_valid is True
        assert result.has_errors is False
        assert result.name == "Ann"
        assert result.birthdate == date(1990, 3, 20)
        assert result.relationship == "Sister"

    def test_date_and_datetime_accepted(self):
        assert self.validator.validate("Ann", date(1990, 3, 20), "Sister").birthdate == date(1990, 3, 20)
        assert self.validator.validate(
            "Ann", datetime(1990, 3, 20, 23, 59), "Sister"
        ).birthdate == date(1990, 3, 20)

    def test_all_missing(self):
        """Test each missing field gets its own issue."""
        result = self.validator.validate("", None, "  ")
        assert result.is_valid is False
        assert sorted(result.error_fields) == ["birthdate", "name", "relationship"]
        assert all(issue.issue_type == "missing" for issue in result.issues)
        assert result.name is None

    def test_bad_date_format(self):
        """Test an unparseable birthdate is an invalid_format error."""
        result = self.validator.validate("Ann", "03/20/1990", "Sister")
        assert result.is_valid is False
        assert result.issues[0].field == "birthdate"
        assert result.issues[0].issue_type == "invalid_format"

    def test_impossible_date(self):
        result = self.validator.validate("Ann", "1990-02-30", "Sister")
        assert result.is_valid is False
        assert result.error_fields == ["birthdate"]
