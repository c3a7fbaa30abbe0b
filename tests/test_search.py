"""Tests for roster search and birthdate formatting."""

import pytest
from datetime import date

from deeday.models.member import FamilyMember
from deeday.queries import filter_members, format_birthdate, matches_search


ANN = FamilyMember(name="Ann", birthdate=date(1990, 3, 20), relationship="Sister")
BOB = FamilyMember(name="Bob", birthdate=date(1985, 11, 2), relationship="Brother")


class TestFilterMembers:
    """Tests for the search filter."""

    def test_matches_relationship_case_insensitive(self):
        """Test 'bro' finds Bob through his relationship."""
        assert filter_members([ANN, BOB], "bro") == [BOB]

    def test_matches_name_case_insensitive(self):
        assert filter_members([ANN, BOB], "ANN") == [ANN]

    @pytest.mark.parametrize("term", ["", None])
    def test_empty_term_matches_all(self, term):
        """Test an empty search shows everyone."""
        assert filter_members([ANN, BOB], term) == [ANN, BOB]

    def test_no_match(self):
        assert filter_members([ANN, BOB], "grandma") == []

    def test_keeps_roster_order(self):
        """Test matches come back in roster order."""
        assert filter_members([BOB, ANN], "r") == [BOB, ANN]

    def test_does_not_mutate_input(self):
        members = [ANN, BOB]
        filter_members(members, "bro")
        assert members == [ANN, BOB]

    def test_matches_search_either_field(self):
        assert matches_search(ANN, "sis") is True
        assert matches_search(ANN, "nn") is True
        assert matches_search(ANN, "bob") is False


class TestFormatBirthdate:
    """Tests for the month-name + day formatter."""

    @pytest.mark.parametrize("birthdate,expected", [
        (date(1990, 3, 20), "March 20"),
        (date(2000, 2, 29), "February 29"),
        (date(1985, 11, 2), "November 2"),
        (date(1970, 1, 1), "January 1"),
    ])
    def test_format(self, birthdate, expected):
        assert format_birthdate(birthdate) == expected
