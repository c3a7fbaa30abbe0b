"""
Roster Search and Display Helpers

DESIGN DECISION: Searching is display-only.
These helpers take the roster's list and return a new, filtered list;
the store itself is never touched.
"""

import calendar
from datetime import date
from typing import Iterable, Optional

from deeday.models.member import FamilyMember


def matches_search(member: FamilyMember, term: Optional[str]) -> bool:
    """
    Case-insensitive substring match on name OR relationship.

    An empty term matches everyone.
    """
    if not term:
        return True
    needle = term.lower()
    return needle in member.name.lower() or needle in member.relationship.lower()


def filter_members(
    members: Iterable[FamilyMember],
    term: Optional[str],
) -> list[FamilyMember]:
    """Members matching the search term, in their original order."""
    return [member for member in members if matches_search(member, term)]


def format_birthdate(birthdate: date) -> str:
    """Month name and day, no year, e.g. 'March 20'."""
    return f"{calendar.month_name[birthdate.month]} {birthdate.day}"
