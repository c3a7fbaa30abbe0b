"""
Main Orchestrator for Deeday

This module ties together the roster store, the birthday calculator
and the search helpers, and defines what each UI action does:
1. Submit the add form (add, tell the form whether to clear)
2. Delete a row
3. Build the visible rows for a search term

DESIGN DECISION: The UI never touches the store's list directly.
It goes through BirthdayBoard, which keeps search display-only and
routes every mutation through the store's add/delete.
"""

from datetime import date
from typing import Optional, Union

from deeday.audit import AuditLogger
from deeday.birthdays import calculate_birthday_info
from deeday.config import get_settings
from deeday.models.member import FamilyMember, LeapDayPolicy, MemberRow
from deeday.queries import filter_members, format_birthdate
from deeday.roster import RosterStore
from deeday.services.storage import (
    InMemoryStorage,
    LocalFileStorage,
    RosterStorageInterface,
)


APP_NAME = "Deeday"
APP_TAGLINE = "Never miss a special day again!"
EMPTY_STATE_MESSAGE = "No birthdays added yet"


class BirthdayBoard:
    """
    Everything the birthday page can do.

    Flow per rerun:
    1. Handle the user's action (submit or delete), if any
    2. Filter the roster by the search term
    3. Run each visible member through the birthday calculator
    """

    def __init__(
        self,
        store: RosterStore,
        leap_day_policy: LeapDayPolicy = LeapDayPolicy.FEB_28,
    ):
        self._store = store
        self._leap_day_policy = leap_day_policy

    @property
    def store(self) -> RosterStore:
        return self._store

    def submit_member(
        self,
        name: Optional[str],
        birthdate: Union[date, str, None],
        relationship: Optional[str],
    ) -> Optional[FamilyMember]:
        """
        Handle the add form.

        Returns the new member, or None when a field was missing.
        The form should clear its fields only when a member comes back.
        """
        return self._store.add(name, birthdate, relationship)

    def delete_member(self, member_id: str) -> bool:
        """Handle a row's delete button."""
        return self._store.delete(member_id)

    def visible_rows(
        self,
        search_term: Optional[str] = None,
        today: Optional[date] = None,
    ) -> list[MemberRow]:
        """Rows to render for the current search term, in roster order."""
        today = today or date.today()
        members = filter_members(self._store.list_members(), search_term)
        return [self._build_row(member, today) for member in members]

    def empty_state_message(self, rows: list[MemberRow]) -> Optional[str]:
        """Message to show instead of the list, or None when there are rows."""
        return None if rows else EMPTY_STATE_MESSAGE

    def _build_row(self, member: FamilyMember, today: date) -> MemberRow:
        return MemberRow(
            member=member,
            birthday=calculate_birthday_info(
                member.birthdate, today, self._leap_day_policy
            ),
            formatted_birthdate=format_birthdate(member.birthdate),
        )


def footer_lines(today: Optional[date] = None) -> tuple[str, str]:
    """Copyright and last-modified lines for the page footer."""
    today = today or date.today()
    return (
        f"© {today.year} {APP_NAME}. All rights reserved.",
        f"Last modified: {format_birthdate(today)}, {today.year}",
    )


def create_app_components(
    use_storage: bool = True,
    storage: Optional[RosterStorageInterface] = None,
) -> tuple[BirthdayBoard, RosterStorageInterface]:
    """
    Factory function to create all application components.

    Args:
        use_storage: Whether to use the local roster file.
                    Set to False to keep everything in memory.
        storage: Explicit storage backend, overrides use_storage

    Returns:
        (birthday_board, storage)
    """
    settings = get_settings()

    if storage is None:
        storage = LocalFileStorage(settings.roster_path) if use_storage else InMemoryStorage()

    store = RosterStore(storage, audit_logger=AuditLogger(record=settings.debug_mode))
    board = BirthdayBoard(store, leap_day_policy=settings.leap_day_policy)

    return board, storage
