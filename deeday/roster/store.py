"""
Roster Store

Owns the authoritative, ordered list of family members and keeps it
synchronized with the injected storage.

DESIGN DECISION: The store has an explicit lifecycle phase.
- LOADED: state came from storage (or started empty); nothing is written
- MUTATED: the user has added or deleted someone; every change is saved

This means opening the app never overwrites storage with the value it
just read. Only a real user action does.

FAILURE SEMANTICS: Storage is best effort. Unreadable or malformed data
at startup gives an empty roster; a failed save is logged and the
in-memory roster stays the truth for the session. Nothing here raises
on bad data or bad input.
"""

from datetime import date
from typing import Optional, Union

from pydantic import TypeAdapter, ValidationError

from deeday.audit import AuditLogger
from deeday.models.member import FamilyMember, RosterPhase, new_member_id
from deeday.services.storage import RosterStorageInterface, StorageError
from deeday.validation import MemberValidator


_ROSTER_ADAPTER = TypeAdapter(list[FamilyMember])


class MalformedRosterError(ValueError):
    """Stored roster could not be turned back into members."""
    pass


def serialize_roster(members: list[FamilyMember]) -> bytes:
    """Serialize members to the stored JSON array layout."""
    return _ROSTER_ADAPTER.dump_json(members)


def deserialize_roster(data: bytes) -> list[FamilyMember]:
    """
    Parse the stored JSON array back into members.

    Raises:
        MalformedRosterError: On invalid JSON, bad records or duplicate ids
    """
    try:
        members = _ROSTER_ADAPTER.validate_json(data)
    except ValidationError as e:
        raise MalformedRosterError(
            f"Stored roster is malformed ({e.error_count()} error(s))"
        ) from e

    seen = set()
    for member in members:
        if member.id in seen:
            raise MalformedRosterError(f"Duplicate member id in stored roster: {member.id}")
        seen.add(member.id)
    return members


class RosterStore:
    """
    The roster of family members.

    Usage:
        store = RosterStore(LocalFileStorage())
        member = store.add("Ann", "1990-03-20", "Sister")
        store.delete(member.id)
    """

    def __init__(
        self,
        storage: RosterStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
        validator: Optional[MemberValidator] = None,
    ):
        self._storage = storage
        self._audit_logger = audit_logger or AuditLogger()
        self._validator = validator or MemberValidator()
        self._members: list[FamilyMember] = []
        self._phase = RosterPhase.LOADED

        self._load()

    @property
    def phase(self) -> RosterPhase:
        return self._phase

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member_id: object) -> bool:
        return any(member.id == member_id for member in self._members)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def add(
        self,
        name: Optional[str],
        birthdate: Union[date, str, None],
        relationship: Optional[str],
    ) -> Optional[FamilyMember]:
        """
        Add a member to the end of the roster.

        If any field is empty (or the birthdate does not parse) this is a
        no-op and returns None. Otherwise the new member is returned and
        the roster is saved.
        """
        result = self._validator.validate(name, birthdate, relationship)
        if not result.is_valid:
            self._audit_logger.log_member_rejected(result.error_fields)
            return None

        member = FamilyMember(
            name=result.name,
            birthdate=result.birthdate,
            relationship=result.relationship,
        )
        # ids are unique within the roster
        while member.id in self:
            member = member.model_copy(update={"id": new_member_id()})

        self._members.append(member)
        self._mutated()
        self._audit_logger.log_member_added(member.id, member.name, member.relationship)
        return member

    def delete(self, member_id: str) -> bool:
        """
        Remove the member with this id.

        Returns True if someone was removed. A missing id is a no-op
        and does not touch storage.
        """
        remaining = [member for member in self._members if member.id != member_id]
        if len(remaining) == len(self._members):
            return False

        self._members = remaining
        self._mutated()
        self._audit_logger.log_member_deleted(member_id)
        return True

    def list_members(self) -> list[FamilyMember]:
        """All members in insertion order (a copy; members are immutable)."""
        return list(self._members)

    def get(self, member_id: str) -> Optional[FamilyMember]:
        """The member with this id, or None."""
        for member in self._members:
            if member.id == member_id:
                return member
        return None

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _load(self) -> None:
        """Read the stored roster once. Fails open to an empty roster."""
        try:
            data = self._storage.read()
        except StorageError as e:
            self._audit_logger.log_roster_load_failed(str(e))
            return

        if not data:
            self._audit_logger.log_roster_loaded(0, from_storage=False)
            return

        try:
            self._members = deserialize_roster(data)
        except MalformedRosterError as e:
            self._audit_logger.log_roster_load_failed(str(e))
            return

        self._audit_logger.log_roster_loaded(len(self._members), from_storage=True)

    def _mutated(self) -> None:
        """Mark the roster changed and overwrite storage with all of it.

        Only StorageError is caught here; backends wrap their own I/O
        errors in it. Failures are logged, not raised.
        """
        self._phase = RosterPhase.MUTATED
        data = serialize_roster(self._members)
        try:
            self._storage.write(data)
        except StorageError as e:
            self._audit_logger.log_roster_save_failed(str(e), len(self._members))
            return

        self._audit_logger.log_roster_saved(len(self._members), len(data))
