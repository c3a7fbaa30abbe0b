"""Roster store package."""

from deeday.roster.store import (
    MalformedRosterError,
    RosterStore,
    deserialize_roster,
    serialize_roster,
)

__all__ = [
    "MalformedRosterError",
    "RosterStore",
    "deserialize_roster",
    "serialize_roster",
]
