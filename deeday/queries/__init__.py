"""Search package."""

from deeday.queries.search import filter_members, format_birthdate, matches_search

__all__ = ["filter_members", "format_birthdate", "matches_search"]
