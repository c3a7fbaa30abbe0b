"""Validation package."""

from deeday.validation.validator import MemberValidator

__all__ = ["MemberValidator"]
