"""Audit logging package."""

from deeday.audit.logger import AuditLogger

__all__ = ["AuditLogger"]
