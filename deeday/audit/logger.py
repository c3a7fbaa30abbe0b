"""
Audit Logger

DESIGN DECISION: Storage problems are never shown to the user, so
every roster change and every storage failure is logged here instead.
This provides:
1. Traceability of adds and deletes
2. The only visible trace of a failed save or a corrupt roster file

The audit logger:
- Is synchronous, like the rest of the app
- Never raises into the roster from its log_* helpers
"""

from typing import Any, Callable

import structlog

from deeday.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs events to the structured local log. Keeps the events of the
    current session in memory when record=True (debug mode and tests).

    The log_* helpers never raise: a failure to build or write an event
    is itself logged and the caller carries on.
    """

    def __init__(self, record: bool = False):
        self._logger = structlog.get_logger("deeday.audit")
        self._record = record
        self.events: list[AuditEvent] = []

    def log(self, event: AuditEvent) -> None:
        """Log an audit event."""
        if self._record:
            self.events.append(event)

        log_dict = event.to_log_dict()
        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def _emit(self, build: Callable[..., AuditEvent], *args: Any) -> None:
        """Build and log an event, logging (not raising) any failure."""
        try:
            self.log(build(*args))
        except Exception as e:
            # Log failure but don't raise
            self._logger.error(
                "audit_log_failed",
                error=str(e),
                builder=build.__name__,
            )

    def log_roster_loaded(self, member_count: int, from_storage: bool) -> None:
        """Log the initial load."""
        self._emit(AuditEventBuilder.roster_loaded, member_count, from_storage)

    def log_roster_load_failed(self, error_message: str) -> None:
        """Log an unreadable or malformed stored roster."""
        self._emit(AuditEventBuilder.roster_load_failed, error_message)

    def log_member_added(self, member_id: str, name: str, relationship: str) -> None:
        """Log a new member."""
        self._emit(AuditEventBuilder.member_added, member_id, name, relationship)

    def log_member_rejected(self, missing_fields: list[str]) -> None:
        """Log an add that was ignored."""
        self._emit(AuditEventBuilder.member_rejected, missing_fields)

    def log_member_deleted(self, member_id: str) -> None:
        """Log a deletion."""
        self._emit(AuditEventBuilder.member_deleted, member_id)

    def log_roster_saved(self, member_count: int, size_bytes: int) -> None:
        """Log a successful save."""
        self._emit(AuditEventBuilder.roster_saved, member_count, size_bytes)

    def log_roster_save_failed(self, error_message: str, member_count: int) -> None:
        """Log a failed save."""
        self._emit(AuditEventBuilder.roster_save_failed, error_message, member_count)
