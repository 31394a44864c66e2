"""
Audit Logger

DESIGN DECISION: Every validation outcome the service layer produces is
logged as one structured event. This provides:
1. Traceability of accepted and refused input
2. Debugging capability for client integrations
3. Correlation with the request that caused it

Logging never replaces returning the errors: callers still receive and
surface every issue. The log is an additional record.
"""

import logging
import sys
from typing import Any, Mapping, Optional
from uuid import UUID, uuid4

import structlog

from finplan.config import LoggingSettings, get_settings
from finplan.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from finplan.models.result import ValidationResult


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure structlog for the process.

    JSON lines by default; a console renderer when json_output is off.
    Call once at startup.
    """
    settings = settings or get_settings().logging
    level = getattr(logging, settings.level)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    if settings.json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

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
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service for validation outcomes.
    """

    def __init__(self, include_rejected_values: Optional[bool] = None):
        """
        Initialize audit logger.

        Args:
            include_rejected_values: Attach offending raw values to failure
                events. Defaults to the logging settings.
        """
        if include_rejected_values is None:
            include_rejected_values = get_settings().logging.rejected_values
        self._include_values = include_rejected_values
        self._logger = structlog.get_logger("finplan.audit")

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at a level matching its severity."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_result(
        self,
        result: ValidationResult,
        raw: Any = None,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        """Log one validation outcome and return the event that was logged."""
        if result.is_valid:
            event = AuditEventBuilder.validation_passed(
                contract=result.contract,
                correlation_id=correlation_id,
            )
        else:
            event = AuditEventBuilder.validation_failed(
                contract=result.contract,
                issues=result.issues,
                correlation_id=correlation_id,
                rejected_values=self._rejected_values(result, raw),
            )
        self.log(event)
        return event

    def _rejected_values(self, result: ValidationResult, raw: Any) -> Optional[dict[str, Any]]:
        if not self._include_values or not isinstance(raw, Mapping):
            return None
        return {
            field: repr(raw[field])
            for field in result.failed_fields
            if field in raw
        }


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a request and pass it to every
    validation made on its behalf.
    """
    return uuid4()
