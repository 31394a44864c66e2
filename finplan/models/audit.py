"""
Audit Models for FinPlan Contracts

Every validation call the service layer makes produces one audit event.
This provides:
1. Traceability of what was accepted and what was refused
2. Debugging information when clients send malformed payloads
3. A count of which fields users trip over most

DESIGN DECISION: Audit events describe outcomes, not payloads.
Raw input values are only attached when explicitly enabled in settings,
since request bodies can carry personal financial data.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from finplan.models.result import ValidationIssue


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    VALIDATION_PASSED = "validation_passed"
    VALIDATION_FAILED = "validation_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """A single audit event."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    contract: str = Field(
        ...,
        description="Contract the input was validated against (e.g. 'liability:create')"
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate this event with the request that caused it"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(default_factory=dict)

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "contract": self.contract,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.validation_passed("goal:create", correlation_id)
        event = AuditEventBuilder.validation_failed("goal:create", issues, correlation_id)
    """

    @staticmethod
    def validation_passed(
        contract: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_PASSED,
            contract=contract,
            correlation_id=correlation_id,
            description=f"Input accepted by {contract}",
        )

    @staticmethod
    def validation_failed(
        contract: str,
        issues: list[ValidationIssue],
        correlation_id: Optional[UUID] = None,
        rejected_values: Optional[dict[str, Any]] = None,
    ) -> AuditEvent:
        details: dict[str, Any] = {
            "error_count": len(issues),
            "fields": sorted({issue.field for issue in issues}),
            "issue_types": [issue.issue_type for issue in issues],
        }
        if rejected_values is not None:
            details["rejected_values"] = rejected_values
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            contract=contract,
            correlation_id=correlation_id,
            description=f"Input rejected by {contract} with {len(issues)} issue(s)",
            details=details,
        )
