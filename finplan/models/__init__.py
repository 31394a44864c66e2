"""
Data Models Package

Domain vocabularies, validation results and audit events.
"""

from finplan.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from finplan.models.enums import (
    AccountType,
    AssetType,
    BudgetPeriod,
    CategoryType,
    GoalStatus,
    GoalType,
    InterestType,
    LiabilityType,
    LiquidityType,
    PaymentFrequency,
    Priority,
    RecurrenceType,
    RecurringFrequency,
    TransactionType,
    UpdateScope,
    ValueSource,
)
from finplan.models.result import ValidationIssue, ValidationResult

__all__ = [
    # Vocabularies
    "AccountType",
    "AssetType",
    "BudgetPeriod",
    "CategoryType",
    "GoalStatus",
    "GoalType",
    "InterestType",
    "LiabilityType",
    "LiquidityType",
    "PaymentFrequency",
    "Priority",
    "RecurrenceType",
    "RecurringFrequency",
    "TransactionType",
    "UpdateScope",
    "ValueSource",
    # Results
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
