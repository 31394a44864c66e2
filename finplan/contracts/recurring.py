"""
Recurring Rule Contracts

A recurring rule describes how often a template transaction repeats
and when the repetition stops. It stops either at an end date or after
a number of occurrences, never both. Working out the actual occurrence
dates happens elsewhere; this module only guards the rule's shape.
"""

from typing import Any

from finplan.contracts._shared import (
    DESCRIPTION_MAX_LENGTH,
    money,
    name_field,
    notes_field,
    reference,
)
from finplan.models.enums import RecurringFrequency, TransactionType
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract
from finplan.validation.fields import date_field, optional, required
from finplan.validation.primitives import boolean, choice, mapping, nested, number, text_list
from finplan.validation.refinements import Refinement, not_both, strictly_after


MAX_PREVIEW_LIMIT = 50

TEMPLATE_TRANSACTION = RecordContract(
    "recurring_rule:template_transaction",
    [
        reference("accountId", "account", is_required=True),
        required("type", choice(TransactionType), message="Transaction type is required"),
        money("amount", "Amount", is_required=True, positive=True),
        name_field("Transaction"),
        reference("categoryId", "category", nullable=True),
        reference("subcategoryId", "subcategory", nullable=True),
        notes_field("description", max_length=DESCRIPTION_MAX_LENGTH, nullable=True),
        notes_field("memo", nullable=True),
        optional("tags", text_list()),
        reference("liabilityId", "liability", nullable=True),
        optional("metadata", mapping()),
    ],
)


def _positive_int(label: str):
    return number(
        integer=True,
        ge=1,
        message=f"{label} must be a positive integer",
        type_message=f"{label} must be a positive integer",
    )


END_DATE_OR_OCCURRENCES = Refinement(
    name="end_date_and_occurrences",
    predicate=not_both("endDate", "occurrences"),
    message="Cannot specify both endDate and occurrences",
    path="endDate",
)

END_AFTER_START = Refinement(
    name="end_date_not_after_start",
    predicate=strictly_after("endDate", "startDate"),
    message="End date must be after start date",
    path="endDate",
    fields=("startDate", "endDate"),
)

CREATE_RECURRING_RULE = RecordContract(
    "recurring_rule:create",
    [
        required(
            "frequency",
            choice(RecurringFrequency),
            message="Frequency is required",
        ),
        optional("interval", _positive_int("Interval"), default=1),
        date_field("startDate", is_required=True, message="Start date is required"),
        date_field("endDate", nullable=True),
        optional("occurrences", _positive_int("Occurrences"), nullable=True),
        optional("isActive", boolean(), default=True),
        required(
            "templateTransaction",
            nested(TEMPLATE_TRANSACTION),
            message="Template transaction is required",
        ),
    ],
    refinements=[END_DATE_OR_OCCURRENCES, END_AFTER_START],
)

UPDATE_RECURRING_RULE = CREATE_RECURRING_RULE.partial("recurring_rule:update")

PREVIEW_OCCURRENCES = RecordContract(
    "recurring_rule:preview",
    [
        required("frequency", choice(RecurringFrequency), message="Frequency is required"),
        optional("interval", _positive_int("Interval"), default=1),
        date_field("startDate", is_required=True, message="Start date is required"),
        date_field("endDate", nullable=True),
        optional("occurrences", _positive_int("Occurrences"), nullable=True),
        optional(
            "limit",
            number(
                integer=True,
                ge=1,
                le=MAX_PREVIEW_LIMIT,
                min_message="Limit must be a positive integer",
                max_message=f"Limit cannot exceed {MAX_PREVIEW_LIMIT}",
            ),
            default=10,
        ),
    ],
)

RECURRING_RULE_CONTRACTS = EntityContracts(
    "recurring_rule", CREATE_RECURRING_RULE, UPDATE_RECURRING_RULE,
)


def validate_create_recurring_rule(raw: Any) -> ValidationResult:
    return CREATE_RECURRING_RULE.validate(raw)


def validate_update_recurring_rule(raw: Any) -> ValidationResult:
    return UPDATE_RECURRING_RULE.validate(raw)


def validate_occurrence_preview(raw: Any) -> ValidationResult:
    return PREVIEW_OCCURRENCES.validate(raw)
