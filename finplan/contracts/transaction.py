"""
Transaction Contracts

A transaction is a single money movement on one account.
Optional references and free-text fields treat "" as "not supplied",
since that is what a cleared form input sends.
"""

from typing import Any

from finplan.contracts._shared import (
    DESCRIPTION_MAX_LENGTH,
    money,
    name_field,
    notes_field,
    reference,
)
from finplan.models.enums import RecurrenceType, TransactionType, UpdateScope
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract
from finplan.validation.fields import date_field, optional, required
from finplan.validation.primitives import boolean, choice, mapping, text_list


CREATE_TRANSACTION = RecordContract(
    "transaction:create",
    [
        reference("accountId", "account", is_required=True),
        date_field("date", is_required=True, message="Transaction date is required"),
        money("amount", "Amount", is_required=True, positive=True),
        required("type", choice(TransactionType), message="Transaction type is required"),
        name_field("Transaction"),
        reference("categoryId", "category", blank_as_absent=True),
        reference("subcategoryId", "subcategory", blank_as_absent=True),
        notes_field("description", max_length=DESCRIPTION_MAX_LENGTH, blank_as_absent=True),
        notes_field("memo", blank_as_absent=True),
        optional("tags", text_list()),
        optional("isRecurring", boolean()),
        reference("recurringRuleId", "recurring rule", blank_as_absent=True),
        reference("liabilityId", "liability", blank_as_absent=True),
        optional("recurrence", choice(RecurrenceType)),
        date_field("recurrence_end_date"),
        optional("metadata", mapping()),
    ],
)

UPDATE_TRANSACTION = CREATE_TRANSACTION.partial("transaction:update")

# Editing a transaction generated from a recurring rule also says how far
# the edit should reach.
UPDATE_GENERATED_TRANSACTION = UPDATE_TRANSACTION.extend(
    "transaction:update_generated",
    [optional("updateScope", choice(UpdateScope), default=UpdateScope.THIS_ONLY.value)],
)

TRANSACTION_CONTRACTS = EntityContracts("transaction", CREATE_TRANSACTION, UPDATE_TRANSACTION)


def validate_create_transaction(raw: Any) -> ValidationResult:
    return CREATE_TRANSACTION.validate(raw)


def validate_update_transaction(raw: Any) -> ValidationResult:
    return UPDATE_TRANSACTION.validate(raw)


def validate_update_generated_transaction(raw: Any) -> ValidationResult:
    return UPDATE_GENERATED_TRANSACTION.validate(raw)
