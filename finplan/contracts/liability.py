"""
Liability Contracts

Liabilities are debts: mortgages, loans, cards. Two cross-field rules
apply to every liability:

1. The term cannot end before it opened.
2. While anything is still owed, the minimum payment must be above
   zero. A fully paid-off liability may carry a zero minimum.

Payment allocation splits a transaction into principal and interest;
the split must move some money.
"""

from typing import Any

from finplan.contracts._shared import money, name_field, reference
from finplan.models.enums import InterestType, LiabilityType, PaymentFrequency
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract
from finplan.validation.fields import date_field, optional, required
from finplan.validation.primitives import choice, nested, number, text
from finplan.validation.refinements import Refinement, on_or_after


LIABILITY_METADATA = RecordContract(
    "liability:metadata",
    [
        optional("lender", text()),
        optional("notes", text()),
    ],
)

TERM_END_NOT_BEFORE_OPEN = Refinement(
    name="term_end_before_open",
    predicate=on_or_after("termEndDate", "openDate"),
    message="Term end date must be on or after open date",
    path="termEndDate",
    fields=("openDate", "termEndDate"),
)

MINIMUM_PAYMENT_WHILE_OWING = Refinement(
    name="minimum_payment_required",
    predicate=lambda data: data["currentBalance"] <= 0 or data["minimumPayment"] > 0,
    message="Minimum payment must be greater than 0 while a balance is outstanding",
    path="minimumPayment",
    fields=("currentBalance", "minimumPayment"),
)

_INTEREST_RATE_MESSAGE = "Interest rate must be between 0% and 100%"

CREATE_LIABILITY = RecordContract(
    "liability:create",
    [
        name_field("Liability"),
        required("type", choice(LiabilityType), message="Liability type is required"),
        money("currentBalance", "Current balance", is_required=True),
        money("originalAmount", "Original amount"),
        required(
            "interestRate",
            number(ge=0, le=100, message=_INTEREST_RATE_MESSAGE,
                   type_message="Interest rate must be a number"),
            message="Interest rate is required",
        ),
        required("interestType", choice(InterestType), message="Interest type is required"),
        money("minimumPayment", "Minimum payment", is_required=True),
        optional("paymentFrequency", choice(PaymentFrequency)),
        date_field("openDate", is_required=True, message="Open date is required"),
        date_field("termEndDate", is_required=True, message="Term end date is required"),
        reference("accountId", "account", blank_as_absent=True),
        optional("metadata", nested(LIABILITY_METADATA)),
    ],
    refinements=[TERM_END_NOT_BEFORE_OPEN, MINIMUM_PAYMENT_WHILE_OWING],
)

UPDATE_LIABILITY = CREATE_LIABILITY.partial("liability:update")

PRINCIPAL_PLUS_INTEREST_POSITIVE = Refinement(
    name="allocation_total_not_positive",
    predicate=lambda data: data["principalAmount"] + data["interestAmount"] > 0,
    message="Principal and interest must add up to more than 0",
    path="principalAmount",
    fields=("principalAmount", "interestAmount"),
)

ALLOCATE_PAYMENT = RecordContract(
    "liability:allocate_payment",
    [
        reference("transactionId", "transaction", is_required=True),
        money("principalAmount", "Principal amount", is_required=True),
        money("interestAmount", "Interest amount", default=0),
    ],
    refinements=[PRINCIPAL_PLUS_INTEREST_POSITIVE],
)

LIABILITY_CONTRACTS = EntityContracts("liability", CREATE_LIABILITY, UPDATE_LIABILITY)


def validate_create_liability(raw: Any) -> ValidationResult:
    return CREATE_LIABILITY.validate(raw)


def validate_update_liability(raw: Any) -> ValidationResult:
    return UPDATE_LIABILITY.validate(raw)


def validate_payment_allocation(raw: Any) -> ValidationResult:
    return ALLOCATE_PAYMENT.validate(raw)
