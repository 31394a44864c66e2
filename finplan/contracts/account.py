"""Account Contracts"""

from typing import Any

from finplan.models.enums import AccountType
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract
from finplan.validation.fields import optional, required
from finplan.validation.primitives import boolean, choice, nested, number, text


DEFAULT_CURRENCY = "GBP"

ACCOUNT_METADATA = RecordContract(
    "account:metadata",
    [
        optional("institution", text()),
        optional("accountNumber", text()),
        optional("interestRate", number()),
        optional("creditLimit", number()),
    ],
)

CREATE_ACCOUNT = RecordContract(
    "account:create",
    [
        required(
            "name",
            text(min_length=1, min_message="Account name cannot be empty"),
            message="Account name is required",
        ),
        required("type", choice(AccountType), message="Account type is required"),
        optional("subtype", text()),
        # Opening balances may be negative (overdrawn or credit accounts)
        optional("openingBalance", number(), default=0),
        optional(
            "currency",
            text(min_length=1, min_message="Currency cannot be empty"),
            default=DEFAULT_CURRENCY,
        ),
        optional("description", text()),
        optional("metadata", nested(ACCOUNT_METADATA)),
    ],
)

UPDATE_ACCOUNT = CREATE_ACCOUNT.partial(
    "account:update",
    extra_fields=[optional("isActive", boolean())],
)

ACCOUNT_CONTRACTS = EntityContracts("account", CREATE_ACCOUNT, UPDATE_ACCOUNT)


def validate_create_account(raw: Any) -> ValidationResult:
    return CREATE_ACCOUNT.validate(raw)


def validate_update_account(raw: Any) -> ValidationResult:
    return UPDATE_ACCOUNT.validate(raw)
