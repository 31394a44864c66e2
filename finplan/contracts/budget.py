"""
Budget Contracts

A budget covers a period between two dates. Line items (one per
category) are added separately once the budget exists.
"""

from typing import Any

from finplan.contracts._shared import money, name_field, notes_field, reference
from finplan.models.enums import BudgetPeriod
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract
from finplan.validation.fields import date_field, optional, required
from finplan.validation.primitives import boolean, choice


CREATE_BUDGET = RecordContract(
    "budget:create",
    [
        name_field("Budget"),
        required("period", choice(BudgetPeriod), message="Budget period is required"),
        date_field("startDate", is_required=True, message="Start date is required"),
        date_field("endDate", is_required=True, message="End date is required"),
    ],
)

UPDATE_BUDGET = CREATE_BUDGET.partial(
    "budget:update",
    extra_fields=[optional("isActive", boolean())],
)

ADD_BUDGET_ITEM = RecordContract(
    "budget:add_item",
    [
        reference("categoryId", "category", is_required=True),
        money("allocatedAmount", "Allocated amount", is_required=True),
        notes_field(),
    ],
)

# Items cannot be moved to another category, only re-sized or annotated
UPDATE_BUDGET_ITEM = RecordContract(
    "budget:update_item",
    [field for field in ADD_BUDGET_ITEM.fields if field.name != "categoryId"],
).partial("budget:update_item")

BUDGET_CONTRACTS = EntityContracts("budget", CREATE_BUDGET, UPDATE_BUDGET)


def validate_create_budget(raw: Any) -> ValidationResult:
    return CREATE_BUDGET.validate(raw)


def validate_update_budget(raw: Any) -> ValidationResult:
    return UPDATE_BUDGET.validate(raw)


def validate_add_budget_item(raw: Any) -> ValidationResult:
    return ADD_BUDGET_ITEM.validate(raw)


def validate_update_budget_item(raw: Any) -> ValidationResult:
    return UPDATE_BUDGET_ITEM.validate(raw)
