"""
Goal Contracts

Goals track progress toward a target amount, optionally by a target
date. Contributions and linked transactions both move a goal forward
and must be for a real (positive) amount.
"""

from typing import Annotated, Any

from pydantic import BaseModel, Field

from finplan.contracts._shared import (
    DESCRIPTION_MAX_LENGTH,
    money,
    name_field,
    notes_field,
    reference,
)
from finplan.models.enums import GoalStatus, GoalType, Priority
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract
from finplan.validation.fields import date_field, optional, required
from finplan.validation.primitives import choice, list_of, nested, number, text


MINIMUM_CONTRIBUTION = 0.01


class Milestone(BaseModel):
    """A progress marker inside a goal's metadata."""

    percentage: Annotated[float, Field(strict=True, ge=0, le=100, allow_inf_nan=False)]
    label: Annotated[str, Field(strict=True)]
    reached: Annotated[bool, Field(strict=True)] = False


GOAL_METADATA = RecordContract(
    "goal:metadata",
    [
        optional("milestones", list_of(Milestone)),
        optional("notes", text()),
    ],
)

CREATE_GOAL = RecordContract(
    "goal:create",
    [
        name_field("Goal"),
        notes_field("description", max_length=DESCRIPTION_MAX_LENGTH),
        required("type", choice(GoalType), message="Goal type is required"),
        money("targetAmount", "Target amount", is_required=True),
        date_field("targetDate"),
        optional("priority", choice(Priority), default=Priority.MEDIUM.value),
        optional("icon", text(max_length=50)),
        optional("metadata", nested(GOAL_METADATA)),
    ],
)

UPDATE_GOAL = CREATE_GOAL.partial(
    "goal:update",
    extra_fields=[optional("status", choice(GoalStatus))],
)


def _contribution_amount():
    return required(
        "amount",
        number(
            ge=MINIMUM_CONTRIBUTION,
            message="Amount must be greater than 0",
            type_message="Amount must be a number",
        ),
        message="Amount is required",
    )


CREATE_GOAL_CONTRIBUTION = RecordContract(
    "goal:contribution",
    [
        _contribution_amount(),
        date_field("date"),
        notes_field(),
    ],
)

LINK_TRANSACTION_TO_GOAL = RecordContract(
    "goal:link_transaction",
    [
        reference("transactionId", "transaction", is_required=True),
        _contribution_amount(),
        notes_field(),
    ],
)

GOAL_CONTRACTS = EntityContracts("goal", CREATE_GOAL, UPDATE_GOAL)


def validate_create_goal(raw: Any) -> ValidationResult:
    return CREATE_GOAL.validate(raw)


def validate_update_goal(raw: Any) -> ValidationResult:
    return UPDATE_GOAL.validate(raw)


def validate_goal_contribution(raw: Any) -> ValidationResult:
    return CREATE_GOAL_CONTRIBUTION.validate(raw)


def validate_goal_transaction_link(raw: Any) -> ValidationResult:
    return LINK_TRANSACTION_TO_GOAL.validate(raw)
