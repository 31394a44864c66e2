"""
Category Contracts

Categories may nest one level (parentCategoryId) and carry a display
colour in #RRGGBB form.
"""

from typing import Any

from finplan.contracts._shared import reference
from finplan.models.enums import CategoryType
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract
from finplan.validation.fields import optional, required
from finplan.validation.primitives import choice, hex_color, number, text


DEFAULT_CATEGORY_COLOR = "#3B82F6"

CREATE_CATEGORY = RecordContract(
    "category:create",
    [
        required(
            "name",
            text(min_length=1, min_message="Category name cannot be empty"),
            message="Category name is required",
        ),
        required("type", choice(CategoryType), message="Category type is required"),
        reference("parentCategoryId", "parent category", nullable=True),
        optional("color", hex_color(), default=DEFAULT_CATEGORY_COLOR),
        optional("icon", text(), nullable=True),
        optional(
            "sortOrder",
            number(integer=True, ge=0, message="Sort order must be a non-negative integer",
                   type_message="Sort order must be a non-negative integer"),
        ),
    ],
)

UPDATE_CATEGORY = CREATE_CATEGORY.partial("category:update")

CATEGORY_CONTRACTS = EntityContracts("category", CREATE_CATEGORY, UPDATE_CATEGORY)


def validate_create_category(raw: Any) -> ValidationResult:
    return CREATE_CATEGORY.validate(raw)


def validate_update_category(raw: Any) -> ValidationResult:
    return UPDATE_CATEGORY.validate(raw)
