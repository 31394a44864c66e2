"""
Asset Contracts

Assets are things of value tracked outside (or alongside) accounts:
property, vehicles, holdings. Value changes are recorded through the
separate asset value contract so each one leaves a history entry.
"""

from typing import Any

from finplan.contracts._shared import money, name_field, reference
from finplan.models.enums import AssetType, LiquidityType, ValueSource
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract
from finplan.validation.fields import date_field, optional, required
from finplan.validation.primitives import choice, nested, number, text


GROWTH_RATE_MIN = -100
GROWTH_RATE_MAX = 1000

ASSET_METADATA = RecordContract(
    "asset:metadata",
    [
        optional("location", text()),
        optional("ticker", text()),
        optional("registrationNumber", text()),
        optional("notes", text()),
    ],
)

CREATE_ASSET = RecordContract(
    "asset:create",
    [
        name_field("Asset"),
        required("type", choice(AssetType), message="Asset type is required"),
        money("currentValue", "Current value", is_required=True),
        money("purchaseValue", "Purchase value"),
        date_field("purchaseDate"),
        optional(
            "expectedGrowthRate",
            number(
                ge=GROWTH_RATE_MIN,
                le=GROWTH_RATE_MAX,
                min_message=f"Growth rate cannot be less than {GROWTH_RATE_MIN}%",
                max_message=f"Growth rate cannot exceed {GROWTH_RATE_MAX}%",
            ),
            default=0,
        ),
        optional("liquidityType", choice(LiquidityType)),
        reference("accountId", "account", blank_as_absent=True),
        optional("metadata", nested(ASSET_METADATA)),
    ],
)

UPDATE_ASSET = CREATE_ASSET.partial("asset:update")

# Recording a new valuation (creates a value history entry)
UPDATE_ASSET_VALUE = RecordContract(
    "asset:update_value",
    [
        money("newValue", "New value", is_required=True),
        optional("source", choice(ValueSource), default=ValueSource.MANUAL.value),
        date_field("date"),
    ],
)

ASSET_CONTRACTS = EntityContracts("asset", CREATE_ASSET, UPDATE_ASSET)


def validate_create_asset(raw: Any) -> ValidationResult:
    return CREATE_ASSET.validate(raw)


def validate_update_asset(raw: Any) -> ValidationResult:
    return UPDATE_ASSET.validate(raw)


def validate_asset_value_update(raw: Any) -> ValidationResult:
    return UPDATE_ASSET_VALUE.validate(raw)
