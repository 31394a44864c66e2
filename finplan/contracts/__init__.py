"""
Entity Contracts

One create/update pair per entity, plus the auxiliary contracts
(asset valuations, payment allocations, budget items, goal
contributions, occurrence previews).

All contracts are built at import time. A malformed contract raises
ContractDefinitionError here, before any request is served.
"""

from typing import Any

from finplan.contracts.account import ACCOUNT_CONTRACTS
from finplan.contracts.asset import ASSET_CONTRACTS, UPDATE_ASSET_VALUE
from finplan.contracts.budget import ADD_BUDGET_ITEM, BUDGET_CONTRACTS, UPDATE_BUDGET_ITEM
from finplan.contracts.category import CATEGORY_CONTRACTS
from finplan.contracts.goal import (
    CREATE_GOAL_CONTRIBUTION,
    GOAL_CONTRACTS,
    LINK_TRANSACTION_TO_GOAL,
)
from finplan.contracts.liability import ALLOCATE_PAYMENT, LIABILITY_CONTRACTS
from finplan.contracts.recurring import PREVIEW_OCCURRENCES, RECURRING_RULE_CONTRACTS
from finplan.contracts.transaction import (
    TRANSACTION_CONTRACTS,
    UPDATE_GENERATED_TRANSACTION,
)
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract


ENTITY_CONTRACTS: dict[str, EntityContracts] = {
    contracts.entity: contracts
    for contracts in (
        TRANSACTION_CONTRACTS,
        ACCOUNT_CONTRACTS,
        CATEGORY_CONTRACTS,
        ASSET_CONTRACTS,
        LIABILITY_CONTRACTS,
        GOAL_CONTRACTS,
        BUDGET_CONTRACTS,
        RECURRING_RULE_CONTRACTS,
    )
}

# Every contract by its own name, e.g. "liability:allocate_payment"
ALL_CONTRACTS: dict[str, RecordContract] = {
    contract.name: contract
    for contract in (
        *(c for pair in ENTITY_CONTRACTS.values() for c in (pair.create, pair.update)),
        UPDATE_GENERATED_TRANSACTION,
        UPDATE_ASSET_VALUE,
        ALLOCATE_PAYMENT,
        CREATE_GOAL_CONTRIBUTION,
        LINK_TRANSACTION_TO_GOAL,
        ADD_BUDGET_ITEM,
        UPDATE_BUDGET_ITEM,
        PREVIEW_OCCURRENCES,
    )
}


def get_entity(entity: str) -> EntityContracts:
    """Look up an entity's contracts. Unknown names raise KeyError."""
    try:
        return ENTITY_CONTRACTS[entity]
    except KeyError:
        raise KeyError(
            f"Unknown entity '{entity}'. Known: {', '.join(sorted(ENTITY_CONTRACTS))}"
        ) from None


def get_contract(name: str) -> RecordContract:
    try:
        return ALL_CONTRACTS[name]
    except KeyError:
        raise KeyError(f"Unknown contract '{name}'") from None


def validate_create(entity: str, raw: Any) -> ValidationResult:
    return get_entity(entity).validate_create(raw)


def validate_update(entity: str, raw: Any) -> ValidationResult:
    return get_entity(entity).validate_update(raw)


__all__ = [
    "ALL_CONTRACTS",
    "ENTITY_CONTRACTS",
    "get_contract",
    "get_entity",
    "validate_create",
    "validate_update",
]
