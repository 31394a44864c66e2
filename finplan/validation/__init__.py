"""
Validation engine: primitive rules, transforms, field definitions,
refinements and the record contract that composes them.
"""

from finplan.validation.contract import (
    EntityContracts,
    RecordContract,
    check_contract,
    derive_partial,
)
from finplan.validation.errors import (
    ContractDefinitionError,
    ErrorCollector,
    FinplanError,
    ValidationFailedError,
)
from finplan.validation.fields import FieldDefinition, date_field, optional, required
from finplan.validation.refinements import Refinement

__all__ = [
    "ContractDefinitionError",
    "EntityContracts",
    "ErrorCollector",
    "FieldDefinition",
    "FinplanError",
    "RecordContract",
    "Refinement",
    "ValidationFailedError",
    "check_contract",
    "date_field",
    "derive_partial",
    "optional",
    "required",
]
