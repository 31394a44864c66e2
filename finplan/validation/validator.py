"""
Entity Validation Service

The entry point request handlers use. It wraps the pure contracts with
the things a service needs around them:

- contract lookup by entity and operation
- one audit log event per call
- a user-facing summary of what went wrong
- an exception-raising variant for handlers that prefer it

The contracts themselves stay pure; only this layer logs.
"""

from typing import Any, Mapping, Optional
from uuid import UUID

from finplan.audit import AuditLogger
from finplan.contracts import ENTITY_CONTRACTS
from finplan.models.result import ValidationResult
from finplan.validation.contract import EntityContracts, RecordContract
from finplan.validation.errors import ValidationFailedError


OPERATIONS = ("create", "update")


class EntityValidator:
    """
    Validates request payloads against entity contracts.

    Safe to share across threads and requests: it holds no per-call state.
    """

    def __init__(
        self,
        audit_logger: Optional[AuditLogger] = None,
        contracts: Optional[Mapping[str, EntityContracts]] = None,
    ):
        """
        Initialize validator.

        Args:
            audit_logger: Where outcomes are logged. A default AuditLogger
                is created if None.
            contracts: Entity registry. Defaults to every built-in entity.
        """
        self._audit = audit_logger or AuditLogger()
        self._contracts = dict(contracts if contracts is not None else ENTITY_CONTRACTS)

    @property
    def entities(self) -> list[str]:
        return sorted(self._contracts)

    def contract_for(self, entity: str, operation: str) -> RecordContract:
        """
        Resolve the contract for an entity operation.

        Raises KeyError for an unknown entity and ValueError for an
        unknown operation; both are caller bugs, not user errors.
        """
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation '{operation}'. Expected one of {OPERATIONS}")
        if entity not in self._contracts:
            raise KeyError(f"Unknown entity '{entity}'")
        pair = self._contracts[entity]
        return pair.create if operation == "create" else pair.update

    def validate(
        self,
        entity: str,
        operation: str,
        raw: Any,
        correlation_id: Optional[UUID] = None,
    ) -> ValidationResult:
        """Validate a payload and log the outcome."""
        return self.validate_with(self.contract_for(entity, operation), raw, correlation_id)

    def validate_with(
        self,
        contract: RecordContract,
        raw: Any,
        correlation_id: Optional[UUID] = None,
    ) -> ValidationResult:
        """Validate against any contract (e.g. 'liability:allocate_payment')."""
        result = contract.validate(raw)
        self._audit.log_result(result, raw=raw, correlation_id=correlation_id)
        return result

    def validate_create(self, entity: str, raw: Any,
                        correlation_id: Optional[UUID] = None) -> ValidationResult:
        return self.validate(entity, "create", raw, correlation_id)

    def validate_update(self, entity: str, raw: Any,
                        correlation_id: Optional[UUID] = None) -> ValidationResult:
        return self.validate(entity, "update", raw, correlation_id)

    def parse(
        self,
        entity: str,
        operation: str,
        raw: Any,
        correlation_id: Optional[UUID] = None,
    ) -> dict[str, Any]:
        """
        Validate and return the canonical record.

        Raises:
            ValidationFailedError: carrying every issue found.
        """
        result = self.validate(entity, operation, raw, correlation_id)
        if not result.is_valid:
            raise ValidationFailedError(result)
        return result.data

    def get_user_friendly_summary(self, result: ValidationResult) -> str:
        """
        Generate a plain-language summary of a validation result.

        One line per issue, grouped under the field it belongs to.
        """
        if result.is_valid:
            return "All checks passed."

        lines = [f"Please fix the following ({result.error_count} issue(s)):"]
        for field in result.failed_fields:
            label = field or "input"
            for issue in result.issues:
                if issue.field != field:
                    continue
                if len(issue.loc) > 1:
                    lines.append(f"   • {label} ({issue.path}): {issue.message}")
                else:
                    lines.append(f"   • {label}: {issue.message}")
        return "\n".join(lines)
