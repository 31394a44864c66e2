"""
Validation Result Models

Every validation call returns exactly one ValidationResult.
It is either a canonical record or a non-empty list of issues,
never both and never neither.

DESIGN DECISION: Results are frozen Pydantic models.
A result is created per call and handed to the caller; nothing
downstream may patch it into a half-valid state.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValidationIssue(BaseModel):
    """A single failure, addressed to one field."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(
        ...,
        description="Top-level field the failure is reported against ('' for the whole input)"
    )
    loc: tuple[Union[str, int], ...] = Field(
        default=(),
        description="Full location, including nested keys and list indexes"
    )
    kind: str = Field(
        ...,
        pattern="^(missing|shape|constraint|relationship)$",
        description="Failure family: missing field, wrong type, bad value, cross-field rule"
    )
    issue_type: str = Field(
        ...,
        description="Machine-readable code (e.g. 'greater_than', 'uuid', 'refinement')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the failure"
    )

    @property
    def path(self) -> str:
        """Location rendered for display, e.g. 'templateTransaction.amount'."""
        return ".".join(str(part) for part in self.loc) or self.field


class ValidationResult(BaseModel):
    """
    Outcome of validating one raw input against one contract.

    Success: is_valid=True, data holds the canonical record, issues is empty.
    Failure: is_valid=False, data is None, issues lists every failure in
    evaluation order (field rules first, then cross-field rules).
    """

    model_config = ConfigDict(frozen=True)

    contract: str = Field(
        ...,
        description="Name of the contract that produced this result"
    )
    is_valid: bool
    data: Optional[dict[str, Any]] = None
    issues: list[ValidationIssue] = Field(default_factory=list)

    @model_validator(mode='after')
    def check_consistency(self) -> 'ValidationResult':
        """A result is never partially populated."""
        if self.is_valid:
            if self.issues:
                raise ValueError("A valid result cannot carry issues")
            if self.data is None:
                raise ValueError("A valid result must carry data")
        else:
            if not self.issues:
                raise ValueError("An invalid result must carry at least one issue")
            if self.data is not None:
                raise ValueError("An invalid result cannot carry data")
        return self

    @classmethod
    def success(cls, contract: str, data: dict[str, Any]) -> 'ValidationResult':
        return cls(contract=contract, is_valid=True, data=data)

    @classmethod
    def failure(
        cls,
        contract: str,
        issues: list[ValidationIssue],
    ) -> 'ValidationResult':
        return cls(contract=contract, is_valid=False, issues=issues)

    @property
    def has_errors(self) -> bool:
        return bool(self.issues)

    @property
    def error_count(self) -> int:
        return len(self.issues)

    @property
    def failed_fields(self) -> list[str]:
        """Distinct failing top-level fields, in first-failure order."""
        seen: dict[str, None] = {}
        for issue in self.issues:
            seen.setdefault(issue.field, None)
        return list(seen)

    def errors_for(self, field: str) -> list[str]:
        """All messages reported against one top-level field."""
        return [issue.message for issue in self.issues if issue.field == field]

    def to_error_payload(self) -> dict[str, Any]:
        """
        Render the failure as an HTTP 400 body.

        The shape matches what API clients already consume:
        {"error": {"message", "code", "statusCode", "details": [...]}}
        """
        return {
            "error": {
                "message": "Validation failed",
                "code": "VALIDATION_ERROR",
                "statusCode": 400,
                "details": [
                    {
                        "path": list(issue.loc) or [issue.field],
                        "code": issue.issue_type,
                        "message": issue.message,
                    }
                    for issue in self.issues
                ],
            }
        }
