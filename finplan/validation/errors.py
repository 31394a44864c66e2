"""
Errors and Error Collection

Two very different kinds of failure exist here:

1. USER FAILURES - the input broke a rule. These are data.
   They are accumulated by ErrorCollector and returned inside a
   ValidationResult. Nothing is raised.

2. ENGINE DEFECTS - a contract was declared wrongly (duplicate field,
   refinement pointing at a field that doesn't exist, a default that
   fails its own rule). These raise ContractDefinitionError at import
   time so a broken contract can never serve a request.
"""

from typing import Union

from finplan.models.result import ValidationIssue, ValidationResult


Loc = tuple[Union[str, int], ...]


class FinplanError(Exception):
    """Base class for all errors raised by this package."""


class ContractDefinitionError(FinplanError):
    """A contract is malformed. This is a programming defect."""


class ValidationFailedError(FinplanError):
    """
    Raised by the `parse` helpers when input is rejected.

    Carries the full ValidationResult so callers can render every issue.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        fields = ", ".join(result.failed_fields) or "<input>"
        super().__init__(
            f"Validation failed for {result.contract}: "
            f"{result.error_count} issue(s) on {fields}"
        )

    @property
    def issues(self) -> list[ValidationIssue]:
        return self.result.issues

    def to_error_payload(self) -> dict:
        return self.result.to_error_payload()


class ErrorCollector:
    """
    Ordered, non-deduplicating accumulator of (location, message) failures.

    Two rules failing on the same field keep both messages, in the
    order the rules ran.
    """

    def __init__(self) -> None:
        self._issues: list[ValidationIssue] = []

    def add(
        self,
        loc: Loc,
        message: str,
        *,
        kind: str,
        issue_type: str,
    ) -> None:
        self._issues.append(ValidationIssue(
            field=str(loc[0]) if loc else "",
            loc=loc,
            kind=kind,
            issue_type=issue_type,
            message=message,
        ))

    @property
    def failed(self) -> bool:
        return bool(self._issues)

    @property
    def issues(self) -> list[ValidationIssue]:
        return list(self._issues)

    def __len__(self) -> int:
        return len(self._issues)
