"""
Object Composer

A RecordContract is an ordered set of FieldDefinitions plus an ordered
list of Refinements. Validation runs in three stages and collects every
failure along the way:

STAGE 1 - PRESENCE:
- Blank strings collapse to absent where the field says so
- Absent fields take their declared default
- Required fields that are still absent are reported
- Nulls are only kept for nullable fields

STAGE 2 - FIELDS:
- Each supplied field runs its rule, then its transform
- A failing field never stops its siblings from being checked

STAGE 3 - REFINEMENTS:
- Only if stages 1 and 2 were clean
- Every refinement runs; all failures are reported

Unknown input keys are dropped from the result, not rejected, unless
the contract is declared closed.

Contracts are immutable once built and safe to share across threads:
every call allocates its own collector and candidate.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

import structlog

from finplan.models.result import ValidationResult
from finplan.validation.errors import (
    ContractDefinitionError,
    ErrorCollector,
    ValidationFailedError,
)
from finplan.validation.fields import FieldDefinition
from finplan.validation.refinements import Refinement, run_refinements
from finplan.validation.transforms import ABSENT, is_blank


logger = structlog.get_logger(__name__)


class RecordContract:
    """The field-and-refinement definition for one create or update operation."""

    def __init__(
        self,
        name: str,
        fields: Iterable[FieldDefinition],
        refinements: Iterable[Refinement] = (),
        *,
        allow_unknown: bool = True,
    ):
        self.name = name
        self._fields = tuple(fields)
        self._refinements = tuple(refinements)
        self.allow_unknown = allow_unknown
        check_contract(self)
        self._by_name = {field.name: field for field in self._fields}

    def __repr__(self) -> str:
        return f"RecordContract({self.name!r}, fields={list(self.field_names)})"

    @property
    def fields(self) -> tuple[FieldDefinition, ...]:
        return self._fields

    @property
    def refinements(self) -> tuple[Refinement, ...]:
        return self._refinements

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(field.name for field in self._fields)

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(field.name for field in self._fields if field.required)

    def field(self, name: str) -> FieldDefinition:
        return self._by_name[name]

    def validate(self, raw: Any) -> ValidationResult:
        """
        Validate untrusted input.

        Returns a ValidationResult; never raises for bad input.
        """
        collector = ErrorCollector()

        if not isinstance(raw, Mapping):
            collector.add(
                (),
                f"Expected an object, received {type(raw).__name__}",
                kind="shape",
                issue_type="object_type",
            )
            return ValidationResult.failure(self.name, collector.issues)

        # Stage 1: presence
        supplied: list[tuple[FieldDefinition, Any]] = []
        candidate: dict[str, Any] = {}

        for field in self._fields:
            value = raw.get(field.name, ABSENT)
            if field.blank_as_absent and is_blank(value):
                value = ABSENT

            if value is ABSENT:
                if field.has_default:
                    supplied.append((field, field.make_default()))
                elif field.required:
                    collector.add(
                        (field.name,),
                        field.required_message,
                        kind="missing",
                        issue_type="missing",
                    )
                continue

            if value is None:
                if field.nullable:
                    candidate[field.name] = None
                else:
                    collector.add(
                        (field.name,),
                        "Expected a value, received null",
                        kind="shape",
                        issue_type="null_type",
                    )
                continue

            supplied.append((field, value))

        if not self.allow_unknown:
            for key in raw:
                if key not in self._by_name:
                    collector.add(
                        (str(key),),
                        f"Unrecognized field '{key}'",
                        kind="shape",
                        issue_type="unrecognized_key",
                    )

        # Stage 2: per-field rule + transform
        for field, value in supplied:
            outcome = field.rule.check(value)
            if not outcome.ok:
                for failure in outcome.failures:
                    collector.add(
                        (field.name,) + failure.loc,
                        failure.message,
                        kind=failure.kind,
                        issue_type=failure.issue_type,
                    )
                continue
            canonical = outcome.value
            if field.transform is not None:
                canonical = field.transform(canonical)
            candidate[field.name] = canonical

        if collector.failed:
            return ValidationResult.failure(self.name, collector.issues)

        # Stage 3: cross-field refinements
        run_refinements(self._refinements, candidate, collector)
        if collector.failed:
            return ValidationResult.failure(self.name, collector.issues)

        ordered = {name: candidate[name] for name in self.field_names if name in candidate}
        return ValidationResult.success(self.name, ordered)

    def parse(self, raw: Any) -> dict[str, Any]:
        """Validate and return the canonical record, or raise ValidationFailedError."""
        result = self.validate(raw)
        if not result.is_valid:
            raise ValidationFailedError(result)
        return result.data

    def partial(
        self,
        name: Optional[str] = None,
        *,
        extra_fields: Iterable[FieldDefinition] = (),
    ) -> 'RecordContract':
        return derive_partial(self, name=name, extra_fields=extra_fields)

    def extend(
        self,
        name: str,
        fields: Iterable[FieldDefinition] = (),
        refinements: Iterable[Refinement] = (),
    ) -> 'RecordContract':
        """A new contract with extra fields/refinements appended."""
        return RecordContract(
            name,
            self._fields + tuple(fields),
            self._refinements + tuple(refinements),
            allow_unknown=self.allow_unknown,
        )


def derive_partial(
    contract: RecordContract,
    *,
    name: Optional[str] = None,
    extra_fields: Iterable[FieldDefinition] = (),
) -> RecordContract:
    """
    Derive the update contract from a create contract.

    Every field becomes optional and loses its default; its rule,
    transform, nullability and blank handling are carried over
    unchanged, so anything create rejects is rejected here too when
    supplied. Refinements carry over and simply skip when the fields
    they read are not part of the update.

    `extra_fields` are update-only fields (e.g. isActive) and are
    forced optional as well.
    """
    fields = [field.as_optional() for field in contract.fields]
    fields.extend(field.as_optional() for field in extra_fields)
    return RecordContract(
        name or f"{contract.name}:partial",
        fields,
        contract.refinements,
        allow_unknown=contract.allow_unknown,
    )


def check_contract(contract: RecordContract) -> None:
    """
    Startup self-checks. A failure here is a programming defect.

    - field names are non-empty and unique
    - required fields do not declare defaults
    - declared defaults pass their own rule
    - refinements only reference declared fields
    """
    problems: list[str] = []
    seen: set[str] = set()

    for field in contract.fields:
        if not field.name:
            problems.append("field with empty name")
        if field.name in seen:
            problems.append(f"duplicate field '{field.name}'")
        seen.add(field.name)

        if field.required and field.has_default:
            problems.append(f"required field '{field.name}' declares a default")
        if field.has_default and not field.rule.accepts(field.make_default()):
            problems.append(
                f"default for '{field.name}' ({field.make_default()!r}) fails its own rule"
            )

    for refinement in contract.refinements:
        if refinement.path not in seen:
            problems.append(
                f"refinement '{refinement.name}' reports on unknown field '{refinement.path}'"
            )
        for name in refinement.fields:
            if name not in seen:
                problems.append(
                    f"refinement '{refinement.name}' reads unknown field '{name}'"
                )

    if problems:
        logger.error(
            "contract_self_check_failed",
            contract=contract.name,
            problems=problems,
        )
        raise ContractDefinitionError(
            f"Contract '{contract.name}' is malformed: " + "; ".join(problems)
        )


@dataclass(frozen=True)
class EntityContracts:
    """The create/update pair for one entity."""

    entity: str
    create: RecordContract
    update: RecordContract

    def validate_create(self, raw: Any) -> ValidationResult:
        return self.create.validate(raw)

    def validate_update(self, raw: Any) -> ValidationResult:
        return self.update.validate(raw)
