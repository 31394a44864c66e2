"""
Field Definitions

A field is a name, a rule, a presence policy, an optional default and
an optional transform. Entity contracts are lists of these, built with
the small helper functions at the bottom of this module.

Invariants:
- The transform only ever sees a value the rule accepted.
- An omitted optional field stays omitted unless it declares a default.
- A declared default is part of the canonical result and must pass
  the field's own rule (checked when the contract is built).
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from finplan.validation.primitives import Rule, date_input
from finplan.validation.transforms import ABSENT, to_iso_text


@dataclass(frozen=True)
class FieldDefinition:
    """Immutable description of one field of a record contract."""

    name: str
    rule: Rule
    required: bool = False
    nullable: bool = False
    default: Any = ABSENT
    default_factory: Optional[Callable[[], Any]] = None
    transform: Optional[Callable[[Any], Any]] = None
    blank_as_absent: bool = False
    required_message: str = "Required"

    @property
    def has_default(self) -> bool:
        return self.default is not ABSENT or self.default_factory is not None

    def make_default(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default

    def as_optional(self) -> 'FieldDefinition':
        """
        The same field, for a partial (update) contract.

        Rule, transform, nullability and blank handling are unchanged;
        only presence is relaxed and the default is dropped, since a
        partial update must never write values the caller did not send.
        """
        return replace(self, required=False, default=ABSENT, default_factory=None)


def required(
    name: str,
    rule: Rule,
    *,
    message: str = "Required",
    nullable: bool = False,
    transform: Optional[Callable[[Any], Any]] = None,
) -> FieldDefinition:
    """A field that must be supplied (and, after coercion, not be absent)."""
    return FieldDefinition(
        name=name,
        rule=rule,
        required=True,
        nullable=nullable,
        transform=transform,
        required_message=message,
    )


def optional(
    name: str,
    rule: Rule,
    *,
    default: Any = ABSENT,
    default_factory: Optional[Callable[[], Any]] = None,
    nullable: bool = False,
    blank_as_absent: bool = False,
    transform: Optional[Callable[[Any], Any]] = None,
) -> FieldDefinition:
    """A field that may be omitted."""
    return FieldDefinition(
        name=name,
        rule=rule,
        required=False,
        nullable=nullable,
        default=default,
        default_factory=default_factory,
        transform=transform,
        blank_as_absent=blank_as_absent,
    )


def date_field(
    name: str,
    *,
    is_required: bool = False,
    nullable: bool = False,
    message: Optional[str] = None,
) -> FieldDefinition:
    """
    A 'text or native date' field.

    The canonical value is always ISO-8601 text (see DateInputRule).
    """
    rule = date_input(required_message=message)
    if is_required:
        return required(
            name, rule, message=message or "Required", nullable=nullable, transform=to_iso_text,
        )
    return optional(name, rule, nullable=nullable, transform=to_iso_text)
