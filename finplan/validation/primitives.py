"""
Primitive Rules

Atomic checks over a single value. Each rule answers one question:
does this value have the right shape, and is it inside its bounds?

DESIGN DECISION: Shape and bound checks are delegated to Pydantic
TypeAdapters in strict mode. Strict means numbers are never parsed
out of strings, booleans are never parsed out of "true", and strings
are never built from numbers. Input from API clients is JSON-typed
already; anything else is a client bug worth reporting.

Bounds are inclusive unless the builder argument says otherwise
(`gt`/`lt` are exclusive, `ge`/`le` inclusive).
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, Optional, Protocol, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from finplan.validation.transforms import parse_iso_timestamp


Loc = tuple[Union[str, int], ...]

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-"
    r"[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

# Pydantic error types grouped by the message slot that can override them
_MIN_ERRORS = {"greater_than", "greater_than_equal", "string_too_short", "too_short"}
_MAX_ERRORS = {"less_than", "less_than_equal", "string_too_long", "too_long"}
_PATTERN_ERRORS = {"string_pattern_mismatch"}
_CHOICE_ERRORS = {"enum", "literal_error"}
_SHAPE_ERRORS = {
    "finite_number",
    "int_from_float",
    "int_parsing",
    "float_parsing",
    "bool_parsing",
}


@dataclass(frozen=True)
class Failure:
    """One rule failure, located relative to the value being checked."""
    loc: Loc
    kind: str
    issue_type: str
    message: str


@dataclass(frozen=True)
class RuleOutcome:
    """Accepted value in canonical form, or the reasons it was refused."""
    value: Any = None
    failures: tuple[Failure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures


def classify(issue_type: str) -> str:
    """Map a Pydantic error type onto missing / shape / constraint."""
    if issue_type == "missing":
        return "missing"
    if issue_type.endswith("_type") or issue_type in _SHAPE_ERRORS:
        return "shape"
    return "constraint"


class Rule(ABC):
    """Base class for every primitive rule."""

    @abstractmethod
    def check(self, value: Any) -> RuleOutcome:
        """Validate `value` and return it in canonical form."""

    def accepts(self, value: Any) -> bool:
        return self.check(value).ok


class AdapterRule(Rule):
    """
    A rule backed by a Pydantic TypeAdapter.

    Pydantic's own messages are used unless the builder supplied a
    message for that failure slot:
        min / max / pattern / choice - the matching constraint family
        constraint - any other value failure
        type - wrong primitive type
    """

    def __init__(
        self,
        annotation: Any,
        *,
        messages: Optional[dict[str, Optional[str]]] = None,
        dump_mode: str = "json",
    ):
        self._adapter = TypeAdapter(annotation)
        self._messages = {k: v for k, v in (messages or {}).items() if v}
        self._dump_mode = dump_mode

    def _message_for(self, issue_type: str, default: str) -> str:
        kind = classify(issue_type)
        if kind == "shape":
            return self._messages.get("type", default)
        if kind == "missing":
            return default
        if issue_type in _MIN_ERRORS:
            slot = "min"
        elif issue_type in _MAX_ERRORS:
            slot = "max"
        elif issue_type in _PATTERN_ERRORS:
            slot = "pattern"
        elif issue_type in _CHOICE_ERRORS:
            slot = "choice"
        else:
            slot = "constraint"
        return self._messages.get(slot) or self._messages.get("constraint", default)

    def check(self, value: Any) -> RuleOutcome:
        try:
            parsed = self._adapter.validate_python(value)
        except ValidationError as exc:
            return RuleOutcome(failures=tuple(
                Failure(
                    loc=tuple(err["loc"]),
                    kind=classify(err["type"]),
                    issue_type=err["type"],
                    message=self._message_for(err["type"], err["msg"]),
                )
                for err in exc.errors()
            ))
        return RuleOutcome(value=self._adapter.dump_python(parsed, mode=self._dump_mode))


class DateInputRule(Rule):
    """
    Accepts either ISO-8601 text or a native date/datetime.

    Values are returned as supplied; text is only parsed to prove it is
    a real ISO date. date_field() pairs this rule with to_iso_text.
    """

    def __init__(self, message: Optional[str] = None, required_message: Optional[str] = None):
        self._message = message or "Invalid date, expected an ISO-8601 date or timestamp"
        self._empty_message = required_message or "Date cannot be empty"

    def check(self, value: Any) -> RuleOutcome:
        if isinstance(value, (datetime, date)):
            return RuleOutcome(value=value)
        if not isinstance(value, str):
            return RuleOutcome(failures=(Failure(
                loc=(),
                kind="shape",
                issue_type="date_type",
                message="Expected a date or an ISO-8601 date string",
            ),))
        if value == "":
            return RuleOutcome(failures=(Failure(
                loc=(),
                kind="constraint",
                issue_type="string_too_short",
                message=self._empty_message,
            ),))
        try:
            parse_iso_timestamp(value)
        except ValueError:
            return RuleOutcome(failures=(Failure(
                loc=(),
                kind="constraint",
                issue_type="date_format",
                message=self._message,
            ),))
        return RuleOutcome(value=value)


class ChoiceRule(Rule):
    """
    Membership in a str Enum.

    The value must be a string (or a member) before membership is
    checked, so bytes or numbers that Pydantic would coerce are shape
    errors rather than matches.
    """

    def __init__(self, enum_cls: type[Enum], message: Optional[str] = None):
        self._enum_cls = enum_cls
        self._shape = AdapterRule(Annotated[str, Field(strict=True)])
        self._members = AdapterRule(enum_cls, messages={"choice": message})

    def check(self, value: Any) -> RuleOutcome:
        if not isinstance(value, self._enum_cls):
            outcome = self._shape.check(value)
            if not outcome.ok:
                return outcome
        return self._members.check(value)


class _Validates(Protocol):
    def validate(self, raw: Any) -> Any: ...


class NestedRule(Rule):
    """Validates a sub-object against another contract."""

    def __init__(self, contract: _Validates):
        self.contract = contract

    def check(self, value: Any) -> RuleOutcome:
        result = self.contract.validate(value)
        if result.is_valid:
            return RuleOutcome(value=result.data)
        return RuleOutcome(failures=tuple(
            Failure(
                loc=issue.loc,
                kind=issue.kind,
                issue_type=issue.issue_type,
                message=issue.message,
            )
            for issue in result.issues
        ))


# =============================================================================
# BUILDERS
# =============================================================================

def number(
    *,
    ge: Optional[float] = None,
    gt: Optional[float] = None,
    le: Optional[float] = None,
    lt: Optional[float] = None,
    integer: bool = False,
    message: Optional[str] = None,
    min_message: Optional[str] = None,
    max_message: Optional[str] = None,
    type_message: Optional[str] = None,
) -> Rule:
    """A finite number, optionally bounded and/or integral."""
    if integer:
        annotation = Annotated[int, Field(strict=True, ge=ge, gt=gt, le=le, lt=lt)]
    else:
        annotation = Annotated[
            float,
            Field(strict=True, ge=ge, gt=gt, le=le, lt=lt, allow_inf_nan=False),
        ]
    return AdapterRule(annotation, messages={
        "constraint": message,
        "min": min_message,
        "max": max_message,
        "type": type_message,
    })


def text(
    *,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    pattern: Optional[str] = None,
    message: Optional[str] = None,
    min_message: Optional[str] = None,
    max_message: Optional[str] = None,
) -> Rule:
    """A string with inclusive length bounds and an optional full-match pattern."""
    if pattern is not None:
        re.compile(pattern)
    annotation = Annotated[
        str,
        Field(strict=True, min_length=min_length, max_length=max_length, pattern=pattern),
    ]
    return AdapterRule(annotation, messages={
        "constraint": message,
        "pattern": message,
        "min": min_message,
        "max": max_message,
    })


def hex_color(message: str = "Invalid color format") -> Rule:
    """'#' followed by exactly six hex digits, either case."""
    return text(pattern=HEX_COLOR_PATTERN, message=message)


def uuid_text(message: str = "Invalid ID") -> Rule:
    """Canonical 8-4-4-4-12 UUID text. Returned as supplied."""
    return text(pattern=UUID_PATTERN, message=message)


def choice(enum_cls: type[Enum], message: Optional[str] = None) -> Rule:
    """Exact membership in a closed vocabulary. Output is the plain tag."""
    return ChoiceRule(enum_cls, message=message)


def boolean() -> Rule:
    return AdapterRule(Annotated[bool, Field(strict=True)])


def text_list() -> Rule:
    return AdapterRule(Annotated[list[Annotated[str, Field(strict=True)]], Field(strict=True)])


def mapping() -> Rule:
    """Free-form key/value object (keys must be strings)."""
    return AdapterRule(
        Annotated[dict[str, Any], Field(strict=True)],
        dump_mode="python",
    )


def list_of(model: type[BaseModel]) -> Rule:
    """A list of small fixed-shape objects described by a Pydantic model."""
    return AdapterRule(Annotated[list[model], Field(strict=True)])


def date_input(
    message: Optional[str] = None,
    required_message: Optional[str] = None,
) -> Rule:
    return DateInputRule(message=message, required_message=required_message)


def nested(contract: _Validates) -> Rule:
    return NestedRule(contract)
