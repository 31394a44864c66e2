"""Field shapes reused across entity contracts."""

from finplan.validation.fields import FieldDefinition, optional, required
from finplan.validation.primitives import number, text, uuid_text

NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
NOTES_MAX_LENGTH = 500


def name_field(label: str, *, max_length: int = NAME_MAX_LENGTH) -> FieldDefinition:
    """Required display name, 1..max_length characters."""
    return required(
        "name",
        text(
            min_length=1,
            max_length=max_length,
            min_message=f"{label} name cannot be empty",
            max_message=f"{label} name must be {max_length} characters or less",
        ),
        message=f"{label} name is required",
    )


def reference(
    name: str,
    label: str,
    *,
    is_required: bool = False,
    nullable: bool = False,
    blank_as_absent: bool = False,
) -> FieldDefinition:
    """A UUID reference to another record."""
    rule = uuid_text(f"Invalid {label} ID")
    if is_required:
        return required(name, rule, message=f"{label.capitalize()} ID is required")
    return optional(name, rule, nullable=nullable, blank_as_absent=blank_as_absent)


def money(
    name: str,
    label: str,
    *,
    is_required: bool = False,
    positive: bool = False,
    default=None,
) -> FieldDefinition:
    """
    A monetary amount.

    positive=True  -> strictly greater than zero
    positive=False -> zero or more
    """
    if positive:
        rule = number(gt=0, message=f"{label} must be greater than 0",
                      type_message=f"{label} must be a number")
    else:
        rule = number(ge=0, message=f"{label} must be non-negative",
                      type_message=f"{label} must be a number")
    if is_required:
        return required(name, rule, message=f"{label} is required")
    if default is not None:
        return optional(name, rule, default=default)
    return optional(name, rule)


def notes_field(name: str = "notes", *, max_length: int = NOTES_MAX_LENGTH,
                nullable: bool = False, blank_as_absent: bool = False) -> FieldDefinition:
    return optional(
        name,
        text(max_length=max_length,
             max_message=f"{name.capitalize()} must be {max_length} characters or less"),
        nullable=nullable,
        blank_as_absent=blank_as_absent,
    )
