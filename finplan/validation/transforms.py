"""
Coercion / Transform Pipeline

Pure functions that turn an accepted value into its canonical
on-the-wire form. Nothing here validates; by the time a transform
runs the value has already passed its rule.
"""

from datetime import date, datetime, timezone
from typing import Any, Union


class _Absent:
    """Marker for 'field not supplied' (distinct from an explicit null)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def is_blank(value: Any) -> bool:
    """Empty strings are the 'no value' sentinel HTML forms send."""
    return isinstance(value, str) and value == ""


def to_iso_text(value: Union[str, date, datetime]) -> str:
    """
    Unify a 'text or native date' value into ISO-8601 text.

    Text passes through untouched (no re-parsing, no reformatting).
    Native values use their own isoformat().
    """
    if isinstance(value, str):
        return value
    return value.isoformat()


def parse_iso_timestamp(text: str) -> datetime:
    """
    Parse ISO-8601 text into an aware datetime for comparisons.

    Date-only text is midnight UTC; naive timestamps are taken as UTC.
    Raises ValueError on anything that isn't ISO-8601.
    """
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def as_timestamp(value: Union[str, date, datetime]) -> datetime:
    """Comparable instant for any canonical date value."""
    return parse_iso_timestamp(to_iso_text(value))
