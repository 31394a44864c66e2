"""
Tests for primitive rules and transforms.

Rules are exercised directly, without a contract around them.
"""

import math
from datetime import date, datetime, timezone

import pytest

from finplan.models.enums import TransactionType
from finplan.validation.primitives import (
    choice,
    date_input,
    hex_color,
    list_of,
    mapping,
    number,
    text,
    text_list,
    uuid_text,
)
from finplan.validation.transforms import (
    ABSENT,
    is_blank,
    parse_iso_timestamp,
    to_iso_text,
)
from finplan.contracts.goal import Milestone


class TestNumberRule:
    """Tests for bounded numbers."""

    def test_bounds_are_inclusive(self):
        """Both ends of a ge/le range are accepted."""
        rule = number(ge=-100, le=1000)
        assert rule.accepts(-100)
        assert rule.accepts(1000)
        assert not rule.accepts(-101)
        assert not rule.accepts(1001)

    def test_exclusive_lower_bound(self):
        """gt rejects the bound itself."""
        rule = number(gt=0)
        assert not rule.accepts(0)
        assert rule.accepts(0.01)

    def test_numbers_are_not_parsed_from_text(self):
        """'100' is a string, not a number."""
        outcome = number().check("100")
        assert not outcome.ok
        assert outcome.failures[0].kind == "shape"

    def test_non_finite_numbers_rejected(self):
        """NaN and infinity never pass."""
        assert not number().accepts(math.nan)
        assert not number().accepts(math.inf)

    def test_integer_rule_rejects_fractions(self):
        """integer=True refuses 1.5."""
        assert not number(integer=True, ge=0).accepts(1.5)
        assert number(integer=True, ge=0).accepts(3)

    def test_custom_messages_per_bound(self):
        """min/max messages replace the default text."""
        rule = number(ge=0, le=10, min_message="too low", max_message="too high")
        assert rule.check(-1).failures[0].message == "too low"
        assert rule.check(11).failures[0].message == "too high"

    def test_generic_message_covers_all_bounds(self):
        """message applies to any constraint failure."""
        rule = number(ge=0, le=100, message="out of range")
        assert rule.check(-1).failures[0].message == "out of range"
        assert rule.check(101).failures[0].message == "out of range"

    def test_type_message_used_for_shape_errors(self):
        """type_message only applies to wrong-type input."""
        rule = number(ge=0, message="bad value", type_message="must be a number")
        assert rule.check("x").failures[0].message == "must be a number"
        assert rule.check(-5).failures[0].message == "bad value"


class TestTextRules:
    """Tests for strings, patterns and identifiers."""

    def test_length_bounds_inclusive(self):
        """1 and 200 characters both pass; 0 and 201 fail."""
        rule = text(min_length=1, max_length=200)
        assert rule.accepts("a")
        assert rule.accepts("a" * 200)
        assert not rule.accepts("")
        assert not rule.accepts("a" * 201)

    def test_strings_are_not_built_from_numbers(self):
        """A number is not a string."""
        outcome = text().check(42)
        assert not outcome.ok
        assert outcome.failures[0].kind == "shape"

    def test_whitespace_is_preserved(self):
        """No silent trimming."""
        assert text().check("  Rent  ").value == "  Rent  "

    @pytest.mark.parametrize("color", ["#3B82F6", "#ff0000", "#AbCdEf"])
    def test_hex_color_accepts_either_case(self, color):
        """Hex digits are case-insensitive."""
        assert hex_color().accepts(color)

    @pytest.mark.parametrize("color", ["3B82F6", "#3B82F", "#3B82F6A", "#GGGGGG", "red"])
    def test_hex_color_rejects_malformed(self, color):
        """Exactly '#' plus six hex digits."""
        outcome = hex_color().check(color)
        assert not outcome.ok
        assert outcome.failures[0].message == "Invalid color format"

    def test_uuid_canonical_form(self):
        """Hyphenated 8-4-4-4-12 text passes through unchanged."""
        value = "550E8400-e29b-41d4-a716-446655440000"
        assert uuid_text().check(value).value == value

    @pytest.mark.parametrize("value", [
        "not-a-uuid",
        "550e8400e29b41d4a716446655440000",
        "{550e8400-e29b-41d4-a716-446655440000}",
        "",
    ])
    def test_uuid_rejects_non_canonical(self, value):
        """No braces, no missing hyphens."""
        outcome = uuid_text("Invalid account ID").check(value)
        assert not outcome.ok
        assert outcome.failures[0].message == "Invalid account ID"


class TestChoiceRule:
    """Tests for closed enumerations."""

    def test_every_member_accepted(self):
        """Each declared tag validates on its own."""
        rule = choice(TransactionType)
        for member in TransactionType:
            assert rule.check(member.value).value == member.value

    def test_exact_membership_only(self):
        """No case-folding and no partial matches."""
        rule = choice(TransactionType)
        assert not rule.accepts("Income")
        assert not rule.accepts("inc")
        assert not rule.accepts("refund")

    def test_output_is_plain_tag(self):
        """Enum members are emitted as their string value."""
        assert choice(TransactionType).check(TransactionType.TRANSFER).value == "transfer"

    @pytest.mark.parametrize("value", [b"income", 1, None, ["income"], 1.0])
    def test_non_strings_are_shape_errors(self, value):
        """Bytes, numbers and lists are never matched against the tags."""
        outcome = choice(TransactionType).check(value)
        assert not outcome.ok
        assert outcome.failures[0].kind == "shape"

    def test_choice_message_only_for_unknown_tags(self):
        """A custom message applies to wrong values, not wrong types."""
        rule = choice(TransactionType, "Pick a transaction type")
        assert rule.check("refund").failures[0].message == "Pick a transaction type"
        assert rule.check(b"refund").failures[0].kind == "shape"


class TestCollectionRules:
    """Tests for lists and free-form mappings."""

    def test_text_list(self):
        """Lists of strings only."""
        assert text_list().accepts(["food", "weekly"])
        assert not text_list().accepts(["food", 3])
        assert not text_list().accepts("food")

    def test_mapping_accepts_any_values(self):
        """Metadata objects are free-form."""
        outcome = mapping().check({"store": "Tesco", "visits": 3})
        assert outcome.ok
        assert outcome.value == {"store": "Tesco", "visits": 3}

    def test_mapping_rejects_lists(self):
        """Test a list is not a mapping."""
        assert not mapping().accepts(["a"])

    def test_list_of_models_applies_defaults(self):
        """Nested objects come back as plain dicts with defaults filled in."""
        outcome = list_of(Milestone).check([{"percentage": 50, "label": "Halfway"}])
        assert outcome.ok
        assert outcome.value == [{"percentage": 50, "label": "Halfway", "reached": False}]

    def test_list_of_models_rejects_tuples(self):
        """Lists of models are as strict about the container as text lists."""
        outcome = list_of(Milestone).check(({"percentage": 50, "label": "Halfway"},))
        assert not outcome.ok
        assert outcome.failures[0].issue_type == "list_type"
        assert not text_list().accepts(("food",))

    def test_list_of_models_reports_item_location(self):
        """Failures point at the index and key inside the list."""
        outcome = list_of(Milestone).check([
            {"percentage": 10, "label": "Start"},
            {"percentage": 150, "label": "Too far"},
        ])
        assert not outcome.ok
        assert outcome.failures[0].loc == (1, "percentage")


class TestDateInputRule:
    """Tests for the text-or-native date rule."""

    def test_accepts_iso_text_unchanged(self):
        """Text passes through exactly as supplied."""
        value = "2025-01-15T10:30:00.000Z"
        assert date_input().check(value).value == value

    def test_accepts_native_values(self):
        """date and datetime are both accepted."""
        assert date_input().accepts(date(2025, 1, 15))
        assert date_input().accepts(datetime(2025, 1, 15, 10, 30))

    def test_rejects_non_iso_text(self):
        """Text must actually be an ISO-8601 date."""
        outcome = date_input().check("15/01/2025")
        assert not outcome.ok
        assert outcome.failures[0].issue_type == "date_format"

    def test_rejects_empty_text(self):
        """Test empty date text uses the required message."""
        outcome = date_input(required_message="Start date is required").check("")
        assert not outcome.ok
        assert outcome.failures[0].message == "Start date is required"

    def test_rejects_other_types(self):
        """Numbers (e.g. epoch millis) are not dates."""
        outcome = date_input().check(1736899200000)
        assert not outcome.ok
        assert outcome.failures[0].kind == "shape"


class TestTransforms:
    """Tests for the pure normalization helpers."""

    def test_to_iso_text_passes_strings_through(self):
        """No re-parsing, no reformatting."""
        assert to_iso_text("2025-01-15") == "2025-01-15"
        assert to_iso_text("2025-01-15T00:00:00Z") == "2025-01-15T00:00:00Z"

    def test_to_iso_text_native_values(self):
        """Native values use their own isoformat()."""
        assert to_iso_text(date(2025, 1, 15)) == "2025-01-15"
        assert to_iso_text(datetime(2025, 1, 15, 10, 30)) == "2025-01-15T10:30:00"
        aware = datetime(2025, 1, 15, tzinfo=timezone.utc)
        assert to_iso_text(aware) == "2025-01-15T00:00:00+00:00"

    def test_parse_treats_naive_as_utc(self):
        """Date-only and naive text compare as UTC instants."""
        assert parse_iso_timestamp("2025-01-15") == parse_iso_timestamp("2025-01-15T00:00:00Z")

    def test_is_blank(self):
        """Test only the empty string is blank."""
        assert is_blank("")
        assert not is_blank(" ")
        assert not is_blank(None)

    def test_absent_is_falsy_singleton(self):
        """Test the absent marker is falsy and readable."""
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"
