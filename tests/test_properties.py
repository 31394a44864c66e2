"""
Cross-entity properties.

These hold for every registered entity, so they are written once
against the registry instead of once per entity.
"""

from datetime import date, datetime

import pytest

from finplan.contracts import ALL_CONTRACTS, ENTITY_CONTRACTS, get_contract, get_entity
from finplan.contracts import validate_create, validate_update
from finplan.models.enums import (
    AccountType,
    AssetType,
    BudgetPeriod,
    CategoryType,
    GoalType,
    LiabilityType,
    RecurringFrequency,
    TransactionType,
)


ENTITIES = sorted(ENTITY_CONTRACTS)

TYPE_FIELDS = {
    "transaction": ("type", TransactionType),
    "account": ("type", AccountType),
    "category": ("type", CategoryType),
    "asset": ("type", AssetType),
    "liability": ("type", LiabilityType),
    "goal": ("type", GoalType),
    "budget": ("period", BudgetPeriod),
    "recurring_rule": ("frequency", RecurringFrequency),
}

# (entity, field) pairs that accept a date
DATE_FIELDS = [
    ("transaction", "date"),
    ("transaction", "recurrence_end_date"),
    ("asset", "purchaseDate"),
    ("liability", "openDate"),
    ("goal", "targetDate"),
    ("budget", "startDate"),
    ("recurring_rule", "startDate"),
]


class TestRegistry:
    """Tests for the entity registry."""

    def test_every_entity_registered(self):
        """Test every entity is in the registry."""
        assert ENTITIES == [
            "account", "asset", "budget", "category",
            "goal", "liability", "recurring_rule", "transaction",
        ]

    def test_unknown_entity_raises(self):
        """Test unknown entity names raise KeyError."""
        with pytest.raises(KeyError, match="Unknown entity 'invoice'"):
            get_entity("invoice")
        with pytest.raises(KeyError):
            validate_create("invoice", {})

    def test_contracts_by_name(self):
        """Test contracts can be looked up by name."""
        assert get_contract("liability:allocate_payment").name == "liability:allocate_payment"
        assert "recurring_rule:preview" in ALL_CONTRACTS
        with pytest.raises(KeyError):
            get_contract("liability:delete")


class TestPresenceProperties:
    """Empty input against create and update."""

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_empty_object_passes_update(self, entity):
        """Test an empty update is valid for every entity."""
        result = validate_update(entity, {})
        assert result.is_valid
        assert result.data == {}

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_empty_object_fails_create(self, entity):
        """Test an empty create reports exactly the required fields."""
        result = validate_create(entity, {})
        assert not result.is_valid
        required = set(get_entity(entity).create.required_fields)
        assert set(result.failed_fields) == required
        assert all(issue.kind == "missing" for issue in result.issues)

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_minimal_payload_passes_create(self, entity, entity_inputs):
        """Test each entity's minimal payload is accepted."""
        assert validate_create(entity, entity_inputs[entity]).is_valid


class TestUpdateNeverTightens:
    """Update rules are the create rules, only optional."""

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_same_rule_per_field(self, entity):
        """Test update fields reuse the create rules unchanged."""
        pair = get_entity(entity)
        for field in pair.create.fields:
            updated = pair.update.field(field.name)
            assert updated.rule is field.rule
            assert updated.transform is field.transform
            assert updated.nullable == field.nullable
            assert updated.blank_as_absent == field.blank_as_absent
            assert not updated.required
            assert not updated.has_default

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_same_refinements(self, entity):
        """Test update carries the create refinements."""
        pair = get_entity(entity)
        assert pair.update.refinements == pair.create.refinements

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_minimal_create_payload_passes_update(self, entity, entity_inputs):
        """A full record is also a valid (if large) update."""
        assert validate_update(entity, entity_inputs[entity]).is_valid


class TestEnumExhaustiveness:
    """Closed vocabularies are preserved exactly."""

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_every_member_accepted(self, entity, entity_inputs):
        """Test every vocabulary member is accepted."""
        field, enum_cls = TYPE_FIELDS[entity]
        for member in enum_cls:
            result = validate_create(entity, {**entity_inputs[entity], field: member.value})
            assert result.is_valid, member
            assert result.data[field] == member.value

    @pytest.mark.parametrize("entity", ENTITIES)
    @pytest.mark.parametrize("value", ["", "unknown", "EXPENSE", " monthly"])
    def test_non_members_rejected(self, entity, value, entity_inputs):
        """Test values outside the vocabulary are rejected."""
        field, _ = TYPE_FIELDS[entity]
        result = validate_create(entity, {**entity_inputs[entity], field: value})
        assert result.failed_fields == [field]

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_update_accepts_members_in_isolation(self, entity):
        """Test each member is a valid single-field update."""
        field, enum_cls = TYPE_FIELDS[entity]
        for member in enum_cls:
            assert validate_update(entity, {field: member.value}).is_valid


class TestDateUnification:
    """Native dates and their ISO text produce the same record."""

    @pytest.mark.parametrize("entity,field", DATE_FIELDS)
    def test_native_date_equals_text(self, entity, field, entity_inputs):
        """Test a native date and its ISO text give the same record."""
        base = entity_inputs[entity]
        native = validate_create(entity, {**base, field: date(2020, 1, 1)})
        textual = validate_create(entity, {**base, field: "2020-01-01"})
        assert native.is_valid and textual.is_valid
        assert native.data == textual.data
        assert native.data[field] == "2020-01-01"

    @pytest.mark.parametrize("entity,field", DATE_FIELDS)
    def test_native_datetime_equals_its_isoformat(self, entity, field, entity_inputs):
        """Test a native datetime and its isoformat give the same record."""
        moment = datetime(2020, 1, 1, 8, 15)
        base = entity_inputs[entity]
        native = validate_create(entity, {**base, field: moment})
        textual = validate_create(entity, {**base, field: moment.isoformat()})
        assert native.data == textual.data

    @pytest.mark.parametrize("entity,field", DATE_FIELDS)
    def test_non_iso_text_rejected(self, entity, field, entity_inputs):
        """Test non-ISO date text is rejected."""
        result = validate_create(entity, {**entity_inputs[entity], field: "01/01/2020"})
        assert result.failed_fields == [field]


class TestIdempotence:
    """A canonical record revalidates to itself."""

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_create_is_idempotent(self, entity, entity_inputs):
        """Test a canonical record revalidates to itself on create."""
        first = validate_create(entity, entity_inputs[entity])
        second = validate_create(entity, first.data)
        assert second.is_valid
        assert second.data == first.data

    @pytest.mark.parametrize("entity", ENTITIES)
    def test_update_is_idempotent(self, entity, entity_inputs):
        """Test a canonical record revalidates to itself on update."""
        first = validate_update(entity, entity_inputs[entity])
        second = validate_update(entity, first.data)
        assert second.data == first.data

    def test_idempotent_with_every_optional_field(self, recurring_input):
        """Test revalidation with nested and optional fields set."""
        payload = {
            **recurring_input,
            "interval": 2,
            "endDate": date(2025, 12, 31),
            "isActive": False,
            "templateTransaction": {
                **recurring_input["templateTransaction"],
                "categoryId": None,
                "tags": ["rent"],
                "metadata": {"landlord": "Acme"},
            },
        }
        first = validate_create("recurring_rule", payload)
        second = validate_create("recurring_rule", first.data)
        assert second.data == first.data


class TestBoundaries:
    """Inclusive bounds accept the bound itself and reject one step beyond."""

    @pytest.mark.parametrize("entity,field,low,high", [
        ("asset", "expectedGrowthRate", -100, 1000),
        ("liability", "interestRate", 0, 100),
    ])
    def test_numeric_bounds(self, entity, field, low, high, entity_inputs):
        """Test inclusive numeric bounds and one step beyond."""
        base = entity_inputs[entity]
        assert validate_create(entity, {**base, field: low}).is_valid
        assert validate_create(entity, {**base, field: high}).is_valid
        assert not validate_create(entity, {**base, field: low - 1}).is_valid
        assert not validate_create(entity, {**base, field: high + 1}).is_valid

    @pytest.mark.parametrize("entity", ["transaction", "asset", "liability", "goal", "budget"])
    def test_name_length(self, entity, entity_inputs):
        """Test name lengths of 1 and 200 pass while 0 and 201 fail."""
        base = entity_inputs[entity]
        assert validate_create(entity, {**base, "name": "n"}).is_valid
        assert validate_create(entity, {**base, "name": "n" * 200}).is_valid
        assert not validate_create(entity, {**base, "name": ""}).is_valid
        assert not validate_create(entity, {**base, "name": "n" * 201}).is_valid
