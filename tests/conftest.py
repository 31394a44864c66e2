"""Shared fixtures: known-good payloads for each entity."""

import pytest
import structlog

from finplan.config import get_settings


VALID_UUID = "550e8400-e29b-41d4-a716-446655440000"
OTHER_UUID = "6fa459ea-ee8a-3ca4-894e-db77e160355e"


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Settings are cached; every test starts from the environment it sets up."""
    monkeypatch.delenv("FINPLAN_LOG_REJECTED_VALUES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def transaction_input():
    return {
        "accountId": VALID_UUID,
        "date": "2025-01-15",
        "amount": 100.5,
        "type": "expense",
        "name": "Grocery Shopping",
    }


@pytest.fixture
def account_input():
    return {"name": "Main Current", "type": "current"}


@pytest.fixture
def category_input():
    return {"name": "Groceries", "type": "expense"}


@pytest.fixture
def asset_input():
    return {"name": "Investment Property", "type": "housing", "currentValue": 250000}


@pytest.fixture
def liability_input():
    return {
        "name": "Test Mortgage",
        "type": "mortgage",
        "currentBalance": 200000,
        "interestRate": 3.5,
        "interestType": "fixed",
        "minimumPayment": 898,
        "openDate": "2020-01-01",
        "termEndDate": "2055-01-01",
    }


@pytest.fixture
def goal_input():
    return {"name": "Emergency Fund", "type": "savings", "targetAmount": 5000}


@pytest.fixture
def budget_input():
    return {
        "name": "Monthly Budget",
        "period": "monthly",
        "startDate": "2025-01-01",
        "endDate": "2025-01-31",
    }


@pytest.fixture
def template_transaction():
    return {
        "accountId": VALID_UUID,
        "type": "expense",
        "amount": 1200,
        "name": "Rent",
    }


@pytest.fixture
def recurring_input(template_transaction):
    return {
        "frequency": "monthly",
        "startDate": "2025-01-01",
        "templateTransaction": template_transaction,
    }


@pytest.fixture
def entity_inputs(
    transaction_input,
    account_input,
    category_input,
    asset_input,
    liability_input,
    goal_input,
    budget_input,
    recurring_input,
):
    """Minimal valid create payload per entity name."""
    return {
        "transaction": transaction_input,
        "account": account_input,
        "category": category_input,
        "asset": asset_input,
        "liability": liability_input,
        "goal": goal_input,
        "budget": budget_input,
        "recurring_rule": recurring_input,
    }
