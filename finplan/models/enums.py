"""
Domain Vocabularies

Every closed set of tags the API accepts lives here, once.
Contracts import these enums rather than spelling out their own lists,
so a concept named in two places can never have two vocabularies.

DESIGN DECISION: str-backed Enums, matched by exact value.
No case-folding, no aliases.
"""

from enum import Enum


# =============================================================================
# TRANSACTIONS
# =============================================================================

class TransactionType(str, Enum):
    """Direction of money movement."""
    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


class RecurrenceType(str, Enum):
    """Legacy per-transaction recurrence marker."""
    NONE = "none"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


# =============================================================================
# ACCOUNTS & CATEGORIES
# =============================================================================

class AccountType(str, Enum):
    CURRENT = "current"
    SAVINGS = "savings"
    ISA = "isa"
    STOCKS_AND_SHARES_ISA = "stocks_and_shares_isa"
    CREDIT = "credit"
    INVESTMENT = "investment"
    LOAN = "loan"
    ASSET = "asset"
    LIABILITY = "liability"


class CategoryType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


# =============================================================================
# ASSETS
# =============================================================================

class AssetType(str, Enum):
    HOUSING = "housing"
    INVESTMENT = "investment"
    VEHICLE = "vehicle"
    BUSINESS = "business"
    PERSONAL_PROPERTY = "personal_property"
    CRYPTO = "crypto"


class LiquidityType(str, Enum):
    """How quickly an asset can be turned into cash."""
    LIQUID = "liquid"
    SEMI_LIQUID = "semi_liquid"
    ILLIQUID = "illiquid"


class ValueSource(str, Enum):
    """Where a recorded asset value came from."""
    MANUAL = "manual"
    AUTOMATIC = "automatic"
    CALCULATED = "calculated"


# =============================================================================
# LIABILITIES
# =============================================================================

class LiabilityType(str, Enum):
    MORTGAGE = "mortgage"
    AUTO_LOAN = "auto_loan"
    STUDENT_LOAN = "student_loan"
    CREDIT_CARD = "credit_card"
    PERSONAL_LOAN = "personal_loan"
    LINE_OF_CREDIT = "line_of_credit"


class InterestType(str, Enum):
    FIXED = "fixed"
    VARIABLE = "variable"


class PaymentFrequency(str, Enum):
    """How often a liability repayment falls due."""
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


# =============================================================================
# GOALS
# =============================================================================

class GoalType(str, Enum):
    SAVINGS = "savings"
    DEBT_PAYOFF = "debt_payoff"
    NET_WORTH = "net_worth"
    PURCHASE = "purchase"
    INVESTMENT = "investment"
    INCOME = "income"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class GoalStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


# =============================================================================
# BUDGETS & RECURRING RULES
# =============================================================================

class BudgetPeriod(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"
    CUSTOM = "custom"


class RecurringFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"
    CUSTOM = "custom"


class UpdateScope(str, Enum):
    """
    Which generated transactions an edit applies to.

    this_only   - just the one occurrence being edited
    all         - every occurrence of the rule
    all_forward - this occurrence and every later one
    """
    THIS_ONLY = "this_only"
    ALL = "all"
    ALL_FORWARD = "all_forward"
