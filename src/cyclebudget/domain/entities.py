"""Domain model entities for cyclebudget.

These are pure data classes representing business concepts, independent of
how the document store lays out its records. Store documents are converted
into these shapes once, by the mappers in ``cyclebudget.database.mappers``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class BaseFrequency(str, Enum):
    """Frequency a category's raw limit is expressed at."""

    DAILY = "daily"
    MONTHLY = "monthly"
    BIMONTHLY = "bimonthly"

    @property
    def display_name(self) -> str:
        return {
            BaseFrequency.DAILY: "Daily",
            BaseFrequency.MONTHLY: "Monthly",
            BaseFrequency.BIMONTHLY: "Bi-Monthly",
        }[self]

    @classmethod
    def parse(cls, value: "BaseFrequency | str | None") -> "BaseFrequency":
        """Parse a frequency code, falling back to monthly for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.MONTHLY


class TransactionType(str, Enum):
    """Ledger entry type.

    ``BUDGET`` marks an income/funding entry, not a spending limit.
    """

    EXPENSE = "expense"
    BUDGET = "budget"


class BudgetStatus(str, Enum):
    """Presentation band for a category's spend percentage."""

    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class Currency:
    """Supported display currency."""

    code: str
    symbol: str
    name: str


@dataclass(frozen=True)
class Category:
    """Spending category with a limit expressed at a base frequency."""

    id: str
    name: str
    base_limit: Decimal
    base_frequency: BaseFrequency = BaseFrequency.MONTHLY
    color: Optional[str] = None
    icon: Optional[str] = None


@dataclass(frozen=True)
class Transaction:
    """Ledger entry. Immutable once created."""

    id: str
    amount: Decimal
    type: TransactionType
    category_id: str
    source: str
    timestamp: datetime

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE


@dataclass(frozen=True)
class Settings:
    """Per-user settings singleton."""

    currency_code: str = "USD"
    cycle_months: int = 1


@dataclass(frozen=True)
class CycleWindow:
    """A closed historical cycle window."""

    label: str
    start_date: datetime
    end_date: datetime
    is_current: bool = False


@dataclass(frozen=True)
class CategoryRow:
    """Per-category spend against its cycle limit."""

    category_id: str
    name: str
    spent: Decimal
    cycle_limit: Decimal
    base_limit: Decimal
    base_frequency: BaseFrequency
    percentage: Decimal
    color: str
    icon: Optional[str] = None

    @property
    def is_over_limit(self) -> bool:
        return self.percentage > 100

    @property
    def overspend(self) -> Decimal:
        """Amount spent beyond the cycle limit (zero when within it)."""
        if not self.is_over_limit:
            return Decimal("0")
        return self.spent - self.cycle_limit

    @property
    def status(self) -> BudgetStatus:
        if self.percentage > 100:
            return BudgetStatus.CRITICAL
        if self.percentage > 75:
            return BudgetStatus.WARNING
        return BudgetStatus.NORMAL


@dataclass(frozen=True)
class Summary:
    """Aggregate of limits vs. spend for the current cycle.

    ``remaining`` is measured against category limits, while
    ``is_over_actual_income`` compares expenses with recorded income. Both
    figures are reported side by side.
    """

    cycle_start: datetime
    cycle_months: int
    total_budget_limit: Decimal
    total_income: Decimal
    total_expenses: Decimal
    remaining: Decimal
    is_over_actual_income: bool
    expense_by_source: dict[str, Decimal] = field(default_factory=dict)
    expense_by_category: dict[str, Decimal] = field(default_factory=dict)
    category_rows: tuple[CategoryRow, ...] = ()


@dataclass(frozen=True)
class TrendPoint:
    """Aggregated expenses for one cycle in the historical comparison."""

    label: str
    total_expenses: Decimal
    is_current: bool
