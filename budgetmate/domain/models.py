"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_KINDS = (INCOME, EXPENSE)


@dataclass(frozen=True)
class TransactionRecord:
    """Single recorded money movement supplied by the transaction repository"""

    id: str
    amount: float  # non-negative magnitude, sign comes from kind
    kind: str  # "income" or "expense"
    category: str
    occurred_at: datetime
    merchant: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_expense(self) -> bool:
        return self.kind == EXPENSE

    @property
    def is_income(self) -> bool:
        return self.kind == INCOME

    @property
    def signed_amount(self) -> float:
        return self.amount if self.kind == INCOME else -self.amount


@dataclass(frozen=True)
class CategoryBreakdownEntry:
    """Expense total for one category within the evaluated window"""

    category: str
    amount: float
    percentage_of_total: float


@dataclass(frozen=True)
class Insight:
    """Rule-generated observation about spending behaviour"""

    id: str
    title: str
    description: str
    kind: str  # "warning" | "tip" | "achievement" | "suggestion"
    priority: str  # "high" | "medium" | "low"
    actionable: bool
    category: Optional[str] = None
    amount: Optional[float] = None
    percentage: Optional[float] = None


@dataclass(frozen=True)
class InsightThresholds:
    """Trigger constants for the insight rules"""

    small_transaction_ceiling: float = 10.0
    small_transaction_count_floor: int = 10
    good_savings_rate: float = 20.0
    low_savings_rate: float = 10.0
    daily_spending_ceiling: float = 50.0
    recent_window_days: int = 7


@dataclass(frozen=True)
class SpendingPattern:
    """Category spend in the current period compared with the previous one"""

    category: str
    amount: float
    percentage: float
    previous_amount: float
    trend: str  # "up" | "down" | "stable"
    trend_percentage: Optional[float]


@dataclass(frozen=True)
class PeriodComparison:
    """Expense totals for two periods and the change between them"""

    current_amount: float
    previous_amount: float
    change_amount: float
    change_percentage: Optional[float]


@dataclass(frozen=True)
class FinancialSummary:
    """Dashboard totals for a set of transactions"""

    total_income: float
    total_expense: float
    net_amount: float
    savings_rate: float
    transaction_count: int
    expense_count: int
    daily_average_spend: float


@dataclass(frozen=True)
class Budget:
    """Spending allocation for one category over a date range"""

    id: str
    name: str
    category: str
    amount: float
    period: str  # "weekly" | "monthly" | "yearly"
    start_date: date
    end_date: date
    is_active: bool = True


@dataclass(frozen=True)
class BudgetUtilization:
    """How much of a budget has been consumed"""

    budget: Budget
    spent: float
    remaining: float
    percentage_used: float
    status: str  # "good" | "warning" | "over"


@dataclass(frozen=True)
class BudgetSummary:
    """Totals across a set of budgets"""

    total_allocated: float
    total_spent: float
    total_remaining: float
    percentage_used: float
    utilizations: List[BudgetUtilization] = field(default_factory=list)
