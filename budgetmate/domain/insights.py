"""Insight engine - derives category breakdowns and textual insights from transactions"""

from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from budgetmate.domain.models import (
    CategoryBreakdownEntry,
    Insight,
    InsightThresholds,
    TransactionRecord,
)
from budgetmate.utils.date_utils import trailing_window, utc_now

DEFAULT_THRESHOLDS = InsightThresholds()

TransactionFilter = Callable[[TransactionRecord], bool]


def compute_total_income(transactions: Iterable[TransactionRecord]) -> float:
    return sum(t.amount for t in transactions if t.is_income)


def compute_total_expense(transactions: Iterable[TransactionRecord]) -> float:
    return sum(t.amount for t in transactions if t.is_expense)


def compute_savings_rate(transactions: List[TransactionRecord]) -> float:
    """Percentage of income not consumed by expenses; 0.0 without income"""
    total_income = compute_total_income(transactions)
    if total_income <= 0:
        return 0.0
    # Scale before dividing so band edges such as 20% come out exact
    return (total_income - compute_total_expense(transactions)) * 100 / total_income


def _spending_by_category(transactions: Iterable[TransactionRecord]) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for txn in transactions:
        if txn.is_expense:
            totals[txn.category] = totals.get(txn.category, 0.0) + txn.amount
    return totals


def compute_category_breakdown(
    transactions: Iterable[TransactionRecord],
    window_filter: Optional[TransactionFilter] = None,
) -> List[CategoryBreakdownEntry]:
    """
    Group expenses by category within an optional window.

    Ordering: amount descending, ties broken by category name ascending.
    Returns an empty list when there are no expenses.
    """
    if window_filter is not None:
        transactions = [t for t in transactions if window_filter(t)]

    totals = _spending_by_category(transactions)
    total_expense = sum(totals.values())

    entries = [
        CategoryBreakdownEntry(
            category=category,
            amount=amount,
            percentage_of_total=amount * 100 / total_expense if total_expense > 0 else 0.0,
        )
        for category, amount in totals.items()
    ]
    entries.sort(key=lambda e: (-e.amount, e.category))
    return entries


def compute_daily_average_spend(
    transactions: Iterable[TransactionRecord],
    days: int,
    now: Optional[datetime] = None,
) -> float:
    """Expense total over the trailing `days` days divided by `days`"""
    if days <= 0:
        return 0.0

    window = trailing_window(now or utc_now(), days)
    recent_total = sum(t.amount for t in transactions if t.is_expense and window.includes(t))
    return recent_total / days


def _top_category_insight(transactions: List[TransactionRecord], period_label: str) -> Optional[Insight]:
    breakdown = compute_category_breakdown(transactions)
    if not breakdown:
        return None

    total_expense = sum(e.amount for e in breakdown)
    if total_expense <= 0:
        return None

    top = breakdown[0]
    percentage = top.amount * 100 / total_expense
    return Insight(
        id="highest-category",
        title=f"{top.category} is your top expense",
        description=f"You've spent ${top.amount:.2f} ({percentage:.1f}%) on {top.category} {period_label}.",
        kind="tip",
        priority="high",
        actionable=True,
        category=top.category,
        amount=top.amount,
        percentage=percentage,
    )


def _small_transactions_insight(
    transactions: List[TransactionRecord], thresholds: InsightThresholds
) -> Optional[Insight]:
    small = [t for t in transactions if t.is_expense and t.amount < thresholds.small_transaction_ceiling]
    if len(small) <= thresholds.small_transaction_count_floor:
        return None

    total_small = sum(t.amount for t in small)
    return Insight(
        id="small-transactions",
        title="Many small purchases detected",
        description=(
            f"You made {len(small)} purchases under ${thresholds.small_transaction_ceiling:.0f}, "
            f"totaling ${total_small:.2f}. Consider tracking these micro-expenses."
        ),
        kind="suggestion",
        priority="medium",
        actionable=True,
        amount=total_small,
    )


def _savings_insight(transactions: List[TransactionRecord], thresholds: InsightThresholds) -> Optional[Insight]:
    """
    Savings band rule.

    Rates inside [low_savings_rate, good_savings_rate] produce nothing, and
    neither branch fires without income.
    """
    if compute_total_income(transactions) <= 0:
        return None

    savings_rate = compute_savings_rate(transactions)

    if savings_rate > thresholds.good_savings_rate:
        return Insight(
            id="good-savings",
            title="Excellent savings rate!",
            description=f"You're saving {savings_rate:.1f}% of your income. Keep up the great work!",
            kind="achievement",
            priority="low",
            actionable=False,
            percentage=savings_rate,
        )
    if savings_rate < thresholds.low_savings_rate:
        return Insight(
            id="low-savings",
            title="Consider boosting your savings",
            description=(
                f"Your savings rate is {savings_rate:.1f}%. "
                f"Try to aim for at least {thresholds.good_savings_rate:.0f}% of your income."
            ),
            kind="warning",
            priority="high",
            actionable=True,
            percentage=savings_rate,
        )
    return None


def _daily_spending_insight(
    transactions: List[TransactionRecord], thresholds: InsightThresholds, now: datetime
) -> Optional[Insight]:
    daily_average = compute_daily_average_spend(transactions, thresholds.recent_window_days, now)
    if daily_average <= thresholds.daily_spending_ceiling:
        return None

    return Insight(
        id="high-daily-spending",
        title="High daily spending this week",
        description=f"You're averaging ${daily_average:.2f} per day. Consider setting daily spending limits.",
        kind="suggestion",
        priority="medium",
        actionable=True,
        amount=daily_average,
    )


def generate_insights(
    transactions: Iterable[TransactionRecord],
    now: Optional[datetime] = None,
    thresholds: InsightThresholds = DEFAULT_THRESHOLDS,
    window_filter: Optional[TransactionFilter] = None,
    period_label: str = "this month",
) -> List[Insight]:
    """
    Main entry point: evaluate every insight rule against a transaction snapshot.

    Rules run in a fixed order and each contributes at most one insight:
    1. highest-category
    2. small-transactions
    3. good-savings / low-savings
    4. high-daily-spending (trailing window ending at `now`)

    No sort is applied across rules, so output order follows rule order.

    `window_filter` narrows rules 1-3 to the analysis period. Rule 4 always
    sees the whole snapshot and applies its own trailing window.
    """
    snapshot = list(transactions)
    now = now or utc_now()
    in_period = [t for t in snapshot if window_filter(t)] if window_filter is not None else snapshot

    candidates = [
        _top_category_insight(in_period, period_label),
        _small_transactions_insight(in_period, thresholds),
        _savings_insight(in_period, thresholds),
        _daily_spending_insight(snapshot, thresholds, now),
    ]
    return [insight for insight in candidates if insight is not None]
