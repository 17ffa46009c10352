"""Spending trends - compares expense totals between two periods"""

from datetime import datetime
from typing import Iterable, List, Optional

from budgetmate.domain.insights import compute_category_breakdown
from budgetmate.domain.models import PeriodComparison, SpendingPattern, TransactionRecord
from budgetmate.utils.date_utils import DateWindow, previous_window, timeframe_window, utc_now


def _change_percentage(current: float, previous: float) -> Optional[float]:
    if previous <= 0:
        return None
    return (current - previous) * 100 / previous


def _expense_total(
    transactions: Iterable[TransactionRecord], window: DateWindow, category: Optional[str] = None
) -> float:
    return sum(
        t.amount
        for t in transactions
        if t.is_expense and window.includes(t) and (category is None or t.category == category)
    )


def compare_periods(
    transactions: List[TransactionRecord],
    current: DateWindow,
    previous: DateWindow,
    category: Optional[str] = None,
) -> PeriodComparison:
    """Expense totals for two windows, optionally restricted to one category"""
    current_amount = _expense_total(transactions, current, category)
    previous_amount = _expense_total(transactions, previous, category)

    return PeriodComparison(
        current_amount=current_amount,
        previous_amount=previous_amount,
        change_amount=current_amount - previous_amount,
        change_percentage=_change_percentage(current_amount, previous_amount),
    )


def compute_week_over_week(
    transactions: List[TransactionRecord], now: Optional[datetime] = None
) -> PeriodComparison:
    """Trailing 7 days against the 7 days before them"""
    now = now or utc_now()
    return compare_periods(transactions, timeframe_window("week", now), previous_window("week", now))


def classify_trend(change_percentage: Optional[float], stable_band: float = 5.0) -> str:
    """
    Map a percentage change to a trend direction.

    No previous spend means the category is new this period, reported as "up".
    """
    if change_percentage is None:
        return "up"
    if change_percentage > stable_band:
        return "up"
    if change_percentage < -stable_band:
        return "down"
    return "stable"


def generate_spending_patterns(
    transactions: List[TransactionRecord],
    current: DateWindow,
    previous: DateWindow,
    limit: int = 6,
    stable_band: float = 5.0,
) -> List[SpendingPattern]:
    """
    Top categories of the current window with their trend against the previous window.

    Ordering follows compute_category_breakdown for the current window.
    """
    breakdown = compute_category_breakdown(transactions, current.includes)
    previous_totals = {e.category: e.amount for e in compute_category_breakdown(transactions, previous.includes)}

    patterns = []
    for entry in breakdown[:limit]:
        previous_amount = previous_totals.get(entry.category, 0.0)
        change = _change_percentage(entry.amount, previous_amount)
        patterns.append(
            SpendingPattern(
                category=entry.category,
                amount=entry.amount,
                percentage=entry.percentage_of_total,
                previous_amount=previous_amount,
                trend=classify_trend(change, stable_band),
                trend_percentage=abs(change) if change is not None else None,
            )
        )
    return patterns
