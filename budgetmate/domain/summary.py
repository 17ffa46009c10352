"""Dashboard summary totals"""

from datetime import datetime
from typing import Iterable, Optional

from budgetmate.domain.insights import (
    compute_daily_average_spend,
    compute_savings_rate,
    compute_total_expense,
    compute_total_income,
)
from budgetmate.domain.models import FinancialSummary, TransactionRecord
from budgetmate.utils.date_utils import DateWindow, utc_now


def summarize_transactions(
    transactions: Iterable[TransactionRecord],
    window: Optional[DateWindow] = None,
    now: Optional[datetime] = None,
    daily_average_days: int = 7,
) -> FinancialSummary:
    """
    Income, expense, net and savings rate over an optional window.

    The daily average uses its own trailing window over every record given.
    """
    records = list(transactions)
    snapshot = [t for t in records if window is None or window.includes(t)]
    total_income = compute_total_income(snapshot)
    total_expense = compute_total_expense(snapshot)

    return FinancialSummary(
        total_income=total_income,
        total_expense=total_expense,
        net_amount=sum(t.signed_amount for t in snapshot),
        savings_rate=compute_savings_rate(snapshot),
        transaction_count=len(snapshot),
        expense_count=sum(1 for t in snapshot if t.is_expense),
        daily_average_spend=compute_daily_average_spend(records, daily_average_days, now or utc_now()),
    )
