"""Budget utilization - how much of each allocation has been spent"""

from typing import Iterable, List, Optional

from budgetmate.domain.models import Budget, BudgetSummary, BudgetUtilization, TransactionRecord


def budget_status(percentage_used: float, warning_percentage: float = 80.0) -> str:
    """
    Status bands:
    - >= 100%: over
    - >= warning_percentage: warning
    - otherwise: good
    """
    if percentage_used >= 100:
        return "over"
    if percentage_used >= warning_percentage:
        return "warning"
    return "good"


def compute_spent(budget: Budget, transactions: Iterable[TransactionRecord]) -> float:
    """Expenses in the budget's category dated within [start_date, end_date]"""
    return sum(
        t.amount
        for t in transactions
        if t.is_expense
        and t.category == budget.category
        and budget.start_date <= t.occurred_at.date() <= budget.end_date
    )


def compute_budget_utilization(
    budget: Budget,
    transactions: Iterable[TransactionRecord],
    warning_percentage: float = 80.0,
) -> BudgetUtilization:
    spent = compute_spent(budget, transactions)

    if budget.amount > 0:
        percentage_used = spent * 100 / budget.amount
    else:
        # Zero allocation: any spend is over budget
        percentage_used = 100.0 if spent > 0 else 0.0

    return BudgetUtilization(
        budget=budget,
        spent=spent,
        remaining=budget.amount - spent,
        percentage_used=percentage_used,
        status=budget_status(percentage_used, warning_percentage),
    )


def summarize_budgets(
    budgets: Iterable[Budget],
    transactions: Iterable[TransactionRecord],
    period: Optional[str] = None,
    warning_percentage: float = 80.0,
) -> BudgetSummary:
    """Utilization of every active budget (optionally one period) plus totals"""
    snapshot = list(transactions)
    selected: List[Budget] = [
        b for b in budgets if b.is_active and (period is None or b.period == period)
    ]
    utilizations = [compute_budget_utilization(b, snapshot, warning_percentage) for b in selected]

    total_allocated = sum(b.amount for b in selected)
    total_spent = sum(u.spent for u in utilizations)

    return BudgetSummary(
        total_allocated=total_allocated,
        total_spent=total_spent,
        total_remaining=total_allocated - total_spent,
        percentage_used=total_spent * 100 / total_allocated if total_allocated > 0 else 0.0,
        utilizations=utilizations,
    )
