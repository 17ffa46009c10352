"""Unit tests for budget utilization"""

import pytest
from datetime import date
from budgetmate.domain.budgets import budget_status, compute_budget_utilization, summarize_budgets
from budgetmate.domain.models import Budget


def _budget(amount: float, category: str = "Food & Dining", period: str = "monthly", **kwargs) -> Budget:
    defaults = dict(
        id=f"budget_{category}",
        name=f"{category} budget",
        category=category,
        amount=amount,
        period=period,
        start_date=date(2025, 7, 1),
        end_date=date(2025, 7, 31),
    )
    defaults.update(kwargs)
    return Budget(**defaults)


@pytest.mark.parametrize(
    "percentage,expected",
    [(0.0, "good"), (79.9, "good"), (80.0, "warning"), (99.9, "warning"), (100.0, "over"), (140.0, "over")],
)
def test_budget_status_bands(percentage, expected):
    assert budget_status(percentage) == expected


def test_utilization_counts_matching_expenses_in_range(make_transaction, now):
    transactions = [
        make_transaction(200, category="Food & Dining", days_ago=3),
        make_transaction(150, category="Food & Dining", days_ago=10),
        make_transaction(75, category="Transportation", days_ago=3),  # other category
        make_transaction(500, category="Food & Dining", days_ago=40),  # before start_date
        make_transaction(300, kind="income", category="Food & Dining", days_ago=3),
    ]

    utilization = compute_budget_utilization(_budget(500), transactions)

    assert utilization.spent == 350
    assert utilization.remaining == 150
    assert utilization.percentage_used == pytest.approx(70.0)
    assert utilization.status == "good"


def test_utilization_over_budget(make_transaction):
    utilization = compute_budget_utilization(_budget(100), [make_transaction(130, days_ago=5)])

    assert utilization.status == "over"
    assert utilization.remaining == -30


def test_utilization_zero_allocation(make_transaction):
    assert compute_budget_utilization(_budget(0), []).status == "good"
    assert compute_budget_utilization(_budget(0), [make_transaction(1, days_ago=5)]).status == "over"


def test_summarize_budgets_filters_period_and_inactive(make_transaction):
    budgets = [
        _budget(400, category="Food & Dining"),
        _budget(200, category="Transportation"),
        _budget(50, category="Entertainment", period="weekly"),
        _budget(1000, category="Shopping", is_active=False),
    ]
    transactions = [
        make_transaction(340, category="Food & Dining", days_ago=5),
        make_transaction(60, category="Transportation", days_ago=5),
        make_transaction(900, category="Shopping", days_ago=5),
    ]

    summary = summarize_budgets(budgets, transactions, period="monthly")

    assert [u.budget.category for u in summary.utilizations] == ["Food & Dining", "Transportation"]
    assert summary.total_allocated == 600
    assert summary.total_spent == 400
    assert summary.total_remaining == 200
    assert summary.percentage_used == pytest.approx(66.67, abs=0.01)
    assert [u.status for u in summary.utilizations] == ["warning", "good"]


def test_summarize_budgets_empty():
    summary = summarize_budgets([], [])

    assert summary.total_allocated == 0
    assert summary.percentage_used == 0.0
    assert summary.utilizations == []
