"""Unit tests for period comparisons and spending patterns"""

import pytest
from datetime import timedelta
from budgetmate.domain.trends import (
    classify_trend,
    compare_periods,
    compute_week_over_week,
    generate_spending_patterns,
)
from budgetmate.utils.date_utils import previous_window, timeframe_window


def test_week_over_week_change(make_transaction, now):
    transactions = [
        make_transaction(150, days_ago=2),
        make_transaction(100, days_ago=10),
        make_transaction(999, days_ago=20),  # outside both weeks
    ]

    comparison = compute_week_over_week(transactions, now=now)

    assert comparison.current_amount == 150
    assert comparison.previous_amount == 100
    assert comparison.change_amount == 50
    assert comparison.change_percentage == pytest.approx(50.0)


def test_week_over_week_identical_periods(make_transaction, now):
    transactions = [make_transaction(80, days_ago=3), make_transaction(80, days_ago=10)]

    comparison = compute_week_over_week(transactions, now=now)

    assert comparison.change_amount == 0
    assert comparison.change_percentage == 0


def test_week_over_week_without_history(make_transaction, now):
    comparison = compute_week_over_week([make_transaction(40, days_ago=1)], now=now)

    assert comparison.previous_amount == 0
    assert comparison.change_percentage is None


def test_compare_periods_by_category(make_transaction, now):
    transactions = [
        make_transaction(60, category="Food", days_ago=1),
        make_transaction(300, category="Travel", days_ago=1),
        make_transaction(30, category="Food", days_ago=9),
    ]
    current = timeframe_window("week", now)
    previous = previous_window("week", now)

    comparison = compare_periods(transactions, current, previous, category="Food")

    assert comparison.current_amount == 60
    assert comparison.previous_amount == 30
    assert comparison.change_percentage == pytest.approx(100.0)


@pytest.mark.parametrize(
    "change,expected",
    [(None, "up"), (12.0, "up"), (5.0, "stable"), (-5.0, "stable"), (0.0, "stable"), (-30.0, "down")],
)
def test_classify_trend(change, expected):
    assert classify_trend(change, stable_band=5.0) == expected


def test_spending_patterns(make_transaction, now):
    """Month to date against the same days of last month"""
    transactions = [
        make_transaction(200, category="Food & Dining", days_ago=5),
        make_transaction(100, category="Food & Dining", days_ago=35),
        make_transaction(90, category="Transportation", days_ago=6),
        make_transaction(100, category="Transportation", days_ago=36),
        make_transaction(50, category="Shopping", days_ago=4),
        make_transaction(900, kind="income", category="Income", days_ago=4),
    ]
    current = timeframe_window("month", now)
    previous = previous_window("month", now)

    patterns = generate_spending_patterns(transactions, current, previous)

    assert [p.category for p in patterns] == ["Food & Dining", "Transportation", "Shopping"]

    food, transport, shopping = patterns
    assert food.trend == "up"
    assert food.trend_percentage == pytest.approx(100.0)
    assert food.previous_amount == 100
    assert transport.trend == "down"
    assert transport.trend_percentage == pytest.approx(10.0)
    assert shopping.trend == "up"
    assert shopping.trend_percentage is None
    assert sum(p.percentage for p in patterns) == pytest.approx(100.0)


def test_spending_patterns_limit(make_transaction, now):
    transactions = [make_transaction(10 + i, category=f"Category {i}", days_ago=1) for i in range(8)]
    current = timeframe_window("week", now)
    previous = previous_window("week", now)

    patterns = generate_spending_patterns(transactions, current, previous, limit=6)

    assert len(patterns) == 6
    assert patterns[0].category == "Category 7"


def test_spending_patterns_previous_window_excludes_current(make_transaction, now):
    """A transaction on the boundary counts only in the current week"""
    current = timeframe_window("week", now)
    transactions = [make_transaction(25, category="Food", occurred_at=current.start)]

    patterns = generate_spending_patterns(transactions, current, previous_window("week", now))

    assert patterns[0].previous_amount == 0
    assert patterns[0].amount == 25
    assert current.start - timedelta(microseconds=1) == previous_window("week", now).end
