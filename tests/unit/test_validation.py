"""Unit tests for the transaction validation pre-check"""

import pytest
from budgetmate.domain.exceptions import ValidationError
from budgetmate.domain.validation import find_problems, validate_transactions


def test_valid_snapshot_passes(sample_transactions):
    validate_transactions(sample_transactions)


def test_empty_snapshot_passes():
    validate_transactions([])


def test_negative_amount_rejected(make_transaction):
    with pytest.raises(ValidationError) as exc_info:
        validate_transactions([make_transaction(-20)])

    assert len(exc_info.value.problems) == 1
    assert "non-negative" in exc_info.value.problems[0]


def test_all_problems_reported(make_transaction):
    transactions = [
        make_transaction(float("nan")),
        make_transaction(15, kind="refund"),
        make_transaction(15),
    ]

    with pytest.raises(ValidationError) as exc_info:
        validate_transactions(transactions)

    problems = exc_info.value.problems
    assert len(problems) == 2
    assert "not a number" in problems[0]
    assert "'refund'" in problems[1]


def test_find_problems_missing_id_and_timestamp(make_transaction):
    record = make_transaction(10)
    broken = type(record)(id="", amount=10, kind="expense", category="Food", occurred_at="yesterday")

    problems = find_problems(broken)

    assert "transaction is missing an id" in problems
    assert any("occurred_at" in p for p in problems)
