"""Unit tests for the SQLAlchemy repositories"""

from datetime import date, datetime, timedelta, timezone
from sqlalchemy.orm import Session
from budgetmate.infrastructure.database.repositories import BudgetRepository, TransactionRepository
from budgetmate.utils.date_utils import trailing_window


def test_transaction_round_trip_keeps_utc(db: Session, now: datetime):
    repo = TransactionRepository(db)
    created = repo.create_transaction(
        user_id="user_a",
        amount=12.34,
        kind="expense",
        category="Food & Dining",
        occurred_at=now - timedelta(days=1),
        merchant="Corner Cafe",
    )
    db.commit()

    [loaded] = repo.list_transactions("user_a")

    assert loaded.id == created.id
    assert loaded.amount == 12.34
    assert loaded.merchant == "Corner Cafe"
    assert loaded.occurred_at == now - timedelta(days=1)
    assert loaded.occurred_at.tzinfo is not None


def test_list_transactions_scoped_to_user_and_window(db: Session, now: datetime):
    repo = TransactionRepository(db)
    for days_ago in (1, 5, 20):
        repo.create_transaction("user_a", 10.0, "expense", "Food", now - timedelta(days=days_ago))
    repo.create_transaction("user_b", 99.0, "expense", "Food", now - timedelta(days=1))
    db.commit()

    recent = repo.list_transactions("user_a", trailing_window(now, 7))

    assert len(recent) == 2
    assert [t.occurred_at for t in recent] == sorted(t.occurred_at for t in recent)
    assert len(repo.list_transactions("user_a")) == 3


def test_naive_timestamps_stored_as_utc(db: Session):
    repo = TransactionRepository(db)
    repo.create_transaction("user_a", 5.0, "income", "Income", datetime(2025, 7, 1, 9, 0))
    db.commit()

    [loaded] = repo.list_transactions("user_a")

    assert loaded.occurred_at == datetime(2025, 7, 1, 9, 0, tzinfo=timezone.utc)


def test_budget_repository_filters_period(db: Session):
    repo = BudgetRepository(db)
    repo.create_budget("user_a", "Groceries", "Food & Dining", 400.0, "monthly", date(2025, 7, 1), date(2025, 7, 31))
    repo.create_budget("user_a", "Fun", "Entertainment", 50.0, "weekly", date(2025, 7, 14), date(2025, 7, 20))
    repo.create_budget("user_b", "Groceries", "Food & Dining", 300.0, "monthly", date(2025, 7, 1), date(2025, 7, 31))
    db.commit()

    monthly = repo.list_budgets("user_a", "monthly")

    assert [b.name for b in monthly] == ["Groceries"]
    assert monthly[0].amount == 400.0
    assert len(repo.list_budgets("user_a")) == 2
