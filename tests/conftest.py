"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from budgetmate.api.main import create_app
from budgetmate.api.dependencies import get_now
from budgetmate.infrastructure.database.models import Base
from budgetmate.infrastructure.database.session import get_db
from budgetmate.domain.models import TransactionRecord


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed evaluation time so relative-date rules are deterministic
FIXED_NOW = datetime(2025, 7, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a pinned clock"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: FIXED_NOW
    return TestClient(app)


@pytest.fixture
def make_transaction() -> Callable[..., TransactionRecord]:
    """Factory for transaction records with sensible defaults"""
    counter = {"n": 0}

    def _make(
        amount: float,
        kind: str = "expense",
        category: str = "Food & Dining",
        occurred_at: datetime | None = None,
        days_ago: float = 30,
        merchant: str | None = None,
    ) -> TransactionRecord:
        counter["n"] += 1
        return TransactionRecord(
            id=f"txn_{counter['n']}",
            amount=amount,
            kind=kind,
            category=category,
            occurred_at=occurred_at or FIXED_NOW - timedelta(days=days_ago),
            merchant=merchant,
        )

    return _make


@pytest.fixture
def sample_transactions(make_transaction) -> list[TransactionRecord]:
    """One month of salary, rent and groceries"""
    transactions = [
        make_transaction(4000, kind="income", category="Income", days_ago=19),
        make_transaction(1500, category="Bills & Utilities", days_ago=18),
    ]

    # Weekly grocery runs
    for week in range(3):
        transactions.append(make_transaction(120, category="Food & Dining", days_ago=17 - week * 7))

    transactions.append(make_transaction(45, category="Transportation", days_ago=2))
    return transactions
