"""Data access layer for transactions and budgets"""

from datetime import date, datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from budgetmate.infrastructure.database.models import BudgetRow, TransactionRow
from budgetmate.domain.models import Budget, TransactionRecord
from budgetmate.utils.date_utils import DateWindow, ensure_utc


def to_transaction_record(row: TransactionRow) -> TransactionRecord:
    return TransactionRecord(
        id=row.id,
        amount=float(row.amount),
        kind=row.kind,
        category=row.category,
        occurred_at=ensure_utc(row.occurred_at),
        merchant=row.merchant,
        description=row.description,
    )


def to_budget(row: BudgetRow) -> Budget:
    return Budget(
        id=row.id,
        name=row.name,
        category=row.category,
        amount=float(row.amount),
        period=row.period,
        start_date=row.start_date,
        end_date=row.end_date,
        is_active=row.is_active,
    )


class TransactionRepository:
    """Repository for user transactions"""

    def __init__(self, db: Session):
        self.db = db

    def create_transaction(
        self,
        user_id: str,
        amount: float,
        kind: str,
        category: str,
        occurred_at: datetime,
        merchant: Optional[str] = None,
        description: Optional[str] = None,
    ) -> TransactionRecord:
        """Persist a transaction and return its domain record"""
        row = TransactionRow(
            user_id=user_id,
            amount=amount,
            kind=kind,
            category=category,
            occurred_at=ensure_utc(occurred_at),
            merchant=merchant,
            description=description,
        )
        self.db.add(row)
        self.db.flush()  # Get ID without committing
        return to_transaction_record(row)

    def list_transactions(self, user_id: str, window: Optional[DateWindow] = None) -> List[TransactionRecord]:
        """Fetch a user's transactions, oldest first, optionally within a window"""
        query = self.db.query(TransactionRow).filter(TransactionRow.user_id == user_id)
        if window is not None:
            query = query.filter(
                TransactionRow.occurred_at >= window.start,
                TransactionRow.occurred_at <= window.end,
            )
        rows = query.order_by(TransactionRow.occurred_at.asc(), TransactionRow.id.asc()).all()
        return [to_transaction_record(row) for row in rows]


class BudgetRepository:
    """Repository for budgets"""

    def __init__(self, db: Session):
        self.db = db

    def create_budget(
        self,
        user_id: str,
        name: str,
        category: str,
        amount: float,
        period: str,
        start_date: date,
        end_date: date,
    ) -> Budget:
        row = BudgetRow(
            user_id=user_id,
            name=name,
            category=category,
            amount=amount,
            period=period,
            start_date=start_date,
            end_date=end_date,
            is_active=True,
        )
        self.db.add(row)
        self.db.flush()
        return to_budget(row)

    def list_budgets(self, user_id: str, period: Optional[str] = None) -> List[Budget]:
        """Fetch a user's active budgets"""
        query = self.db.query(BudgetRow).filter(BudgetRow.user_id == user_id, BudgetRow.is_active.is_(True))
        if period is not None:
            query = query.filter(BudgetRow.period == period)
        return [to_budget(row) for row in query.order_by(BudgetRow.name.asc()).all()]
