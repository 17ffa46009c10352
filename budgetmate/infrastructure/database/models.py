"""SQLAlchemy ORM models for stored transactions and budgets"""

import uuid
from sqlalchemy import Column, String, Boolean, Numeric, DateTime, Date, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class TransactionRow(Base):
    """Income or expense recorded for a user"""

    __tablename__ = "transaction_record"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False, index=True)
    amount = Column(Numeric(14, 2, asdecimal=False), nullable=False)
    kind = Column(String(16), nullable=False)
    category = Column(Text, nullable=False)
    occurred_at = Column(DateTime(timezone=True), nullable=False, index=True)
    merchant = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class BudgetRow(Base):
    """Category allocation over a date range"""

    __tablename__ = "budget"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    amount = Column(Numeric(14, 2, asdecimal=False), nullable=False)
    period = Column(String(16), nullable=False, default="monthly")
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
