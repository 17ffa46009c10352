"""GET /v1/breakdown, /v1/patterns, /v1/summary - dashboard analytics"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from budgetmate.api.dependencies import get_now, resolve_timeframe
from budgetmate.api.v1.schemas import (
    BreakdownResponse,
    CategoryBreakdownSchema,
    PatternsResponse,
    PeriodComparisonSchema,
    SpendingPatternSchema,
    SummaryResponse,
)
from budgetmate.config import settings
from budgetmate.domain.insights import compute_category_breakdown
from budgetmate.domain.summary import summarize_transactions
from budgetmate.domain.trends import compute_week_over_week, generate_spending_patterns
from budgetmate.infrastructure.database.repositories import TransactionRepository
from budgetmate.infrastructure.database.session import get_db
from budgetmate.utils.date_utils import DateWindow, previous_window

router = APIRouter()


@router.get("/breakdown", response_model=BreakdownResponse)
def get_breakdown(
    user_id: str = Query(..., description="User identifier"),
    timeframe: Optional[str] = Query(None, description="week | month | quarter"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    """Expense totals per category, largest first"""
    timeframe, window = resolve_timeframe(timeframe, now)
    transactions = TransactionRepository(db).list_transactions(user_id, window)
    breakdown = compute_category_breakdown(transactions)

    return BreakdownResponse(
        user_id=user_id,
        timeframe=timeframe,
        total_expense=sum(e.amount for e in breakdown),
        categories=[CategoryBreakdownSchema.model_validate(e) for e in breakdown],
    )


@router.get("/patterns", response_model=PatternsResponse)
def get_patterns(
    user_id: str = Query(..., description="User identifier"),
    timeframe: Optional[str] = Query(None, description="week | month | quarter"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    """Top categories with their trend against the previous period"""
    timeframe, current = resolve_timeframe(timeframe, now)
    previous = previous_window(timeframe, now)

    # One query spanning both periods
    transactions = TransactionRepository(db).list_transactions(
        user_id, DateWindow(start=previous.start, end=current.end)
    )
    patterns = generate_spending_patterns(
        transactions,
        current,
        previous,
        limit=settings.pattern_limit,
        stable_band=settings.trend_stable_band,
    )

    return PatternsResponse(
        user_id=user_id,
        timeframe=timeframe,
        patterns=[SpendingPatternSchema.model_validate(p) for p in patterns],
    )


@router.get("/summary", response_model=SummaryResponse)
def get_summary(
    user_id: str = Query(..., description="User identifier"),
    timeframe: Optional[str] = Query(None, description="week | month | quarter"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    """Income, expense, savings rate and week-over-week spend change"""
    timeframe, window = resolve_timeframe(timeframe, now)
    transactions = TransactionRepository(db).list_transactions(user_id)

    summary = summarize_transactions(transactions, window=window, now=now)
    week_over_week = compute_week_over_week(transactions, now=now)

    return SummaryResponse(
        user_id=user_id,
        timeframe=timeframe,
        total_income=summary.total_income,
        total_expense=summary.total_expense,
        net_amount=summary.net_amount,
        savings_rate=summary.savings_rate,
        transaction_count=summary.transaction_count,
        expense_count=summary.expense_count,
        daily_average_spend=summary.daily_average_spend,
        week_over_week=PeriodComparisonSchema.model_validate(week_over_week),
    )
