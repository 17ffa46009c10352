"""POST /v1/budgets and GET /v1/budgets/summary - budget allocation and utilization"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from budgetmate.api.dependencies import get_request_id
from budgetmate.api.v1.schemas import (
    BudgetCreate,
    BudgetSchema,
    BudgetSummaryResponse,
    BudgetUtilizationSchema,
)
from budgetmate.config import settings
from budgetmate.domain.budgets import summarize_budgets
from budgetmate.infrastructure.database.repositories import BudgetRepository, TransactionRepository
from budgetmate.infrastructure.database.session import get_db
from budgetmate.infrastructure.observability.metrics import record_budget_statuses

router = APIRouter()


@router.post("/budgets", response_model=BudgetSchema, status_code=201)
def create_budget(
    request_body: BudgetCreate,
    db: Session = Depends(get_db),
    request_id: str = Depends(get_request_id),
):
    """Create a category budget for a date range"""
    try:
        budget = BudgetRepository(db).create_budget(
            user_id=request_body.user_id,
            name=request_body.name,
            category=request_body.category,
            amount=request_body.amount,
            period=request_body.period,
            start_date=request_body.start_date,
            end_date=request_body.end_date,
        )
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Failed to store budget: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return BudgetSchema.model_validate(budget)


@router.get("/budgets/summary", response_model=BudgetSummaryResponse)
def get_budget_summary(
    user_id: str = Query(..., description="User identifier"),
    period: Optional[str] = Query(None, description="weekly | monthly | yearly"),
    db: Session = Depends(get_db),
):
    """
    Spend against each active budget plus overall totals.

    Status per budget: good (< 80%), warning (>= 80%), over (>= 100%).
    """
    budgets = BudgetRepository(db).list_budgets(user_id, period)
    transactions = TransactionRepository(db).list_transactions(user_id)

    summary = summarize_budgets(
        budgets,
        transactions,
        period=period,
        warning_percentage=settings.budget_warning_percentage,
    )
    record_budget_statuses(summary.utilizations)

    return BudgetSummaryResponse(
        user_id=user_id,
        period=period,
        total_allocated=summary.total_allocated,
        total_spent=summary.total_spent,
        total_remaining=summary.total_remaining,
        percentage_used=summary.percentage_used,
        budgets=[
            BudgetUtilizationSchema(
                budget_id=u.budget.id,
                name=u.budget.name,
                category=u.budget.category,
                allocated=u.budget.amount,
                spent=u.spent,
                remaining=u.remaining,
                percentage_used=u.percentage_used,
                status=u.status,
            )
            for u in summary.utilizations
        ],
    )
