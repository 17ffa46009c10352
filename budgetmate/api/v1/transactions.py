"""POST/GET /v1/transactions - store and list a user's transactions"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from budgetmate.api.dependencies import get_now, get_request_id, resolve_timeframe
from budgetmate.api.v1.schemas import TransactionCreate, TransactionListResponse, TransactionSchema
from budgetmate.infrastructure.database.repositories import TransactionRepository
from budgetmate.infrastructure.database.session import get_db

router = APIRouter()


@router.post("/transactions", response_model=TransactionSchema, status_code=201)
def create_transaction(
    request_body: TransactionCreate,
    db: Session = Depends(get_db),
    request_id: str = Depends(get_request_id),
):
    """Record an income or expense for a user"""
    try:
        record = TransactionRepository(db).create_transaction(
            user_id=request_body.user_id,
            amount=request_body.amount,
            kind=request_body.kind,
            category=request_body.category,
            occurred_at=request_body.occurred_at,
            merchant=request_body.merchant,
            description=request_body.description,
        )
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Failed to store transaction: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return TransactionSchema.model_validate(record)


@router.get("/transactions", response_model=TransactionListResponse)
def list_transactions(
    user_id: str = Query(..., description="User identifier"),
    timeframe: Optional[str] = Query(None, description="week | month | quarter"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    """
    List a user's transactions within the analysis period.

    Returns:
        Transactions ordered oldest first
    """
    timeframe, window = resolve_timeframe(timeframe, now)
    records = TransactionRepository(db).list_transactions(user_id, window)

    return TransactionListResponse(
        user_id=user_id,
        timeframe=timeframe,
        transactions=[TransactionSchema.model_validate(r) for r in records],
    )
