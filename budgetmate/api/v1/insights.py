"""GET /v1/insights and POST /v1/insights/evaluate - rule-based spending insights"""

import time
import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from budgetmate.api.dependencies import get_now, get_request_id, get_thresholds, resolve_timeframe
from budgetmate.api.v1.schemas import (
    CategoryBreakdownSchema,
    EvaluateRequest,
    EvaluateResponse,
    InsightSchema,
    InsightsResponse,
)
from budgetmate.domain.exceptions import ValidationError
from budgetmate.domain.insights import compute_category_breakdown, generate_insights
from budgetmate.domain.models import InsightThresholds, TransactionRecord
from budgetmate.domain.validation import validate_transactions
from budgetmate.infrastructure.database.repositories import TransactionRepository
from budgetmate.infrastructure.database.session import get_db
from budgetmate.infrastructure.observability.logging import log_insights_generated
from budgetmate.infrastructure.observability.metrics import record_insights, validation_failure_counter
from budgetmate.utils.date_utils import TIMEFRAME_LABELS, DateWindow, ensure_utc, trailing_window

router = APIRouter()


@router.get("/insights", response_model=InsightsResponse)
def get_insights(
    user_id: str = Query(..., description="User identifier"),
    timeframe: Optional[str] = Query(None, description="week | month | quarter"),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
    thresholds: InsightThresholds = Depends(get_thresholds),
    request_id: str = Depends(get_request_id),
):
    """
    Generate insights over a user's stored transactions.

    Flow:
    1. Resolve the analysis window for the timeframe
    2. Load the user's transactions within it, reaching back far enough to
       cover the trailing daily-spending window
    3. Run the insight rules, with rules 1-3 limited to the analysis window
    4. Record metrics and a structured log line
    """
    start_time = time.time()
    timeframe, window = resolve_timeframe(timeframe, now)

    trailing = trailing_window(now, thresholds.recent_window_days)
    loaded = TransactionRepository(db).list_transactions(
        user_id, DateWindow(start=min(window.start, trailing.start), end=window.end)
    )
    transactions = [t for t in loaded if window.includes(t)]

    insights = generate_insights(
        loaded,
        now=now,
        thresholds=thresholds,
        window_filter=window.includes,
        period_label=TIMEFRAME_LABELS[timeframe],
    )

    duration_ms = (time.time() - start_time) * 1000
    record_insights(insights, source="stored")
    log_insights_generated(request_id, user_id, timeframe, len(transactions), [i.id for i in insights], duration_ms)

    return InsightsResponse(
        user_id=user_id,
        timeframe=timeframe,
        transaction_count=len(transactions),
        insights=[InsightSchema.model_validate(i) for i in insights],
    )


@router.post("/insights/evaluate", response_model=EvaluateResponse)
def evaluate_snapshot(
    request_body: EvaluateRequest,
    now: datetime = Depends(get_now),
    thresholds: InsightThresholds = Depends(get_thresholds),
    request_id: str = Depends(get_request_id),
):
    """
    Stateless evaluation of a caller-supplied transaction snapshot.

    The snapshot goes through the validation pre-check first; contract
    violations are rejected with 422 and the list of problems.
    """
    transactions = [
        TransactionRecord(
            id=t.id,
            amount=t.amount,
            kind=t.kind,
            category=t.category,
            occurred_at=ensure_utc(t.occurred_at),
            merchant=t.merchant,
        )
        for t in request_body.transactions
    ]

    try:
        validate_transactions(transactions)
    except ValidationError as e:
        validation_failure_counter.inc()
        logging.warning(f"Rejected transaction snapshot: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail={"message": "Invalid transactions", "problems": e.problems})

    evaluated_at = ensure_utc(request_body.now) if request_body.now else now
    insights = generate_insights(transactions, now=evaluated_at, thresholds=thresholds)
    breakdown = compute_category_breakdown(transactions)
    record_insights(insights, source="snapshot")

    return EvaluateResponse(
        insights=[InsightSchema.model_validate(i) for i in insights],
        breakdown=[CategoryBreakdownSchema.model_validate(e) for e in breakdown],
    )
