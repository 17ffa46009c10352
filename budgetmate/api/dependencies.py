"""Dependency injection for FastAPI endpoints"""

from datetime import datetime
from typing import Optional

from fastapi import HTTPException, Request

from budgetmate.config import settings
from budgetmate.domain.exceptions import InvalidTimeframeError
from budgetmate.domain.models import InsightThresholds
from budgetmate.utils.date_utils import DateWindow, timeframe_window, utc_now


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_now() -> datetime:
    """Evaluation time for relative-date rules; overridden in tests"""
    return utc_now()


def get_thresholds() -> InsightThresholds:
    return settings.insight_thresholds()


def resolve_timeframe(timeframe: Optional[str], now: datetime) -> tuple[str, DateWindow]:
    """Map a timeframe query value to its window, rejecting unknown values with 422"""
    timeframe = timeframe or settings.default_timeframe
    try:
        return timeframe, timeframe_window(timeframe, now)
    except InvalidTimeframeError as e:
        raise HTTPException(status_code=422, detail=str(e))
