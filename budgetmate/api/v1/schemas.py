"""Pydantic schemas for API request/response validation"""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TransactionCreate(BaseModel):
    """Request body for POST /v1/transactions"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    amount: float = Field(..., ge=0, description="Non-negative amount; sign comes from kind")
    kind: Literal["income", "expense"]
    category: str = Field(..., min_length=1, description="Free-text category label")
    occurred_at: datetime
    merchant: Optional[str] = None
    description: Optional[str] = None


class TransactionSchema(BaseModel):
    """Stored transaction"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: float
    kind: str
    category: str
    occurred_at: datetime
    merchant: Optional[str] = None
    description: Optional[str] = None


class TransactionListResponse(BaseModel):
    """Response for GET /v1/transactions"""

    user_id: str
    timeframe: str
    transactions: List[TransactionSchema]


class SnapshotTransaction(BaseModel):
    """Transaction supplied inline for stateless evaluation; checked by the domain pre-check"""

    id: str
    amount: float
    kind: str
    category: str
    occurred_at: datetime
    merchant: Optional[str] = None


class EvaluateRequest(BaseModel):
    """Request body for POST /v1/insights/evaluate"""

    transactions: List[SnapshotTransaction]
    now: Optional[datetime] = Field(None, description="Evaluation time; defaults to server time")


class InsightSchema(BaseModel):
    """Single rule-generated insight"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    kind: str
    priority: str
    actionable: bool
    category: Optional[str] = None
    amount: Optional[float] = None
    percentage: Optional[float] = None


class CategoryBreakdownSchema(BaseModel):
    """Expense total for one category"""

    model_config = ConfigDict(from_attributes=True)

    category: str
    amount: float
    percentage_of_total: float


class InsightsResponse(BaseModel):
    """Response for GET /v1/insights"""

    user_id: str
    timeframe: str
    transaction_count: int
    insights: List[InsightSchema]


class EvaluateResponse(BaseModel):
    """Response for POST /v1/insights/evaluate"""

    insights: List[InsightSchema]
    breakdown: List[CategoryBreakdownSchema]


class BreakdownResponse(BaseModel):
    """Response for GET /v1/breakdown"""

    user_id: str
    timeframe: str
    total_expense: float
    categories: List[CategoryBreakdownSchema]


class SpendingPatternSchema(BaseModel):
    """Category spend with trend against the previous period"""

    model_config = ConfigDict(from_attributes=True)

    category: str
    amount: float
    percentage: float
    previous_amount: float
    trend: str
    trend_percentage: Optional[float] = None


class PatternsResponse(BaseModel):
    """Response for GET /v1/patterns"""

    user_id: str
    timeframe: str
    patterns: List[SpendingPatternSchema]


class PeriodComparisonSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    current_amount: float
    previous_amount: float
    change_amount: float
    change_percentage: Optional[float] = None


class SummaryResponse(BaseModel):
    """Response for GET /v1/summary"""

    user_id: str
    timeframe: str
    total_income: float
    total_expense: float
    net_amount: float
    savings_rate: float
    transaction_count: int
    expense_count: int
    daily_average_spend: float
    week_over_week: PeriodComparisonSchema


class BudgetCreate(BaseModel):
    """Request body for POST /v1/budgets"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0, description="Allocated amount")
    period: Literal["weekly", "monthly", "yearly"] = "monthly"
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_date_order(self) -> "BudgetCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class BudgetSchema(BaseModel):
    """Stored budget"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category: str
    amount: float
    period: str
    start_date: date
    end_date: date


class BudgetUtilizationSchema(BaseModel):
    """Spend against one budget"""

    budget_id: str
    name: str
    category: str
    allocated: float
    spent: float
    remaining: float
    percentage_used: float
    status: str


class BudgetSummaryResponse(BaseModel):
    """Response for GET /v1/budgets/summary"""

    user_id: str
    period: Optional[str] = None
    total_allocated: float
    total_spent: float
    total_remaining: float
    percentage_used: float
    budgets: List[BudgetUtilizationSchema]
