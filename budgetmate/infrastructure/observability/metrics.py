"""Prometheus metrics for monitoring insight output, budget health, and request latency"""

from typing import Iterable

from prometheus_client import Counter, Histogram

from budgetmate.domain.models import BudgetUtilization, Insight

# Insight metrics
insight_counter = Counter(
    "budgetmate_insight_total",
    "Insights emitted by rule",
    ["insight_id"],  # highest-category | small-transactions | good-savings | ...
)

insight_request_counter = Counter(
    "budgetmate_insight_requests_total",
    "Insight evaluations performed",
    ["source"],  # stored | snapshot
)

# Budget metrics
budget_status_counter = Counter(
    "budgetmate_budget_status_total",
    "Budget utilization results by status",
    ["status"],  # good | warning | over
)

# Input contract
validation_failure_counter = Counter(
    "budgetmate_validation_failures_total",
    "Transaction snapshots rejected by the validation pre-check",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_insights(insights: Iterable[Insight], source: str) -> None:
    """Count every emitted insight by rule id"""
    insight_request_counter.labels(source=source).inc()
    for insight in insights:
        insight_counter.labels(insight_id=insight.id).inc()


def record_budget_statuses(utilizations: Iterable[BudgetUtilization]) -> None:
    for utilization in utilizations:
        budget_status_counter.labels(status=utilization.status).inc()
