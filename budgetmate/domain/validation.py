"""Input contract pre-check, kept apart from the aggregation logic"""

import math
from datetime import datetime
from typing import Iterable, List

from budgetmate.domain.exceptions import ValidationError
from budgetmate.domain.models import TRANSACTION_KINDS, TransactionRecord


def find_problems(record: TransactionRecord) -> List[str]:
    """Describe every contract violation on a single record"""
    label = record.id or "<missing id>"
    problems = []

    if not record.id:
        problems.append("transaction is missing an id")
    if not isinstance(record.amount, (int, float)) or math.isnan(record.amount):
        problems.append(f"{label}: amount is not a number")
    elif record.amount < 0:
        problems.append(f"{label}: amount must be non-negative, got {record.amount}")
    if record.kind not in TRANSACTION_KINDS:
        problems.append(f"{label}: kind must be income or expense, got {record.kind!r}")
    if not isinstance(record.occurred_at, datetime):
        problems.append(f"{label}: occurred_at is not a timestamp")

    return problems


def validate_transactions(transactions: Iterable[TransactionRecord]) -> None:
    """
    Raise ValidationError listing every problem in the snapshot.

    The insight engine itself never validates; callers that want a strict
    contract run this first.
    """
    problems = [problem for record in transactions for problem in find_problems(record)]
    if problems:
        raise ValidationError(problems)
