"""Unit tests for structured JSON logging"""

import json
import logging

from budgetmate.config import settings
from budgetmate.infrastructure.observability.logging import CustomJsonFormatter


def test_json_formatter_adds_service_metadata():
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord("budgetmate", logging.INFO, __file__, 1, "Insights generated", None, None)
    record.request_id = "req-1"

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Insights generated"
    assert payload["level"] == "INFO"
    assert payload["service"] == settings.service_name
    assert payload["request_id"] == "req-1"
    assert payload["timestamp"]
