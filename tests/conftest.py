"""
Pytest configuration and shared fixtures.
"""
from dataclasses import dataclass
from typing import List

import pytest

from src.models.period_log import PeriodLog
from tests.factories import make_start


@dataclass
class FakeLambdaContext:
    """Minimal Lambda context accepted by the powertools decorators."""
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Create a fake Lambda context."""
    return FakeLambdaContext()


@pytest.fixture
def regular_logs() -> List[PeriodLog]:
    """Four period starts exactly 28 days apart, newest last."""
    return [
        make_start("2024-01-01"),
        make_start("2024-01-29"),
        make_start("2024-02-26"),
        make_start("2024-03-25"),
    ]


@pytest.fixture
def irregular_logs() -> List[PeriodLog]:
    """Period starts 21 and then 35 days apart."""
    return [
        make_start("2024-01-01"),
        make_start("2024-01-22"),
        make_start("2024-02-26"),
    ]


@pytest.fixture
def mock_dynamo_items() -> List[dict]:
    """Create mock DynamoDB items as returned by a period log query."""
    from decimal import Decimal
    return [
        {
            "PK": "USER#123",
            "SK": "PERIOD#2024-01-29#b",
            "id": "b",
            "userId": "123",
            "type": "period_start",
            "startDate": "2024-01-29",
            "flow": "medium",
            "symptoms": ["cramps"],
            "durationDays": Decimal("5"),
        },
        {
            "PK": "USER#123",
            "SK": "PERIOD#2024-01-01#a",
            "id": "a",
            "userId": "123",
            "type": "period_start",
            "startDate": "2024-01-01",
        },
    ]
