"""
Tests for the prediction and period log Lambda handlers.
"""
import json
import pytest
from unittest.mock import Mock, patch

from src.handlers import prediction, period_log
from src.services.exceptions import InvalidLogDateError
from tests.factories import make_start

@pytest.fixture
def mock_store():
    """Patch the store used by both handlers."""
    store = Mock()
    with patch.object(prediction, 'get_store', return_value=store), \
         patch.object(period_log, 'get_store', return_value=store):
        yield store

def _body(result):
    return json.loads(result["body"])

def test_prediction_handler(mock_store, regular_logs, lambda_context):
    """Test a full prediction response."""
    mock_store.list_logs.return_value = list(reversed(regular_logs))
    
    result = prediction.handler({"queryStringParameters": {"user_id": "123"}}, lambda_context)
    body = _body(result)
    
    assert result["statusCode"] == 200
    assert body["prediction"]["period_start"] == "2024-04-22"
    assert body["prediction"]["cycle_length"] == 28
    assert body["insights"] == [
        "Your cycle is very regular. This is a good sign of reproductive health."
    ]
    assert body["summary"]["average_cycle_length"] == 28
    assert body["health"]
    assert {"date": "2024-04-22", "type": "prediction"} in body["calendar"]
    mock_store.list_logs.assert_called_once_with("123")

def test_prediction_handler_reads_body(mock_store, lambda_context):
    """Test that the user id can come from the JSON body."""
    mock_store.list_logs.return_value = [make_start("2024-01-01")]
    
    result = prediction.handler({"body": json.dumps({"user_id": "123"})}, lambda_context)
    body = _body(result)
    
    assert result["statusCode"] == 200
    assert body["prediction"] is None  # Needs at least two logs
    assert body["calendar"] == [{"date": "2024-01-01", "type": "period"}]

def test_prediction_handler_missing_user(mock_store, lambda_context):
    """Test the error for a request without a user id."""
    result = prediction.handler({"body": "{}"}, lambda_context)
    assert result["statusCode"] == 400
    assert not mock_store.list_logs.called

def test_prediction_handler_invalid_body(mock_store, lambda_context):
    """Test the error for a body that is not JSON."""
    result = prediction.handler({"body": "not json"}, lambda_context)
    assert result["statusCode"] == 400

def test_prediction_handler_no_logs(mock_store, lambda_context):
    """Test the response for a user without period logs."""
    mock_store.list_logs.return_value = []
    
    result = prediction.handler({"queryStringParameters": {"user_id": "123"}}, lambda_context)
    
    assert result["statusCode"] == 404

def test_prediction_handler_storage_error(mock_store, lambda_context):
    """Test that unexpected errors become a 500 response."""
    mock_store.list_logs.side_effect = RuntimeError("table unavailable")
    
    result = prediction.handler({"queryStringParameters": {"user_id": "123"}}, lambda_context)
    
    assert result["statusCode"] == 500
    assert _body(result)["error"] == "table unavailable"

def test_period_log_handler(mock_store, lambda_context):
    """Test storing a new period log."""
    mock_store.save_log.side_effect = lambda log: log.model_copy(update={"id": "new-id"})
    event = {"body": json.dumps({
        "user_id": "123",
        "type": "period_start",
        "startDate": "2024-01-01",
        "flow": "light",
        "durationDays": 4
    })}
    
    result = period_log.handler(event, lambda_context)
    body = _body(result)
    
    assert result["statusCode"] == 201
    assert body["id"] == "new-id"
    assert body["startDate"] == "2024-01-01"
    assert body["durationDays"] == 4
    saved = mock_store.save_log.call_args[0][0]
    assert saved.user_id == "123"

def test_period_log_handler_validation_error(mock_store, lambda_context):
    """Test rejection of an unknown log type."""
    event = {"body": json.dumps({"user_id": "123", "type": "spotting", "startDate": "2024-01-01"})}
    
    result = period_log.handler(event, lambda_context)
    
    assert result["statusCode"] == 400
    assert _body(result)["error"] == "Invalid period log"
    assert not mock_store.save_log.called

def test_period_log_handler_invalid_date(mock_store, lambda_context):
    """Test rejection of an unparsable start date."""
    mock_store.save_log.side_effect = InvalidLogDateError(None, "tomorrow")
    event = {"body": json.dumps({"user_id": "123", "type": "period_start", "startDate": "tomorrow"})}
    
    result = period_log.handler(event, lambda_context)
    
    assert result["statusCode"] == 400
    assert "tomorrow" in _body(result)["error"]

def test_period_log_handler_missing_user(mock_store, lambda_context):
    """Test the error for a log without an owner."""
    event = {"body": json.dumps({"type": "period_start", "startDate": "2024-01-01"})}
    
    result = period_log.handler(event, lambda_context)
    
    assert result["statusCode"] == 400
