"""
Tests for the DynamoDB client wrapper.
"""
import pytest
from unittest.mock import Mock, patch

from src.utils import dynamo
from src.utils.dynamo import DynamoDBClient, create_pk, create_period_log_sk

@pytest.fixture
def table():
    """Create a DynamoDBClient backed by a mocked boto3 table."""
    with patch('src.utils.dynamo.boto3') as mock_boto3:
        mock_table = Mock()
        mock_boto3.resource.return_value.Table.return_value = mock_table
        yield DynamoDBClient("TrackerTable-test"), mock_table

def test_query_items_follows_pagination(table):
    """Test that all result pages are collected."""
    client, mock_table = table
    mock_table.query.side_effect = [
        {"Items": [{"id": "a"}], "LastEvaluatedKey": {"PK": "USER#1", "SK": "x"}},
        {"Items": [{"id": "b"}]},
    ]
    
    items = client.query_items("PK", "USER#1", newest_first=True)
    
    assert items == [{"id": "a"}, {"id": "b"}]
    second_call = mock_table.query.call_args_list[1].kwargs
    assert second_call["ExclusiveStartKey"] == {"PK": "USER#1", "SK": "x"}
    assert second_call["ScanIndexForward"] is False

def test_get_dynamo_requires_table_name(monkeypatch):
    """Test that a missing table name fails loudly."""
    monkeypatch.delenv("TRACKER_TABLE_NAME", raising=False)
    monkeypatch.setattr(dynamo, "_dynamo_instance", None)
    
    with pytest.raises(EnvironmentError, match="TRACKER_TABLE_NAME"):
        dynamo.get_dynamo()

def test_key_helpers():
    """Test partition and sort key formats."""
    assert create_pk("123") == "USER#123"
    assert create_period_log_sk("2024-01-01", "abc") == "PERIOD#2024-01-01#abc"
