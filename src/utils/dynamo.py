"""
DynamoDB utility functions for data access.
"""
import os
from typing import Dict, List, Optional, Any
import boto3
from boto3.dynamodb.conditions import Key

PERIOD_LOG_SK_PREFIX = "PERIOD#"

# Singleton instance
_dynamo_instance = None

def get_dynamo() -> 'DynamoDBClient':
    """
    Get or create singleton DynamoDB client instance.
    
    Always go through this function rather than instantiating
    DynamoDBClient directly, so every caller shares one table handle and
    a missing table name fails loudly.
    
    Example:
        dynamo = get_dynamo()
        items = dynamo.query_items("PK", create_pk("123"))
    
    Returns:
        DynamoDBClient: Singleton instance of DynamoDB client
        
    Raises:
        EnvironmentError: If TRACKER_TABLE_NAME environment variable is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        try:
            table_name = os.environ['TRACKER_TABLE_NAME']
        except KeyError:
            raise EnvironmentError(
                "TRACKER_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

class DynamoDBClient:
    """Client for interacting with DynamoDB table."""
    
    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)
    
    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a single item into the table.
        
        Args:
            item: Dictionary containing item attributes
            
        Returns:
            Response from DynamoDB
        """
        return self.table.put_item(Item=item)
    
    def query_items(
        self,
        partition_key: str,
        partition_value: str,
        sort_key_condition: Optional[Any] = None,
        newest_first: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Query items using partition key and optional sort key condition.
        
        Follows pagination so callers always get the full result set.
        
        Args:
            partition_key: Name of partition key
            partition_value: Value of partition key
            sort_key_condition: Optional sort key condition
            newest_first: Return items in descending sort key order
            
        Returns:
            List of matching items
        """
        key_condition = Key(partition_key).eq(partition_value)
        if sort_key_condition is not None:
            key_condition = key_condition & sort_key_condition
        
        query_args = {
            "KeyConditionExpression": key_condition,
            "ScanIndexForward": not newest_first
        }
        items = []
        while True:
            response = self.table.query(**query_args)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            query_args["ExclusiveStartKey"] = last_key
    
    def delete_item(self, key: Dict[str, str]) -> Dict[str, Any]:
        """
        Delete an item from the table.
        
        Args:
            key: Dictionary containing partition key and sort key
            
        Returns:
            Response from DynamoDB
        """
        return self.table.delete_item(Key=key)

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

def create_period_log_sk(start_date: str, log_id: str) -> str:
    """
    Create sort key for period log entries.
    
    Keys sort by start date so a descending query returns the most recent
    periods first.

    Args:
        start_date: Period start date in yyyy-MM-dd format
        log_id: Unique log identifier

    Returns:
        Sort key in format "PERIOD#{start_date}#{log_id}"
    """
    return f"{PERIOD_LOG_SK_PREFIX}{start_date}#{log_id}"
