"""
Helpers shared by the API Gateway Lambda handlers.
"""
import json
from typing import Any, Dict, Optional

def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse the JSON body of an API Gateway proxy event.

    Raises:
        ValueError: If the body is not a JSON object
    """
    body = event.get("body") or {}
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError as e:
            raise ValueError(f"Request body is not valid JSON: {e.msg}") from e
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body

def get_user_id(event: Dict[str, Any]) -> Optional[str]:
    """Extract the user id from the query string or the JSON body."""
    params = event.get("queryStringParameters") or {}
    if params.get("user_id"):
        return str(params["user_id"])
    body = parse_body(event)
    user_id = body.get("user_id")
    return str(user_id) if user_id else None

def response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Build an API Gateway Lambda proxy response."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str)
    }
