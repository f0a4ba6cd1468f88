"""
Lambda handler for logging a period start or end.
"""
from typing import Any, Dict, Optional

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from src.handlers.utils import parse_body, response
from src.models.period_log import PeriodLog
from src.services.exceptions import InvalidLogDateError
from src.services.period_log_store import PeriodLogStore
from src.utils.logging import logger

tracer = Tracer()

_store: Optional[PeriodLogStore] = None

def get_store() -> PeriodLogStore:
    """Get or create the period log store."""
    global _store
    if _store is None:
        _store = PeriodLogStore()
    return _store

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Handle a new period log.
    
    Args:
        event: API Gateway Lambda proxy event whose JSON body holds the log
            fields and ``user_id``
        context: Lambda context
        
    Returns:
        API Gateway Lambda proxy response with the stored log
    """
    try:
        try:
            body = parse_body(event)
        except ValueError as e:
            return response(400, {"error": str(e)})

        if not body.get("user_id") and not body.get("userId"):
            return response(400, {"error": "Missing user_id"})

        try:
            log = PeriodLog.model_validate(body)
        except ValidationError as e:
            return response(400, {
                "error": "Invalid period log",
                "details": e.errors(include_url=False)
            })

        stored = get_store().save_log(log)
        return response(201, stored.model_dump(mode="json", by_alias=True, exclude_none=True))

    except InvalidLogDateError as e:
        return response(400, {"error": str(e), "log_id": e.log_id})
    except Exception as e:
        logger.exception("Error storing period log")
        return response(500, {"error": str(e)})
