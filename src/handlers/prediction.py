"""
Lambda handler for cycle predictions.
"""
from typing import Any, Dict, Optional

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.utils import get_user_id, response
from src.services.calendar import build_calendar_events
from src.services.cycle import predict_next_cycle, get_cycle_insights
from src.services.health_analysis import analyze_cycle_health
from src.services.period_log_store import PeriodLogStore
from src.services.statistics import calculate_cycle_summary
from src.utils.logging import logger

tracer = Tracer()

# Predictions are only shown once at least this many logs exist
MIN_LOGS_FOR_PREDICTION = 2

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
    Handle prediction request.
    
    Args:
        event: API Gateway Lambda proxy event with ``user_id`` in the query
            string or JSON body
        context: Lambda context
        
    Returns:
        API Gateway Lambda proxy response with prediction, insights,
        summary, health analysis and calendar events
    """
    try:
        try:
            user_id = get_user_id(event)
        except ValueError as e:
            return response(400, {"error": str(e)})

        if not user_id:
            return response(400, {"error": "Missing user_id"})

        logs = get_store().list_logs(user_id)
        if not logs:
            return response(404, {"error": "No period logs found"})

        prediction = None
        if len(logs) >= MIN_LOGS_FOR_PREDICTION:
            prediction = predict_next_cycle(logs)

        result = {
            "user_id": user_id,
            "prediction": prediction.model_dump(mode="json") if prediction else None,
            "insights": get_cycle_insights(logs),
            "summary": calculate_cycle_summary(logs).model_dump(mode="json"),
            "health": [insight.model_dump(mode="json") for insight in analyze_cycle_health(logs)],
            "calendar": [
                calendar_event.model_dump(mode="json")
                for calendar_event in build_calendar_events(logs, prediction)
            ]
        }

        logger.info("Prediction calculated", extra={
            "user_id": user_id,
            "log_count": len(logs),
            "next_period": result["prediction"]["period_start"] if prediction else None
        })
        return response(200, result)

    except Exception as e:
        logger.exception("Error calculating prediction")
        return response(500, {"error": str(e)})
