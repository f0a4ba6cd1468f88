"""
Period log storage service.

This module persists period logs in the tracker table and loads them back
as validated models for the prediction services.

Typical usage:
    store = PeriodLogStore()
    store.save_log(PeriodLog(user_id="123", type="period_start", start_date="2024-01-01"))
    logs = store.list_logs("123")
"""
from typing import Any, Dict, List
from datetime import datetime, timezone
import uuid

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key
from pydantic import ValidationError

from src.models.period_log import PeriodLog
from src.services.exceptions import InvalidLogDateError
from src.services.utils import parse_log_date, format_log_date
from src.utils.dynamo import get_dynamo, create_pk, create_period_log_sk, PERIOD_LOG_SK_PREFIX

logger = Logger()

class PeriodLogStore:
    """Service for storing and retrieving period logs."""

    def __init__(self):
        """Initialize period log store."""
        self.dynamo = get_dynamo()

    def save_log(self, log: PeriodLog) -> PeriodLog:
        """
        Store a period log.

        Start and end dates are normalised to ``yyyy-MM-dd`` and a new id is
        assigned when the log has none.

        Args:
            log: Period log to store, must carry a user id

        Returns:
            The stored log

        Raises:
            ValueError: If the log has no user id
            InvalidLogDateError: If the start date is missing or unparsable
        """
        if not log.user_id:
            raise ValueError("Period log must have a user_id")

        start = parse_log_date(log.start_date)
        if start is None:
            raise InvalidLogDateError(log.id, log.start_date)
        end = parse_log_date(log.end_date)
        if log.end_date is not None and end is None:
            raise InvalidLogDateError(log.id, log.end_date, "endDate")

        stored = log.model_copy(update={
            "id": log.id or str(uuid.uuid4()),
            "start_date": format_log_date(start),
            "end_date": format_log_date(end) if end else None,
            "created_at": log.created_at or datetime.now(timezone.utc).isoformat()
        })

        item: Dict[str, Any] = {
            "PK": create_pk(stored.user_id),
            "SK": create_period_log_sk(stored.start_date, stored.id),
            **stored.model_dump(mode="json", by_alias=True, exclude_none=True)
        }
        self.dynamo.put_item(item)

        logger.info("Period log stored", extra={
            "user_id": stored.user_id,
            "log_id": stored.id,
            "type": stored.type.value
        })
        return stored

    def list_logs(self, user_id: str) -> List[PeriodLog]:
        """
        Get all period logs for a user, most recent start first.

        Items that fail model validation are skipped and logged.

        Args:
            user_id: User to load logs for

        Returns:
            List of period logs
        """
        items = self.dynamo.query_items(
            partition_key="PK",
            partition_value=create_pk(user_id),
            sort_key_condition=Key("SK").begins_with(PERIOD_LOG_SK_PREFIX),
            newest_first=True
        )

        logs = []
        for item in items:
            try:
                logs.append(PeriodLog.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid period log item", extra={
                    "user_id": user_id,
                    "sort_key": item.get("SK"),
                    "error": str(e)
                })

        logger.debug("Period logs loaded", extra={"user_id": user_id, "count": len(logs)})
        return logs

    def delete_log(self, user_id: str, start_date: str, log_id: str) -> None:
        """
        Delete a stored period log.

        Args:
            user_id: Owner of the log
            start_date: Stored start date of the log
            log_id: Log identifier
        """
        self.dynamo.delete_item({
            "PK": create_pk(user_id),
            "SK": create_period_log_sk(start_date, log_id)
        })
        logger.info("Period log deleted", extra={"user_id": user_id, "log_id": log_id})
