"""
Shared utility functions for cycle-related services.

These utilities are used across multiple service modules to handle common
operations like date parsing and period start extraction.
"""
from typing import List, Optional, Sequence, Union
from datetime import date, datetime

from aws_lambda_powertools import Logger
from src.models.period_log import PeriodLog
from src.services.exceptions import InvalidLogDateError

logger = Logger()

DATE_FORMAT = "%Y-%m-%d"

def parse_log_date(value: Union[str, date, None]) -> Optional[date]:
    """
    Parse a stored log date.

    Accepts ``yyyy-MM-dd`` strings, full ISO timestamps (the time part is
    dropped) and ``date``/``datetime`` objects.

    Args:
        value: Raw date value from a period log

    Returns:
        Calendar date, or None if the value is missing or unparsable

    Example:
        >>> parse_log_date("2024-02-29")
        datetime.date(2024, 2, 29)
        >>> parse_log_date("not a date") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None

def format_log_date(value: date) -> str:
    """Format a date the way period logs store it."""
    return value.strftime(DATE_FORMAT)

def resolve_log_date(
    log: PeriodLog,
    field: str = "start_date",
    strict: bool = False
) -> Optional[date]:
    """
    Parse a date field of a log according to the date policy.

    Args:
        log: Period log to read
        field: Model attribute holding the date
        strict: Raise instead of skipping when the date is unusable

    Returns:
        Parsed date, or None when skipped in permissive mode

    Raises:
        InvalidLogDateError: In strict mode, if the date is missing or unparsable
    """
    raw = getattr(log, field)
    parsed = parse_log_date(raw)
    if parsed is None:
        stored_name = "startDate" if field == "start_date" else "endDate"
        if strict:
            raise InvalidLogDateError(log.id, raw, stored_name)
        logger.warning(
            "Skipping period log with unusable date",
            extra={"log_id": log.id, "field": stored_name, "value": raw}
        )
    return parsed

def get_period_start_dates(logs: Sequence[PeriodLog], strict: bool = False) -> List[date]:
    """
    Extract period start dates, most recent first.

    Args:
        logs: Period logs in any order, mixed types allowed
        strict: Raise on unparsable start dates instead of skipping them

    Returns:
        Start dates of ``period_start`` logs sorted descending

    Example:
        >>> dates = get_period_start_dates(logs)
        >>> latest = dates[0] if dates else None
    """
    start_dates = []
    for log in logs:
        if not log.is_period_start:
            continue
        parsed = resolve_log_date(log, "start_date", strict)
        if parsed is not None:
            start_dates.append(parsed)
    return sorted(start_dates, reverse=True)

def calculate_cycle_gaps(
    start_dates: Sequence[date],
    max_length: Optional[int] = None
) -> List[int]:
    """
    Day gaps between adjacent start dates sorted most recent first.

    Non-positive gaps (duplicate dates) are dropped, as are gaps of
    ``max_length`` days or more when a limit is given.
    """
    gaps = []
    for newer, older in zip(start_dates, start_dates[1:]):
        gap = (newer - older).days
        if gap <= 0:
            continue
        if max_length is not None and gap >= max_length:
            continue
        gaps.append(gap)
    return gaps
