"""
Calendar service for marking logged and predicted cycle days.
"""
from typing import List, Optional, Sequence
from datetime import date, timedelta

from src.models.calendar import CalendarEvent, CalendarEventType
from src.models.period_log import PeriodLog
from src.models.prediction import CyclePrediction
from src.services.constants import CALENDAR_DATE_LABELS, NO_CALENDAR_EVENT_LABEL
from src.services.utils import parse_log_date

# Logged periods outrank predictions on the same day
EVENT_PRECEDENCE = [
    CalendarEventType.PERIOD,
    CalendarEventType.OVULATION,
    CalendarEventType.FERTILE,
    CalendarEventType.PREDICTION
]

def build_calendar_events(
    logs: Sequence[PeriodLog],
    prediction: Optional[CyclePrediction] = None
) -> List[CalendarEvent]:
    """
    Build calendar events from period logs and an optional prediction.
    
    Args:
        logs: Period logs; logs without a usable start date are ignored
        prediction: Predicted next cycle to overlay, if any
        
    Returns:
        Period days first, then the predicted start, ovulation day and
        each day of the fertile window
        
    Example:
        >>> events = build_calendar_events(logs, predict_next_cycle(logs))
        >>> describe_date(events, date(2024, 1, 15))
        'Ovulation Day'
    """
    events = []
    for log in logs:
        start = parse_log_date(log.start_date)
        if start is None:
            continue
        for offset in range(log.duration_days or 1):
            events.append(CalendarEvent(
                date=start + timedelta(days=offset),
                type=CalendarEventType.PERIOD
            ))

    if prediction is not None:
        events.append(CalendarEvent(date=prediction.period_start, type=CalendarEventType.PREDICTION))
        events.append(CalendarEvent(date=prediction.ovulation_date, type=CalendarEventType.OVULATION))
        current = prediction.fertile_start
        while current <= prediction.fertile_end:
            events.append(CalendarEvent(date=current, type=CalendarEventType.FERTILE))
            current += timedelta(days=1)

    return events

def event_type_on(events: Sequence[CalendarEvent], day: date) -> Optional[CalendarEventType]:
    """Return the highest-precedence event type on a day, if any."""
    types_on_day = {event.type for event in events if event.date == day}
    for event_type in EVENT_PRECEDENCE:
        if event_type in types_on_day:
            return event_type
    return None

def describe_date(events: Sequence[CalendarEvent], day: date) -> str:
    """Human-readable label for a calendar day."""
    event_type = event_type_on(events, day)
    if event_type is None:
        return NO_CALENDAR_EVENT_LABEL
    return CALENDAR_DATE_LABELS[event_type.value]
