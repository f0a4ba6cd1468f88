"""
Calendar event model for logged and predicted cycle days.
"""
from enum import Enum
from datetime import date
from pydantic import BaseModel

class CalendarEventType(str, Enum):
    """
    Kind of day shown on the cycle calendar.
    """
    PERIOD = "period"
    FERTILE = "fertile"
    OVULATION = "ovulation"
    PREDICTION = "prediction"

class CalendarEvent(BaseModel):
    """
    A single marked day on the cycle calendar.
    """
    date: date
    type: CalendarEventType
