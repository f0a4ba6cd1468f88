"""
Period log model definition for logged period starts and ends.
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class PeriodLogType(str, Enum):
    """
    Marks whether a log records the start or the end of a period.
    """
    PERIOD_START = "period_start"
    PERIOD_END = "period_end"

class FlowLevel(str, Enum):
    """
    Logged menstrual flow intensity.
    """
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"

class PeriodLog(BaseModel):
    """
    A period log as stored in the tracker table.

    Dates are kept as the stored ``yyyy-MM-dd`` strings; services parse them
    so a single malformed record does not break a whole query.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    user_id: Optional[str] = Field(None, alias="userId")
    type: PeriodLogType
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    flow: Optional[FlowLevel] = None
    symptoms: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    duration_days: Optional[int] = Field(None, alias="durationDays", ge=1, le=10)
    created_at: Optional[str] = Field(None, alias="createdAt")

    @property
    def is_period_start(self) -> bool:
        """Check if this log marks the start of a period."""
        return self.type == PeriodLogType.PERIOD_START
