"""
Models for cycle summaries and health analysis results.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel

class InsightSeverity(str, Enum):
    """
    How urgently a health insight should be surfaced.
    """
    NORMAL = "normal"
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"

class CycleRegularity(str, Enum):
    """
    Regularity grade derived from variation between consecutive cycles.
    """
    REGULAR = "Regular"
    SLIGHTLY_IRREGULAR = "Slightly Irregular"
    IRREGULAR = "Irregular"
    NEEDS_MORE_DATA = "Needs More Data"

class HealthInsight(BaseModel):
    """
    A single finding from the cycle health analysis.
    """
    id: str
    title: str
    description: str
    severity: InsightSeverity
    actionable: bool
    recommendation: str

class CycleSummary(BaseModel):
    """
    Aggregate cycle statistics. ``None`` means not enough data.
    """
    average_cycle_length: Optional[int] = None
    average_period_length: Optional[int] = None
    regularity: Optional[CycleRegularity] = None
    shortest_cycle: Optional[int] = None
