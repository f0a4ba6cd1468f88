"""
Health analysis service for logged period data.

Turns period history into a list of structured findings (irregular, short
or long cycles, a possibly missed period) that callers can render as cards.

Typical usage:
    logs = store.list_logs(user_id)
    for insight in analyze_cycle_health(logs):
        print(f"[{insight.severity.value}] {insight.title}")
"""
from typing import List, Optional, Sequence
from datetime import date

from aws_lambda_powertools import Logger
from src.models.period_log import PeriodLog
from src.models.insight import HealthInsight, InsightSeverity
from src.services.constants import (
    SHORT_CYCLE_THRESHOLD,
    LONG_CYCLE_THRESHOLD,
    MAX_PLAUSIBLE_CYCLE_LENGTH,
    IRREGULAR_CYCLE_SPREAD_DAYS,
    MISSED_PERIOD_GRACE_DAYS
)
from src.services.cycle import average_cycle_length
from src.services.utils import get_period_start_dates, calculate_cycle_gaps

logger = Logger()

def analyze_cycle_health(
    logs: Sequence[PeriodLog],
    today: Optional[date] = None,
    strict: bool = False
) -> List[HealthInsight]:
    """
    Analyze period history for patterns worth flagging.
    
    Args:
        logs: Period logs in any order
        today: Reference date for the missed period check, defaults to today
        strict: Raise on unparsable start dates instead of skipping them
        
    Returns:
        List of insights. Empty without logs; a single "not enough data"
        insight with fewer than two period starts; a "healthy pattern"
        insight when no warning applies.
        
    Raises:
        InvalidLogDateError: In strict mode, if a period start has a bad date
    """
    if not logs:
        return []

    if today is None:
        today = date.today()

    start_dates = get_period_start_dates(logs, strict)
    if len(start_dates) < 2:
        return [
            HealthInsight(
                id="not-enough-data",
                title="Not Enough Data",
                description="Log at least two periods to get cycle insights.",
                severity=InsightSeverity.INFO,
                actionable=False,
                recommendation="Continue tracking your periods regularly."
            )
        ]

    insights = []
    cycle_lengths = calculate_cycle_gaps(start_dates, max_length=MAX_PLAUSIBLE_CYCLE_LENGTH)
    average_length = average_cycle_length(start_dates)

    if len(cycle_lengths) >= 2:
        spread = max(cycle_lengths) - min(cycle_lengths)
        if spread > IRREGULAR_CYCLE_SPREAD_DAYS:
            insights.append(HealthInsight(
                id="irregular-cycles",
                title="Irregular Cycle Pattern Detected",
                description=f"Your cycles varied by {spread} days in the last {len(cycle_lengths)} cycles.",
                severity=InsightSeverity.WARNING,
                actionable=True,
                recommendation="Consider consulting with a healthcare provider if this pattern continues."
            ))

        if average_length < SHORT_CYCLE_THRESHOLD:
            insights.append(HealthInsight(
                id="short-cycles",
                title="Short Cycle Pattern",
                description=f"Your average cycle length is {average_length} days, which is shorter than typical.",
                severity=InsightSeverity.WARNING,
                actionable=True,
                recommendation=(
                    "Short cycles can sometimes indicate hormonal imbalances. "
                    "Consider discussing with a healthcare provider."
                )
            ))

        if average_length > LONG_CYCLE_THRESHOLD:
            insights.append(HealthInsight(
                id="long-cycles",
                title="Long Cycle Pattern",
                description=f"Your average cycle length is {average_length} days, which is longer than typical.",
                severity=InsightSeverity.WARNING,
                actionable=True,
                recommendation=(
                    "Long cycles can sometimes indicate conditions like PCOS. "
                    "Consider discussing with a healthcare provider."
                )
            ))

    days_since_last_period = (today - start_dates[0]).days
    if days_since_last_period > average_length + MISSED_PERIOD_GRACE_DAYS:
        insights.append(HealthInsight(
            id="missed-period",
            title="Possible Missed Period",
            description=(
                f"It's been {days_since_last_period} days since your last period, "
                "which is longer than your average cycle length."
            ),
            severity=InsightSeverity.WARNING,
            actionable=True,
            recommendation="Consider taking a pregnancy test or consulting with a healthcare provider."
        ))

    if not insights:
        insights.append(HealthInsight(
            id="healthy-pattern",
            title="Healthy Cycle Pattern",
            description=f"Your cycles appear regular with an average length of {average_length} days.",
            severity=InsightSeverity.NORMAL,
            actionable=False,
            recommendation="Continue tracking your cycle for the most accurate predictions."
        ))

    logger.info(
        "Cycle health analyzed",
        extra={
            "insight_ids": [insight.id for insight in insights],
            "average_cycle_length": average_length
        }
    )
    return insights
