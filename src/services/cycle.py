"""
Service module for menstrual cycle calculations and predictions.

This module computes the average cycle length from logged period starts,
predicts the next period, ovulation and fertile window, and derives simple
regularity insights. All functions are pure: they never mutate their input
and give the same answer for the same logs.

Typical usage:
    logs = store.list_logs(user_id)
    prediction = predict_next_cycle(logs)
    insights = get_cycle_insights(logs)
"""
from typing import List, Optional, Sequence
from datetime import date, timedelta

from src.models.period_log import PeriodLog
from src.models.prediction import CyclePrediction
from src.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    PREDICTED_PERIOD_DURATION,
    LUTEAL_PHASE_DAYS,
    FERTILE_DAYS_BEFORE_OVULATION,
    FERTILE_DAYS_AFTER_OVULATION,
    SHORT_CYCLE_THRESHOLD,
    LONG_CYCLE_THRESHOLD,
    REGULARITY_SAMPLE_SIZE,
    REGULARITY_TOLERANCE_DAYS,
    SHORT_CYCLE_MESSAGE,
    LONG_CYCLE_MESSAGE,
    REGULAR_CYCLE_MESSAGE,
    VARIABLE_CYCLE_MESSAGE
)
from src.services.utils import get_period_start_dates, calculate_cycle_gaps

def calculate_cycle_length(logs: Sequence[PeriodLog], strict: bool = False) -> int:
    """
    Calculate the average cycle length from logged period starts.
    
    Args:
        logs: Period logs in any order, mixed types allowed
        strict: Raise on unparsable start dates instead of skipping them
        
    Returns:
        Mean gap in days between consecutive period starts, rounded to the
        nearest integer (half to even). Falls back to 28 days when fewer
        than two usable starts or no positive gaps exist.
        
    Raises:
        InvalidLogDateError: In strict mode, if a period start has a bad date
        
    Example:
        >>> calculate_cycle_length([])
        28
    """
    return average_cycle_length(get_period_start_dates(logs, strict))

def average_cycle_length(start_dates: Sequence[date]) -> int:
    """
    Average cycle length from already parsed start dates, most recent first.
    
    Lets callers that need the start dates as well parse the logs only once.
    """
    if len(start_dates) < 2:
        return DEFAULT_CYCLE_LENGTH

    # Duplicate starts give zero gaps and are dropped
    gaps = calculate_cycle_gaps(start_dates)
    if not gaps:
        return DEFAULT_CYCLE_LENGTH

    return round(sum(gaps) / len(gaps))

def predict_next_cycle(
    logs: Sequence[PeriodLog],
    today: Optional[date] = None,
    strict: bool = False
) -> CyclePrediction:
    """
    Predict the next period, ovulation date and fertile window.
    
    The prediction is anchored on the most recent logged period start,
    whatever order the logs arrive in. Without any usable start the anchor
    is ``today``.
    
    Args:
        logs: Period logs in any order
        today: Reference date used when no period start exists, defaults to
            the current date
        strict: Raise on unparsable start dates instead of skipping them
        
    Returns:
        CyclePrediction with all dates populated
        
    Raises:
        InvalidLogDateError: In strict mode, if a period start has a bad date
        
    Example:
        >>> prediction = predict_next_cycle(logs)
        >>> print(f"Next period expected on {prediction.period_start}")
    """
    start_dates = get_period_start_dates(logs, strict)
    cycle_length = average_cycle_length(start_dates)
    last_period_start = start_dates[0] if start_dates else (today or date.today())

    period_start = last_period_start + timedelta(days=cycle_length)
    ovulation_date = period_start - timedelta(days=LUTEAL_PHASE_DAYS)

    return CyclePrediction(
        period_start=period_start,
        period_end=period_start + timedelta(days=PREDICTED_PERIOD_DURATION),
        ovulation_date=ovulation_date,
        fertile_start=ovulation_date - timedelta(days=FERTILE_DAYS_BEFORE_OVULATION),
        fertile_end=ovulation_date + timedelta(days=FERTILE_DAYS_AFTER_OVULATION),
        cycle_length=cycle_length,
        is_prediction=True
    )

def get_cycle_insights(logs: Sequence[PeriodLog], strict: bool = False) -> List[str]:
    """
    Generate short textual insights about cycle length and regularity.
    
    Length warnings come first, then the regularity message. Regularity is
    only assessed with at least three logged starts: the gaps between the
    three most recent starts must each be within two days of the average
    cycle length to count as very regular.
    
    Args:
        logs: Period logs in any order
        strict: Raise on unparsable start dates instead of skipping them
        
    Returns:
        Ordered list of insight messages, possibly empty
        
    Raises:
        InvalidLogDateError: In strict mode, if a period start has a bad date
    """
    insights = []
    start_dates = get_period_start_dates(logs, strict)
    cycle_length = average_cycle_length(start_dates)

    if cycle_length < SHORT_CYCLE_THRESHOLD:
        insights.append(SHORT_CYCLE_MESSAGE)
    elif cycle_length > LONG_CYCLE_THRESHOLD:
        insights.append(LONG_CYCLE_MESSAGE)

    if len(start_dates) >= REGULARITY_SAMPLE_SIZE:
        recent = start_dates[:REGULARITY_SAMPLE_SIZE]
        variations = [
            abs((newer - older).days - cycle_length)
            for newer, older in zip(recent, recent[1:])
        ]
        if all(v <= REGULARITY_TOLERANCE_DAYS for v in variations):
            insights.append(REGULAR_CYCLE_MESSAGE)
        else:
            insights.append(VARIABLE_CYCLE_MESSAGE)

    return insights
