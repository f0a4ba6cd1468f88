"""
Statistics calculation service for period log data.

This module provides functionality for calculating cycle summary statistics,
including average cycle and period lengths, the shortest cycle and a
regularity grade.
"""
from typing import List, Optional, Sequence
from statistics import mean
from aws_lambda_powertools import Logger
from src.models.period_log import PeriodLog, PeriodLogType
from src.models.insight import CycleSummary, CycleRegularity
from src.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH,
    DEFAULT_SHORTEST_CYCLE,
    MAX_PLAUSIBLE_CYCLE_LENGTH,
    REGULAR_VARIATION_DAYS,
    SLIGHTLY_IRREGULAR_VARIATION_DAYS
)
from src.services.utils import get_period_start_dates, calculate_cycle_gaps, resolve_log_date

logger = Logger()

def calculate_period_lengths(logs: Sequence[PeriodLog], strict: bool = False) -> List[int]:
    """
    Calculate logged period durations from ``period_end`` logs.
    
    Args:
        logs: Period logs to analyze
        strict: Raise on unparsable dates instead of skipping the log
        
    Returns:
        Inclusive durations in days, keeping only positive values
    """
    durations = []
    for log in logs:
        if log.type != PeriodLogType.PERIOD_END:
            continue
        start = resolve_log_date(log, "start_date", strict)
        end = resolve_log_date(log, "end_date", strict)
        if start is None or end is None:
            continue
        duration = (end - start).days + 1
        if duration > 0:
            durations.append(duration)
    return durations

def grade_regularity(cycle_lengths: Sequence[int]) -> Optional[CycleRegularity]:
    """
    Grade regularity from the variation between consecutive cycle lengths.
    
    Args:
        cycle_lengths: Cycle lengths, most recent first
        
    Returns:
        Regularity grade, or None without any cycle lengths
        
    Example:
        >>> grade_regularity([28, 29, 28])
        <CycleRegularity.REGULAR: 'Regular'>
    """
    if len(cycle_lengths) >= 3:
        variations = [
            abs(length - previous)
            for previous, length in zip(cycle_lengths, cycle_lengths[1:])
        ]
        average_variation = mean(variations)
        if average_variation <= REGULAR_VARIATION_DAYS:
            return CycleRegularity.REGULAR
        if average_variation <= SLIGHTLY_IRREGULAR_VARIATION_DAYS:
            return CycleRegularity.SLIGHTLY_IRREGULAR
        return CycleRegularity.IRREGULAR
    if cycle_lengths:
        return CycleRegularity.NEEDS_MORE_DATA
    return None

def calculate_cycle_summary(logs: Sequence[PeriodLog], strict: bool = False) -> CycleSummary:
    """
    Calculate overall cycle statistics.
    
    Args:
        logs: Period logs to analyze
        strict: Raise on unparsable dates instead of skipping the log
        
    Returns:
        CycleSummary containing:
        - average_cycle_length: Mean days between period starts
        - average_period_length: Mean logged period duration
        - regularity: Regularity grade
        - shortest_cycle: Shortest observed cycle
        All fields are None when fewer than two periods are logged.
    """
    if len(logs) < 2:
        return CycleSummary()

    start_dates = get_period_start_dates(logs, strict)
    if len(start_dates) < 2:
        return CycleSummary()

    # Gaps of 60+ days are most likely missed logs
    cycle_lengths = calculate_cycle_gaps(start_dates, max_length=MAX_PLAUSIBLE_CYCLE_LENGTH)
    period_lengths = calculate_period_lengths(logs, strict)

    summary = CycleSummary(
        average_cycle_length=round(mean(cycle_lengths)) if cycle_lengths else DEFAULT_CYCLE_LENGTH,
        average_period_length=round(mean(period_lengths)) if period_lengths else DEFAULT_PERIOD_LENGTH,
        regularity=grade_regularity(cycle_lengths),
        shortest_cycle=min(cycle_lengths) if cycle_lengths else DEFAULT_SHORTEST_CYCLE
    )

    logger.info(
        "Calculated cycle summary",
        extra={
            "period_starts": len(start_dates),
            "cycles_used": len(cycle_lengths),
            "periods_with_end": len(period_lengths)
        }
    )
    return summary
