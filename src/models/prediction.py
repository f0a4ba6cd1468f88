"""
Prediction model for the next expected cycle.
"""
from datetime import date
from pydantic import BaseModel

class CyclePrediction(BaseModel):
    """
    Predicted dates for the next cycle.

    Always produced fresh from the current log history; ``is_prediction``
    lets callers tell it apart from logged data.
    """
    period_start: date
    period_end: date
    ovulation_date: date
    fertile_start: date
    fertile_end: date
    cycle_length: int
    is_prediction: bool = True
