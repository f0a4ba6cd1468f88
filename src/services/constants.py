"""
Constants and shared data for cycle-related services.

The heuristics below are fixed domain assumptions, kept here so they can
later be made data-driven without changing the prediction algorithm.
"""

DEFAULT_CYCLE_LENGTH = 28
DEFAULT_PERIOD_LENGTH = 5
DEFAULT_SHORTEST_CYCLE = 26

# Prediction heuristics
PREDICTED_PERIOD_DURATION = 5
LUTEAL_PHASE_DAYS = 14
FERTILE_DAYS_BEFORE_OVULATION = 5
FERTILE_DAYS_AFTER_OVULATION = 1

# Insight thresholds
SHORT_CYCLE_THRESHOLD = 21
LONG_CYCLE_THRESHOLD = 35
REGULARITY_SAMPLE_SIZE = 3
REGULARITY_TOLERANCE_DAYS = 2

# Summary and health analysis
MAX_PLAUSIBLE_CYCLE_LENGTH = 60
IRREGULAR_CYCLE_SPREAD_DAYS = 7
MISSED_PERIOD_GRACE_DAYS = 7
REGULAR_VARIATION_DAYS = 3
SLIGHTLY_IRREGULAR_VARIATION_DAYS = 7

SHORT_CYCLE_MESSAGE = (
    "Your cycle is shorter than average. Consider consulting a healthcare provider."
)
LONG_CYCLE_MESSAGE = (
    "Your cycle is longer than average. Consider consulting a healthcare provider."
)
REGULAR_CYCLE_MESSAGE = (
    "Your cycle is very regular. This is a good sign of reproductive health."
)
VARIABLE_CYCLE_MESSAGE = (
    "Your cycle shows some variation. This is normal, but monitor for significant changes."
)

CALENDAR_DATE_LABELS = {
    "period": "Period Day",
    "fertile": "Fertile Window",
    "ovulation": "Ovulation Day",
    "prediction": "Predicted Period Start",
}
NO_CALENDAR_EVENT_LABEL = "No events on this day"
