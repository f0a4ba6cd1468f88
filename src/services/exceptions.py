"""
Service-level exceptions.

This module contains exceptions that can be raised by the cycle services
and the period log store.
"""
from typing import Any, Optional

class CycleDataError(Exception):
    """Base exception for problems with logged cycle data."""
    pass

class InvalidLogDateError(CycleDataError):
    """Raised in strict mode when a period log carries an unparsable date."""

    def __init__(self, log_id: Optional[str], value: Any, field: str = "startDate"):
        self.log_id = log_id
        self.value = value
        self.field = field
        super().__init__(
            f"Period log {log_id or '<unsaved>'} has invalid {field}: {value!r}"
        )
