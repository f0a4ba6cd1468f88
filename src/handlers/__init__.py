"""
Lambda handlers package for AWS Lambda functions.
"""
from .prediction import handler
from .period_log import handler as period_log_handler

__all__ = ["handler", "period_log_handler"]
