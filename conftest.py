"""Configure test suite environment"""
import os
import sys

# Add the project root directory to the Python path so `src.` and `tests.` import
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

# Lambda runtime settings the handlers and DynamoDB client read at import time
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "cycle_tracker")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
os.environ.setdefault("TRACKER_TABLE_NAME", "TrackerTable-test")
