"""
Structured logging for Review Sentinel.

JSON logs with timestamp, level and event_type. Use get_logger() in every
engine module for aggregation-friendly output.
"""

from review_sentinel.sentinel_logging.logger import configure_structlog, get_logger

__all__ = ["configure_structlog", "get_logger"]
