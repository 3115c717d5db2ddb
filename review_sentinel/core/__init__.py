"""
Core utilities: exceptions shared by the config layer, taggers and scorers.
"""

from review_sentinel.core.exceptions import (
    ConfigurationError,
    InvalidReviewInput,
    ReviewSentinelError,
    TaggerError,
)

__all__ = [
    "ConfigurationError",
    "InvalidReviewInput",
    "ReviewSentinelError",
    "TaggerError",
]
