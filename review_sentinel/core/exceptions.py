"""
Application-level exceptions.

Scorers raise these internally; the analysis pipeline converts them into
degraded results so none of them reaches a caller of analyze_review().
"""

from __future__ import annotations


class ReviewSentinelError(Exception):
    """Base class for all Review Sentinel errors."""


class TaggerError(ReviewSentinelError):
    """The sentiment tagging capability failed or returned invalid counts."""


class InvalidReviewInput(ReviewSentinelError):
    """Input handed to the pipeline is not review text."""


class ConfigurationError(ReviewSentinelError):
    """A setting or vocabulary file is malformed."""
