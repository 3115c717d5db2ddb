"""
Pytest fixtures for Review Sentinel tests.

Every test starts from a clean configuration: sentinel env vars unset and the
settings / matcher caches dropped. FixedTagger stands in for the tagging
capability so sentiment is deterministic.
"""

from __future__ import annotations

import pytest

from review_sentinel.analysis_engine.models import TagCounts

SENTINEL_ENV_VARS = ("REVIEW_SENTINEL_TAGGER", "REVIEW_SENTINEL_VOCAB_PATH", "LOG_LEVEL", "LOG_FORMAT")


class FixedTagger:
    """Returns the same counts for every text and records each call."""

    def __init__(self, positive: int = 0, negative: int = 0, neutral: int = 0):
        self.counts = TagCounts(positive=positive, negative=negative, neutral=neutral)
        self.calls: list[str] = []

    def tag(self, text: str) -> TagCounts:
        self.calls.append(text)
        return self.counts


class FailingTagger:
    """Simulates an unavailable tagging capability."""

    def __init__(self):
        self.calls = 0

    def tag(self, text: str) -> TagCounts:
        self.calls += 1
        raise RuntimeError("tagger offline")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Unset sentinel env vars, reset cached settings and matchers, restore logging config."""
    from review_sentinel.analysis_engine import pipeline
    from review_sentinel.config import reset_settings_cache
    from review_sentinel.sentinel_logging import configure_structlog

    for name in SENTINEL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    pipeline._matcher_for.cache_clear()
    pipeline._tagger_for.cache_clear()
    yield
    reset_settings_cache()
    pipeline._matcher_for.cache_clear()
    pipeline._tagger_for.cache_clear()
    for name in SENTINEL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    configure_structlog()


@pytest.fixture
def matcher():
    from review_sentinel.analysis_engine.patterns import PatternMatcher

    return PatternMatcher()


@pytest.fixture
def fixed_tagger():
    """Factory: fixed_tagger(positive, negative, neutral) -> FixedTagger."""
    return FixedTagger


@pytest.fixture
def failing_tagger():
    return FailingTagger()
