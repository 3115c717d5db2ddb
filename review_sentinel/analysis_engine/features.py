"""
Lexical metrics extraction from review text.

Converts raw text into word count, unique-word count, average word length
and emotion intensity. No scoring logic; output feeds the sentiment and
authenticity scorers.
"""

from __future__ import annotations

from review_sentinel.analysis_engine.models import LexicalMetrics
from review_sentinel.analysis_engine.patterns import (
    CAPITAL_RUNS,
    EMOTIONAL_WORDS,
    EXCLAMATIONS,
    PatternMatcher,
)
from review_sentinel.sentinel_logging import get_logger

logger = get_logger(__name__)

EMOTIONAL_WORD_WEIGHT = 0.2
EXCLAMATION_WEIGHT = 0.15
CAPITAL_RUN_WEIGHT = 0.1
INTENSITY_DIVISOR = 10


def tokenize(text: str) -> list[str]:
    """Split on runs of whitespace; empty or whitespace-only text gives no tokens."""
    return text.split()


def emotion_intensity(text: str, matcher: PatternMatcher) -> float:
    """
    min(1, (emotional*0.2 + exclamations*0.15 + capital_runs*0.1) / 10).

    Capital runs are two or more consecutive uppercase letters.
    """
    emotional = matcher.count(EMOTIONAL_WORDS, text)
    exclamations = matcher.count(EXCLAMATIONS, text)
    capitals = matcher.count(CAPITAL_RUNS, text)
    raw = (
        emotional * EMOTIONAL_WORD_WEIGHT
        + exclamations * EXCLAMATION_WEIGHT
        + capitals * CAPITAL_RUN_WEIGHT
    ) / INTENSITY_DIVISOR
    return min(1.0, raw)


def extract_metrics(text: str, matcher: PatternMatcher) -> LexicalMetrics:
    """Compute LexicalMetrics for one text. Zero words gives zero counts and length."""
    words = tokenize(text)
    word_count = len(words)
    unique_words = len({w.lower() for w in words})
    avg_word_length = sum(len(w) for w in words) / word_count if word_count else 0.0

    metrics = LexicalMetrics(
        word_count=word_count,
        unique_words=unique_words,
        avg_word_length=avg_word_length,
        emotion_intensity=emotion_intensity(text, matcher),
    )
    logger.debug(
        "lexical_metrics_result",
        word_count=metrics.word_count,
        unique_words=metrics.unique_words,
        emotion_intensity=metrics.emotion_intensity,
    )
    return metrics
