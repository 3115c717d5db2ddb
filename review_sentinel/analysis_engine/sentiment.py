"""
Sentiment scorer: tag counts + emotion intensity -> score, label, confidence.

Formula: base = (positive - negative) / total, amplified by emotion
intensity (up to x1.5) and clamped to [-1, 1]. Confidence grows with the
number of tagged terms (plateau at 10) and shrinks with the neutral share.
A tagger failure yields the degraded neutral result instead of raising.
"""

from __future__ import annotations

from review_sentinel.analysis_engine.models import (
    SentimentLabel,
    SentimentResult,
    TagCounts,
    degraded_sentiment,
)
from review_sentinel.analysis_engine.tagging import SentimentTagger
from review_sentinel.sentinel_logging import get_logger

logger = get_logger(__name__)

EMOTION_AMPLIFICATION = 0.5
CONFIDENCE_SAMPLE_PLATEAU = 10

# (threshold, label) pairs checked in order; first match wins.
POSITIVE_BANDS = ((0.6, SentimentLabel.VERY_POSITIVE), (0.2, SentimentLabel.POSITIVE))
NEGATIVE_BANDS = ((-0.6, SentimentLabel.VERY_NEGATIVE), (-0.2, SentimentLabel.NEGATIVE))


def sentiment_label(score: float) -> SentimentLabel:
    """> 0.6 Very Positive; > 0.2 Positive; < -0.6 Very Negative; < -0.2 Negative; else Neutral."""
    for threshold, label in POSITIVE_BANDS:
        if score > threshold:
            return label
    for threshold, label in NEGATIVE_BANDS:
        if score < threshold:
            return label
    return SentimentLabel.NEUTRAL


def score_from_counts(counts: TagCounts, emotion_intensity: float) -> SentimentResult:
    """Pure scoring step; a zero total is treated as 1 (score 0, confidence 0)."""
    total = counts.total or 1
    base_score = (counts.positive - counts.negative) / total
    weighted = base_score * (1 + emotion_intensity * EMOTION_AMPLIFICATION)
    score = max(-1.0, min(1.0, weighted))
    confidence = (total / CONFIDENCE_SAMPLE_PLATEAU) * (1 - abs(counts.neutral / total))
    confidence = max(0.0, min(1.0, confidence))
    return SentimentResult(score=score, label=sentiment_label(score), confidence=confidence)


def score_sentiment(
    text: str,
    emotion_intensity: float,
    tagger: SentimentTagger,
) -> SentimentResult:
    """
    Tag the text once and score it.

    Any exception from the tagger (including invalid counts) is logged and
    turned into the degraded neutral sentiment; it never propagates.
    """
    try:
        counts = tagger.tag(text)
        if not isinstance(counts, TagCounts):
            counts = TagCounts(*counts)
    except Exception as e:
        logger.warning("sentiment_tagger_failed", tagger=type(tagger).__name__, error=str(e))
        return degraded_sentiment()

    result = score_from_counts(counts, emotion_intensity)
    logger.debug(
        "sentiment_result",
        positive=counts.positive,
        negative=counts.negative,
        neutral=counts.neutral,
        score=result.score,
        label=result.label.value,
        confidence=result.confidence,
    )
    return result
