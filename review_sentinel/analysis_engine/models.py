"""
Data models for analysis engine input and output.

Every model is created fresh per analysis and never mutated afterwards.
to_dict() gives a JSON-serializable view with stable key order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from review_sentinel.core.exceptions import TaggerError

VERDICT_FAKE = "Potentially Fake Review"
VERDICT_AUTHENTIC = "Likely Authentic Review"
ERROR_REASON = "Error processing review"


class SentimentLabel(str, Enum):
    VERY_POSITIVE = "Very Positive"
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"
    VERY_NEGATIVE = "Very Negative"


@dataclass(frozen=True)
class LexicalMetrics:
    """Surface statistics of one review text."""

    word_count: int = 0
    unique_words: int = 0
    """Distinct tokens after case folding; no stemming or punctuation stripping."""
    avg_word_length: float = 0.0
    """Mean raw token length including attached punctuation; 0 for empty text."""
    emotion_intensity: float = 0.0
    """Composite of emotional words, exclamations and capital runs, in [0, 1]."""

    @property
    def vocabulary_diversity(self) -> float | None:
        """unique_words / word_count; None when there are no words."""
        if self.word_count == 0:
            return None
        return self.unique_words / self.word_count

    def to_dict(self) -> dict[str, Any]:
        return {
            "word_count": self.word_count,
            "unique_words": self.unique_words,
            "avg_word_length": self.avg_word_length,
            "emotion_intensity": self.emotion_intensity,
        }


@dataclass(frozen=True)
class TagCounts:
    """
    Counts of terms a tagger recognized as positive, negative or neutral.

    Validated on construction: a tagger returning anything other than
    non-negative integers is treated as a tagger failure.
    """

    positive: int = 0
    negative: int = 0
    neutral: int = 0

    def __post_init__(self) -> None:
        for name in ("positive", "negative", "neutral"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise TaggerError(f"Tag count {name} must be a non-negative integer, got {value!r}")

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral


@dataclass(frozen=True)
class SentimentResult:
    score: float = 0.0
    """Normalized sentiment in [-1, 1]."""
    label: SentimentLabel = SentimentLabel.NEUTRAL
    confidence: float = 0.0
    degraded: bool = False
    """True when the tagger failed and this is the neutral fallback."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label.value,
            "confidence": self.confidence,
            "degraded": self.degraded,
        }


@dataclass(frozen=True)
class AuthenticityResult:
    """
    Verdict of the authenticity rules.

    reasons follow rule evaluation order and hold one entry per triggered rule.
    """

    is_fake: bool = False
    confidence: float = 0.0
    reasons: tuple[str, ...] = ()
    fake_score: float = 0.0
    """Raw accumulated rule weight before thresholding."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_fake": self.is_fake,
            "confidence": self.confidence,
            "reasons": list(self.reasons),
            "fake_score": self.fake_score,
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Complete result of analyze_review(): authenticity, sentiment and metrics."""

    authenticity: AuthenticityResult
    sentiment: SentimentResult
    metrics: LexicalMetrics
    signals: Mapping[str, int] = field(default_factory=dict, hash=False)
    """Hit count per pattern detector; informational, not used in scoring. Read-only."""
    degraded: bool = False
    """True when the pipeline failed and this is the fixed error report."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "signals", MappingProxyType(dict(self.signals)))

    @property
    def is_fake(self) -> bool:
        return self.authenticity.is_fake

    @property
    def confidence(self) -> float:
        return self.authenticity.confidence

    @property
    def reasons(self) -> tuple[str, ...]:
        return self.authenticity.reasons

    @property
    def verdict(self) -> str:
        return VERDICT_FAKE if self.is_fake else VERDICT_AUTHENTIC

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_fake": self.is_fake,
            "confidence": self.confidence,
            "reasons": list(self.reasons),
            "verdict": self.verdict,
            "degraded": self.degraded,
            "sentiment": self.sentiment.to_dict(),
            "metrics": self.metrics.to_dict(),
            "signals": dict(self.signals),
        }


def degraded_sentiment() -> SentimentResult:
    """Neutral, zero-confidence sentiment used when tagging fails."""
    return SentimentResult(score=0.0, label=SentimentLabel.NEUTRAL, confidence=0.0, degraded=True)


def error_report() -> AnalysisReport:
    """Fixed report returned when the pipeline itself fails."""
    return AnalysisReport(
        authenticity=AuthenticityResult(
            is_fake=False,
            confidence=0.0,
            reasons=(ERROR_REASON,),
            fake_score=0.0,
        ),
        sentiment=degraded_sentiment(),
        metrics=LexicalMetrics(),
        signals={},
        degraded=True,
    )
