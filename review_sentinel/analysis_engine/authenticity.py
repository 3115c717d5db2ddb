"""
Rule-based authenticity scoring for a single review.

Four rules run in a fixed order: promotional content, missing personal
perspective, limited vocabulary diversity, high emotional density. Each
triggered rule adds its weight to the fake score and contributes one
human-readable reason. No ML; thresholds live in AuthenticityConfig.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from review_sentinel.analysis_engine.models import AuthenticityResult, LexicalMetrics
from review_sentinel.analysis_engine.patterns import (
    EMOTIONAL_WORDS,
    PERSONAL_PRONOUNS,
    SPAM_PHRASES,
    PatternMatcher,
)
from review_sentinel.sentinel_logging import get_logger

logger = get_logger(__name__)

REASON_SPAM = "Contains promotional or spam-like content"
REASON_NO_PERSPECTIVE = "Lacks personal perspective"
REASON_LOW_DIVERSITY = "Limited vocabulary diversity"
REASON_HIGH_EMOTION = "Unusually high emotional content"


@dataclass(frozen=True)
class AuthenticityConfig:
    """
    Weights and thresholds for the authenticity rules.

    Defaults are the production weights; tune per deployment.
    """

    spam_weight: float = 0.3

    no_perspective_weight: float = 0.2
    # Only texts longer than this many words are penalized for missing pronouns.
    no_perspective_min_words: int = 30

    low_diversity_weight: float = 0.15
    # unique_words / word_count strictly below this triggers.
    low_diversity_threshold: float = 0.4

    high_emotion_weight: float = 0.25
    # emotional matches / word_count strictly above this triggers.
    high_emotion_threshold: float = 0.3

    # fake_score strictly above this marks the review as fake.
    fake_threshold: float = 0.5
    # Added to fake_score for the reported confidence (then clamped to 1).
    confidence_base: float = 0.3


@dataclass(frozen=True)
class RuleHit:
    rule_name: str
    weight: float
    reason: str


def _check_spam(text: str, metrics: LexicalMetrics, matcher: PatternMatcher, config: AuthenticityConfig) -> RuleHit | None:
    if matcher.has_match(SPAM_PHRASES, text):
        return RuleHit("spam_phrases", config.spam_weight, REASON_SPAM)
    return None


def _check_personal_perspective(
    text: str, metrics: LexicalMetrics, matcher: PatternMatcher, config: AuthenticityConfig
) -> RuleHit | None:
    if metrics.word_count <= config.no_perspective_min_words:
        return None
    if matcher.count(PERSONAL_PRONOUNS, text) == 0:
        return RuleHit("no_personal_pronouns", config.no_perspective_weight, REASON_NO_PERSPECTIVE)
    return None


def _check_vocabulary_diversity(
    text: str, metrics: LexicalMetrics, matcher: PatternMatcher, config: AuthenticityConfig
) -> RuleHit | None:
    diversity = metrics.vocabulary_diversity
    if diversity is not None and diversity < config.low_diversity_threshold:
        return RuleHit("low_vocabulary_diversity", config.low_diversity_weight, REASON_LOW_DIVERSITY)
    return None


def _check_emotional_density(
    text: str, metrics: LexicalMetrics, matcher: PatternMatcher, config: AuthenticityConfig
) -> RuleHit | None:
    if metrics.word_count == 0:
        return None
    density = matcher.count(EMOTIONAL_WORDS, text) / metrics.word_count
    if density > config.high_emotion_threshold:
        return RuleHit("high_emotional_density", config.high_emotion_weight, REASON_HIGH_EMOTION)
    return None


RuleCheck = Callable[[str, LexicalMetrics, PatternMatcher, AuthenticityConfig], "RuleHit | None"]

# Evaluation order is the order of reasons in the result.
RULES: tuple[RuleCheck, ...] = (
    _check_spam,
    _check_personal_perspective,
    _check_vocabulary_diversity,
    _check_emotional_density,
)


def assess_authenticity(
    text: str,
    metrics: LexicalMetrics,
    matcher: PatternMatcher,
    config: AuthenticityConfig | None = None,
) -> AuthenticityResult:
    """
    Run the rules in order and combine them into a verdict.

    is_fake = fake_score > fake_threshold; confidence = min(1, fake_score + confidence_base).
    An empty reasons tuple means no rule fired.
    """
    config = config or AuthenticityConfig()
    fake_score = 0.0
    hits: list[RuleHit] = []
    for rule in RULES:
        hit = rule(text, metrics, matcher, config)
        if hit is None:
            continue
        fake_score += hit.weight
        hits.append(hit)

    confidence = max(0.0, min(1.0, fake_score + config.confidence_base))
    result = AuthenticityResult(
        is_fake=fake_score > config.fake_threshold,
        confidence=confidence,
        reasons=tuple(h.reason for h in hits),
        fake_score=fake_score,
    )
    logger.debug(
        "authenticity_result",
        fake_score=fake_score,
        is_fake=result.is_fake,
        rules=[h.rule_name for h in hits],
    )
    return result
