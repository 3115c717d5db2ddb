"""
Analysis pipeline: run full review analysis (metrics -> sentiment -> authenticity).

Single entrypoint for the CLI and any host application. analyze_review()
always returns an AnalysisReport: a tagger failure degrades only the
sentiment part, and any other failure returns the fixed error report.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from review_sentinel.analysis_engine.authenticity import AuthenticityConfig, assess_authenticity
from review_sentinel.analysis_engine.features import extract_metrics
from review_sentinel.analysis_engine.models import AnalysisReport, error_report
from review_sentinel.analysis_engine.patterns import PatternMatcher
from review_sentinel.analysis_engine.sentiment import score_sentiment
from review_sentinel.analysis_engine.tagging import SentimentTagger, get_tagger
from review_sentinel.analysis_engine.vocabulary import load_vocabulary
from review_sentinel.config import get_settings
from review_sentinel.core.exceptions import InvalidReviewInput
from review_sentinel.sentinel_logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=4)
def _matcher_for(vocabulary_path: Path | None, mtime_ns: int | None) -> PatternMatcher:
    return PatternMatcher(load_vocabulary(vocabulary_path))


def _mtime_ns(path: Path | None) -> int | None:
    if path is None:
        return None
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


def default_matcher() -> PatternMatcher:
    """
    PatternMatcher for the configured vocabulary (built-in tables unless overridden).

    Cached per (path, modification time): creating or editing the override file
    takes effect on the next analysis.
    """
    path = get_settings().vocabulary_path
    return _matcher_for(path, _mtime_ns(path))


@lru_cache(maxsize=4)
def _tagger_for(name: str) -> SentimentTagger:
    return get_tagger(name)


def default_tagger() -> SentimentTagger:
    """Tagger for the configured backend (REVIEW_SENTINEL_TAGGER), built once per backend."""
    return _tagger_for(get_settings().tagger)


def analyze_review(
    text: str,
    *,
    tagger: SentimentTagger | None = None,
    matcher: PatternMatcher | None = None,
    config: AuthenticityConfig | None = None,
) -> AnalysisReport:
    """
    Analyze one review text.

    Returns AnalysisReport with authenticity verdict, sentiment and lexical metrics.
    Never raises: configuration problems, non-string input and unexpected faults
    are logged and yield error_report().
    """
    try:
        if not isinstance(text, str):
            raise InvalidReviewInput(f"Review text must be str, got {type(text).__name__}")
        logger.info("analysis_pipeline_start", text_length=len(text))

        matcher = matcher or default_matcher()
        tagger = tagger or default_tagger()

        metrics = extract_metrics(text, matcher)
        sentiment = score_sentiment(text, metrics.emotion_intensity, tagger)
        authenticity = assess_authenticity(text, metrics, matcher, config)

        report = AnalysisReport(
            authenticity=authenticity,
            sentiment=sentiment,
            metrics=metrics,
            signals=matcher.signals(text),
        )
    except Exception as e:
        logger.error("analysis_pipeline_failed", error=str(e), error_type=type(e).__name__, exc_info=True)
        return error_report()

    logger.info(
        "analysis_pipeline_done",
        is_fake=report.is_fake,
        confidence=report.confidence,
        sentiment_label=report.sentiment.label.value,
        sentiment_degraded=report.sentiment.degraded,
        reason_count=len(report.reasons),
    )
    return report
