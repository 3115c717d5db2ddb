"""
Analysis engine package: lexical metrics, sentiment and authenticity scoring.

Consumes raw review text, applies pattern detectors and rule-based scoring,
and produces an explainable AnalysisReport.
"""

from review_sentinel.analysis_engine.authenticity import (
    AuthenticityConfig,
    assess_authenticity,
)
from review_sentinel.analysis_engine.features import extract_metrics
from review_sentinel.analysis_engine.models import (
    AnalysisReport,
    AuthenticityResult,
    LexicalMetrics,
    SentimentLabel,
    SentimentResult,
    TagCounts,
    error_report,
)
from review_sentinel.analysis_engine.patterns import PatternMatcher
from review_sentinel.analysis_engine.pipeline import analyze_review
from review_sentinel.analysis_engine.sentiment import score_sentiment, sentiment_label
from review_sentinel.analysis_engine.tagging import (
    LexiconTagger,
    SentimentTagger,
    VaderTagger,
    get_tagger,
)
from review_sentinel.analysis_engine.vocabulary import (
    DEFAULT_VOCABULARY,
    Vocabulary,
    load_vocabulary,
)

__all__ = [
    "AuthenticityConfig",
    "assess_authenticity",
    "extract_metrics",
    "AnalysisReport",
    "AuthenticityResult",
    "LexicalMetrics",
    "SentimentLabel",
    "SentimentResult",
    "TagCounts",
    "error_report",
    "PatternMatcher",
    "analyze_review",
    "score_sentiment",
    "sentiment_label",
    "LexiconTagger",
    "SentimentTagger",
    "VaderTagger",
    "get_tagger",
    "DEFAULT_VOCABULARY",
    "Vocabulary",
    "load_vocabulary",
]
