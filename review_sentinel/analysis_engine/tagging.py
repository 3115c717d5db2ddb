"""
Sentiment tagging capability: tag(text) -> TagCounts.

The sentiment scorer depends only on the SentimentTagger protocol, so any
object with a tag() method can be injected (tests use a fixed stub).
Two backends ship here:

- LexiconTagger: built-in positive/negative/neutral word sets, no dependencies.
- VaderTagger: NLTK's VADER lexicon (pip extra "vader"); word valence decides
  the bucket. Needs the vader_lexicon data package.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Protocol

from review_sentinel.analysis_engine.models import TagCounts
from review_sentinel.core.exceptions import ConfigurationError, TaggerError
from review_sentinel.sentinel_logging import get_logger

logger = get_logger(__name__)

_TOKEN_RE = re.compile(r"[a-z']+")

POSITIVE_WORDS = frozenset({
    "good", "great", "excellent", "love", "loved", "like", "liked", "best", "nice",
    "happy", "pleased", "recommend", "recommended", "amazing", "awesome", "fantastic",
    "perfect", "wonderful", "superb", "reliable", "comfortable", "fast", "easy",
    "sturdy", "beautiful", "helpful", "friendly", "worth", "impressed", "satisfied",
})
NEGATIVE_WORDS = frozenset({
    "bad", "terrible", "awful", "hate", "hated", "worst", "poor", "broken", "broke",
    "disappointed", "disappointing", "useless", "cheap", "slow", "waste", "refund",
    "faulty", "defective", "rude", "horrible", "flimsy", "problem", "problems",
    "unhappy", "annoying", "fake", "scam", "return", "returned", "damaged",
})
NEUTRAL_WORDS = frozenset({
    "okay", "ok", "average", "fine", "decent", "mediocre", "normal", "alright",
    "standard", "fair", "adequate", "acceptable", "ordinary", "typical", "expected",
})

VADER_POLARITY_THRESHOLD = 0.5


class SentimentTagger(Protocol):
    def tag(self, text: str) -> TagCounts:
        ...


def _tokens(text: str) -> list[str]:
    return _TOKEN_RE.findall(text.lower())


class LexiconTagger:
    """Count tokens found in fixed positive, negative and neutral word sets."""

    def __init__(
        self,
        positive: Iterable[str] = POSITIVE_WORDS,
        negative: Iterable[str] = NEGATIVE_WORDS,
        neutral: Iterable[str] = NEUTRAL_WORDS,
    ):
        self.positive = frozenset(w.lower() for w in positive)
        self.negative = frozenset(w.lower() for w in negative)
        self.neutral = frozenset(w.lower() for w in neutral)

    def tag(self, text: str) -> TagCounts:
        pos = neg = neu = 0
        for token in _tokens(text):
            if token in self.positive:
                pos += 1
            elif token in self.negative:
                neg += 1
            elif token in self.neutral:
                neu += 1
        return TagCounts(positive=pos, negative=neg, neutral=neu)


class VaderTagger:
    """
    Bucket tokens by VADER lexicon valence.

    valence >= 0.5 counts positive, <= -0.5 negative, anything else in the
    lexicon neutral; tokens outside the lexicon are ignored. The lexicon is
    loaded from NLTK on first use unless one is injected.
    """

    def __init__(
        self,
        lexicon: Mapping[str, float] | None = None,
        threshold: float = VADER_POLARITY_THRESHOLD,
    ):
        self._lexicon = lexicon
        self.threshold = threshold

    def _load_lexicon(self) -> Mapping[str, float]:
        if self._lexicon is None:
            try:
                from nltk.sentiment import SentimentIntensityAnalyzer
            except ImportError as e:
                raise TaggerError("nltk is not installed; install the 'vader' extra") from e
            try:
                self._lexicon = SentimentIntensityAnalyzer().lexicon
            except LookupError as e:
                raise TaggerError("NLTK vader_lexicon data is not available") from e
            logger.info("vader_lexicon_loaded", size=len(self._lexicon))
        return self._lexicon

    def tag(self, text: str) -> TagCounts:
        lexicon = self._load_lexicon()
        pos = neg = neu = 0
        for token in _tokens(text):
            valence = lexicon.get(token)
            if valence is None:
                continue
            if valence >= self.threshold:
                pos += 1
            elif valence <= -self.threshold:
                neg += 1
            else:
                neu += 1
        return TagCounts(positive=pos, negative=neg, neutral=neu)


def get_tagger(name: str) -> SentimentTagger:
    """Build the tagger registered under name ("lexicon" or "vader")."""
    key = (name or "").strip().lower()
    if key == "lexicon":
        return LexiconTagger()
    if key == "vader":
        return VaderTagger()
    raise ConfigurationError(f"Unknown sentiment tagger {name!r}")
