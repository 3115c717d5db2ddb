"""
Named regular-pattern detectors used by the metrics extractor and the scorers.

Patterns are compiled once from an injected Vocabulary and never change.
Vocabulary patterns match case-insensitive substrings ("goods" counts "good"),
except personal pronouns, which match whole words only.
"""

from __future__ import annotations

import re
from typing import Iterable

from review_sentinel.analysis_engine.vocabulary import DEFAULT_VOCABULARY, Vocabulary

EXCESSIVE_CAPITALS = "excessive_capitals"
CAPITAL_RUNS = "capital_runs"
REPEATED_PUNCTUATION = "repeated_punctuation"
EXCLAMATIONS = "exclamations"
SPAM_PHRASES = "spam_phrases"
EMOTIONAL_WORDS = "emotional_words"
FAKE_TELLS = "fake_tells"
PERSONAL_PRONOUNS = "personal_pronouns"

PATTERN_NAMES = (
    EXCESSIVE_CAPITALS,
    CAPITAL_RUNS,
    REPEATED_PUNCTUATION,
    EXCLAMATIONS,
    SPAM_PHRASES,
    EMOTIONAL_WORDS,
    FAKE_TELLS,
    PERSONAL_PRONOUNS,
)


def _alternation(words: Iterable[str]) -> str:
    # Longest first so "best ever" wins over a shorter overlapping entry.
    ordered = sorted({w for w in words}, key=len, reverse=True)
    return "|".join(re.escape(w) for w in ordered)


class PatternMatcher:
    """Compiled detectors keyed by name; see PATTERN_NAMES."""

    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY):
        self.vocabulary = vocabulary
        self._patterns: dict[str, re.Pattern[str]] = {
            EXCESSIVE_CAPITALS: re.compile(r"[A-Z]{3,}"),
            CAPITAL_RUNS: re.compile(r"[A-Z]{2,}"),
            REPEATED_PUNCTUATION: re.compile(r"[!?.]{2,}"),
            EXCLAMATIONS: re.compile(r"!"),
            SPAM_PHRASES: re.compile(f"({_alternation(vocabulary.promotional_phrases)})", re.IGNORECASE),
            EMOTIONAL_WORDS: re.compile(f"({_alternation(vocabulary.emotional_words)})", re.IGNORECASE),
            FAKE_TELLS: re.compile(f"({_alternation(vocabulary.fake_tells)})", re.IGNORECASE),
            PERSONAL_PRONOUNS: re.compile(
                rf"\b({_alternation(vocabulary.personal_pronouns)})\b", re.IGNORECASE
            ),
        }

    def count(self, name: str, text: str) -> int:
        """Number of non-overlapping matches of the named pattern. KeyError for unknown names."""
        return sum(1 for _ in self._patterns[name].finditer(text))

    def has_match(self, name: str, text: str) -> bool:
        return self._patterns[name].search(text) is not None

    def signals(self, text: str) -> dict[str, int]:
        """Hit count for every detector, in PATTERN_NAMES order."""
        return {name: self.count(name, text) for name in PATTERN_NAMES}
