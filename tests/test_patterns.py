"""
Tests for the pattern matcher and vocabulary loading.
"""

from __future__ import annotations

import json

import pytest

from review_sentinel.analysis_engine.patterns import (
    CAPITAL_RUNS,
    EMOTIONAL_WORDS,
    EXCESSIVE_CAPITALS,
    FAKE_TELLS,
    PATTERN_NAMES,
    PERSONAL_PRONOUNS,
    REPEATED_PUNCTUATION,
    SPAM_PHRASES,
    PatternMatcher,
)
from review_sentinel.analysis_engine.vocabulary import (
    DEFAULT_VOCABULARY,
    EMOTIONAL_WORDS as DEFAULT_EMOTIONAL_WORDS,
    Vocabulary,
    load_vocabulary,
)
from review_sentinel.core.exceptions import ConfigurationError


def test_default_vocabulary_tables():
    assert DEFAULT_VOCABULARY.promotional_phrases == ("click here", "buy now", "discount", "offer", "limited time")
    assert DEFAULT_VOCABULARY.personal_pronouns == ("I", "me", "my", "mine", "we", "our", "ours")
    assert DEFAULT_VOCABULARY.fake_tells == ("amazing", "incredible", "awesome", "fantastic", "perfect", "best ever")
    assert len(DEFAULT_EMOTIONAL_WORDS) == 10


def test_emotional_words_match_substrings(matcher):
    """'goods' counts 'good' and 'bestsellers' counts 'best'."""
    assert matcher.count(EMOTIONAL_WORDS, "These goods are bestsellers") == 2
    assert matcher.count(EMOTIONAL_WORDS, "LOVE it, Hate it, terrible") == 3


def test_pronouns_match_whole_words_only(matcher):
    assert matcher.count(PERSONAL_PRONOUNS, "This is it") == 0
    assert matcher.count(PERSONAL_PRONOUNS, "I think my dog likes it") == 2
    assert matcher.count(PERSONAL_PRONOUNS, "Mine is OURS, not theirs") == 2


def test_spam_phrases_case_insensitive(matcher):
    assert matcher.has_match(SPAM_PHRASES, "LIMITED TIME offer")
    assert matcher.count(SPAM_PHRASES, "LIMITED TIME offer") == 2
    assert not matcher.has_match(SPAM_PHRASES, "Arrived on time, works fine")


def test_capital_thresholds_differ(matcher):
    """Two-letter runs count as capital runs but not as excessive capitals."""
    assert matcher.count(CAPITAL_RUNS, "OK TV") == 2
    assert matcher.count(EXCESSIVE_CAPITALS, "OK TV") == 0
    assert matcher.count(EXCESSIVE_CAPITALS, "WOW this is GREAT") == 2


def test_repeated_punctuation_and_fake_tells(matcher):
    assert matcher.count(REPEATED_PUNCTUATION, "Wow!!! Really?? ok.") == 2
    assert matcher.count(FAKE_TELLS, "Amazing! The best ever.") == 2


def test_signals_cover_every_detector(matcher):
    signals = matcher.signals("BUY NOW!!! best ever")
    assert tuple(signals) == PATTERN_NAMES
    assert signals[SPAM_PHRASES] == 1
    assert signals[FAKE_TELLS] == 1
    assert signals[REPEATED_PUNCTUATION] == 1


def test_unknown_pattern_name_raises(matcher):
    with pytest.raises(KeyError):
        matcher.count("no_such_pattern", "text")


def test_custom_vocabulary_is_injected():
    custom = PatternMatcher(Vocabulary(promotional_phrases=("free shipping",)))
    assert custom.has_match(SPAM_PHRASES, "Free Shipping today")
    assert not custom.has_match(SPAM_PHRASES, "buy now")


def test_load_vocabulary_none_returns_defaults():
    assert load_vocabulary(None) is DEFAULT_VOCABULARY


def test_load_vocabulary_missing_file_returns_defaults(tmp_path):
    assert load_vocabulary(tmp_path / "missing.json") is DEFAULT_VOCABULARY


def test_load_vocabulary_overrides_only_given_keys(tmp_path):
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps({"promotional_phrases": ["free shipping", "promo code"]}), encoding="utf-8")
    vocab = load_vocabulary(path)
    assert vocab.promotional_phrases == ("free shipping", "promo code")
    assert vocab.emotional_words == DEFAULT_VOCABULARY.emotional_words


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps(["buy now"]),
        json.dumps({"spam": ["buy now"]}),
        json.dumps({"emotional_words": []}),
        json.dumps({"emotional_words": ["love", ""]}),
        json.dumps({"fake_tells": "amazing"}),
    ],
)
def test_load_vocabulary_rejects_malformed_content(tmp_path, content):
    path = tmp_path / "vocab.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_vocabulary(path)
