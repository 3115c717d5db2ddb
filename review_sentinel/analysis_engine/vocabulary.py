"""
Fixed vocabularies for the pattern matcher.

DEFAULT_VOCABULARY holds the built-in tables. load_vocabulary() reads an
optional JSON override (REVIEW_SENTINEL_VOCAB_PATH) whose keys replace the
matching default tables; missing keys keep the defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path

from review_sentinel.core.exceptions import ConfigurationError
from review_sentinel.sentinel_logging import get_logger

logger = get_logger(__name__)

PROMOTIONAL_PHRASES = ("click here", "buy now", "discount", "offer", "limited time")
EMOTIONAL_WORDS = ("love", "hate", "terrible", "excellent", "awful", "great", "bad", "good", "worst", "best")
PERSONAL_PRONOUNS = ("I", "me", "my", "mine", "we", "our", "ours")
# Detected and reported in signals; not used by the authenticity rules.
FAKE_TELLS = ("amazing", "incredible", "awesome", "fantastic", "perfect", "best ever")

VOCABULARY_KEYS = ("promotional_phrases", "emotional_words", "personal_pronouns", "fake_tells")


@dataclass(frozen=True)
class Vocabulary:
    promotional_phrases: tuple[str, ...] = PROMOTIONAL_PHRASES
    emotional_words: tuple[str, ...] = EMOTIONAL_WORDS
    personal_pronouns: tuple[str, ...] = PERSONAL_PRONOUNS
    fake_tells: tuple[str, ...] = FAKE_TELLS


DEFAULT_VOCABULARY = Vocabulary()


def _parse_table(key: str, value: object) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ConfigurationError(f"Vocabulary key {key!r} must be a non-empty list of strings")
    words: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ConfigurationError(f"Vocabulary key {key!r} contains an invalid entry: {item!r}")
        words.append(item.strip())
    return tuple(words)


def load_vocabulary(path: Path | str | None) -> Vocabulary:
    """
    Load a vocabulary override from JSON.

    None or a missing file returns DEFAULT_VOCABULARY (missing file logs a warning).
    Unreadable JSON, a non-object root, unknown keys or bad entries raise ConfigurationError.
    """
    if path is None:
        return DEFAULT_VOCABULARY
    path = Path(path)
    if not path.is_file():
        logger.warning("vocabulary_file_missing", path=str(path))
        return DEFAULT_VOCABULARY
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read vocabulary file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Vocabulary file {path} must contain a JSON object")

    unknown = sorted(set(data) - set(VOCABULARY_KEYS))
    if unknown:
        raise ConfigurationError(f"Unknown vocabulary keys in {path}: {', '.join(unknown)}")

    overrides = {key: _parse_table(key, value) for key, value in data.items()}
    logger.info("vocabulary_loaded", path=str(path), overridden=sorted(overrides))
    return replace(DEFAULT_VOCABULARY, **overrides)
