"""
Application settings.

A frozen Settings snapshot built from the environment (and .env) on first use
and cached for the process. Tests call reset_settings_cache() after changing
the environment. LOG_LEVEL / LOG_FORMAT are read through config.env by
review_sentinel.sentinel_logging.configure_structlog().
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from review_sentinel.config.env import get_tagger_name, get_vocabulary_path
from review_sentinel.core.exceptions import ConfigurationError

KNOWN_TAGGERS = ("lexicon", "vader")


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one process."""

    tagger: str = "lexicon"
    """Sentiment tagger backend name (see analysis_engine.tagging.get_tagger)."""
    vocabulary_path: Path | None = None
    """Optional JSON vocabulary override; None uses the built-in tables."""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings.

    Raises ConfigurationError for an unknown tagger backend.
    """
    tagger = get_tagger_name()
    if tagger not in KNOWN_TAGGERS:
        raise ConfigurationError(
            f"Unknown REVIEW_SENTINEL_TAGGER {tagger!r}; expected one of {', '.join(KNOWN_TAGGERS)}"
        )
    return Settings(tagger=tagger, vocabulary_path=get_vocabulary_path())


def reset_settings_cache() -> None:
    """Drop the cached Settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
