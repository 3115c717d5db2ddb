"""
Environment variable loading for Review Sentinel.

- REVIEW_SENTINEL_TAGGER: lexicon | vader (default: lexicon)
- REVIEW_SENTINEL_VOCAB_PATH: optional JSON file overriding the fixed vocabularies
- LOG_LEVEL: logging level name (default: INFO)
- LOG_FORMAT: json | console (default: json)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is review_sentinel/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_TAGGER = "lexicon"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"


def load_sentinel_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    if _ENV_PATH.is_file():
        load_dotenv(_ENV_PATH, override=False)


def get_tagger_name() -> str:
    """Return REVIEW_SENTINEL_TAGGER lowercased; default lexicon."""
    load_sentinel_env()
    return (os.getenv("REVIEW_SENTINEL_TAGGER") or DEFAULT_TAGGER).strip().lower()


def get_vocabulary_path() -> Path | None:
    """Return REVIEW_SENTINEL_VOCAB_PATH as a Path, or None when unset."""
    load_sentinel_env()
    raw = (os.getenv("REVIEW_SENTINEL_VOCAB_PATH") or "").strip()
    return Path(raw) if raw else None


def get_log_level() -> str:
    """Return LOG_LEVEL uppercased; default INFO."""
    load_sentinel_env()
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()


def get_log_format() -> str:
    """Return LOG_FORMAT lowercased; default json."""
    load_sentinel_env()
    return (os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT).strip().lower()
