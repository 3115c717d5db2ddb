"""
Configuration management for Review Sentinel.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for tagger backend and vocabulary overrides.
"""

from review_sentinel.config.settings import Settings, get_settings, reset_settings_cache  # noqa: F401

__all__ = ["Settings", "get_settings", "reset_settings_cache"]
