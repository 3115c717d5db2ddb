"""Command-line tools for Review Sentinel."""
