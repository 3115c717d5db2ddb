"""
Review Sentinel: explainable fake-review and sentiment scoring for a single review text.

Turns raw text into lexical metrics, a sentiment estimate and an
authenticity verdict with the reasons behind it. Stateless and
request-scoped; see analysis_engine.analyze_review for the entry point.
"""

__version__ = "0.1.0"
