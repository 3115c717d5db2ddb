"""
Tests for structured logging (sentinel_logging) and the events the pipeline emits.

Each test reconfigures structlog onto the capsys stream and parses the JSON lines.
"""

from __future__ import annotations

import json
import logging
import sys

import pytest

from review_sentinel.analysis_engine.pipeline import analyze_review
from review_sentinel.sentinel_logging import configure_structlog, get_logger

MARKER = "ZEBRAQUOKKA"


@pytest.fixture
def read_logs(capsys):
    """Route logs (DEBUG, JSON) to capsys; read_logs() -> (raw stderr, parsed lines)."""
    configure_structlog(level=logging.DEBUG, fmt="json", stream=sys.stderr)
    capsys.readouterr()

    def read():
        err = capsys.readouterr().err
        return err, [json.loads(line) for line in err.splitlines() if line.strip()]

    return read


def _events(entries):
    return [e["event_type"] for e in entries]


def test_get_logger_line_shape(read_logs):
    get_logger("review_sentinel.sample").info("cache_warmed", size=3)
    _, entries = read_logs()
    assert len(entries) == 1
    entry = entries[0]
    assert entry["event_type"] == "cache_warmed"
    assert entry["message"] == "cache_warmed"
    assert entry["level"] == "info"
    assert entry["logger"] == "review_sentinel.sample"
    assert entry["size"] == 3
    assert "timestamp" in entry


def test_pipeline_logs_start_and_done(read_logs, fixed_tagger):
    text = f"{MARKER} buy now"
    analyze_review(text, tagger=fixed_tagger(positive=1))
    err, entries = read_logs()

    events = _events(entries)
    assert events[0] == "analysis_pipeline_start"
    assert events[-1] == "analysis_pipeline_done"
    assert {"lexical_metrics_result", "sentiment_result", "authenticity_result"} <= set(events)

    start = entries[0]
    assert start["level"] == "info"
    assert start["text_length"] == len(text)
    done = entries[-1]
    assert done["is_fake"] is False
    assert done["reason_count"] == 1
    assert MARKER not in err


def test_pipeline_failure_logged_with_traceback(monkeypatch, read_logs, fixed_tagger):
    def boom(text, matcher):
        raise RuntimeError("metrics exploded")

    monkeypatch.setattr("review_sentinel.analysis_engine.pipeline.extract_metrics", boom)
    analyze_review(f"{MARKER} great", tagger=fixed_tagger())
    err, entries = read_logs()

    events = _events(entries)
    assert "analysis_pipeline_done" not in events
    failed = entries[events.index("analysis_pipeline_failed")]
    assert failed["level"] == "error"
    assert failed["error_type"] == "RuntimeError"
    assert "Traceback" in failed["exception"]
    assert "metrics exploded" in failed["exception"]
    assert MARKER not in err


def test_tagger_failure_logged_without_text(read_logs, failing_tagger):
    analyze_review(f"{MARKER} love it", tagger=failing_tagger)
    err, entries = read_logs()

    warning = entries[_events(entries).index("sentiment_tagger_failed")]
    assert warning["level"] == "warning"
    assert warning["tagger"] == "FailingTagger"
    assert _events(entries)[-1] == "analysis_pipeline_done"
    assert MARKER not in err


def test_level_filters_lower_events(capsys, fixed_tagger):
    configure_structlog(level="WARNING", fmt="json", stream=sys.stderr)
    analyze_review("fine product", tagger=fixed_tagger())
    assert capsys.readouterr().err == ""


def test_env_supplies_level_and_format(monkeypatch, capsys, fixed_tagger):
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.setenv("LOG_FORMAT", "console")
    configure_structlog(stream=sys.stderr)
    analyze_review("fine product", tagger=fixed_tagger())
    assert capsys.readouterr().err == ""

    monkeypatch.setenv("LOG_LEVEL", "info")
    configure_structlog(stream=sys.stderr)
    analyze_review("fine product", tagger=fixed_tagger())
    err = capsys.readouterr().err
    assert "analysis_pipeline_done" in err
    assert not err.lstrip().startswith("{")


def test_unknown_format_falls_back_to_json(read_logs):
    configure_structlog(fmt="xml", stream=sys.stderr)
    get_logger("review_sentinel.sample").info("cache_warmed")
    _, entries = read_logs()
    assert _events(entries) == ["cache_warmed"]
