"""
Structured logging: timestamp, level, event_type and logger name on every line.

Level and renderer come from LOG_LEVEL / LOG_FORMAT (review_sentinel.config.env)
unless configure_structlog() is called with explicit values, as the CLI does
for --verbose. Output goes to stderr so stdout stays free for results.
Review text is never passed to the logger, only its length and derived values.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

import structlog

from review_sentinel.config.env import get_log_format, get_log_level

LOG_FORMATS = ("json", "console")


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def _level_value(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.strip().upper(), logging.INFO)


def configure_structlog(
    level: int | str | None = None,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    (Re)configure structlog for the whole process.

    level: logging level name or number; None reads LOG_LEVEL.
    fmt: "json" or "console"; None reads LOG_FORMAT. Anything else falls back to json.
    stream: where lines are written; None means the current sys.stderr.
    """
    level_value = _level_value(get_log_level() if level is None else level)
    fmt = (get_log_format() if fmt is None else fmt).strip().lower()
    if fmt not in LOG_FORMATS:
        fmt = "json"
    stream = stream or sys.stderr

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        # Module-level loggers must follow later reconfiguration.
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("analysis_pipeline_done", is_fake=False, reason_count=1)
    Output (JSON): {"event_type": "analysis_pipeline_done", "is_fake": false, "reason_count": 1, "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    return structlog.get_logger(name, logger=name)
