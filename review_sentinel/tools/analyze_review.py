#!/usr/bin/env python3
"""
Analyze one review from the command line.

Reads the review from the positional argument, --file, or stdin, runs the
analysis pipeline and prints a short summary (or the full report with --json).

Usage:
  review-sentinel "Great product, I use it every day."
  py -m review_sentinel.tools.analyze_review --file review.txt --json
  echo "BUY NOW!!!" | review-sentinel --tagger vader
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from review_sentinel.analysis_engine.models import AnalysisReport
from review_sentinel.analysis_engine.pipeline import analyze_review
from review_sentinel.analysis_engine.tagging import get_tagger
from review_sentinel.core.exceptions import ConfigurationError
from review_sentinel.sentinel_logging import configure_structlog

EXIT_OK = 0
EXIT_NO_INPUT = 2


def confidence_band(value: float) -> str:
    """> 0.7 high, > 0.4 medium, otherwise low."""
    if value > 0.7:
        return "high"
    if value > 0.4:
        return "medium"
    return "low"


def tone_band(score: float) -> str:
    """> 0.3 positive, < -0.3 negative, otherwise mixed."""
    if score > 0.3:
        return "positive"
    if score < -0.3:
        return "negative"
    return "mixed"


def format_summary(report: AnalysisReport) -> str:
    s = report.sentiment
    m = report.metrics
    lines = [
        f"{report.verdict} (confidence {report.confidence * 100:.1f}%, {confidence_band(report.confidence)})",
        f"Sentiment: {s.label.value} score={s.score:.2f} tone={tone_band(s.score)} "
        f"confidence={s.confidence * 100:.1f}% ({confidence_band(s.confidence)})",
        f"Metrics: words={m.word_count} unique={m.unique_words} "
        f"avg_len={m.avg_word_length:.1f} emotion={m.emotion_intensity * 100:.1f}%",
    ]
    if report.reasons:
        lines.append("Key findings:")
        lines.extend(f"  - {r}" for r in report.reasons)
    else:
        lines.append("Key findings: none")
    return "\n".join(lines)


def _read_input(args: argparse.Namespace) -> str | None:
    if args.text is not None:
        return args.text
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score one review for authenticity and sentiment.")
    parser.add_argument("text", nargs="?", help="Review text (omit to use --file or stdin)")
    parser.add_argument("--file", help="Read the review from this UTF-8 file")
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    parser.add_argument("--tagger", help="Sentiment tagger backend: lexicon | vader")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug events to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        configure_structlog(level=logging.DEBUG)

    try:
        text = _read_input(args)
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"cannot read {args.file or 'stdin'}: {e}")
    if text is None:
        parser.print_usage(sys.stderr)
        print("error: no review text given", file=sys.stderr)
        return EXIT_NO_INPUT

    tagger = None
    if args.tagger:
        try:
            tagger = get_tagger(args.tagger)
        except ConfigurationError as e:
            parser.error(str(e))

    report = analyze_review(text, tagger=tagger)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_summary(report))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
