#!/usr/bin/env python3
"""
Social Identity Engine — Batch scoring CLI

Re-scores exported submissions offline.  Provides four subcommands:

  score         — Score every submission and write the full results as JSON.
  records       — Score every submission and write the flat result rows.
  summary       — Print a cohort summary (trait means, archetype counts).
  check-config  — Validate a scoring configuration JSON file.

Input files hold one submission object or a list of them.  A submission is
either ``{"responses": {...}, "completion_seconds": 95}`` or a bare response
map.

Usage examples
--------------
  python scripts/score_responses.py score exports/responses.json -o results.json
  python scripts/score_responses.py summary exports/responses.json --exclude-suspect
  python scripts/score_responses.py --config weights_v4.json records exports/responses.json
  python scripts/score_responses.py check-config weights_v4.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

# Ensure the project root is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import structlog

from social_identity.config import get_scoring_config
from social_identity.logging_config import configure_logging
from social_identity.schemas.scoring_config import ScoringConfig, load_scoring_config
from social_identity.services.cohort_service import summarize_cohort
from social_identity.services.scoring_engine import ScoringEngine

logger = structlog.get_logger("social_identity.cli")


# ──────────────────────────────────────────────────────────────────────────────
# Input handling
# ──────────────────────────────────────────────────────────────────────────────

def load_submissions(path: str) -> list[tuple[dict[str, Any], float | None]]:
    """Read ``(responses, completion_seconds)`` pairs from a JSON file."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc

    entries = payload if isinstance(payload, list) else [payload]
    submissions: list[tuple[dict[str, Any], float | None]] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Submission #{index} must be a JSON object")

        if "responses" in entry:
            responses = entry["responses"]
            completion = entry.get("completion_seconds")
        else:
            responses, completion = entry, None

        if not isinstance(responses, dict):
            raise ValueError(f"Submission #{index}: 'responses' must be an object")
        if completion is not None and (
            isinstance(completion, bool) or not isinstance(completion, (int, float))
        ):
            raise ValueError(f"Submission #{index}: 'completion_seconds' must be a number")

        submissions.append((responses, completion))
    return submissions


def _resolve_config(args: argparse.Namespace) -> ScoringConfig:
    if args.config:
        return load_scoring_config(args.config)
    return get_scoring_config()


def _write_json(data: Any, output: str | None) -> None:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.info("output_written", path=output)
    else:
        print(text)


# ──────────────────────────────────────────────────────────────────────────────
# Subcommands
# ──────────────────────────────────────────────────────────────────────────────

def cmd_score(args: argparse.Namespace) -> None:
    engine = ScoringEngine(_resolve_config(args))
    results = engine.run_batch(load_submissions(args.input))
    _write_json([r.model_dump(mode="json") for r in results], args.output)


def cmd_records(args: argparse.Namespace) -> None:
    engine = ScoringEngine(_resolve_config(args))
    submissions = load_submissions(args.input)
    results = engine.run_batch(submissions)
    rows = [
        result.to_record(completion)
        for result, (_, completion) in zip(results, submissions)
    ]
    _write_json(rows, args.output)


def cmd_summary(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    engine = ScoringEngine(config)
    results = engine.run_batch(load_submissions(args.input))
    summary = summarize_cohort(results, config, exclude_suspect=args.exclude_suspect)

    print(f"\n{'=' * 60}")
    print(f"  Cohort Summary")
    print(f"{'=' * 60}")
    print(f"  Submissions:       {summary.total}")
    print(f"  Suspect:           {summary.suspect_count}")
    print(f"  Included:          {summary.scored}")

    print(f"\n  Trait Means:")
    for trait, mean in summary.trait_means.items():
        label = config.trait_meta[trait].label
        shown = f"{mean:.2f}" if mean is not None else "—"
        print(f"    {trait:<4} {label:<28} {shown}")

    print(f"\n  Archetypes:")
    for key, count in summary.archetype_counts.items():
        print(f"    {config.archetypes[key].title:<28} {count}")

    print(f"\n  Affect:")
    print(f"    Positive (mean): {summary.mean_positive_affect if summary.mean_positive_affect is not None else '—'}")
    print(f"    Negative (mean): {summary.mean_negative_affect if summary.mean_negative_affect is not None else '—'}")
    print()


def cmd_check_config(args: argparse.Namespace) -> None:
    config = load_scoring_config(args.path)
    print(f"Configuration {args.path} is valid (version {config.version}).")
    print(f"  Traits:      {len(config.traits)}")
    print(f"  Items:       {len(config.items)}")
    print(f"  Archetypes:  {len(config.archetypes)}")
    print(f"  Pairs:       {len(config.pair_table)}")


# ──────────────────────────────────────────────────────────────────────────────
# Entry point
# ──────────────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Social Identity Engine — batch scoring, cohort summaries "
            "and configuration checks."
        ),
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Scoring configuration JSON (default: SCORING_CONFIG_PATH or built-in).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override LOG_LEVEL for this run.",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available subcommands",
    )

    # ── score ─────────────────────────────────────────────────────────
    score_parser = subparsers.add_parser(
        "score",
        help="Score submissions and write full results as JSON.",
    )
    score_parser.add_argument("input", help="Submissions JSON file.")
    score_parser.add_argument("--output", "-o", default=None, help="Write to FILE instead of stdout.")

    # ── records ───────────────────────────────────────────────────────
    records_parser = subparsers.add_parser(
        "records",
        help="Score submissions and write flat result rows as JSON.",
    )
    records_parser.add_argument("input", help="Submissions JSON file.")
    records_parser.add_argument("--output", "-o", default=None, help="Write to FILE instead of stdout.")

    # ── summary ───────────────────────────────────────────────────────
    summary_parser = subparsers.add_parser(
        "summary",
        help="Print trait means and archetype distribution for a cohort.",
    )
    summary_parser.add_argument("input", help="Submissions JSON file.")
    summary_parser.add_argument(
        "--exclude-suspect",
        action="store_true",
        default=False,
        help="Leave suspect submissions out of the means and counts.",
    )

    # ── check-config ──────────────────────────────────────────────────
    check_parser = subparsers.add_parser(
        "check-config",
        help="Validate a scoring configuration JSON file.",
    )
    check_parser.add_argument("path", help="Configuration JSON file.")

    return parser


_COMMANDS = {
    "score": cmd_score,
    "records": cmd_records,
    "summary": cmd_summary,
    "check-config": cmd_check_config,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(level=args.log_level)

    try:
        _COMMANDS[args.command](args)
    except ValueError as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
