"""
Social Identity Engine — Cohort summary

Aggregate statistics over a batch of scoring results: submission counts,
per-trait means, archetype distribution and mean affect.
"""

from __future__ import annotations

import statistics
from typing import Iterable

import structlog

from social_identity.schemas.result import CohortSummary, ScoringResult
from social_identity.schemas.scoring_config import ScoringConfig

logger = structlog.get_logger("social_identity.cohort_service")


def summarize_cohort(
    results: Iterable[ScoringResult],
    config: ScoringConfig,
    exclude_suspect: bool = False,
) -> CohortSummary:
    """Summarise ``results``; suspect submissions are dropped when asked."""
    all_results = list(results)
    suspect_count = sum(1 for r in all_results if r.suspect)
    included = [r for r in all_results if not (exclude_suspect and r.suspect)]

    trait_means: dict[str, float | None] = {}
    for trait in config.traits:
        scores = [r.traits[trait] for r in included if trait in r.traits]
        trait_means[trait] = round(statistics.mean(scores), 2) if scores else None

    archetype_counts = {key: 0 for key in config.archetypes}
    for r in included:
        archetype_counts[r.archetype_key] = archetype_counts.get(r.archetype_key, 0) + 1

    summary = CohortSummary(
        total=len(all_results),
        suspect_count=suspect_count,
        scored=len(included),
        trait_means=trait_means,
        archetype_counts=archetype_counts,
        mean_positive_affect=_mean_or_none(
            [r.affect.positive for r in included if r.affect.positive is not None]
        ),
        mean_negative_affect=_mean_or_none(
            [r.affect.negative for r in included if r.affect.negative is not None]
        ),
    )
    logger.info(
        "cohort_summary_complete",
        total=summary.total,
        scored=summary.scored,
        suspect=suspect_count,
    )
    return summary


def _mean_or_none(values: list[int]) -> float | None:
    return round(statistics.mean(values), 2) if values else None
