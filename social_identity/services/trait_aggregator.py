"""
Social Identity Engine — Trait aggregation

Folds weighted item contributions into per-trait raw totals and ranges, then
normalises each trait to an integer 0-100:

  1. Resolve each scored field to 1-5 (unresolved fields are skipped)
  2. Centre the answer:  c = value - 3            (-2 ... +2)
  3. Apply the item direction per trait            (reversal with exemptions)
  4. raw[trait]   += direction x c x weight
     bound[trait] += weight x 2                    (maximum possible swing)
  5. score = round(100 x (raw + bound) / (2 x bound)), clamped to [0, 100];
     a trait with bound 0 carries no signal and scores the midpoint 50.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

import structlog

from social_identity.schemas.result import TraitRange
from social_identity.schemas.scoring_config import ScoringConfig
from social_identity.services.value_resolver import resolve_value

logger = structlog.get_logger("social_identity.trait_aggregator")

NEUTRAL_CENTRE: int = 3
MAX_CENTRED: int = 2
NEUTRAL_SCORE: int = 50


@dataclass(frozen=True)
class AggregateResult:
    traits: dict[str, int]
    raw: dict[str, float]
    ranges: dict[str, TraitRange]


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class TraitAggregator:
    """Weighted aggregation and min/max normalisation of trait scores."""

    SCORE_MIN: int = 0
    SCORE_MAX: int = 100

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    def aggregate(self, responses: Mapping[str, Any]) -> AggregateResult:
        raw: dict[str, float] = {trait: 0.0 for trait in self.config.traits}
        bound: dict[str, float] = {trait: 0.0 for trait in self.config.traits}

        skipped = 0
        for field, spec in self.config.items.items():
            value = resolve_value(field, responses, self.config)
            if value is None:
                skipped += 1
                continue

            centred = value - NEUTRAL_CENTRE
            for trait, weight in spec.weights.items():
                if trait not in raw or not weight:
                    continue
                raw[trait] += spec.direction(trait) * centred * weight
                bound[trait] += weight * MAX_CENTRED

        traits: dict[str, int] = {}
        ranges: dict[str, TraitRange] = {}
        for trait in self.config.traits:
            ranges[trait] = TraitRange(min=-bound[trait], max=bound[trait])
            traits[trait] = self._normalise(trait, raw[trait], bound[trait])

        logger.debug(
            "aggregation_complete",
            scored_items=len(self.config.items) - skipped,
            skipped_items=skipped,
        )
        return AggregateResult(traits=traits, raw=raw, ranges=ranges)

    def _normalise(self, trait: str, raw_total: float, bound: float) -> int:
        if bound == 0:
            logger.debug("trait_zero_bound", trait=trait)
            return NEUTRAL_SCORE
        scaled = 100.0 * (raw_total + bound) / (2.0 * bound)
        score = round_half_away_from_zero(scaled)
        return max(self.SCORE_MIN, min(self.SCORE_MAX, score))
