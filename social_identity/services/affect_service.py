"""Positive / negative affect (PANAS) sums.

Each sum covers ten mood items (range 10-50) and is only reported when every
one of its items resolves to 1-5.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from social_identity.schemas.result import AffectScores
from social_identity.schemas.scoring_config import ScoringConfig
from social_identity.services.value_resolver import resolve_value


class AffectScorer:
    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    def score(self, responses: Mapping[str, Any]) -> AffectScores:
        affect = self.config.affect
        if affect is None:
            return AffectScores()
        return AffectScores(
            positive=self._sum_complete(affect.positive_items, responses),
            negative=self._sum_complete(affect.negative_items, responses),
        )

    def _sum_complete(
        self,
        fields: Sequence[str],
        responses: Mapping[str, Any],
    ) -> int | None:
        if not fields:
            return None
        total = 0
        for field in fields:
            value = resolve_value(field, responses, self.config)
            if value is None:
                return None
            total += value
        return total
