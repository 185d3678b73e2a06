"""
Social Identity Engine — Archetype classification (top-two dominance)

Ranks the trait vector, falls back to the default archetype when no trait
dominates, and otherwise looks up the ordered (primary, secondary) pair.

Fallback rule (strict inequalities, both clauses kept as written)::

    spread < 15   OR   (40 < top < 60  AND  spread < 25)

where ``top`` is the highest score and ``spread`` is highest minus lowest.
"""

from __future__ import annotations

from typing import Mapping

import structlog

from social_identity.schemas.scoring_config import ScoringConfig

logger = structlog.get_logger("social_identity.archetype_classifier")


def rank_traits(traits: Mapping[str, int]) -> list[tuple[str, int]]:
    """Traits sorted by score descending; equal scores by ascending trait id."""
    return sorted(traits.items(), key=lambda item: (-item[1], item[0]))


class ArchetypeClassifier:
    """Pure, deterministic mapping from trait vector to archetype key."""

    MIN_SPREAD: int = 15
    MIDRANGE_LOW: int = 40
    MIDRANGE_HIGH: int = 60
    MIDRANGE_MIN_SPREAD: int = 25

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    def classify(self, traits: Mapping[str, int]) -> str:
        present = {t: traits[t] for t in self.config.traits if t in traits}
        ranked = rank_traits(present)
        default = self.config.default_archetype

        if len(ranked) < 2:
            logger.debug("archetype_insufficient_traits", count=len(ranked))
            return default

        (primary, top), (secondary, _) = ranked[0], ranked[1]
        spread = top - ranked[-1][1]

        if self._is_undifferentiated(top, spread):
            logger.debug("archetype_fallback", top=top, spread=spread)
            return default

        archetype_key = self.config.archetype_for_pair(primary, secondary)
        if archetype_key is None or archetype_key not in self.config.archetypes:
            logger.debug(
                "archetype_pair_missing",
                pair=self.config.pair_key(primary, secondary),
            )
            return default
        return archetype_key

    def _is_undifferentiated(self, top: int, spread: int) -> bool:
        if spread < self.MIN_SPREAD:
            return True
        return (
            self.MIDRANGE_LOW < top < self.MIDRANGE_HIGH
            and spread < self.MIDRANGE_MIN_SPREAD
        )
