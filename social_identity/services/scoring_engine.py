"""
Social Identity Engine — Scoring pipeline facade

Implements the single-call scoring pipeline:
  1. Aggregate weighted item answers into a 0-100 trait vector
  2. Classify the vector into an archetype (top-two dominance)
  3. Compose the insight text for the vector and archetype
  4. Check submission quality (completion time, completeness)
  5. Score positive / negative affect
  6. Compile the ``ScoringResult`` with a display-ranked trait list

The engine performs no I/O and keeps no state beyond its read-only
configuration, so one instance may be shared by any number of callers.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

import structlog

from social_identity.config import get_scoring_config
from social_identity.schemas.result import ArchetypeView, RankedTrait, ScoringResult
from social_identity.schemas.scoring_config import ScoringConfig
from social_identity.services.affect_service import AffectScorer
from social_identity.services.archetype_classifier import ArchetypeClassifier
from social_identity.services.insight_composer import InsightComposer
from social_identity.services.quality_service import SubmissionQualityChecker
from social_identity.services.trait_aggregator import TraitAggregator

logger = structlog.get_logger("social_identity.scoring_engine")


class ScoringEngine:
    """Orchestrates aggregation, classification, insights and quality checks."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config if config is not None else get_scoring_config()
        self.aggregator = TraitAggregator(self.config)
        self.classifier = ArchetypeClassifier(self.config)
        self.composer = InsightComposer(self.config)
        self.quality = SubmissionQualityChecker(self.config)
        self.affect = AffectScorer(self.config)

    # ══════════════════════════════════════════════════════════════════════
    # run: single submission
    # ══════════════════════════════════════════════════════════════════════

    def run(
        self,
        responses: Mapping[str, Any],
        completion_seconds: float | None = None,
    ) -> ScoringResult:
        """Score one response set.

        Parameters
        ----------
        responses:
            Field id -> raw answer (text, integer-like 1-5, bool or absent).
            Never mutated.
        completion_seconds:
            Optional elapsed completion time, used only by the quality check.

        Returns
        -------
        ScoringResult
            Always complete; sparse or malformed answers degrade to neutral
            scores and the default archetype rather than raising.
        """
        aggregate = self.aggregator.aggregate(responses)
        archetype_key = self.classifier.classify(aggregate.traits)
        insight = self.composer.compose(aggregate.traits, archetype_key)
        quality = self.quality.assess(responses, completion_seconds)
        affect = self.affect.score(responses)

        result = ScoringResult(
            traits=aggregate.traits,
            trait_ranked=self._rank_for_display(aggregate.traits),
            archetype_key=archetype_key,
            archetype=self._archetype_view(archetype_key),
            insight=insight,
            suspect=quality.suspect,
            quality=quality,
            affect=affect,
            raw=aggregate.raw,
            ranges=aggregate.ranges,
        )
        logger.debug(
            "scoring_complete",
            archetype=archetype_key,
            suspect=quality.suspect,
            answered=quality.answered,
        )
        return result

    # ══════════════════════════════════════════════════════════════════════
    # run_batch: independent re-scoring of many submissions
    # ══════════════════════════════════════════════════════════════════════

    def run_batch(
        self,
        submissions: Iterable[tuple[Mapping[str, Any], float | None]],
    ) -> list[ScoringResult]:
        """Score ``(responses, completion_seconds)`` pairs in order."""
        results = [
            self.run(responses, completion_seconds)
            for responses, completion_seconds in submissions
        ]
        logger.info(
            "batch_scoring_complete",
            submissions=len(results),
            suspect=sum(1 for r in results if r.suspect),
        )
        return results

    # ── Helpers ───────────────────────────────────────────────────────────

    def _rank_for_display(self, traits: Mapping[str, int]) -> list[RankedTrait]:
        ranked = [
            RankedTrait(
                id=trait,
                label=self.config.trait_meta[trait].label,
                description=self.config.trait_meta[trait].description,
                score=traits[trait],
            )
            for trait in self.config.traits
        ]
        ranked.sort(key=lambda r: r.score, reverse=True)
        return ranked

    def _archetype_view(self, archetype_key: str) -> ArchetypeView:
        archetype = self.config.archetypes[archetype_key]
        return ArchetypeView(key=archetype_key, **archetype.model_dump())
