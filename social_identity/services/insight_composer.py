"""
Social Identity Engine — Insight composition

Builds the three-part insight text from the trait vector and the chosen
archetype:

- **primary**: the top two traits' high/low sentences (top trait gated at
  60, second trait at 55), joined by a space.
- **growth edge**: the low sentence of the lowest-ranked trait, always.
- **curiosity**: a remark on Social Initiative when the archetype's typical
  pair includes it, otherwise on Emotional Regulation, otherwise empty.
"""

from __future__ import annotations

from typing import Mapping

import structlog

from social_identity.schemas.result import InsightBundle
from social_identity.schemas.scoring_config import ScoringConfig

logger = structlog.get_logger("social_identity.insight_composer")


class InsightComposer:
    def __init__(self, config: ScoringConfig) -> None:
        self.config = config
        self.templates = config.insights

    def compose(self, traits: Mapping[str, int], archetype_key: str) -> InsightBundle:
        # Stable sort in canonical trait order; no id tie-break here.
        ordered = [(t, traits[t]) for t in self.config.traits if t in traits]
        ordered.sort(key=lambda item: item[1], reverse=True)

        if not ordered:
            return InsightBundle(primary="", growth_edge="", curiosity="")

        first, first_score = ordered[0]
        sentences = [
            self._sentence(first, first_score >= self.templates.primary_high_threshold),
        ]
        if len(ordered) > 1:
            second, second_score = ordered[1]
            sentences.append(
                self._sentence(second, second_score >= self.templates.secondary_high_threshold)
            )

        lowest = ordered[-1][0]
        return InsightBundle(
            primary=" ".join(sentences),
            growth_edge=self.templates.low.get(lowest, ""),
            curiosity=self._curiosity(traits, archetype_key),
        )

    def _sentence(self, trait: str, high: bool) -> str:
        source = self.templates.high if high else self.templates.low
        text = source.get(trait)
        if text is None:
            logger.debug("insight_template_missing", trait=trait, high=high)
            return ""
        return text

    def _curiosity(self, traits: Mapping[str, int], archetype_key: str) -> str:
        t = self.templates
        archetype = self.config.archetypes.get(archetype_key)
        if archetype is None:
            archetype = self.config.archetypes[self.config.default_archetype]

        initiative = traits.get(t.initiative_trait)
        if t.initiative_trait in archetype.typical_pair and initiative is not None:
            template = (
                t.initiative_high
                if initiative >= t.initiative_high_threshold
                else t.initiative_typical
            )
            return template.format(title=archetype.title, score=initiative)

        regulation = traits.get(t.regulation_trait)
        if regulation is not None:
            template = (
                t.regulation_high
                if regulation >= t.regulation_high_threshold
                else t.regulation_low
            )
            return template.format(title=archetype.title, score=regulation)

        return ""
