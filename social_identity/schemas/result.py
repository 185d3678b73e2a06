from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class TraitRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float


class RankedTrait(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: str
    score: int


class ArchetypeView(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    tagline: str
    icon: str
    accent: str
    tone: str
    typical_pair: tuple[str, ...] = ()


class InsightBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    growth_edge: str
    curiosity: str = ""


class QualityAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    suspect: bool
    reason: Optional[str] = None  # "fast_completion" | "low_completeness"
    answered: int
    total: int
    answered_fraction: float


class AffectScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    positive: Optional[int] = None
    negative: Optional[int] = None


class ScoringResult(BaseModel):
    """Terminal output of one scoring run.

    Downstream collaborators treat every field as computed data and never
    recompute or override it.
    """

    model_config = ConfigDict(frozen=True)

    traits: dict[str, int]
    trait_ranked: list[RankedTrait]
    archetype_key: str
    archetype: ArchetypeView
    insight: InsightBundle
    suspect: bool
    quality: QualityAssessment
    affect: AffectScores
    raw: dict[str, float]
    ranges: dict[str, TraitRange]

    def to_record(self, completion_seconds: float | None = None) -> dict[str, Any]:
        """Flatten into the row shape persisted alongside the raw answers."""
        record: dict[str, Any] = {
            "completion_time_seconds": completion_seconds,
        }
        for trait, score in self.traits.items():
            record[f"trait_{trait}"] = score
        record["archetype"] = self.archetype_key
        record["suspect_submission"] = self.suspect
        record["panas_positive_score"] = self.affect.positive
        record["panas_negative_score"] = self.affect.negative
        return record


class CohortSummary(BaseModel):
    total: int
    suspect_count: int
    scored: int
    trait_means: dict[str, Optional[float]]
    archetype_counts: dict[str, int]
    mean_positive_affect: Optional[float] = None
    mean_negative_affect: Optional[float] = None
