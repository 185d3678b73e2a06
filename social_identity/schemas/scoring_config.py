"""
Social Identity Engine — Scoring configuration model

Declarative, immutable description of everything the engine computes with:
trait identifiers and display metadata, ordinal-to-numeric maps, per-item
weight vectors with reversal flags and exemptions, the archetype registry,
the ordered-pair lookup table and the threshold-gated insight templates.

A configuration is validated once when it is built (from the reference data
or a JSON file) and is then shared read-only by every scoring call.
"""

from __future__ import annotations

import json
import math
import re
import string
from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Any, Mapping, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    WrapSerializer,
    field_validator,
    model_validator,
)

_TRAIT_ID_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")

_CURIOSITY_PLACEHOLDERS: frozenset[str] = frozenset({"title", "score"})


class ScoringConfigError(ValueError):
    """Raised when a scoring configuration file cannot be read or parsed."""


def _placeholders(template: str) -> set[str]:
    """Return the ``str.format`` field names used by ``template``."""
    return {
        name
        for _, name, _, _ in string.Formatter().parse(template)
        if name is not None
    }


def _read_only(value: dict[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(value)


def _dump_as_dict(value: Mapping[Any, Any], handler: SerializerFunctionWrapHandler) -> Any:
    return handler(dict(value))


K = TypeVar("K")
V = TypeVar("V")

# Validated as a dict, stored as a read-only view, dumped as a plain dict.
FrozenMap = Annotated[
    dict[K, V],
    AfterValidator(_read_only),
    WrapSerializer(_dump_as_dict),
]


# ──────────────────────────────────────────────────────────────────────────────
# Building blocks
# ──────────────────────────────────────────────────────────────────────────────


class TraitMeta(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str
    description: str


class ItemWeightSpec(BaseModel):
    """Weight vector of one scored field.

    ``reverse`` flips the centred answer for every weighted trait except
    those listed in ``reverse_exempt``, which keep scoring forward.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    weights: FrozenMap[str, float]
    reverse: bool = False
    reverse_exempt: frozenset[str] = frozenset()

    @field_validator("weights")
    @classmethod
    def _weights_must_be_positive(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        if not v:
            raise ValueError("An item must weight at least one trait")
        for trait, weight in v.items():
            if not math.isfinite(weight):
                raise ValueError(f"Weight for trait {trait!r} must be finite, got {weight}")
            if weight <= 0:
                raise ValueError(f"Weight for trait {trait!r} must be > 0, got {weight}")
        return v

    @model_validator(mode="after")
    def _exemptions_must_apply_to_reversed_weights(self) -> "ItemWeightSpec":
        if self.reverse_exempt and not self.reverse:
            raise ValueError("reverse_exempt is only meaningful on a reversed item")
        unknown = self.reverse_exempt - set(self.weights)
        if unknown:
            raise ValueError(f"reverse_exempt names unweighted traits: {sorted(unknown)}")
        return self

    def direction(self, trait: str) -> int:
        """Sign applied to the centred answer for ``trait`` (+1 or -1)."""
        if self.reverse and trait not in self.reverse_exempt:
            return -1
        return 1


class ArchetypeDef(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    tagline: str
    icon: str
    accent: str
    tone: str
    typical_pair: tuple[str, ...] = ()

    @field_validator("typical_pair")
    @classmethod
    def _pair_is_empty_or_two(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) not in (0, 2):
            raise ValueError(f"typical_pair must hold 0 or 2 traits, got {len(v)}")
        return v


class InsightTemplates(BaseModel):
    """Per-trait high/low sentences plus the curiosity-remark branches.

    The top trait and the second trait are gated by different thresholds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    high: FrozenMap[str, str]
    low: FrozenMap[str, str]

    primary_high_threshold: int = 60
    secondary_high_threshold: int = 55

    initiative_trait: str = "SI"
    initiative_high_threshold: int = 65
    initiative_high: str
    initiative_typical: str

    regulation_trait: str = "ER"
    regulation_high_threshold: int = 60
    regulation_high: str
    regulation_low: str

    @field_validator(
        "initiative_high", "initiative_typical", "regulation_high", "regulation_low",
    )
    @classmethod
    def _known_placeholders_only(cls, v: str) -> str:
        unknown = _placeholders(v) - _CURIOSITY_PLACEHOLDERS
        if unknown:
            raise ValueError(f"Unknown template placeholders: {sorted(unknown)}")
        return v


class AffectConfig(BaseModel):
    """Item lists for the positive / negative affect (PANAS) sums."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    positive_items: tuple[str, ...]
    negative_items: tuple[str, ...]


# ──────────────────────────────────────────────────────────────────────────────
# Full configuration
# ──────────────────────────────────────────────────────────────────────────────


class ScoringConfig(BaseModel):
    """The complete, swappable scoring configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = "1"
    traits: tuple[str, ...] = Field(min_length=1)
    trait_meta: FrozenMap[str, TraitMeta]
    ordinal_maps: FrozenMap[str, FrozenMap[str, int]] = Field(
        default_factory=dict, validate_default=True,
    )
    items: FrozenMap[str, ItemWeightSpec]
    archetypes: FrozenMap[str, ArchetypeDef]
    default_archetype: str
    pair_table: FrozenMap[str, str]
    insights: InsightTemplates
    affect: AffectConfig | None = None

    @field_validator("traits")
    @classmethod
    def _trait_ids_are_unique_identifiers(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(v)) != len(v):
            raise ValueError("Trait ids must be unique")
        for trait in v:
            if not _TRAIT_ID_RE.match(trait):
                raise ValueError(f"Invalid trait id: {trait!r}")
        return v

    @field_validator("ordinal_maps")
    @classmethod
    def _ordinal_values_in_likert_range(
        cls, v: Mapping[str, Mapping[str, int]],
    ) -> Mapping[str, Mapping[str, int]]:
        for field, mapping in v.items():
            for text, value in mapping.items():
                if not 1 <= value <= 5:
                    raise ValueError(
                        f"Ordinal value for {field}={text!r} must be 1-5, got {value}"
                    )
        return v

    @model_validator(mode="after")
    def _cross_references_resolve(self) -> "ScoringConfig":
        known = set(self.traits)

        missing_meta = known - set(self.trait_meta)
        if missing_meta:
            raise ValueError(f"trait_meta missing for: {sorted(missing_meta)}")

        for field, spec in self.items.items():
            unknown = set(spec.weights) - known
            if unknown:
                raise ValueError(f"Item {field!r} weights unknown traits: {sorted(unknown)}")

        if self.default_archetype not in self.archetypes:
            raise ValueError(f"Default archetype {self.default_archetype!r} is not registered")
        if self.archetypes[self.default_archetype].typical_pair:
            raise ValueError("The default archetype must have an empty typical_pair")

        for key, archetype in self.archetypes.items():
            unknown = set(archetype.typical_pair) - known
            if unknown:
                raise ValueError(f"Archetype {key!r} references unknown traits: {sorted(unknown)}")

        for pair, archetype_key in self.pair_table.items():
            primary, sep, secondary = pair.partition("-")
            if not sep or primary not in known or secondary not in known:
                raise ValueError(f"Invalid pair key {pair!r}; expected 'PRIMARY-SECONDARY'")
            if archetype_key not in self.archetypes:
                raise ValueError(f"Pair {pair!r} maps to unknown archetype {archetype_key!r}")

        for trait_map_name in ("high", "low"):
            templates = getattr(self.insights, trait_map_name)
            missing = known - set(templates)
            if missing:
                raise ValueError(f"insights.{trait_map_name} missing for: {sorted(missing)}")

        if self.affect is not None:
            for field in (*self.affect.positive_items, *self.affect.negative_items):
                if field in self.ordinal_maps:
                    raise ValueError(f"Affect item {field!r} must be a numeric field")

        return self

    # ── Lookups ───────────────────────────────────────────────────────────

    @property
    def scored_fields(self) -> tuple[str, ...]:
        return tuple(self.items)

    @staticmethod
    def pair_key(primary: str, secondary: str) -> str:
        return f"{primary}-{secondary}"

    def archetype_for_pair(self, primary: str, secondary: str) -> str | None:
        """Archetype key for the ordered pair, or ``None`` when absent."""
        return self.pair_table.get(self.pair_key(primary, secondary))


def load_scoring_config(path: str | Path) -> ScoringConfig:
    """Read and validate a JSON scoring configuration.

    Raises ``ScoringConfigError`` when the file is unreadable or not JSON;
    structural problems surface as ``pydantic.ValidationError``.
    """
    config_path = Path(path)
    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ScoringConfigError(f"Cannot read scoring configuration {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ScoringConfigError(f"Scoring configuration {config_path} is not valid JSON: {exc}") from exc
    return ScoringConfig.model_validate(payload)
