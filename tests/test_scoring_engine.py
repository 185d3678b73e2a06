"""Tests for the ScoringEngine facade — end-to-end scoring behaviour."""
import copy
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType

import pytest

from social_identity.schemas.scoring_config import ScoringConfig
from social_identity.services.scoring_engine import ScoringEngine


class TestDeterminism:
    def test_repeated_runs_are_identical(self, engine, maximal_responses):
        """Same input, same result, field for field."""
        first = engine.run(maximal_responses, 240)
        second = engine.run(maximal_responses, 240)
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_concurrent_runs_agree(self, engine, maximal_responses):
        """A shared engine gives identical results across threads."""
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: engine.run(maximal_responses, 240), range(8)))
        assert all(r == results[0] for r in results)

    def test_inputs_are_not_mutated(self, engine, maximal_responses):
        """The response map is left exactly as passed in."""
        snapshot = copy.deepcopy(maximal_responses)
        engine.run(maximal_responses, 240)
        assert maximal_responses == snapshot

    def test_accepts_read_only_mapping(self, engine, maximal_responses):
        """Any Mapping works, including a read-only proxy."""
        frozen = MappingProxyType(dict(maximal_responses))
        assert engine.run(frozen, 240) == engine.run(maximal_responses, 240)


class TestMissingDataNeutrality:
    def test_empty_submission(self, engine, scoring_config):
        """No answers = all 50, default archetype, suspect."""
        result = engine.run({})
        assert result.traits == {trait: 50 for trait in scoring_config.traits}
        assert result.archetype_key == "balanced_navigator"
        assert result.suspect is True
        assert result.quality.reason == "low_completeness"
        assert result.affect.positive is None
        assert result.affect.negative is None

    def test_all_garbage_equals_empty(self, engine, scoring_config):
        """Unresolvable answers score the same as no answers."""
        garbage = {field: "n/a" for field in scoring_config.scored_fields}
        assert engine.run(garbage).traits == engine.run({}).traits


class TestFullSubmission:
    def test_all_top_answers(self, engine, scoring_config, maximal_responses):
        """All-5 answers give The Quiet Explorer with full insight text."""
        result = engine.run(maximal_responses, 240)
        templates = scoring_config.insights

        # CR and ED tie at 100; CR wins the id tie-break -> CR-ED pair.
        assert result.archetype_key == "quiet_explorer"
        assert result.archetype.title == "The Quiet Explorer"
        assert result.archetype.typical_pair == ("ED", "CR")

        assert result.insight.primary == f"{templates.high['CR']} {templates.high['ED']}"
        assert result.insight.growth_edge == templates.low["ER"]
        assert result.insight.curiosity == templates.regulation_low.format(
            title="The Quiet Explorer", score=result.traits["ER"],
        )

        assert result.suspect is False
        assert result.quality.answered == 36
        assert result.affect.positive == 50
        assert result.affect.negative == 50

    def test_ranked_list_is_display_sorted(self, engine, maximal_responses):
        """trait_ranked is score-descending with labels and descriptions."""
        result = engine.run(maximal_responses, 240)
        ids = [r.id for r in result.trait_ranked]
        assert ids == ["CR", "ED", "GP", "SE", "SI", "PF", "ER"]
        assert result.trait_ranked[0].label == "Cognitive Reflection"
        assert result.trait_ranked[0].description == "Depth of processing before acting"

    def test_neutral_answers(self, engine, scoring_config, neutral_responses):
        """All-3 answers give all 50 and the default archetype."""
        result = engine.run(neutral_responses, 300)
        templates = scoring_config.insights
        assert set(result.traits.values()) == {50}
        assert result.archetype_key == "balanced_navigator"
        assert result.insight.primary == f"{templates.low['ER']} {templates.low['CR']}"
        assert result.insight.growth_edge == templates.low["ED"]
        assert "Your score of 50 shows room" in result.insight.curiosity
        assert result.suspect is False


class TestPartialSubmission:
    def test_two_items_drive_catalyst(self, engine, scoring_config):
        """Two top answers on GP and ED select the ED-GP pair."""
        result = engine.run({"close_friends": 5, "social_expansion_desire": 5})
        templates = scoring_config.insights

        assert result.traits["GP"] == 100
        assert result.traits["ED"] == 100
        assert result.archetype_key == "catalyst"  # ED-GP pair
        # Insight ordering keeps canonical order on ties: GP before ED.
        assert result.insight.primary == f"{templates.high['GP']} {templates.high['ED']}"
        assert result.insight.growth_edge == templates.low["SE"]
        assert result.insight.curiosity == (
            "The Catalysts often score moderately on Social Initiative. At 50, "
            "you sit right in the heart of your type."
        )
        assert result.suspect is True


class TestConfigurationSwap:
    def test_custom_pair_table_changes_archetype(self, raw_config, maximal_responses):
        """A swapped configuration changes the outcome without code changes."""
        raw_config["pair_table"]["CR-ED"] = "reflective_observer"
        engine = ScoringEngine(ScoringConfig.model_validate(raw_config))
        assert engine.run(maximal_responses, 240).archetype_key == "reflective_observer"

    def test_default_engine_uses_cached_config(self, maximal_responses):
        """ScoringEngine() falls back to the process-wide configuration."""
        assert ScoringEngine().run(maximal_responses, 240).archetype_key == "quiet_explorer"


class TestBatchAndRecord:
    def test_run_batch_preserves_order(self, engine, maximal_responses, neutral_responses):
        """Batch results come back in submission order."""
        results = engine.run_batch([
            (maximal_responses, 240),
            ({}, None),
            (neutral_responses, 10),
        ])
        assert [r.archetype_key for r in results] == [
            "quiet_explorer", "balanced_navigator", "balanced_navigator",
        ]
        assert [r.suspect for r in results] == [False, True, True]

    def test_to_record_flattens_result(self, engine, maximal_responses):
        """to_record gives one flat row with trait_<ID> columns."""
        result = engine.run(maximal_responses, 240)
        record = result.to_record(240)
        assert record["trait_CR"] == 100
        assert record["trait_GP"] == 88
        assert record["archetype"] == "quiet_explorer"
        assert record["suspect_submission"] is False
        assert record["completion_time_seconds"] == 240
        assert record["panas_positive_score"] == 50
        assert set(k for k in record if k.startswith("trait_")) == {
            "trait_ER", "trait_CR", "trait_SI", "trait_PF", "trait_GP", "trait_SE", "trait_ED",
        }

    def test_result_serialises_to_json(self, engine, maximal_responses):
        """model_dump(mode='json') gives plain JSON types."""
        dumped = engine.run(maximal_responses, 240).model_dump(mode="json")
        assert dumped["archetype"]["key"] == "quiet_explorer"
        assert dumped["ranges"]["CR"]["max"] == pytest.approx(5.6)
