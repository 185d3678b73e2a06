"""Unit tests for AffectScorer — positive / negative PANAS sums."""
from social_identity.services.affect_service import AffectScorer

POSITIVE = (1, 3, 5, 9, 10, 12, 14, 16, 17, 19)
NEGATIVE = (2, 4, 6, 7, 8, 11, 13, 15, 18, 20)


def _panas(positive_value, negative_value):
    responses = {f"panas_{i}": positive_value for i in POSITIVE}
    responses.update({f"panas_{i}": negative_value for i in NEGATIVE})
    return responses


class TestAffectScores:
    def test_complete_sums(self, scoring_config):
        """Each scale sums its ten items."""
        scores = AffectScorer(scoring_config).score(_panas(4, 2))
        assert scores.positive == 40
        assert scores.negative == 20

    def test_string_answers(self, scoring_config):
        """Integer text counts like integers."""
        scores = AffectScorer(scoring_config).score(_panas("5", "1"))
        assert scores.positive == 50
        assert scores.negative == 10

    def test_one_missing_item_voids_only_its_scale(self, scoring_config):
        """A missing item voids its own scale only."""
        responses = _panas(3, 3)
        del responses["panas_19"]
        scores = AffectScorer(scoring_config).score(responses)
        assert scores.positive is None
        assert scores.negative == 30

    def test_invalid_item_voids_scale(self, scoring_config):
        """An out-of-range item voids its scale."""
        responses = _panas(3, 3)
        responses["panas_2"] = 7
        assert AffectScorer(scoring_config).score(responses).negative is None

    def test_config_without_affect_section(self, small_config_factory):
        """No affect section = both scales None."""
        scores = AffectScorer(small_config_factory(3)).score(_panas(4, 2))
        assert scores.positive is None
        assert scores.negative is None
