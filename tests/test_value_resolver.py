"""Unit tests for value resolution — raw answer -> Likert 1-5 or None."""
import pytest

from social_identity.services.value_resolver import resolve_value


class TestNumericFields:
    """Fields without an ordinal map are read as leading integers."""

    @pytest.mark.parametrize("raw, expected", [
        (1, 1),
        (5, 5),
        ("3", 3),
        (" 4 ", 4),
        ("+2", 2),
        (2.0, 2),
    ])
    def test_valid_values(self, scoring_config, raw, expected):
        """Integers, integer text and integral floats resolve unchanged."""
        assert resolve_value("panas_1", {"panas_1": raw}, scoring_config) == expected

    @pytest.mark.parametrize("raw, expected", [
        ("4.0", 4),
        ("3.5", 3),
        (3.5, 3),
        (4.99, 4),
        ("4abc", 4),
        ("2 - Disagree", 2),
    ])
    def test_leading_integer_is_taken(self, scoring_config, raw, expected):
        """Decimal text matches its float; trailing text after the digits is ignored."""
        assert resolve_value("panas_1", {"panas_1": raw}, scoring_config) == expected

    def test_decimal_text_and_float_agree(self, scoring_config):
        """Spreadsheet round-trips ("4.0") resolve the same as the number 4.0."""
        as_text = resolve_value("panas_1", {"panas_1": "4.0"}, scoring_config)
        as_float = resolve_value("panas_1", {"panas_1": 4.0}, scoring_config)
        assert as_text == as_float == 4

    @pytest.mark.parametrize("raw", [0, 6, -1, "0", "6", 10, 0.5, "7.2"])
    def test_out_of_range_is_none(self, scoring_config, raw):
        """Values outside 1-5 after truncation resolve to None."""
        assert resolve_value("panas_1", {"panas_1": raw}, scoring_config) is None

    @pytest.mark.parametrize("raw", [
        "", "   ", "abc", "n/a", ".5", float("nan"), float("inf"), None, [], {},
    ])
    def test_garbage_is_indistinguishable_from_missing(self, scoring_config, raw):
        """Text without leading digits, non-finite floats and containers give None."""
        assert resolve_value("panas_1", {"panas_1": raw}, scoring_config) is None

    def test_booleans_are_not_likert_values(self, scoring_config):
        """True/False never count as 1/0."""
        assert resolve_value("panas_1", {"panas_1": True}, scoring_config) is None
        assert resolve_value("panas_1", {"panas_1": False}, scoring_config) is None

    def test_absent_field(self, scoring_config):
        """A missing key resolves to None, not to a neutral 3."""
        assert resolve_value("panas_1", {}, scoring_config) is None


class TestOrdinalFields:
    """Fields with an ordinal map resolve by exact text lookup."""

    def test_mapped_text(self, scoring_config):
        """Mapped text returns its configured 1-5 value."""
        responses = {"social_frequency": "Very Often"}
        assert resolve_value("social_frequency", responses, scoring_config) == 5

    def test_shared_midpoint_labels(self, scoring_config):
        """Different labels may map to the same midpoint."""
        for text in ("It happens naturally", "Depends on situation"):
            responses = {"conversation_initiator": text}
            assert resolve_value("conversation_initiator", responses, scoring_config) == 3

    def test_unmapped_text_is_none(self, scoring_config):
        """Lookup is case-sensitive; near misses give None."""
        responses = {"friendship_ease": "very easy"}
        assert resolve_value("friendship_ease", responses, scoring_config) is None

    def test_numeric_answer_on_ordinal_field_is_none(self, scoring_config):
        """Ordinal fields never fall back to numeric parsing."""
        responses = {"social_frequency": 4}
        assert resolve_value("social_frequency", responses, scoring_config) is None

    def test_missing_ordinal_is_none(self, scoring_config):
        """An unanswered ordinal field resolves to None."""
        assert resolve_value("first_interaction_comfort", {}, scoring_config) is None
