"""Shared pytest fixtures for the scoring engine tests."""
import copy

import pytest
import structlog

from social_identity.config import get_scoring_config, get_settings
from social_identity.schemas.scoring_config import ScoringConfig
from social_identity.scoring_defaults import DEFAULT_SCORING_CONFIG, TRAITS
from social_identity.services.scoring_engine import ScoringEngine


@pytest.fixture(autouse=True)
def _clear_cached_settings():
    """Settings and the scoring config are process-cached; isolate each test."""
    get_settings.cache_clear()
    get_scoring_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_scoring_config.cache_clear()


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI tests configure structlog onto a per-test captured stream; undo it."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def raw_config():
    """A mutable deep copy of the reference configuration data."""
    return copy.deepcopy(DEFAULT_SCORING_CONFIG)


@pytest.fixture
def scoring_config():
    return ScoringConfig.model_validate(DEFAULT_SCORING_CONFIG)


@pytest.fixture
def engine(scoring_config):
    return ScoringEngine(scoring_config)


def answer_for(config, field, likert=3):
    """Return a valid raw answer for ``field``: ordinal text or a Likert int."""
    ordinal = config.ordinal_maps.get(field)
    if ordinal is None:
        return likert
    for text, value in ordinal.items():
        if value == likert:
            return text
    return next(iter(ordinal))


@pytest.fixture
def answer(scoring_config):
    """``answer(field, likert)`` against the reference configuration."""
    def _answer(field, likert=3):
        return answer_for(scoring_config, field, likert)
    return _answer


@pytest.fixture
def neutral_responses(scoring_config):
    """Every scored field answered at the neutral centre (3)."""
    return {field: answer_for(scoring_config, field, 3) for field in scoring_config.scored_fields}


@pytest.fixture
def maximal_responses(scoring_config):
    """Every scored field answered at the top of the scale (5)."""
    return {field: answer_for(scoring_config, field, 5) for field in scoring_config.scored_fields}


@pytest.fixture
def make_vector():
    """Build a trait vector from scores listed in canonical trait order."""
    def _make(*scores):
        assert len(scores) == len(TRAITS)
        return dict(zip(TRAITS, scores))
    return _make


@pytest.fixture
def small_config_factory(raw_config):
    """Build a config whose items are ``item_1..item_n``, each weighting ER."""
    def _make(n_items):
        data = copy.deepcopy(raw_config)
        data["ordinal_maps"] = {}
        data["items"] = {f"item_{i}": {"weights": {"ER": 1.0}} for i in range(1, n_items + 1)}
        data["affect"] = None
        return ScoringConfig.model_validate(data)
    return _make
