"""
Tests for analysis configuration.
"""

import math

import pytest

from roadgraph.core.config import (
    DEFAULT_CONFIG,
    DEFAULT_COST_EPSILON,
    DEFAULT_EXHAUSTIVE_SEARCH_LIMIT,
    AnalysisConfig,
)
from roadgraph.core.exceptions import ConfigurationError


def test_defaults():
    """Test default configuration values."""
    assert DEFAULT_CONFIG.exhaustive_search_limit == DEFAULT_EXHAUSTIVE_SEARCH_LIMIT == 8
    assert DEFAULT_CONFIG.cost_epsilon == DEFAULT_COST_EPSILON


@pytest.mark.parametrize("limit", [1, 0, -3, True, 2.5, "8"])
def test_invalid_search_limit(limit):
    """Test rejection of unusable search limits."""
    with pytest.raises(ConfigurationError, match="exhaustive_search_limit"):
        AnalysisConfig(exhaustive_search_limit=limit)


@pytest.mark.parametrize("epsilon", [0, -1e-9, math.inf, math.nan, "small", False])
def test_invalid_cost_epsilon(epsilon):
    """Test rejection of unusable tolerances."""
    with pytest.raises(ConfigurationError, match="cost_epsilon"):
        AnalysisConfig(cost_epsilon=epsilon)


def test_config_is_immutable():
    """Test that configuration cannot be changed after creation."""
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.exhaustive_search_limit = 12
