"""Unit tests for score conversions and weighted match percentage."""

from __future__ import annotations

import pytest

from analysis.dto import Criterion
from analysis.scores import (
    CriterionState,
    rescale_score,
    state_to_score,
    states_to_score_map,
    weighted_match_percentage,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("state", "expected"),
    [("no", 0.0), ("unknown", 50.0), ("yes", 80.0), ("star", 100.0), (" YES ", 80.0), (None, 50.0), ("maybe", 50.0)],
)
def test_state_to_score(state, expected: float) -> None:
    """4-state evaluations map onto the chart scale."""

    assert state_to_score(state) == expected


def test_state_mapping_is_overridable() -> None:
    """A product-specific mapping replaces the defaults."""

    mapping = {CriterionState.no: 10.0, CriterionState.yes: 70.0}

    assert state_to_score("yes", mapping) == 70.0
    assert state_to_score("star", mapping) == 50.0


def test_states_to_score_map() -> None:
    """Convert a whole criterion -> state mapping."""

    assert states_to_score_map({"a": "star", "b": CriterionState.no}) == {"a": 100.0, "b": 0.0}


def test_rescale_score() -> None:
    """Ratings on other scales are converted and clamped."""

    assert rescale_score(4, 5) == pytest.approx(80.0)
    assert rescale_score(7.5, 10) == pytest.approx(75.0)
    assert rescale_score(12, 10) == 100.0
    with pytest.raises(ValueError):
        rescale_score(3, 0)


def test_weighted_match_percentage_weights_importance() -> None:
    """High-importance criteria weigh three times as much as low ones."""

    criteria = [
        Criterion(id="a", name="A", importance="high"),
        Criterion(id="b", name="B", importance="low"),
    ]

    assert weighted_match_percentage(criteria, {"a": 100, "b": 0}) == 75
    assert weighted_match_percentage(criteria, {"a": 0, "b": 100}) == 25


def test_weighted_match_percentage_defaults() -> None:
    """Missing scores count as 50; no criteria yields 0."""

    criteria = [Criterion(id="a", name="A"), Criterion(id="b", name="B")]

    assert weighted_match_percentage(criteria, {"a": 100}) == 75
    assert weighted_match_percentage([], {}) == 0
