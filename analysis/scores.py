"""Score conversions feeding the wave chart.

The chart plots numeric 0-100 scores. Comparison data also arrives as a
4-state evaluation (`no`/`unknown`/`yes`/`star`) or as 0-5 / 0-10 ratings;
these helpers convert both to the chart scale.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum

from .coordinates import DEFAULT_SCORE, clamp_score
from .dto import Criterion, Importance, ScoreMap


class CriterionState(StrEnum):
    """4-state evaluation of a vendor against one criterion."""

    no = "no"
    unknown = "unknown"
    yes = "yes"
    star = "star"


DEFAULT_STATE_SCORES: Mapping[CriterionState, float] = {
    CriterionState.no: 0.0,
    CriterionState.unknown: 50.0,
    CriterionState.yes: 80.0,
    CriterionState.star: 100.0,
}

IMPORTANCE_WEIGHTS: Mapping[Importance, int] = {"high": 3, "medium": 2, "low": 1}


def state_to_score(
    state: str | CriterionState | None,
    mapping: Mapping[CriterionState, float] = DEFAULT_STATE_SCORES,
) -> float:
    """Convert a 4-state evaluation to a 0-100 score.

    Args:
        state: Evaluation state (string values are accepted).
        mapping: State -> score mapping.

    Returns:
        The mapped score; unrecognized or missing states map to the neutral
        midpoint.
    """

    if state is None:
        return DEFAULT_SCORE
    try:
        key = CriterionState(str(state).strip().lower())
    except ValueError:
        return DEFAULT_SCORE
    return float(mapping.get(key, DEFAULT_SCORE))


def states_to_score_map(
    states: Mapping[str, str | CriterionState | None],
    mapping: Mapping[CriterionState, float] = DEFAULT_STATE_SCORES,
) -> dict[str, float]:
    """Convert a criterion id -> state mapping into a ScoreMap."""

    return {criterion_id: state_to_score(state, mapping) for criterion_id, state in states.items()}


def rescale_score(value: float, scale_max: float) -> float:
    """Rescale a rating on `[0, scale_max]` to the 0-100 chart scale.

    Raises:
        ValueError: When `scale_max` is not positive.
    """

    if scale_max <= 0:
        raise ValueError(f"scale_max must be positive, got {scale_max!r}.")
    return clamp_score(value / scale_max * 100)


def weighted_match_percentage(criteria: Sequence[Criterion], scores: ScoreMap) -> int:
    """Compute the importance-weighted overall match for a vendor.

    Args:
        criteria: Criteria the vendor is evaluated against.
        scores: Criterion id -> 0-100 score; missing scores count as 50.

    Returns:
        Rounded weighted average in [0, 100]; 0 when there are no criteria.
    """

    total_weight = 0
    weighted = 0.0
    for criterion in criteria:
        weight = IMPORTANCE_WEIGHTS.get(criterion.importance, 1)
        raw = scores.get(criterion.id)
        weighted += weight * clamp_score(DEFAULT_SCORE if raw is None else raw)
        total_weight += weight
    if total_weight == 0:
        return 0
    return int(round(weighted / total_weight))
