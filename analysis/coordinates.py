"""Map criteria and vendor scores into chart-local pixel coordinates."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .dto import ChartDimensions, Criterion, ScoreMap, WavePoint

DEFAULT_SCORE = 50.0
MIN_SCORE = 0.0
MAX_SCORE = 100.0


def clamp_score(score: float) -> float:
    """Clamp a score into the plotted [0, 100] range; non-finite scores plot at 50."""

    value = float(score)
    if not math.isfinite(value):
        return DEFAULT_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, value))


def criterion_x(index: int, count: int, chart_width: float) -> float:
    """Return the x position of the criterion at `index`.

    Args:
        index: Zero-based criterion index.
        count: Total number of criteria (must be >= 1).
        chart_width: Width of the plotting box.

    Returns:
        `chart_width / 2` for a single criterion; otherwise an evenly spaced
        position with the first criterion at 0 and the last at `chart_width`.
    """

    if count == 1:
        return chart_width / 2
    return (chart_width / (count - 1)) * index


def score_to_y(score: float, chart_height: float) -> float:
    """Convert a 0-100 score to an inverted y coordinate (100 plots at the top)."""

    return chart_height - (clamp_score(score) / 100) * chart_height


def map_wave_points(
    criteria: Sequence[Criterion],
    scores: ScoreMap,
    dimensions: ChartDimensions,
    *,
    vendor_id: str,
) -> tuple[WavePoint, ...]:
    """Convert ordered criteria and a vendor's score map into wave points.

    Args:
        criteria: Ordered criteria; order defines x position.
        scores: Mapping of criterion id to a score in [0, 100].
        dimensions: Resolved ChartDimensions.
        vendor_id: Vendor the scores belong to.

    Returns:
        One WavePoint per criterion, in criteria order. A missing score is
        plotted at the neutral midpoint rather than zero.
    """

    count = len(criteria)
    points: list[WavePoint] = []
    for index, criterion in enumerate(criteria):
        raw = scores.get(criterion.id)
        score = clamp_score(DEFAULT_SCORE if raw is None else raw)
        points.append(
            WavePoint(
                x=criterion_x(index, count, dimensions.chart_width),
                y=score_to_y(score, dimensions.chart_height),
                criterion_id=criterion.id,
                criterion_name=criterion.name,
                score=score,
                vendor_id=vendor_id,
            )
        )
    return tuple(points)
