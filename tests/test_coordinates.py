"""Unit tests for mapping criteria and scores to chart coordinates."""

from __future__ import annotations

import pytest

from analysis.coordinates import clamp_score, criterion_x, map_wave_points, score_to_y
from analysis.dto import ChartDimensions, Criterion

pytestmark = pytest.mark.unit


def _dimensions(chart_width: int = 300, chart_height: int = 200) -> ChartDimensions:
    return ChartDimensions(
        width=chart_width + 40,
        height=chart_height + 60,
        padding_top=20,
        padding_right=10,
        padding_bottom=40,
        padding_left=30,
        chart_width=chart_width,
        chart_height=chart_height,
    )


def _criteria(count: int) -> list[Criterion]:
    return [Criterion(id=f"c{i + 1}", name=f"Criterion {i + 1}") for i in range(count)]


def test_map_wave_points_spaces_criteria_and_inverts_scores() -> None:
    """Five criteria spread across the width with 100 at the top."""

    criteria = _criteria(5)
    scores = {"c1": 10, "c2": 90, "c3": 50, "c4": 30, "c5": 70}

    points = map_wave_points(criteria, scores, _dimensions(), vendor_id="acme")

    assert [p.x for p in points] == [0, 75, 150, 225, 300]
    assert [p.y for p in points] == pytest.approx([180, 20, 100, 140, 60])
    assert [p.criterion_id for p in points] == ["c1", "c2", "c3", "c4", "c5"]
    assert {p.vendor_id for p in points} == {"acme"}


def test_single_criterion_is_centered() -> None:
    """A single criterion is plotted in the middle of the plotting box."""

    points = map_wave_points(_criteria(1), {"c1": 12}, _dimensions(), vendor_id="acme")

    assert len(points) == 1
    assert points[0].x == 150


def test_missing_score_plots_at_midpoint() -> None:
    """Criteria without a score use the neutral 50 rather than 0."""

    criteria = _criteria(5)
    scores = {"c1": 10, "c2": 90, "c4": 30, "c5": 70}

    points = map_wave_points(criteria, scores, _dimensions(), vendor_id="acme")

    assert points[2].score == 50
    assert points[2].y == 100


def test_x_positions_do_not_depend_on_scores() -> None:
    """Changing scores never moves points horizontally."""

    criteria = _criteria(4)
    low = map_wave_points(criteria, {c.id: 0 for c in criteria}, _dimensions(), vendor_id="a")
    high = map_wave_points(criteria, {c.id: 100 for c in criteria}, _dimensions(), vendor_id="a")

    assert [p.x for p in low] == [p.x for p in high]
    assert all(p.y == 200 for p in low)
    assert all(p.y == 0 for p in high)


def test_out_of_range_scores_are_clamped() -> None:
    """Scores outside [0, 100] stay inside the plotting box."""

    assert clamp_score(-20) == 0
    assert clamp_score(140) == 100
    assert score_to_y(140, 200) == 0
    assert score_to_y(-20, 200) == 200


def test_criterion_x_handles_last_index() -> None:
    """The last criterion sits at the right edge."""

    assert criterion_x(0, 3, 300) == 0
    assert criterion_x(2, 3, 300) == 300


def test_empty_criteria_produce_no_points() -> None:
    """No criteria means nothing to plot."""

    assert map_wave_points([], {"c1": 10}, _dimensions(), vendor_id="acme") == ()


def test_non_finite_scores_plot_at_midpoint() -> None:
    """Corrupt NaN or infinite scores read as unknown, not as a top score."""

    assert clamp_score(float("nan")) == 50
    assert clamp_score(float("inf")) == 50

    criteria = _criteria(2)
    points = map_wave_points(criteria, {"c1": float("nan"), "c2": 100}, _dimensions(), vendor_id="acme")

    assert points[0].score == 50
    assert points[0].y == 100
