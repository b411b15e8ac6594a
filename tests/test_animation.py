"""Unit tests for draw-in timelines and easing curves."""

from __future__ import annotations

import pytest

from analysis.animation import (
    Timeline,
    ease_in,
    ease_in_out,
    ease_linear,
    ease_out,
    easing_for,
    lerp,
    marker_timelines,
    path_draw_timeline,
    path_opacity_timeline,
    spring_easing,
)
from analysis.dto import AnimationConfig

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("easing", [ease_linear, ease_in, ease_out, ease_in_out])
def test_easing_curves_are_anchored(easing) -> None:
    """Every curve starts at 0 and ends at 1."""

    assert easing(0.0) == pytest.approx(0.0)
    assert easing(1.0) == pytest.approx(1.0)


def test_ease_in_out_is_symmetric() -> None:
    """The midpoint of ease-in-out is exactly half."""

    assert ease_in_out(0.5) == pytest.approx(0.5)
    assert ease_in(0.5) < 0.5 < ease_out(0.5)


@pytest.mark.parametrize(("stiffness", "damping"), [(300.0, 30.0), (100.0, 20.0), (100.0, 40.0)])
def test_spring_easing_settles_at_one(stiffness: float, damping: float) -> None:
    """Under-, critically and over-damped springs start at 0 and end at 1."""

    spring = spring_easing(stiffness=stiffness, damping=damping, duration_ms=500)

    assert spring(0.0) == pytest.approx(0.0)
    assert spring(1.0) == 1.0
    assert 0.0 < spring(0.5) < 1.5


def test_timeline_interpolates_with_delay() -> None:
    """Value stays at start during the delay and reaches end after duration."""

    timeline = Timeline(start=0.0, end=10.0, duration_ms=100, delay_ms=50)

    assert timeline.value_at(0) == 0.0
    assert timeline.value_at(100) == pytest.approx(5.0)
    assert timeline.value_at(150) == 10.0
    assert timeline.value_at(1000) == 10.0
    assert not timeline.is_finished(149)
    assert timeline.is_finished(150)


def test_zero_duration_timeline_jumps_to_end() -> None:
    """A zero-length timeline completes immediately."""

    timeline = Timeline(start=1.0, end=2.0, duration_ms=0)

    assert timeline.value_at(0) == 2.0


def test_path_timelines_follow_animation_config() -> None:
    """The path draws over the configured duration and fades to 0.9."""

    draw = path_draw_timeline(AnimationConfig(duration_ms=400, easing="easeInOut"))
    assert draw.duration_ms == 400
    assert draw.value_at(200) == pytest.approx(0.5)
    assert draw.value_at(400) == 1.0

    opacity = path_opacity_timeline()
    assert opacity.value_at(10_000) == pytest.approx(0.9)


def test_marker_timelines_are_staggered() -> None:
    """Each marker starts 50ms after the previous one."""

    timelines = marker_timelines(4)

    assert [t.delay_ms for t in timelines] == [0, 50, 100, 150]
    assert {t.duration_ms for t in timelines} == {300}
    assert marker_timelines(0) == ()


def test_easing_for_unknown_name_raises() -> None:
    """An unsupported easing name is rejected."""

    with pytest.raises(ValueError):
        easing_for(AnimationConfig(easing="bounce"))  # type: ignore[arg-type]


def test_lerp() -> None:
    """Interpolate linearly between two values."""

    assert lerp(10, 20, 0.25) == 12.5
