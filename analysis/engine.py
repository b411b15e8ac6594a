"""Orchestration entry points for the wave-chart engine.

The engine is a pure, non-Django pipeline:

    width -> breakpoint -> dimensions -> (points -> path, grid)

It accepts in-memory inputs and returns DTOs. It must not import Django or
perform I/O. Identical inputs always produce identical geometry, so results are
memoized on the input tuple.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from .breakpoints import RESPONSIVE_BREAKPOINTS, dimensions_for_width, resolve_breakpoint
from .coordinates import map_wave_points
from .dto import (
    DEFAULT_SPLINE_CONFIG,
    ChartDimensions,
    Criterion,
    ResponsiveBreakpoint,
    ScoreMap,
    SplineConfig,
    WavePoint,
)
from .grid import DEFAULT_Y_AXIS_STEPS, GridGeometry, render_grid
from .scores import weighted_match_percentage
from .spline import generate_catmull_rom_path

logger = logging.getLogger(__name__)


class ChartState(StrEnum):
    """Render state of the wave chart, driven purely by input presence."""

    measuring = "measuring"
    empty = "empty"
    loading = "loading"
    rendered = "rendered"


STATE_MESSAGES: dict[ChartState, str] = {
    ChartState.measuring: "Measuring chart area...",
    ChartState.empty: "Select a vendor to view match visualization.",
    ChartState.loading: "Loading criteria...",
    ChartState.rendered: "",
}


@dataclass(frozen=True, slots=True)
class WaveChartResult:
    """Assembled wave-chart geometry for one vendor.

    Attributes:
        state: Current ChartState.
        message: Placeholder message for non-rendered states.
        breakpoint: Selected breakpoint (mobile while measuring).
        dimensions: Resolved ChartDimensions (always defined).
        vendor_id: Vendor being plotted, if any.
        points: Plotted points (empty unless rendered).
        path: Vector path through the points (empty unless rendered).
        grid: Grid geometry (None unless rendered).
        match_percentage: Importance-weighted overall match, if rendered.
    """

    state: ChartState
    message: str
    breakpoint: ResponsiveBreakpoint
    dimensions: ChartDimensions
    vendor_id: str | None = None
    points: tuple[WavePoint, ...] = ()
    path: str = ""
    grid: GridGeometry | None = None
    match_percentage: int | None = None


def resolve_chart_state(width: int | None, vendor_id: str | None, criteria: Sequence[Criterion]) -> ChartState:
    """Return the chart state for the presence/absence of the three inputs."""

    if width is None or width <= 0:
        return ChartState.measuring
    if not vendor_id:
        return ChartState.empty
    if not criteria:
        return ChartState.loading
    return ChartState.rendered


def build_wave_chart(
    criteria: Sequence[Criterion],
    scores: ScoreMap,
    *,
    width: int | None,
    vendor_id: str | None,
    spline_config: SplineConfig = DEFAULT_SPLINE_CONFIG,
    y_axis_steps: int = DEFAULT_Y_AXIS_STEPS,
    breakpoints: Sequence[ResponsiveBreakpoint] = RESPONSIVE_BREAKPOINTS,
) -> WaveChartResult:
    """Build the full wave-chart geometry for a vendor.

    Args:
        criteria: Ordered criteria.
        scores: Criterion id -> 0-100 score for the vendor.
        width: Observed container width; None or 0 while unmeasured.
        vendor_id: Selected vendor, or None.
        spline_config: Spline configuration.
        y_axis_steps: Number of horizontal grid intervals.
        breakpoints: Breakpoint table.

    Returns:
        WaveChartResult. CoordinateMapper and SplineGenerator only run in the
        rendered state.
    """

    score_items = tuple(sorted((str(key), float(value)) for key, value in scores.items() if value is not None))
    return _build_cached(
        tuple(criteria),
        score_items,
        width,
        vendor_id or None,
        spline_config,
        y_axis_steps,
        tuple(breakpoints),
    )


@lru_cache(maxsize=128)
def _build_cached(
    criteria: tuple[Criterion, ...],
    score_items: tuple[tuple[str, float], ...],
    width: int | None,
    vendor_id: str | None,
    spline_config: SplineConfig,
    y_axis_steps: int,
    breakpoints: tuple[ResponsiveBreakpoint, ...],
) -> WaveChartResult:
    measured = width if width is not None and width > 0 else 0
    breakpoint = resolve_breakpoint(measured, breakpoints)
    dimensions = dimensions_for_width(measured, breakpoints)
    state = resolve_chart_state(width, vendor_id, criteria)
    logger.debug("Wave chart state=%s breakpoint=%s width=%s", state, breakpoint.name, width)

    if state is not ChartState.rendered or vendor_id is None:
        return WaveChartResult(
            state=state,
            message=STATE_MESSAGES[state],
            breakpoint=breakpoint,
            dimensions=dimensions,
            vendor_id=vendor_id,
        )

    scores = dict(score_items)
    points = map_wave_points(criteria, scores, dimensions, vendor_id=vendor_id)
    return WaveChartResult(
        state=state,
        message=STATE_MESSAGES[state],
        breakpoint=breakpoint,
        dimensions=dimensions,
        vendor_id=vendor_id,
        points=points,
        path=generate_catmull_rom_path(points, spline_config),
        grid=render_grid(
            dimensions,
            criteria,
            truncate_label_at=breakpoint.truncate_label_at,
            y_axis_steps=y_axis_steps,
        ),
        match_percentage=weighted_match_percentage(criteria, scores),
    )


SizeListener = Callable[[int], None]


class SizeObserver:
    """Hold the latest container width and notify subscribers on change.

    The host's layout system pushes measurements with `observe`; consumers can
    also pull `width` directly. Invalid measurements are ignored, so the chart
    simply stays in the measuring state until a valid one arrives.
    """

    def __init__(self) -> None:
        self._width: int | None = None
        self._listeners: list[SizeListener] = []

    @property
    def width(self) -> int | None:
        return self._width

    def subscribe(self, listener: SizeListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def observe(self, width: object) -> bool:
        """Record a measurement and notify listeners when the width changed.

        Returns:
            True when listeners were notified.
        """

        if isinstance(width, bool) or not isinstance(width, (int, float)):
            logger.debug("Ignoring non-numeric size measurement: %r", width)
            return False
        if width < 0 or not math.isfinite(width):
            logger.debug("Ignoring invalid size measurement: %r", width)
            return False
        measured = int(width)
        if measured == self._width:
            return False
        self._width = measured
        for listener in tuple(self._listeners):
            listener(measured)
        return True
