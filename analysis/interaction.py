"""Pointer interaction for plotted wave points.

Point markers are drawn at a fixed radius and are hit-testable within an
enlarged hover radius. Criterion labels rendered by the grid carry the
criterion id, so clicking a label dispatches the same event as clicking the
criterion's marker.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

from .dto import WavePoint

InteractionKind = Literal["hover_enter", "hover_leave", "click"]

MARKER_RADIUS = 4.0
HOVER_RADIUS = 6.0
NEAREST_POINT_THRESHOLD = 20.0


@dataclass(frozen=True, slots=True)
class InteractionEvent:
    """A hover or click notification.

    Attributes:
        kind: Event kind.
        criterion_id: Criterion affected by the event.
        point: The WavePoint involved (always present for hover events).
    """

    kind: InteractionKind
    criterion_id: str
    point: WavePoint | None = None


InteractionListener = Callable[[InteractionEvent], None]


def find_nearest_wave_point(
    x: float,
    y: float,
    points: Sequence[WavePoint],
    threshold: float = NEAREST_POINT_THRESHOLD,
) -> WavePoint | None:
    """Return the point closest to `(x, y)` strictly within `threshold`.

    Args:
        x: Pointer x in chart-local coordinates.
        y: Pointer y in chart-local coordinates.
        points: Plotted points.
        threshold: Maximum distance considered a match.

    Returns:
        The nearest point, the earliest one on ties, or None.
    """

    nearest: WavePoint | None = None
    best = threshold
    for point in points:
        distance = math.hypot(point.x - x, point.y - y)
        if distance < best:
            best = distance
            nearest = point
    return nearest


class InteractionLayer:
    """Track hover state over plotted points and emit interaction events.

    Args:
        points: Plotted WavePoints in chart-local coordinates.
        marker_radius: Rendered marker radius.
        hover_radius: Hit-test radius (enlarged marker).
        tolerance: Optional extra pointer tolerance added to `hover_radius`.
    """

    def __init__(
        self,
        points: Sequence[WavePoint],
        *,
        marker_radius: float = MARKER_RADIUS,
        hover_radius: float = HOVER_RADIUS,
        tolerance: float = 0.0,
    ) -> None:
        self.points = tuple(points)
        self.marker_radius = marker_radius
        self.hover_radius = max(hover_radius, marker_radius)
        self.tolerance = max(0.0, tolerance)
        self._by_criterion = {point.criterion_id: point for point in self.points}
        self._hovered: WavePoint | None = None
        self._listeners: list[InteractionListener] = []

    @property
    def hovered(self) -> WavePoint | None:
        """Return the currently hovered point, if any."""

        return self._hovered

    def subscribe(self, listener: InteractionListener) -> Callable[[], None]:
        """Register a listener and return a callable that unregisters it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def hit_test(self, x: float, y: float) -> WavePoint | None:
        """Return the point whose hover radius contains `(x, y)`, if any."""

        reach = self.hover_radius + self.tolerance
        nearest: WavePoint | None = None
        best = math.inf
        for point in self.points:
            distance = math.hypot(point.x - x, point.y - y)
            if distance <= reach and distance < best:
                best = distance
                nearest = point
        return nearest

    def pointer_move(self, x: float, y: float) -> tuple[InteractionEvent, ...]:
        """Update hover state for a pointer move and return emitted events."""

        target = self.hit_test(x, y)
        if target == self._hovered:
            return ()
        events: list[InteractionEvent] = []
        if self._hovered is not None:
            events.append(InteractionEvent("hover_leave", self._hovered.criterion_id, self._hovered))
        if target is not None:
            events.append(InteractionEvent("hover_enter", target.criterion_id, target))
        self._hovered = target
        return self._emit(events)

    def pointer_leave(self) -> tuple[InteractionEvent, ...]:
        """Clear hover state when the pointer leaves the chart."""

        if self._hovered is None:
            return ()
        previous, self._hovered = self._hovered, None
        return self._emit([InteractionEvent("hover_leave", previous.criterion_id, previous)])

    def click(self, x: float, y: float) -> tuple[InteractionEvent, ...]:
        """Dispatch a click at `(x, y)` to the point under the pointer."""

        target = self.hit_test(x, y)
        if target is None:
            return ()
        return self._emit([InteractionEvent("click", target.criterion_id, target)])

    def click_label(self, criterion_id: str) -> tuple[InteractionEvent, ...]:
        """Dispatch a click on a criterion label (same semantics as its marker)."""

        point = self._by_criterion.get(criterion_id)
        if point is None:
            return ()
        return self._emit([InteractionEvent("click", criterion_id, point)])

    def _emit(self, events: list[InteractionEvent]) -> tuple[InteractionEvent, ...]:
        for event in events:
            for listener in tuple(self._listeners):
                listener(event)
        return tuple(events)
