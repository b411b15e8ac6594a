"""Centripetal Catmull-Rom spline generation for vendor wave paths.

The wave path must pass through every plotted point, in order, without the
cusps or self-intersections that uniform Catmull-Rom produces when adjacent
scores differ sharply. Knot spacing between two points is their Euclidean
distance raised to `alpha` (0.5 = centripetal).

Each segment `[P1, P2]` is converted to an equivalent cubic Bezier using the
neighbors `P0` and `P3`, then sampled into a polyline. Missing neighbors at the
ends are synthesized by repeating the nearest real point, so callers never pad
the input. `tension` scales the tangents: 0 collapses the control points onto
the segment endpoints (straight lines), 1 keeps the full Catmull-Rom tangents.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol, TypeVar

from .dto import DEFAULT_SPLINE_CONFIG, SplineConfig

Point2D = tuple[float, float]

_EPSILON = 1e-12


class _PointLike(Protocol):
    """Anything with chart-local `x`/`y` coordinates (WavePoint, samples, ...)."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


_P = TypeVar("_P", bound=_PointLike)


def format_coordinate(value: float) -> str:
    """Format a path coordinate deterministically.

    Args:
        value: Coordinate value.

    Returns:
        The value rounded to 3 decimals with trailing zeros removed; negative
        zero is normalized to `0`.
    """

    text = f"{value:.3f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def segment_control_points(
    p0: Point2D,
    p1: Point2D,
    p2: Point2D,
    p3: Point2D,
    *,
    alpha: float,
    tension: float,
) -> tuple[Point2D, Point2D]:
    """Return the Bezier control points for the Catmull-Rom segment `p1 -> p2`.

    Args:
        p0: Point before the segment (may equal `p1` at the left boundary).
        p1: Segment start.
        p2: Segment end.
        p3: Point after the segment (may equal `p2` at the right boundary).
        alpha: Knot exponent (0 uniform, 0.5 centripetal, 1 chordal).
        tension: Scale applied to the tangents, in [0, 1].

    Returns:
        Two control points `(c1, c2)` such that the cubic Bezier
        `p1, c1, c2, p2` traces the segment.
    """

    l01_a = math.dist(p0, p1) ** alpha
    l12_a = math.dist(p1, p2) ** alpha
    l23_a = math.dist(p2, p3) ** alpha
    l01_2a = l01_a * l01_a
    l12_2a = l12_a * l12_a
    l23_2a = l23_a * l23_a

    c1x, c1y = p1
    if l01_a > _EPSILON:
        a = 2 * l01_2a + 3 * l01_a * l12_a + l12_2a
        n = 3 * l01_a * (l01_a + l12_a)
        c1x = (p1[0] * a - p0[0] * l12_2a + p2[0] * l01_2a) / n
        c1y = (p1[1] * a - p0[1] * l12_2a + p2[1] * l01_2a) / n

    c2x, c2y = p2
    if l23_a > _EPSILON:
        b = 2 * l23_2a + 3 * l23_a * l12_a + l12_2a
        m = 3 * l23_a * (l23_a + l12_a)
        c2x = (p2[0] * b + p1[0] * l23_2a - p3[0] * l12_2a) / m
        c2y = (p2[1] * b + p1[1] * l23_2a - p3[1] * l12_2a) / m

    c1 = (p1[0] + tension * (c1x - p1[0]), p1[1] + tension * (c1y - p1[1]))
    c2 = (p2[0] + tension * (c2x - p2[0]), p2[1] + tension * (c2y - p2[1]))
    return c1, c2


def _bezier(p1: Point2D, c1: Point2D, c2: Point2D, p2: Point2D, s: float) -> Point2D:
    mt = 1.0 - s
    w0 = mt * mt * mt
    w1 = 3 * mt * mt * s
    w2 = 3 * mt * s * s
    w3 = s * s * s
    return (
        w0 * p1[0] + w1 * c1[0] + w2 * c2[0] + w3 * p2[0],
        w0 * p1[1] + w1 * c1[1] + w2 * c2[1] + w3 * p2[1],
    )


def sample_catmull_rom(
    points: Sequence[_PointLike],
    config: SplineConfig = DEFAULT_SPLINE_CONFIG,
) -> tuple[Point2D, ...]:
    """Sample the spline through `points` into a polyline.

    Args:
        points: Ordered points to interpolate.
        config: Spline configuration.

    Returns:
        The first point followed by `config.smoothness` samples per segment;
        the last sample of each segment is exactly the segment end point.
    """

    coords = [(float(p.x), float(p.y)) for p in points]
    if not coords:
        return ()
    samples: list[Point2D] = [coords[0]]
    last = len(coords) - 1
    for i in range(last):
        p0 = coords[max(0, i - 1)]
        p1 = coords[i]
        p2 = coords[i + 1]
        p3 = coords[min(last, i + 2)]
        c1, c2 = segment_control_points(p0, p1, p2, p3, alpha=config.alpha, tension=config.tension)
        for step in range(1, config.smoothness):
            samples.append(_bezier(p1, c1, c2, p2, step / config.smoothness))
        samples.append(p2)
    return tuple(samples)


def generate_catmull_rom_path(
    points: Sequence[_PointLike],
    config: SplineConfig = DEFAULT_SPLINE_CONFIG,
) -> str:
    """Generate a vector path (`d` attribute) through `points`.

    Args:
        points: Ordered points, usually from `map_wave_points`.
        config: Spline configuration.

    Returns:
        An empty string for no points, a zero-length `M x y L x y` path for a
        single point, otherwise `M` to the first point followed by one `L`
        command per sample.
    """

    if not points:
        return ""
    if len(points) == 1:
        x = format_coordinate(points[0].x)
        y = format_coordinate(points[0].y)
        return f"M {x} {y} L {x} {y}"

    samples = sample_catmull_rom(points, config)
    head, *rest = samples
    parts = [f"M {format_coordinate(head[0])} {format_coordinate(head[1])}"]
    parts.extend(f"L {format_coordinate(x)} {format_coordinate(y)}" for x, y in rest)
    return " ".join(parts)


def wave_bounding_box(points: Sequence[_PointLike]) -> tuple[float, float, float, float]:
    """Return `(min_x, max_x, min_y, max_y)` for the points, or zeros when empty."""

    if not points:
        return (0.0, 0.0, 0.0, 0.0)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), max(xs), min(ys), max(ys))


def _perpendicular_distance(point: _PointLike, start: _PointLike, end: _PointLike) -> float:
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(point.x - start.x, point.y - start.y)
    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(point.x - (start.x + t * dx), point.y - (start.y + t * dy))


def simplify_wave_path(points: Sequence[_P], epsilon: float = 2.0) -> list[_P]:
    """Drop points that deviate less than `epsilon` from the simplified line.

    Uses Ramer-Douglas-Peucker; the first and last points are always kept.

    Args:
        points: Ordered points.
        epsilon: Maximum allowed perpendicular deviation in pixels.

    Returns:
        A new list containing a subset of `points`, in order.
    """

    if len(points) <= 2:
        return list(points)

    first, last = points[0], points[-1]
    max_distance = 0.0
    max_index = 0
    for index in range(1, len(points) - 1):
        distance = _perpendicular_distance(points[index], first, last)
        if distance > max_distance:
            max_distance = distance
            max_index = index

    if max_distance > epsilon:
        left = simplify_wave_path(points[: max_index + 1], epsilon)
        right = simplify_wave_path(points[max_index:], epsilon)
        return left[:-1] + right
    return [first, last]
