"""Server-side SVG rendering for wave-chart geometry.

The analysis engine returns chart-local geometry. This module translates it to
canvas coordinates (padding applied), formats numbers once, and renders the
`core/partials/wave_chart.svg` template.
"""

from __future__ import annotations

from typing import Any

from django.template.loader import render_to_string

from analysis.animation import marker_timelines
from analysis.dto import DEFAULT_ANIMATION_CONFIG, DEFAULT_WAVE_COLORS, AnimationConfig, WaveColors
from analysis.engine import ChartState, WaveChartResult
from analysis.grid import AxisLabel, GridLine
from analysis.interaction import HOVER_RADIUS, MARKER_RADIUS
from analysis.spline import format_coordinate as fmt

SVG_TEMPLATE = "core/partials/wave_chart.svg"


def _line(line: GridLine) -> dict[str, Any]:
    return {
        "x1": fmt(line.x1),
        "y1": fmt(line.y1),
        "x2": fmt(line.x2),
        "y2": fmt(line.y2),
        "stroke_width": "1.5" if line.emphasized else "0.5",
        "dasharray": "none" if line.emphasized else "4 2",
    }


def _label(label: AxisLabel) -> dict[str, Any]:
    transform = ""
    if label.rotation:
        transform = f"rotate({fmt(label.rotation)} {fmt(label.x)} {fmt(label.y)})"
    return {
        "x": fmt(label.x),
        "y": fmt(label.y),
        "text": label.text,
        "full_text": label.full_text or label.text,
        "anchor": label.anchor,
        "transform": transform,
        "criterion_id": label.criterion_id,
    }


def wave_chart_svg_context(
    result: WaveChartResult,
    *,
    vendor_name: str = "",
    colors: WaveColors = DEFAULT_WAVE_COLORS,
    animation: AnimationConfig = DEFAULT_ANIMATION_CONFIG,
    show_points: bool = True,
) -> dict[str, Any]:
    """Build the template context for the SVG partial.

    Args:
        result: Engine output; only the rendered state produces drawable geometry.
        vendor_name: Vendor display name (exposed as a data attribute).
        colors: Palette used for grid, text and wave.
        animation: Draw-in animation timing for the path.
        show_points: Whether to draw point markers.

    Returns:
        Template context dictionary.
    """

    dimensions = result.dimensions
    context: dict[str, Any] = {
        "state": result.state.value,
        "message": result.message,
        "width": dimensions.width,
        "height": dimensions.height,
        "colors": colors,
        "vendor_id": result.vendor_id or "",
        "vendor_name": vendor_name,
        "rendered": result.state is ChartState.rendered,
    }
    if result.state is not ChartState.rendered or result.grid is None:
        return context

    left = dimensions.padding_left
    top = dimensions.padding_top
    grid = result.grid
    timelines = marker_timelines(len(result.points))
    markers = [
        {
            "cx": fmt(left + point.x),
            "cy": fmt(top + point.y),
            "criterion_id": point.criterion_id,
            "criterion_name": point.criterion_name,
            "score": fmt(point.score),
            "delay_ms": timeline.delay_ms,
            "duration_ms": timeline.duration_ms,
        }
        for point, timeline in zip(result.points, timelines)
    ]
    context.update(
        {
            "translate": f"translate({fmt(left)}, {fmt(top)})",
            "path": result.path,
            "path_duration_ms": animation.duration_ms,
            "horizontal_lines": [
                {"line": _line(line), "label": _label(label)}
                for line, label in zip(grid.horizontal_lines, grid.y_labels)
            ],
            "vertical_lines": [_line(line) for line in grid.vertical_lines],
            "criterion_labels": [_label(label) for label in grid.criterion_labels],
            "y_title": _label(grid.y_title),
            "x_title": _label(grid.x_title),
            "markers": markers if show_points else [],
            "marker_radius": fmt(MARKER_RADIUS),
            "hover_radius": fmt(HOVER_RADIUS),
            "match_percentage": result.match_percentage,
        }
    )
    return context


def render_wave_chart_svg(result: WaveChartResult, **kwargs: Any) -> str:
    """Render the wave chart as a standalone SVG document string."""

    return render_to_string(SVG_TEMPLATE, wave_chart_svg_context(result, **kwargs))
