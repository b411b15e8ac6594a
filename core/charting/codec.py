"""JSON encoding helpers for wave-chart geometry.

The geometry API returns these payloads so a client-side renderer can draw the
chart without recomputing the spline.
"""

from __future__ import annotations

from typing import Any

from analysis.dto import ChartDimensions, ResponsiveBreakpoint, WavePoint
from analysis.engine import WaveChartResult
from analysis.grid import AxisLabel, GridGeometry, GridLine
from analysis.interaction import InteractionEvent


def encode_wave_chart(result: WaveChartResult) -> dict[str, Any]:
    """Encode a WaveChartResult into a JSON-serializable dictionary.

    Args:
        result: Engine output to encode.

    Returns:
        Dict payload with state, breakpoint, dimensions and (when rendered)
        points, path, grid and match percentage.
    """

    return {
        "state": result.state.value,
        "message": result.message,
        "vendor_id": result.vendor_id,
        "breakpoint": encode_breakpoint(result.breakpoint),
        "dimensions": encode_dimensions(result.dimensions),
        "points": [encode_point(point) for point in result.points],
        "path": result.path,
        "grid": encode_grid(result.grid) if result.grid is not None else None,
        "match_percentage": result.match_percentage,
    }


def encode_breakpoint(breakpoint: ResponsiveBreakpoint) -> dict[str, Any]:
    return {
        "name": breakpoint.name,
        "min_width": breakpoint.min_width,
        "max_width": breakpoint.max_width,
        "truncate_label_at": breakpoint.truncate_label_at,
    }


def encode_dimensions(dimensions: ChartDimensions) -> dict[str, int]:
    return {
        "width": dimensions.width,
        "height": dimensions.height,
        "padding_top": dimensions.padding_top,
        "padding_right": dimensions.padding_right,
        "padding_bottom": dimensions.padding_bottom,
        "padding_left": dimensions.padding_left,
        "chart_width": dimensions.chart_width,
        "chart_height": dimensions.chart_height,
    }


def encode_point(point: WavePoint) -> dict[str, Any]:
    return {
        "x": point.x,
        "y": point.y,
        "criterion_id": point.criterion_id,
        "criterion_name": point.criterion_name,
        "score": point.score,
        "vendor_id": point.vendor_id,
    }


def _encode_line(line: GridLine) -> dict[str, Any]:
    return {"x1": line.x1, "y1": line.y1, "x2": line.x2, "y2": line.y2, "emphasized": line.emphasized}


def _encode_label(label: AxisLabel) -> dict[str, Any]:
    return {
        "x": label.x,
        "y": label.y,
        "text": label.text,
        "anchor": label.anchor,
        "rotation": label.rotation,
        "criterion_id": label.criterion_id,
        "full_text": label.full_text,
    }


def encode_grid(grid: GridGeometry) -> dict[str, Any]:
    """Encode GridGeometry into a JSON-serializable dictionary."""

    return {
        "horizontal_lines": [_encode_line(line) for line in grid.horizontal_lines],
        "y_labels": [_encode_label(label) for label in grid.y_labels],
        "vertical_lines": [_encode_line(line) for line in grid.vertical_lines],
        "criterion_labels": [_encode_label(label) for label in grid.criterion_labels],
        "y_title": _encode_label(grid.y_title),
        "x_title": _encode_label(grid.x_title),
        "rotated": grid.rotated,
    }


def encode_event(event: InteractionEvent) -> dict[str, Any]:
    """Encode an InteractionEvent for the hit-test API."""

    return {
        "kind": event.kind,
        "criterion_id": event.criterion_id,
        "point": encode_point(event.point) if event.point is not None else None,
    }
