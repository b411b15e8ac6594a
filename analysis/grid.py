"""Static grid geometry for the wave chart.

The grid is independent of any vendor's data: horizontal score lines, one
vertical line per criterion and the criterion labels. Coordinates are
absolute canvas coordinates (padding already applied) so a renderer can draw
them directly.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .coordinates import criterion_x, score_to_y
from .dto import ChartDimensions, Criterion

DEFAULT_Y_AXIS_STEPS = 5
ROTATE_LABELS_ABOVE = 8
LABEL_ELLIPSIS = "..."
Y_AXIS_TITLE = "Match Score (%)"
X_AXIS_TITLE = "Evaluation Criteria"


@dataclass(frozen=True, slots=True)
class GridLine:
    """A single grid line segment.

    Attributes:
        x1: Start x (canvas coordinates).
        y1: Start y.
        x2: End x.
        y2: End y.
        emphasized: True for boundary lines (solid and heavier).
    """

    x1: float
    y1: float
    x2: float
    y2: float
    emphasized: bool


@dataclass(frozen=True, slots=True)
class AxisLabel:
    """A positioned text label.

    Attributes:
        x: Anchor x (canvas coordinates).
        y: Anchor y.
        text: Display text (already truncated).
        anchor: Text anchor (`start`, `middle`, `end`).
        rotation: Rotation in degrees around the anchor point.
        criterion_id: Criterion the label identifies, if any.
        full_text: Untruncated text, for tooltips.
    """

    x: float
    y: float
    text: str
    anchor: str = "middle"
    rotation: float = 0.0
    criterion_id: str | None = None
    full_text: str | None = None


@dataclass(frozen=True, slots=True)
class GridGeometry:
    """All static geometry for one chart size and criteria list."""

    horizontal_lines: tuple[GridLine, ...]
    y_labels: tuple[AxisLabel, ...]
    vertical_lines: tuple[GridLine, ...]
    criterion_labels: tuple[AxisLabel, ...]
    y_title: AxisLabel
    x_title: AxisLabel
    rotated: bool


def truncate_label(label: str, limit: int) -> str:
    """Truncate `label` to `limit` characters and append an ellipsis when cut."""

    if len(label) <= limit:
        return label
    return label[:limit] + LABEL_ELLIPSIS


def _format_percent(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value:g}%"


def render_grid(
    dimensions: ChartDimensions,
    criteria: Sequence[Criterion],
    *,
    truncate_label_at: int,
    y_axis_steps: int = DEFAULT_Y_AXIS_STEPS,
) -> GridGeometry:
    """Build the static grid geometry.

    Args:
        dimensions: Resolved ChartDimensions.
        criteria: Ordered criteria (x-axis ticks).
        truncate_label_at: Maximum characters before a label is truncated.
        y_axis_steps: Number of intervals between 0% and 100%.

    Returns:
        GridGeometry with `y_axis_steps + 1` horizontal lines and one vertical
        line and label per criterion.

    Raises:
        ValueError: When `y_axis_steps` is less than 1.
    """

    if y_axis_steps < 1:
        raise ValueError(f"y_axis_steps must be >= 1, got {y_axis_steps}.")

    left = dimensions.padding_left
    top = dimensions.padding_top
    chart_width = dimensions.chart_width
    chart_height = dimensions.chart_height

    horizontal: list[GridLine] = []
    y_labels: list[AxisLabel] = []
    for step in range(y_axis_steps + 1):
        value = (step / y_axis_steps) * 100
        y = top + score_to_y(value, chart_height)
        boundary = step in (0, y_axis_steps)
        horizontal.append(GridLine(x1=left, y1=y, x2=left + chart_width, y2=y, emphasized=boundary))
        y_labels.append(AxisLabel(x=left - 8, y=y, text=_format_percent(value), anchor="end"))

    count = len(criteria)
    rotated = count > ROTATE_LABELS_ABOVE
    label_offset = 32 if rotated else 20
    vertical: list[GridLine] = []
    labels: list[AxisLabel] = []
    for index, criterion in enumerate(criteria):
        x = left + criterion_x(index, count, chart_width)
        boundary = index in (0, count - 1)
        vertical.append(GridLine(x1=x, y1=top, x2=x, y2=top + chart_height, emphasized=boundary))
        labels.append(
            AxisLabel(
                x=x,
                y=top + chart_height + label_offset,
                text=truncate_label(criterion.name, truncate_label_at),
                anchor="start" if rotated else "middle",
                rotation=-45.0 if rotated else 0.0,
                criterion_id=criterion.id,
                full_text=criterion.name,
            )
        )

    y_title = AxisLabel(x=left - 40, y=top + chart_height / 2, text=Y_AXIS_TITLE, rotation=-90.0)
    x_title = AxisLabel(
        x=left + chart_width / 2,
        y=top + chart_height + (56 if rotated else 36),
        text=X_AXIS_TITLE,
    )

    return GridGeometry(
        horizontal_lines=tuple(horizontal),
        y_labels=tuple(y_labels),
        vertical_lines=tuple(vertical),
        criterion_labels=tuple(labels),
        y_title=y_title,
        x_title=x_title,
        rotated=rotated,
    )
