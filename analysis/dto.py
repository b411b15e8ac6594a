"""DTO types consumed and returned by the wave-chart engine.

DTOs are plain, frozen data containers used to transport chart geometry to the
UI. They intentionally avoid any Django/ORM dependencies so the engine can be
exercised with in-memory inputs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, TypeAlias

Importance = Literal["low", "medium", "high"]

ScoreMap: TypeAlias = Mapping[str, float]


class SplineConfigError(ValueError):
    """Raised when a SplineConfig is constructed with out-of-range values."""


@dataclass(frozen=True, slots=True)
class Criterion:
    """A single evaluation criterion plotted on the wave chart.

    Attributes:
        id: Stable identifier used to look up the vendor score.
        name: Display name shown as the x-axis label.
        importance: Weighting bucket used by match percentage calculations.
        type: Free-form grouping (e.g. "Security", "Cost").
    """

    id: str
    name: str
    importance: Importance = "medium"
    type: str = "Features"


@dataclass(frozen=True, slots=True)
class WavePoint:
    """The plotted position of one vendor's score for one criterion.

    Attributes:
        x: Chart-local x coordinate (0 at the left edge of the plotting box).
        y: Chart-local y coordinate (0 at the top, i.e. a score of 100).
        criterion_id: Criterion this point represents.
        criterion_name: Criterion display name.
        score: Clamped score in [0, 100] used for the y position.
        vendor_id: Vendor the score belongs to.
    """

    x: float
    y: float
    criterion_id: str
    criterion_name: str
    score: float
    vendor_id: str


@dataclass(frozen=True, slots=True)
class DimensionProfile:
    """Fixed canvas size and paddings associated with a breakpoint."""

    width: int
    height: int
    padding_top: int
    padding_right: int
    padding_bottom: int
    padding_left: int


@dataclass(frozen=True, slots=True)
class ChartDimensions:
    """Resolved canvas dimensions including the inner plotting box.

    Attributes:
        width: Full canvas width.
        height: Full canvas height.
        padding_top: Space above the plotting box.
        padding_right: Space right of the plotting box.
        padding_bottom: Space below the plotting box (x-axis labels).
        padding_left: Space left of the plotting box (y-axis labels).
        chart_width: `width - padding_left - padding_right`.
        chart_height: `height - padding_top - padding_bottom`.
    """

    width: int
    height: int
    padding_top: int
    padding_right: int
    padding_bottom: int
    padding_left: int
    chart_width: int
    chart_height: int

    @classmethod
    def from_profile(cls, profile: DimensionProfile, *, width: int | None = None) -> "ChartDimensions":
        """Build dimensions from a profile, optionally overriding the canvas width.

        Args:
            profile: DimensionProfile supplying height and paddings.
            width: Optional canvas width; defaults to `profile.width`.

        Returns:
            ChartDimensions with non-negative plotting box sizes.
        """

        canvas_width = profile.width if width is None else width
        return cls(
            width=canvas_width,
            height=profile.height,
            padding_top=profile.padding_top,
            padding_right=profile.padding_right,
            padding_bottom=profile.padding_bottom,
            padding_left=profile.padding_left,
            chart_width=max(0, canvas_width - profile.padding_left - profile.padding_right),
            chart_height=max(0, profile.height - profile.padding_top - profile.padding_bottom),
        )


@dataclass(frozen=True, slots=True)
class ResponsiveBreakpoint:
    """A container-width range mapped to a dimension profile.

    Attributes:
        min_width: Inclusive lower bound in pixels.
        max_width: Inclusive upper bound, or None for the open-ended last entry.
        name: Stable breakpoint name (mobile, tablet, ...).
        profile: DimensionProfile used when the breakpoint is selected.
        truncate_label_at: Maximum characters shown for criterion labels.
    """

    min_width: int
    max_width: int | None
    name: str
    profile: DimensionProfile
    truncate_label_at: int

    def contains(self, width: int) -> bool:
        """Return True when `width` falls inside this breakpoint's range."""

        if width < self.min_width:
            return False
        return self.max_width is None or width <= self.max_width


@dataclass(frozen=True, slots=True)
class SplineConfig:
    """Catmull-Rom spline configuration.

    Attributes:
        tension: Tangent scale; 0 draws straight segments, 1 the full curve.
        smoothness: Samples generated per segment (including the segment end).
        alpha: Knot exponent; 0 uniform, 0.5 centripetal, 1 chordal.

    Raises:
        SplineConfigError: When any value is outside its allowed range.
    """

    tension: float = 0.5
    smoothness: int = 20
    alpha: float = 0.5

    def __post_init__(self) -> None:
        if not 0.0 <= self.tension <= 1.0:
            raise SplineConfigError(f"tension must be within [0, 1], got {self.tension!r}.")
        if isinstance(self.smoothness, bool) or not isinstance(self.smoothness, int) or self.smoothness < 1:
            raise SplineConfigError(f"smoothness must be a positive integer, got {self.smoothness!r}.")
        if not 0.0 <= self.alpha <= 1.0:
            raise SplineConfigError(f"alpha must be within [0, 1], got {self.alpha!r}.")


DEFAULT_SPLINE_CONFIG = SplineConfig()

Easing = Literal["linear", "easeIn", "easeOut", "easeInOut", "spring"]


@dataclass(frozen=True, slots=True)
class AnimationConfig:
    """Draw-in animation settings for the wave path and markers."""

    duration_ms: int = 500
    easing: Easing = "spring"
    stiffness: float = 300.0
    damping: float = 30.0


DEFAULT_ANIMATION_CONFIG = AnimationConfig()


@dataclass(frozen=True, slots=True)
class WaveColors:
    """Color palette used when rendering a wave chart."""

    vendor1: str = "#6366f1"
    vendor2: str = "#ec4899"
    grid: str = "#e5e7eb"
    background: str = "#ffffff"
    text: str = "#1f2937"
    axis: str = "#9ca3af"


DEFAULT_WAVE_COLORS = WaveColors()


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a configuration table."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
