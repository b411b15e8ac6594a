"""Responsive breakpoint resolution for the wave chart.

The chart does not scale continuously with its container. Instead, the observed
container width selects one of a fixed set of dimension profiles so labels,
paddings and truncation stay legible at every size.
"""

from __future__ import annotations

from collections.abc import Sequence

from .dto import ChartDimensions, DimensionProfile, ResponsiveBreakpoint, ValidationResult

RESPONSIVE_BREAKPOINTS: tuple[ResponsiveBreakpoint, ...] = (
    ResponsiveBreakpoint(
        min_width=0,
        max_width=767,
        name="mobile",
        profile=DimensionProfile(
            width=350, height=280, padding_top=20, padding_right=10, padding_bottom=40, padding_left=30
        ),
        truncate_label_at=8,
    ),
    ResponsiveBreakpoint(
        min_width=768,
        max_width=1023,
        name="tablet",
        profile=DimensionProfile(
            width=700, height=320, padding_top=24, padding_right=16, padding_bottom=48, padding_left=40
        ),
        truncate_label_at=12,
    ),
    ResponsiveBreakpoint(
        min_width=1024,
        max_width=1439,
        name="desktop",
        profile=DimensionProfile(
            width=480, height=360, padding_top=28, padding_right=20, padding_bottom=56, padding_left=48
        ),
        truncate_label_at=16,
    ),
    ResponsiveBreakpoint(
        min_width=1440,
        max_width=1919,
        name="wide",
        profile=DimensionProfile(
            width=600, height=400, padding_top=32, padding_right=24, padding_bottom=64, padding_left=56
        ),
        truncate_label_at=20,
    ),
    ResponsiveBreakpoint(
        min_width=1920,
        max_width=None,
        name="xl",
        profile=DimensionProfile(
            width=720, height=440, padding_top=36, padding_right=28, padding_bottom=72, padding_left=64
        ),
        truncate_label_at=24,
    ),
)

BREAKPOINT_BY_NAME = {bp.name: bp for bp in RESPONSIVE_BREAKPOINTS}


def resolve_breakpoint(
    width: int,
    breakpoints: Sequence[ResponsiveBreakpoint] = RESPONSIVE_BREAKPOINTS,
) -> ResponsiveBreakpoint:
    """Return the breakpoint whose width range contains `width`.

    Args:
        width: Observed container width in pixels.
        breakpoints: Ordered breakpoint table (smallest first).

    Returns:
        The first matching breakpoint, or the first entry when nothing matches
        (for example a negative width reported before layout completes).

    Raises:
        ValueError: When the breakpoint table is empty.
    """

    if not breakpoints:
        raise ValueError("At least one breakpoint is required.")
    for breakpoint in breakpoints:
        if breakpoint.contains(width):
            return breakpoint
    return breakpoints[0]


def dimensions_for_width(
    width: int,
    breakpoints: Sequence[ResponsiveBreakpoint] = RESPONSIVE_BREAKPOINTS,
) -> ChartDimensions:
    """Resolve chart dimensions for an observed container width.

    Args:
        width: Observed container width in pixels; 0 means "not measured yet".
        breakpoints: Ordered breakpoint table (smallest first).

    Returns:
        ChartDimensions for the selected profile. A measured container narrower
        than the profile shrinks the canvas, but never below the horizontal
        paddings.
    """

    profile = resolve_breakpoint(width, breakpoints).profile
    if width <= 0 or width >= profile.width:
        return ChartDimensions.from_profile(profile)
    minimum = profile.padding_left + profile.padding_right
    return ChartDimensions.from_profile(profile, width=max(minimum, width))


def validate_breakpoints(breakpoints: Sequence[ResponsiveBreakpoint]) -> ValidationResult:
    """Validate that a breakpoint table partitions `[0, inf)`.

    Args:
        breakpoints: Ordered breakpoint table to validate.

    Returns:
        ValidationResult listing gaps, overlaps and invalid profiles.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not breakpoints:
        return ValidationResult(is_valid=False, errors=("Breakpoint table is empty.",))

    if breakpoints[0].min_width != 0:
        errors.append(f"Breakpoint[{breakpoints[0].name}] must start at 0, got {breakpoints[0].min_width}.")

    seen: set[str] = set()
    for idx, breakpoint in enumerate(breakpoints):
        if breakpoint.name in seen:
            errors.append(f"Breakpoint name {breakpoint.name!r} is duplicated.")
        seen.add(breakpoint.name)

        if breakpoint.max_width is not None and breakpoint.max_width < breakpoint.min_width:
            errors.append(f"Breakpoint[{breakpoint.name}].max_width is below min_width.")
        if breakpoint.max_width is None and idx != len(breakpoints) - 1:
            errors.append(f"Breakpoint[{breakpoint.name}] is open-ended but is not the last entry.")

        profile = breakpoint.profile
        if profile.padding_left + profile.padding_right > profile.width:
            errors.append(f"Breakpoint[{breakpoint.name}] horizontal paddings exceed the profile width.")
        if profile.padding_top + profile.padding_bottom > profile.height:
            errors.append(f"Breakpoint[{breakpoint.name}] vertical paddings exceed the profile height.")
        if breakpoint.truncate_label_at < 1:
            errors.append(f"Breakpoint[{breakpoint.name}].truncate_label_at must be positive.")

        if idx == 0:
            continue
        previous = breakpoints[idx - 1]
        if previous.max_width is None:
            continue
        if breakpoint.min_width > previous.max_width + 1:
            errors.append(
                f"Gap between Breakpoint[{previous.name}] and Breakpoint[{breakpoint.name}]: "
                f"{previous.max_width + 1}..{breakpoint.min_width - 1} is uncovered."
            )
        elif breakpoint.min_width <= previous.max_width:
            errors.append(f"Breakpoint[{previous.name}] overlaps Breakpoint[{breakpoint.name}].")

    if breakpoints[-1].max_width is not None:
        errors.append(f"Last Breakpoint[{breakpoints[-1].name}] must be open-ended (max_width=None).")

    widths = [bp.profile.width for bp in breakpoints]
    if widths != sorted(widths):
        warnings.append("Profile widths are not monotonically increasing across breakpoints.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
