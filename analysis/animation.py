"""Declarative draw-in timelines for wave paths and point markers.

A timeline maps elapsed wall-clock time to a displayed value:
`value(t) = lerp(start, end, ease(t / duration))`. The frame clock driving
`elapsed_ms` belongs to the rendering layer; nothing here schedules work, and
dropping a Timeline is all it takes to cancel it.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from .dto import DEFAULT_ANIMATION_CONFIG, AnimationConfig, Easing

EasingFunction = Callable[[float], float]

MARKER_STAGGER_MS = 50
MARKER_FADE_MS = 300
OPACITY_FADE_MS = 200


def lerp(start: float, end: float, progress: float) -> float:
    """Linearly interpolate between `start` and `end`."""

    return start + (end - start) * progress


def ease_linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t * t


def ease_out(t: float) -> float:
    inverse = 1.0 - t
    return 1.0 - inverse * inverse * inverse


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    inverse = -2 * t + 2
    return 1.0 - (inverse * inverse * inverse) / 2


def spring_easing(*, stiffness: float, damping: float, duration_ms: int, mass: float = 1.0) -> EasingFunction:
    """Build an easing curve from a damped spring's step response.

    Args:
        stiffness: Spring constant.
        damping: Damping coefficient.
        duration_ms: Timeline duration used to convert progress to seconds.
        mass: Attached mass.

    Returns:
        A function of progress in [0, 1] that starts at 0 and returns exactly 1
        at the end of the timeline (the spring is considered settled).
    """

    omega = math.sqrt(stiffness / mass)
    zeta = damping / (2 * math.sqrt(stiffness * mass))
    seconds = max(duration_ms, 0) / 1000

    def response(t: float) -> float:
        if t >= 1.0:
            return 1.0
        tau = t * seconds
        if zeta < 1.0:
            damped = omega * math.sqrt(1 - zeta * zeta)
            decay = math.exp(-zeta * omega * tau)
            return 1.0 - decay * (math.cos(damped * tau) + (zeta * omega / damped) * math.sin(damped * tau))
        if zeta == 1.0:
            return 1.0 - math.exp(-omega * tau) * (1 + omega * tau)
        root = omega * math.sqrt(zeta * zeta - 1)
        r1 = -zeta * omega + root
        r2 = -zeta * omega - root
        return 1.0 - (r2 * math.exp(r1 * tau) - r1 * math.exp(r2 * tau)) / (r2 - r1)

    return response


_EASINGS: dict[str, EasingFunction] = {
    "linear": ease_linear,
    "easeIn": ease_in,
    "easeOut": ease_out,
    "easeInOut": ease_in_out,
}


def easing_for(config: AnimationConfig) -> EasingFunction:
    """Return the easing function described by an AnimationConfig.

    Raises:
        ValueError: When the easing name is unknown.
    """

    if config.easing == "spring":
        return spring_easing(stiffness=config.stiffness, damping=config.damping, duration_ms=config.duration_ms)
    try:
        return _EASINGS[config.easing]
    except KeyError as exc:
        raise ValueError(f"Unknown easing: {config.easing!r}.") from exc


@dataclass(frozen=True, slots=True)
class Timeline:
    """Interpolate a displayed value over a fixed duration.

    Attributes:
        start: Value at elapsed time 0.
        end: Value once the duration has elapsed.
        duration_ms: Duration in milliseconds; 0 jumps straight to `end`.
        easing: Easing function applied to normalized progress.
        delay_ms: Time before the timeline starts moving.
    """

    start: float
    end: float
    duration_ms: int
    easing: EasingFunction = ease_linear
    delay_ms: int = 0

    def progress_at(self, elapsed_ms: float) -> float:
        """Return normalized, clamped progress in [0, 1]."""

        active = elapsed_ms - self.delay_ms
        if self.duration_ms <= 0:
            return 1.0 if active >= 0 else 0.0
        return max(0.0, min(1.0, active / self.duration_ms))

    def value_at(self, elapsed_ms: float) -> float:
        """Return the displayed value at `elapsed_ms`."""

        progress = self.progress_at(elapsed_ms)
        if progress >= 1.0:
            return self.end
        return lerp(self.start, self.end, self.easing(progress))

    def is_finished(self, elapsed_ms: float) -> bool:
        return self.progress_at(elapsed_ms) >= 1.0


def path_draw_timeline(config: AnimationConfig = DEFAULT_ANIMATION_CONFIG) -> Timeline:
    """Timeline for the wave path's drawn fraction (0 -> 1)."""

    return Timeline(start=0.0, end=1.0, duration_ms=config.duration_ms, easing=easing_for(config))


def path_opacity_timeline(opacity: float = 0.9) -> Timeline:
    """Timeline for the wave path's fade-in."""

    return Timeline(start=0.0, end=opacity, duration_ms=OPACITY_FADE_MS)


def marker_timelines(
    count: int,
    *,
    stagger_ms: int = MARKER_STAGGER_MS,
    fade_ms: int = MARKER_FADE_MS,
    easing: Easing = "easeOut",
) -> tuple[Timeline, ...]:
    """Staggered fade/scale-in timelines, one per point marker."""

    function = _EASINGS.get(easing, ease_out)
    return tuple(
        Timeline(start=0.0, end=1.0, duration_ms=fade_ms, easing=function, delay_ms=index * stagger_ms)
        for index in range(count)
    )
