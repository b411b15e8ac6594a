"""Pure wave-chart analysis package for vendorWave.

This package contains deterministic, testable computations that operate on
in-memory inputs and return DTOs. It must not import Django or perform any
database I/O.
"""

from .engine import build_wave_chart

__all__ = ["build_wave_chart"]
