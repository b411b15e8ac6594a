"""Service-layer functions for the core app.

Services in `core` coordinate Django persistence concerns (ORM, transactions)
with the pure wave-chart engine in `analysis`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from django.conf import settings
from django.db import transaction

from analysis.dto import Criterion as CriterionDTO
from analysis.dto import SplineConfig
from analysis.engine import WaveChartResult, build_wave_chart
from analysis.grid import DEFAULT_Y_AXIS_STEPS
from analysis.scores import CriterionState
from core.models import Criterion, EvaluationProject, Vendor, VendorScore

logger = logging.getLogger(__name__)


def spline_config_from_settings() -> SplineConfig:
    """Return the SplineConfig configured in Django settings."""

    return SplineConfig(
        tension=float(getattr(settings, "VENDOR_WAVE_SPLINE_TENSION", 0.5)),
        smoothness=int(getattr(settings, "VENDOR_WAVE_SPLINE_SMOOTHNESS", 20)),
        alpha=float(getattr(settings, "VENDOR_WAVE_SPLINE_ALPHA", 0.5)),
    )


def y_axis_steps_from_settings() -> int:
    """Return the configured number of horizontal grid intervals."""

    return int(getattr(settings, "VENDOR_WAVE_Y_AXIS_STEPS", DEFAULT_Y_AXIS_STEPS))


def project_criteria(project: EvaluationProject) -> tuple[CriterionDTO, ...]:
    """Return the project's criteria as ordered DTOs."""

    return tuple(
        CriterionDTO(id=row.key, name=row.name, importance=row.importance, type=row.type)
        for row in project.criteria.order_by("position", "id")
    )


def vendor_score_map(vendor: Vendor) -> dict[str, float]:
    """Return the vendor's plotted scores keyed by criterion key.

    Criteria without a recorded score or state are omitted so the chart plots
    them at the neutral midpoint.
    """

    scores: dict[str, float] = {}
    for row in vendor.scores.select_related("criterion"):
        value = row.plotted_score()
        if value is not None:
            scores[row.criterion.key] = value
    return scores


def build_project_wave_chart(
    project: EvaluationProject,
    *,
    vendor: Vendor | None,
    width: int | None,
) -> WaveChartResult:
    """Build wave-chart geometry for a vendor within a project.

    Args:
        project: Project supplying the criteria.
        vendor: Selected vendor (must belong to `project`), or None.
        width: Observed container width, or None when unmeasured.

    Returns:
        WaveChartResult from the analysis engine.
    """

    criteria = project_criteria(project)
    scores = vendor_score_map(vendor) if vendor is not None else {}
    result = build_wave_chart(
        criteria,
        scores,
        width=width,
        vendor_id=vendor.key if vendor is not None else None,
        spline_config=spline_config_from_settings(),
        y_axis_steps=y_axis_steps_from_settings(),
    )
    logger.info(
        "Built wave chart project=%s vendor=%s state=%s breakpoint=%s",
        project.pk,
        vendor.key if vendor is not None else None,
        result.state,
        result.breakpoint.name,
    )
    return result


def record_vendor_scores(
    vendor: Vendor,
    evaluations: Mapping[str, float | str | None],
) -> int:
    """Upsert a vendor's scores from a criterion key -> evaluation mapping.

    Numeric values are stored as scores; strings are stored as 4-state
    evaluations. `None` clears both.

    Args:
        vendor: Vendor being evaluated.
        evaluations: Criterion key -> score (0-100), state string, or None.

    Returns:
        Number of score rows written.

    Raises:
        ValueError: When a key does not match a project criterion, a score is
            a boolean or outside [0, 100], or a state is not recognized.
    """

    criteria = {row.key: row for row in Criterion.objects.filter(project_id=vendor.project_id)}
    written = 0
    with transaction.atomic():
        for key, value in evaluations.items():
            criterion = criteria.get(key)
            if criterion is None:
                raise ValueError(f"Unknown criterion key {key!r} for project {vendor.project_id}.")
            score: float | None = None
            state = ""
            if isinstance(value, bool):
                raise ValueError(f"Score for criterion {key!r} must be a number or state, got {value!r}.")
            if isinstance(value, str):
                try:
                    state = CriterionState(value.strip().lower()).value
                except ValueError as exc:
                    raise ValueError(f"Unknown evaluation state {value!r} for criterion {key!r}.") from exc
            elif value is not None:
                score = float(value)
                if not 0.0 <= score <= 100.0:
                    raise ValueError(f"Score for criterion {key!r} must be within [0, 100], got {score}.")
            VendorScore.objects.update_or_create(
                vendor=vendor,
                criterion=criterion,
                defaults={"score": score, "state": state},
            )
            written += 1
    logger.info("Recorded %s scores for vendor=%s", written, vendor.key)
    return written
