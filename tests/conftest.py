"""Pytest fixtures shared across Django integration tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from analysis.engine import _build_cached


@pytest.fixture(autouse=True)
def _clear_wave_chart_cache():
    """Reset the memoized wave-chart pipeline so tests cannot leak results."""

    _build_cached.cache_clear()
    yield
    _build_cached.cache_clear()


@pytest.fixture
def project(db):
    """Return an EvaluationProject with five ordered criteria."""

    from core.models import Criterion, EvaluationProject

    project = EvaluationProject.objects.create(name="CRM shortlist", category="CRM")
    rows = [
        ("security", "Security", "high"),
        ("pricing", "Pricing", "medium"),
        ("integrations", "Integrations", "medium"),
        ("support", "Support", "low"),
        ("reporting", "Reporting", "high"),
    ]
    for position, (key, name, importance) in enumerate(rows):
        Criterion.objects.create(project=project, key=key, name=name, importance=importance, position=position)
    return project


@pytest.fixture
def vendor(project):
    """Return a Vendor with scores for every criterion except `integrations`."""

    from core.models import Vendor, VendorScore

    vendor = Vendor.objects.create(project=project, key="acme", name="Acme CRM")
    scores = {"security": 10.0, "pricing": 90.0, "support": 30.0, "reporting": 70.0}
    for criterion in project.criteria.all():
        if criterion.key in scores:
            VendorScore.objects.create(vendor=vendor, criterion=criterion, score=scores[criterion.key])
    return vendor


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views, commands, or IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
