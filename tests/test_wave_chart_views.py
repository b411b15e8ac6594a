"""Django integration tests for wave-chart pages and APIs."""

from __future__ import annotations

import pytest
from django.urls import reverse

from core.models import EvaluationProject, Vendor

pytestmark = pytest.mark.integration


@pytest.mark.django_db
def test_project_list_renders(client, project) -> None:
    """The landing page lists evaluation projects."""

    response = client.get(reverse("core:project_list"))

    assert response.status_code == 200
    assert b"CRM shortlist" in response.content


@pytest.mark.django_db
def test_wave_chart_page_renders_selected_vendor(client, project, vendor) -> None:
    """The chart page shows the vendor's match and the SVG."""

    response = client.get(
        reverse("core:wave_chart", args=[project.pk]),
        {"vendor": vendor.key, "width": 1200},
    )

    assert response.status_code == 200
    chart = response.context["chart"]
    assert chart.state == "rendered"
    assert chart.breakpoint.name == "desktop"
    assert chart.match_percentage == 50
    content = response.content.decode()
    assert "Acme CRM" in content
    assert "<svg" in content
    assert 'data-criterion-id="integrations"' in content


@pytest.mark.django_db
def test_wave_chart_page_without_vendor_shows_prompt(client, project) -> None:
    """No vendor selected renders the empty placeholder."""

    response = client.get(reverse("core:wave_chart", args=[project.pk]), {"width": 1200})

    assert response.status_code == 200
    assert response.context["chart"].state == "empty"
    assert b"Select a vendor to view match visualization." in response.content


@pytest.mark.django_db
def test_invalid_width_is_treated_as_unmeasured(client, project, vendor) -> None:
    """Malformed widths fall back to the measuring state instead of erroring."""

    response = client.get(
        reverse("core:wave_chart", args=[project.pk]),
        {"vendor": vendor.key, "width": "wide"},
    )

    assert response.status_code == 200
    assert response.context["chart"].state == "measuring"


@pytest.mark.django_db
def test_wave_chart_returns_404_for_unknown_project(client) -> None:
    """Unknown projects are not found."""

    response = client.get(reverse("core:wave_chart", args=[999]))

    assert response.status_code == 404


@pytest.mark.django_db
def test_wave_chart_rejects_vendor_from_other_project(client, project) -> None:
    """A vendor key is only valid within its own project."""

    other = EvaluationProject.objects.create(name="Other")
    Vendor.objects.create(project=other, key="globex", name="Globex")

    response = client.get(reverse("core:wave_chart", args=[project.pk]), {"vendor": "globex", "width": 800})

    assert response.status_code == 404


@pytest.mark.django_db
def test_wave_chart_api_returns_geometry(client, project, vendor) -> None:
    """The JSON API exposes points, path and grid for the tablet breakpoint."""

    response = client.get(
        reverse("core:wave_chart_api", args=[project.pk]),
        {"vendor": vendor.key, "width": 800},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["state"] == "rendered"
    assert payload["breakpoint"]["name"] == "tablet"
    assert payload["vendor_name"] == "Acme CRM"
    assert [p["x"] for p in payload["points"]] == [0, 161, 322, 483, 644]
    assert payload["points"][2]["score"] == 50
    assert payload["path"].startswith("M 0 ")


@pytest.mark.django_db
def test_wave_chart_api_loading_state_without_criteria(client, vendor) -> None:
    """A project without criteria reports the loading state."""

    vendor.project.criteria.all().delete()

    response = client.get(
        reverse("core:wave_chart_api", args=[vendor.project.pk]),
        {"vendor": vendor.key, "width": 800},
    )

    payload = response.json()
    assert payload["state"] == "loading"
    assert payload["message"] == "Loading criteria..."


@pytest.mark.django_db
def test_hit_api_returns_point_under_pointer(client, project, vendor) -> None:
    """A pointer over a marker reports the point and a click event."""

    api = client.get(
        reverse("core:wave_chart_api", args=[project.pk]),
        {"vendor": vendor.key, "width": 800},
    ).json()
    target = api["points"][1]

    response = client.get(
        reverse("core:wave_chart_hit_api", args=[project.pk]),
        {"vendor": vendor.key, "width": 800, "x": target["x"] + 3, "y": target["y"]},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["hit"]["criterion_id"] == "pricing"
    assert [event["kind"] for event in payload["events"]] == ["click"]


@pytest.mark.django_db
def test_hit_api_label_click(client, project, vendor) -> None:
    """Clicking a criterion label dispatches the same click as its marker."""

    response = client.get(
        reverse("core:wave_chart_hit_api", args=[project.pk]),
        {"vendor": vendor.key, "width": 800, "criterion": "support"},
    )

    payload = response.json()
    assert payload["hit"]["criterion_id"] == "support"
    assert payload["events"][0]["criterion_id"] == "support"


@pytest.mark.django_db
def test_hit_api_misses_and_validation(client, project, vendor) -> None:
    """Empty space returns no hit; missing coordinates are a 400."""

    url = reverse("core:wave_chart_hit_api", args=[project.pk])

    miss = client.get(url, {"vendor": vendor.key, "width": 800, "x": 80, "y": -50}).json()
    assert miss["hit"] is None
    assert miss["events"] == []

    invalid = client.get(url, {"vendor": vendor.key, "width": 800, "x": 10})
    assert invalid.status_code == 400
    assert "errors" in invalid.json()


@pytest.mark.django_db
def test_svg_download(client, project, vendor) -> None:
    """The SVG endpoint returns an attachment."""

    response = client.get(
        reverse("core:wave_chart_svg", args=[project.pk]),
        {"vendor": vendor.key, "width": 1920},
    )

    assert response.status_code == 200
    assert response["Content-Type"].startswith("image/svg+xml")
    assert "wave-chart-" in response["Content-Disposition"]
    assert response.content.startswith(b"<svg")


@pytest.mark.django_db
def test_hit_api_treats_malformed_width_as_unmeasured(client, project, vendor) -> None:
    """A bad width does not reject an otherwise valid label click."""

    response = client.get(
        reverse("core:wave_chart_hit_api", args=[project.pk]),
        {"vendor": vendor.key, "width": "abc", "criterion": "security"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["state"] == "measuring"
    assert payload["hit"] is None
    assert payload["events"] == []


@pytest.mark.django_db
def test_hit_api_reports_malformed_pointer_fields(client, project, vendor) -> None:
    """Pointer and tolerance errors are reported; width errors are not."""

    response = client.get(
        reverse("core:wave_chart_hit_api", args=[project.pk]),
        {"vendor": vendor.key, "width": "abc", "x": 10, "y": 20, "tolerance": "far"},
    )

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert "tolerance" in errors
    assert "width" not in errors
