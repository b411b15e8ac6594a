"""Tests for JSON encoding and SVG rendering of wave-chart results."""

from __future__ import annotations

import json

import pytest

from analysis import build_wave_chart
from analysis.dto import Criterion
from analysis.interaction import InteractionLayer
from core.charting.codec import encode_event, encode_wave_chart
from core.charting.svg import render_wave_chart_svg, wave_chart_svg_context

CRITERIA = (
    Criterion(id="security", name="Security", importance="high"),
    Criterion(id="pricing", name="Pricing"),
    Criterion(id="support", name="Customer Support Quality", importance="low"),
)
SCORES = {"security": 80, "pricing": 40, "support": 65}


@pytest.mark.unit
def test_encode_rendered_chart_is_json_serializable() -> None:
    """Encoded results round-trip through json.dumps."""

    result = build_wave_chart(CRITERIA, SCORES, width=1200, vendor_id="acme")
    payload = json.loads(json.dumps(encode_wave_chart(result)))

    assert payload["state"] == "rendered"
    assert payload["breakpoint"]["name"] == "desktop"
    assert payload["dimensions"]["chart_width"] == 412
    assert [p["criterion_id"] for p in payload["points"]] == ["security", "pricing", "support"]
    assert payload["path"] == result.path
    assert len(payload["grid"]["horizontal_lines"]) == 6
    assert payload["grid"]["criterion_labels"][2]["text"] == "Customer Support..."


@pytest.mark.unit
def test_encode_placeholder_chart() -> None:
    """Placeholder states encode without geometry."""

    payload = encode_wave_chart(build_wave_chart(CRITERIA, SCORES, width=None, vendor_id="acme"))

    assert payload["state"] == "measuring"
    assert payload["message"] == "Measuring chart area..."
    assert payload["points"] == []
    assert payload["grid"] is None
    assert payload["match_percentage"] is None


@pytest.mark.unit
def test_encode_event() -> None:
    """Click events include the clicked point."""

    result = build_wave_chart(CRITERIA, SCORES, width=1200, vendor_id="acme")
    (event,) = InteractionLayer(result.points).click_label("pricing")

    encoded = encode_event(event)
    assert encoded["kind"] == "click"
    assert encoded["criterion_id"] == "pricing"
    assert encoded["point"]["score"] == 40


@pytest.mark.integration
def test_svg_context_translates_markers_to_canvas_coordinates() -> None:
    """Markers are offset by the paddings; the path uses a group transform."""

    result = build_wave_chart(CRITERIA, SCORES, width=1200, vendor_id="acme")
    context = wave_chart_svg_context(result, vendor_name="Acme")

    first = context["markers"][0]
    assert first["cx"] == "48"
    assert context["translate"] == "translate(48, 28)"
    assert [m["delay_ms"] for m in context["markers"]] == [0, 50, 100]
    assert context["marker_radius"] == "4"
    assert context["hover_radius"] == "6"


@pytest.mark.integration
def test_svg_renders_wave_markers_and_labels() -> None:
    """Rendered charts contain the path, one marker per criterion and labels."""

    result = build_wave_chart(CRITERIA, SCORES, width=1200, vendor_id="acme")
    svg = render_wave_chart_svg(result, vendor_name="Acme")

    assert svg.startswith("<svg")
    assert f'd="{result.path}"' in svg
    assert svg.count("<circle") == 3
    assert 'data-criterion-id="support"' in svg
    assert "Customer Support..." in svg
    assert "Match Score (%)" in svg


@pytest.mark.integration
def test_svg_hides_markers_when_requested() -> None:
    """Point markers are optional."""

    result = build_wave_chart(CRITERIA, SCORES, width=1200, vendor_id="acme")

    assert "<circle" not in render_wave_chart_svg(result, show_points=False)


@pytest.mark.integration
def test_svg_renders_placeholder_message() -> None:
    """Empty charts show the vendor selection prompt."""

    result = build_wave_chart(CRITERIA, SCORES, width=1200, vendor_id=None)
    svg = render_wave_chart_svg(result)

    assert "Select a vendor to view match visualization." in svg
    assert "<path" not in svg
    assert 'data-state="empty"' in svg
