"""Views for evaluation projects and the comparison wave chart."""

from __future__ import annotations

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, render

from analysis.interaction import InteractionLayer
from core.charting.codec import encode_event, encode_point, encode_wave_chart
from core.charting.svg import render_wave_chart_svg
from core.forms import WaveChartForm, WaveChartHitForm
from core.models import EvaluationProject, Vendor
from core.services import build_project_wave_chart

logger = logging.getLogger(__name__)


def _selected_vendor(project: EvaluationProject, vendor_key: str | None) -> Vendor | None:
    """Return the selected vendor, raising 404 when it is not in the project."""

    if not vendor_key:
        return None
    return get_object_or_404(Vendor, project=project, key=vendor_key)


def project_list(request: HttpRequest) -> HttpResponse:
    """Render the list of evaluation projects."""

    projects = EvaluationProject.objects.all()
    return render(request, "core/project_list.html", {"projects": projects})


def wave_chart(request: HttpRequest, project_id: int) -> HttpResponse:
    """Render the wave-chart page for a project and optional vendor."""

    project = get_object_or_404(EvaluationProject, pk=project_id)
    form = WaveChartForm(request.GET)
    vendor_key, width = form.chart_inputs()
    vendor = _selected_vendor(project, vendor_key)
    result = build_project_wave_chart(project, vendor=vendor, width=width)

    return render(
        request,
        "core/wave_chart.html",
        {
            "project": project,
            "vendors": project.vendors.all(),
            "vendor": vendor,
            "form": form,
            "width": width,
            "chart": result,
            "svg_markup": render_wave_chart_svg(result, vendor_name=vendor.name if vendor else ""),
        },
    )


def wave_chart_svg(request: HttpRequest, project_id: int) -> HttpResponse:
    """Return the wave chart as a standalone SVG document."""

    project = get_object_or_404(EvaluationProject, pk=project_id)
    vendor_key, width = WaveChartForm(request.GET).chart_inputs()
    vendor = _selected_vendor(project, vendor_key)
    result = build_project_wave_chart(project, vendor=vendor, width=width)

    response = HttpResponse(
        render_wave_chart_svg(result, vendor_name=vendor.name if vendor else ""),
        content_type="image/svg+xml; charset=utf-8",
    )
    filename = f"wave-chart-{project.pk}-{vendor.key if vendor else 'empty'}.svg"
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response


def wave_chart_api(request: HttpRequest, project_id: int) -> JsonResponse:
    """Return wave-chart geometry as JSON."""

    project = get_object_or_404(EvaluationProject, pk=project_id)
    vendor_key, width = WaveChartForm(request.GET).chart_inputs()
    vendor = _selected_vendor(project, vendor_key)
    result = build_project_wave_chart(project, vendor=vendor, width=width)
    payload = encode_wave_chart(result)
    payload["vendor_name"] = vendor.name if vendor else None
    return JsonResponse(payload)


def wave_chart_hit_api(request: HttpRequest, project_id: int) -> JsonResponse:
    """Hit-test a pointer position or a criterion label click.

    Pointer coordinates are chart-local (padding already subtracted). The
    response contains the point under the pointer, if any, and the click events
    that position would dispatch.
    """

    project = get_object_or_404(EvaluationProject, pk=project_id)
    form = WaveChartHitForm(request.GET)
    vendor_key, width = form.chart_inputs()
    errors = form.request_errors()
    if errors:
        return JsonResponse({"errors": errors}, status=400)

    vendor = _selected_vendor(project, vendor_key)
    result = build_project_wave_chart(project, vendor=vendor, width=width)
    layer = InteractionLayer(result.points, tolerance=form.cleaned_data.get("tolerance") or 0.0)

    criterion = form.cleaned_data.get("criterion")
    if criterion:
        events = layer.click_label(criterion)
        hit = events[0].point if events else None
    else:
        x = form.cleaned_data["x"]
        y = form.cleaned_data["y"]
        hit = layer.hit_test(x, y)
        events = layer.click(x, y)

    logger.debug("Wave chart hit project=%s vendor=%s hit=%s", project.pk, vendor_key, hit)
    return JsonResponse(
        {
            "state": result.state.value,
            "hit": encode_point(hit) if hit is not None else None,
            "events": [encode_event(event) for event in events],
        }
    )
