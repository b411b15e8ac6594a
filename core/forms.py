"""Forms for core UI workflows.

Wave-chart views take their inputs from the query string. Invalid values are
dropped by validation and treated as absent, which maps them onto the chart's
placeholder states instead of an error page.
"""

from __future__ import annotations

from django import forms
from django.forms.forms import NON_FIELD_ERRORS


class WaveChartForm(forms.Form):
    """Validate wave-chart query parameters."""

    vendor = forms.SlugField(required=False, max_length=64, label="Vendor")
    width = forms.IntegerField(
        required=False,
        min_value=0,
        max_value=100_000,
        label="Container width",
        help_text="Observed container width in pixels; empty or 0 while unmeasured.",
    )

    def chart_inputs(self) -> tuple[str | None, int | None]:
        """Return `(vendor_key, width)` using only the fields that validated."""

        self.is_valid()
        cleaned = getattr(self, "cleaned_data", {}) or {}
        vendor = cleaned.get("vendor") or None
        width = cleaned.get("width")
        return vendor, width


class WaveChartHitForm(WaveChartForm):
    """Validate a pointer position (chart-local) or a clicked criterion label."""

    REQUEST_FIELDS = frozenset({"x", "y", "criterion", "tolerance", NON_FIELD_ERRORS})

    x = forms.FloatField(required=False, label="Pointer x")
    y = forms.FloatField(required=False, label="Pointer y")
    criterion = forms.SlugField(required=False, max_length=64, label="Criterion label")
    tolerance = forms.FloatField(required=False, min_value=0.0, max_value=50.0, label="Pointer tolerance")

    def clean(self) -> dict[str, object]:
        """Require either both pointer coordinates or a criterion label."""

        cleaned = super().clean()
        has_pointer = cleaned.get("x") is not None and cleaned.get("y") is not None
        if not has_pointer and not cleaned.get("criterion"):
            raise forms.ValidationError("Provide both x and y, or a criterion.")
        return cleaned

    def request_errors(self) -> dict[str, list[dict[str, str]]]:
        """Return errors that make the hit request unanswerable.

        Malformed `vendor` or `width` values are dropped like in the other chart
        views, so only pointer, criterion and tolerance problems are reported.
        """

        self.is_valid()
        data = self.errors.get_json_data()
        return {field: errors for field, errors in data.items() if field in self.REQUEST_FIELDS}
