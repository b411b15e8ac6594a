"""Admin registrations for the core app."""

from __future__ import annotations

from django.contrib import admin

from core.models import Criterion, EvaluationProject, Vendor, VendorScore


class CriterionInline(admin.TabularInline):
    """Inline editor for a project's ordered criteria."""

    model = Criterion
    extra = 0
    fields = ("position", "key", "name", "importance", "type")
    ordering = ("position", "id")


class VendorInline(admin.TabularInline):
    """Inline editor for a project's vendors."""

    model = Vendor
    extra = 0
    fields = ("key", "name", "website")


@admin.register(EvaluationProject)
class EvaluationProjectAdmin(admin.ModelAdmin):
    """Admin configuration for EvaluationProject."""

    list_display = ("name", "category", "created_at")
    search_fields = ("name", "category")
    inlines = (CriterionInline, VendorInline)


@admin.register(Criterion)
class CriterionAdmin(admin.ModelAdmin):
    """Admin configuration for Criterion."""

    list_display = ("name", "project", "key", "importance", "type", "position")
    list_filter = ("importance", "type")
    search_fields = ("name", "key")


class VendorScoreInline(admin.TabularInline):
    """Inline editor for a vendor's per-criterion scores."""

    model = VendorScore
    extra = 0
    fields = ("criterion", "score", "state", "comment")


@admin.register(Vendor)
class VendorAdmin(admin.ModelAdmin):
    """Admin configuration for Vendor."""

    list_display = ("name", "project", "key", "website")
    search_fields = ("name", "key")
    inlines = (VendorScoreInline,)


@admin.register(VendorScore)
class VendorScoreAdmin(admin.ModelAdmin):
    """Admin configuration for VendorScore."""

    list_display = ("vendor", "criterion", "score", "state")
    list_filter = ("state",)
