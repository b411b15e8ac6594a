"""Database models for the core app.

The core app persists the evaluation data the wave chart consumes:

- an evaluation project grouping criteria and vendors,
- ordered criteria with an importance level,
- shortlisted vendors,
- one score per vendor and criterion, either numeric (0-100) or as a 4-state
  evaluation that is converted for plotting.
"""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from analysis.scores import CriterionState, state_to_score


class EvaluationProject(models.Model):
    """A vendor-evaluation project.

    Attributes:
        name: Human-readable project name.
        category: Technology category being evaluated (e.g. "CRM").
        description: Optional free-form request description.
        created_at: Creation timestamp.
    """

    name = models.CharField(max_length=200)
    category = models.CharField(max_length=120, blank=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at", "id")

    def __str__(self) -> str:
        """Return the project name for display contexts."""

        return self.name


class Criterion(models.Model):
    """An evaluation criterion belonging to a project.

    Attributes:
        project: Owning project.
        key: Stable identifier, unique within the project (used as criterion id).
        name: Display name (x-axis label).
        importance: Weighting bucket.
        type: Free-form grouping (Features, Security, ...).
        position: Sort order; defines x-axis position on the wave chart.
    """

    class Importance(models.TextChoices):
        LOW = "low", "Low"
        MEDIUM = "medium", "Medium"
        HIGH = "high", "High"

    project = models.ForeignKey(EvaluationProject, on_delete=models.CASCADE, related_name="criteria")
    key = models.SlugField(max_length=64)
    name = models.CharField(max_length=200)
    importance = models.CharField(max_length=10, choices=Importance.choices, default=Importance.MEDIUM)
    type = models.CharField(max_length=60, default="Features")
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ("position", "id")
        constraints = [
            models.UniqueConstraint(fields=("project", "key"), name="uniq_criterion_key_per_project"),
        ]
        verbose_name_plural = "Criteria"

    def __str__(self) -> str:
        """Return the criterion name for display contexts."""

        return self.name


class Vendor(models.Model):
    """A vendor shortlisted for a project."""

    project = models.ForeignKey(EvaluationProject, on_delete=models.CASCADE, related_name="vendors")
    key = models.SlugField(max_length=64)
    name = models.CharField(max_length=200)
    website = models.URLField(blank=True)
    description = models.TextField(blank=True)
    logo_url = models.URLField(blank=True)

    class Meta:
        ordering = ("name", "id")
        constraints = [
            models.UniqueConstraint(fields=("project", "key"), name="uniq_vendor_key_per_project"),
        ]

    def __str__(self) -> str:
        """Return the vendor name for display contexts."""

        return self.name


class VendorScore(models.Model):
    """A vendor's evaluation against one criterion.

    Attributes:
        vendor: Vendor being evaluated.
        criterion: Criterion evaluated.
        score: Optional numeric score in [0, 100]; takes precedence when set.
        state: Optional 4-state evaluation used when `score` is empty.
        comment: Optional evaluator note.
    """

    vendor = models.ForeignKey(Vendor, on_delete=models.CASCADE, related_name="scores")
    criterion = models.ForeignKey(Criterion, on_delete=models.CASCADE, related_name="scores")
    score = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0.0), MaxValueValidator(100.0)],
    )
    state = models.CharField(
        max_length=10,
        blank=True,
        choices=[(state.value, state.value.title()) for state in CriterionState],
    )
    comment = models.TextField(blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=("vendor", "criterion"), name="uniq_score_per_vendor_criterion"),
        ]

    def __str__(self) -> str:
        """Return a concise display string for admin/debug usage."""

        return f"VendorScore(vendor={self.vendor_id}, criterion={self.criterion_id}, score={self.score})"

    def plotted_score(self) -> float | None:
        """Return the 0-100 score to plot, or None when nothing was recorded."""

        if self.score is not None:
            return float(self.score)
        if self.state:
            return state_to_score(self.state)
        return None
