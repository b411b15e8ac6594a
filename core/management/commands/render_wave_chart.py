"""Render a project's wave chart to an SVG document."""

from __future__ import annotations

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from core.charting.svg import render_wave_chart_svg
from core.models import EvaluationProject, Vendor
from core.services import build_project_wave_chart


class Command(BaseCommand):
    """Write the wave-chart SVG for a project and vendor to stdout or a file."""

    help = "Render the comparison wave chart for a vendor as SVG."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("--project", type=int, required=True, help="EvaluationProject id.")
        parser.add_argument(
            "--vendor",
            default=None,
            help="Vendor key within the project. Omit to render the empty placeholder.",
        )
        parser.add_argument(
            "--width",
            type=int,
            default=1024,
            help="Container width in pixels used to pick the breakpoint (default 1024).",
        )
        parser.add_argument(
            "--output",
            default=None,
            help="Optional file path; the SVG is written to stdout when omitted.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        project_id: int = options["project"]
        vendor_key: str | None = options["vendor"]
        width: int = options["width"]
        output: str | None = options["output"]

        if width < 0:
            raise CommandError("--width must be zero or positive.")

        try:
            project = EvaluationProject.objects.get(pk=project_id)
        except EvaluationProject.DoesNotExist as exc:
            raise CommandError(f"Project {project_id} does not exist.") from exc

        vendor = None
        if vendor_key:
            try:
                vendor = project.vendors.get(key=vendor_key)
            except Vendor.DoesNotExist as exc:
                raise CommandError(f"Vendor {vendor_key!r} is not part of project {project_id}.") from exc

        result = build_project_wave_chart(project, vendor=vendor, width=width)
        svg = render_wave_chart_svg(result, vendor_name=vendor.name if vendor else "")

        if output is None:
            self.stdout.write(svg)
            return None

        Path(output).write_text(svg, encoding="utf-8")
        self.stdout.write(f"[{result.state.value}] wrote {output} ({result.breakpoint.name})")
        return None
