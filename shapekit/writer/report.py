"""
TextReportWriter — turns a shape collection into the console report.

Report sections, in order:
  1. title        — banner line.
  2. shapes       — "Individual Shape Information:" and every describe() block.
  3. summary      — aggregate statistics over the collection.
  4. process      — "Demonstrating polymorphism with function calls:" and
                    process_shape() for each demonstration shape (omitted when
                    there are none).

Sections are joined with a blank line into full_report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from shapekit.shapes.base import Shape
from shapekit.stats.aggregate import ShapeStats, calculate_shape_stats
from shapekit.writer.templates import process_shape, render_stats

DEFAULT_TITLE: str = "=== Polymorphism Demo: Shape Calculator ==="


@dataclass(frozen=True)
class ReportInput:
    """Complete input bundle for a report writer."""

    shapes: tuple[Shape, ...]
    process: tuple[Shape, ...] = ()
    title: str = DEFAULT_TITLE


@dataclass(frozen=True)
class ReportOutput:
    """Output of a report write."""

    sections: dict[str, str]  # section name → section text
    full_report: str  # all sections joined in order
    stats: ShapeStats


@runtime_checkable
class ReportWriter(Protocol):
    """Protocol for report writers."""

    def write(self, report_input: ReportInput) -> ReportOutput: ...


class TextReportWriter:
    """Deterministic plain-text writer."""

    def write(self, ri: ReportInput) -> ReportOutput:
        """
        Render every section of the report.

        Parameters
        ----------
        ri:
            ReportInput bundle (shapes to summarise and shapes to process).

        Returns
        -------
        ReportOutput
            Per-section text, the full report, and the computed statistics.
        """
        stats = calculate_shape_stats(ri.shapes)

        sections: dict[str, str] = {"title": ri.title}
        sections["shapes"] = "\n".join(
            ["Individual Shape Information:", *(shape.describe() for shape in ri.shapes)]
        )
        sections["summary"] = render_stats(stats)
        if ri.process:
            sections["process"] = "\n".join(
                [
                    "Demonstrating polymorphism with function calls:",
                    *(process_shape(shape) for shape in ri.process),
                ]
            )

        full_report = "\n\n".join(sections.values()) + "\n"
        return ReportOutput(sections=sections, full_report=full_report, stats=stats)
