"""Text presentation of shapes, aggregate statistics, and full reports."""

from .report import ReportInput, ReportOutput, ReportWriter, TextReportWriter
from .templates import process_shape, render_stats

__all__ = [
    "ReportInput",
    "ReportOutput",
    "ReportWriter",
    "TextReportWriter",
    "process_shape",
    "render_stats",
]
