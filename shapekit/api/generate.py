"""
Public report generation API.

generate_report() is the single entry point that takes a shape set (by
bundled name or by file path) and returns the complete report text. It wires
the full pipeline: shape-set loader → aggregate statistics → writer.
"""

from __future__ import annotations

from pathlib import Path

from shapekit.config.loader import get_shape_set, load_shape_set
from shapekit.writer.report import DEFAULT_TITLE, ReportInput, TextReportWriter


def generate_report(
    shape_set: str = "demo",
    path: Path | str | None = None,
    title: str = DEFAULT_TITLE,
) -> str:
    """
    Generate the shape report for a shape set.

    Parameters
    ----------
    shape_set:
        Name of a bundled shape set; ignored when *path* is given.
    path:
        Optional path to a YAML shape-set file.
    title:
        Banner line printed at the top of the report.

    Returns
    -------
    str
        Full report text, newline-terminated.

    Raises
    ------
    KeyError
        If *shape_set* names no bundled set.
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the shape-set file is malformed or a shape fails validation
        (InvalidGeometryError).
    """
    loaded = load_shape_set(path) if path is not None else get_shape_set(shape_set)
    writer_out = TextReportWriter().write(
        ReportInput(shapes=loaded.shapes, process=loaded.process, title=title)
    )
    return writer_out.full_report
