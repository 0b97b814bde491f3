"""
Prose templates for shapes and aggregate statistics.

process_shape renders any shape through its describe() contract, without
knowing the concrete variant. render_stats renders the summary block. All
numbers are fixed-point with two decimals.
"""

from __future__ import annotations

from shapekit.errors import EmptyCollectionError
from shapekit.shapes.base import Shape
from shapekit.stats.aggregate import ShapeStats
from shapekit.utilities.constants import format_fixed

STATS_HEADER: str = "=== Summary Statistics ==="
NOT_AVAILABLE: str = "n/a"


def process_shape(shape: Shape) -> str:
    """Render a 'Processing <name>:' line followed by the shape's description."""
    return f"Processing {shape.name}:\n{shape.describe()}"


def _average(stats: ShapeStats, metric: str, unit: str) -> str:
    try:
        value = stats.average_area if metric == "area" else stats.average_perimeter
    except EmptyCollectionError:
        return NOT_AVAILABLE
    return f"{format_fixed(value)} {unit}"


def render_stats(stats: ShapeStats) -> str:
    """
    Render the summary statistics block.

    Averages of an empty collection render as ``n/a``; the underlying
    EmptyCollectionError is not propagated to the report.
    """
    lines = [
        STATS_HEADER,
        f"Total shapes: {stats.count}",
        f"Total area: {format_fixed(stats.total_area)} square units",
        f"Total perimeter: {format_fixed(stats.total_perimeter)} units",
        f"Average area: {_average(stats, 'area', 'square units')}",
        f"Average perimeter: {_average(stats, 'perimeter', 'units')}",
    ]
    return "\n".join(lines)
