"""
shapekit — polymorphic geometric shapes with memoized area and perimeter.

Rectangles, circles, and triangles share one interface; their metrics are
computed lazily, cached, folded into aggregate statistics, and rendered as a
plain-text report.
"""

from .api import generate_report
from .errors import EmptyCollectionError, InvalidGeometryError
from .shapes import Circle, Rectangle, Shape, ShapeKind, Triangle, build_shape
from .stats import ShapeStats, calculate_shape_stats
from .writer import process_shape, render_stats

__version__ = "0.1.0"

__all__ = [
    "Shape",
    "ShapeKind",
    "Rectangle",
    "Circle",
    "Triangle",
    "build_shape",
    "ShapeStats",
    "calculate_shape_stats",
    "process_shape",
    "render_stats",
    "generate_report",
    "InvalidGeometryError",
    "EmptyCollectionError",
]
