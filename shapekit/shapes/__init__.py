"""
Concrete shapes and the registry that builds them by kind.

Importing this package registers every built-in shape.
"""

from .base import Shape, ShapeKind
from .circle import Circle
from .rectangle import Rectangle
from .registry import build_shape, get, list_kinds, measurement_names, register
from .triangle import Triangle

for _shape_cls in (Rectangle, Circle, Triangle):
    register(_shape_cls)

__all__ = [
    "Shape",
    "ShapeKind",
    "Rectangle",
    "Circle",
    "Triangle",
    "build_shape",
    "get",
    "list_kinds",
    "measurement_names",
    "register",
]
