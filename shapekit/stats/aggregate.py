"""
Aggregate statistics — a pure fold over an ordered collection of shapes.

Totals are summed from each shape's memoized metrics, so folding a collection
populates every shape's cache as a side effect. Averages are derived on
demand and fail explicitly on an empty collection instead of returning
NaN or infinity.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from shapekit.errors import EmptyCollectionError
from shapekit.shapes.base import Shape


@dataclass(frozen=True)
class ShapeStats:
    """Totals over a shape collection. Transient; recomputed from the collection."""

    total_area: float = 0.0
    total_perimeter: float = 0.0
    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def average_area(self) -> float:
        """Mean area per shape.

        Raises:
            EmptyCollectionError: If the collection had no shapes.
        """
        if self.is_empty:
            raise EmptyCollectionError("area")
        return self.total_area / self.count

    @property
    def average_perimeter(self) -> float:
        """Mean perimeter per shape.

        Raises:
            EmptyCollectionError: If the collection had no shapes.
        """
        if self.is_empty:
            raise EmptyCollectionError("perimeter")
        return self.total_perimeter / self.count


def calculate_shape_stats(shapes: Iterable[Shape]) -> ShapeStats:
    """Fold *shapes* into total area, total perimeter, and count."""
    total_area = 0.0
    total_perimeter = 0.0
    count = 0
    for shape in shapes:
        total_area += shape.area
        total_perimeter += shape.perimeter
        count += 1
    return ShapeStats(total_area=total_area, total_perimeter=total_perimeter, count=count)
