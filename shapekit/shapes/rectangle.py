"""Rectangle defined by width and height."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from shapekit.shapes.base import Shape, ShapeKind
from shapekit.utilities.constants import format_fixed
from shapekit.utilities.validation import require_finite, require_positive


@dataclass(frozen=True)
class Rectangle(Shape):
    """Rectangle with strictly positive ``width`` and ``height``."""

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE
    name: ClassVar[str] = "Rectangle"

    width: float
    height: float

    def __post_init__(self) -> None:
        require_positive(self.name, "width", self.width)
        require_positive(self.name, "height", self.height)
        require_finite(self.name, "area", self.width * self.height)
        require_finite(self.name, "perimeter", 2.0 * (self.width + self.height))

    def compute_area(self) -> float:
        return self.width * self.height

    def compute_perimeter(self) -> float:
        return 2.0 * (self.width + self.height)

    def describe(self) -> str:
        return self._render(
            f"Dimensions: {format_fixed(self.width)} x {format_fixed(self.height)}"
        )
