"""Circle defined by its radius."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from shapekit.shapes.base import Shape, ShapeKind
from shapekit.utilities.constants import PI, format_fixed
from shapekit.utilities.validation import require_finite, require_positive


@dataclass(frozen=True)
class Circle(Shape):
    """
    Circle with a strictly positive ``radius``.

    ``radius_squared`` is derived once at construction and reused by the area
    formula. The perimeter is reported as the circumference.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE
    name: ClassVar[str] = "Circle"

    radius: float
    radius_squared: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        require_positive(self.name, "radius", self.radius)
        object.__setattr__(self, "radius_squared", self.radius * self.radius)
        require_finite(self.name, "area", PI * self.radius_squared)
        require_finite(self.name, "perimeter", 2.0 * PI * self.radius)

    def compute_area(self) -> float:
        return PI * self.radius_squared

    def compute_perimeter(self) -> float:
        return 2.0 * PI * self.radius

    @property
    def circumference(self) -> float:
        """Alias of :attr:`perimeter`."""
        return self.perimeter

    def describe(self) -> str:
        return self._render(
            f"Radius: {format_fixed(self.radius)}",
            perimeter_label="Circumference",
        )
