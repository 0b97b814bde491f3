"""
Triangle defined by its three side lengths.

The area comes from Heron's formula over the semi-perimeter s:

    area = sqrt(s × (s − a) × (s − b) × (s − c))

Side lengths that violate the strict triangle inequality would make the
radicand zero or negative, so they are rejected at construction with
InvalidGeometryError rather than producing a NaN or zero area that would
silently corrupt aggregate sums. Sides whose perimeter or radicand overflow
to infinity are rejected the same way.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from shapekit.errors import InvalidGeometryError
from shapekit.shapes.base import Shape, ShapeKind
from shapekit.utilities.constants import format_fixed
from shapekit.utilities.validation import require_finite, require_positive


@dataclass(frozen=True)
class Triangle(Shape):
    """Triangle with sides ``side_a``, ``side_b``, ``side_c``."""

    kind: ClassVar[ShapeKind] = ShapeKind.TRIANGLE
    name: ClassVar[str] = "Triangle"

    side_a: float
    side_b: float
    side_c: float
    semi_perimeter: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for field_name in ("side_a", "side_b", "side_c"):
            require_positive(self.name, field_name, getattr(self, field_name))

        shortest, middle, longest = sorted((self.side_a, self.side_b, self.side_c))
        if shortest + middle <= longest:
            raise InvalidGeometryError(
                self.name,
                f"sides {self.side_a}, {self.side_b}, {self.side_c} violate the "
                f"triangle inequality ({shortest} + {middle} <= {longest})",
            )

        require_finite(self.name, "perimeter", self.side_a + self.side_b + self.side_c)
        object.__setattr__(
            self, "semi_perimeter", (self.side_a + self.side_b + self.side_c) * 0.5
        )
        require_finite(self.name, "area", self._heron_radicand())

    @property
    def sides(self) -> tuple[float, float, float]:
        return (self.side_a, self.side_b, self.side_c)

    def _heron_radicand(self) -> float:
        s = self.semi_perimeter
        return s * (s - self.side_a) * (s - self.side_b) * (s - self.side_c)

    def compute_area(self) -> float:
        radicand = self._heron_radicand()
        # Rounding on near-degenerate sides can push an accepted radicand below zero.
        return math.sqrt(max(radicand, 0.0))

    def compute_perimeter(self) -> float:
        return 2.0 * self.semi_perimeter

    def describe(self) -> str:
        sides = ", ".join(format_fixed(side) for side in self.sides)
        return self._render(f"Sides: {sides}")
