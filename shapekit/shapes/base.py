"""
Shape abstraction — the capability set every concrete shape implements.

Concrete shapes are frozen dataclasses: their defining measurements never
change after construction. That makes the two derived metrics safe to
memoize without an invalidation path:

  area       → compute_area() on first access, stored value afterwards
  perimeter  → compute_perimeter() on first access, stored value afterwards

The memo cells live in the instance __dict__ (functools.cached_property), so
they do not take part in dataclass equality or hashing. The unset → set
transition is one-way and is not guarded for concurrent first access.
A formula result that is not finite raises InvalidGeometryError instead of
being cached.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import ClassVar

from shapekit.utilities.constants import format_fixed
from shapekit.utilities.validation import require_finite

SEPARATOR: str = "-" * 24


class ShapeKind(str, Enum):
    """Closed set of shape variants known to the registry."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"


@dataclass(frozen=True)
class Shape(ABC):
    """
    Abstract base for all shapes.

    Subclasses set the ``kind`` and ``name`` class attributes and implement
    the two formulas plus :meth:`describe`. Callers read the metrics through
    :attr:`area` and :attr:`perimeter`, never through the formulas directly.
    """

    kind: ClassVar[ShapeKind]
    name: ClassVar[str]

    @abstractmethod
    def compute_area(self) -> float:
        """Evaluate the area formula. Uncached."""

    @abstractmethod
    def compute_perimeter(self) -> float:
        """Evaluate the perimeter formula. Uncached."""

    @abstractmethod
    def describe(self) -> str:
        """Return a multi-line text block with name, measurements, and metrics."""

    @cached_property
    def area(self) -> float:
        return require_finite(self.name, "area", self.compute_area())

    @cached_property
    def perimeter(self) -> float:
        return require_finite(self.name, "perimeter", self.compute_perimeter())

    def _render(self, measurement_line: str, perimeter_label: str = "Perimeter") -> str:
        """Lay out the shared describe() block around one measurement line."""
        lines = [
            f"Shape: {self.name}",
            measurement_line,
            f"Area: {format_fixed(self.area)}",
            f"{perimeter_label}: {format_fixed(self.perimeter)}",
            SEPARATOR,
        ]
        return "\n".join(lines)
