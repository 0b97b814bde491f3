"""
Exception types raised across shapekit.

Both are ValueError subclasses: each signals a bad input value, never an
environmental failure, and neither is retryable.
"""

from __future__ import annotations


class InvalidGeometryError(ValueError):
    """Raised when a shape's measurements cannot describe a real shape.

    Attributes:
        shape: Display name of the shape being constructed (e.g. ``"Triangle"``).
        detail: Human-readable description of the violated constraint.
    """

    def __init__(self, shape: str, detail: str) -> None:
        super().__init__(f"[{shape}] {detail}")
        self.shape = shape
        self.detail = detail


class EmptyCollectionError(ValueError):
    """Raised when an average is requested over zero shapes.

    Attributes:
        metric: Name of the requested average (``"area"`` or ``"perimeter"``).
    """

    def __init__(self, metric: str) -> None:
        super().__init__(f"Cannot compute average {metric} of an empty shape collection")
        self.metric = metric
