"""
Fail-fast measurement checks.

All checks raise InvalidGeometryError (a ValueError) naming the shape and the
offending measurement. They return the value unchanged so they can be used
inline in __post_init__.
"""

from __future__ import annotations

import math

from shapekit.errors import InvalidGeometryError


def require_finite(shape: str, field_name: str, value: float) -> float:
    """Reject NaN and infinite measurements."""
    if not math.isfinite(value):
        raise InvalidGeometryError(shape, f"{field_name} must be finite, got {value}")
    return value


def require_positive(shape: str, field_name: str, value: float) -> float:
    """Reject non-finite, zero, and negative measurements."""
    require_finite(shape, field_name, value)
    if value <= 0:
        raise InvalidGeometryError(shape, f"{field_name} must be positive, got {value}")
    return value
