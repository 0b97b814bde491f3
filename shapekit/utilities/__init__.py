"""
Shared utilities for the shapekit geometry library.

Provides the numeric constants and fail-fast measurement checks used
identically by every concrete shape.
"""

from .constants import PI, PRECISION, format_fixed
from .validation import require_finite, require_positive

__all__ = [
    # constants
    "PI",
    "PRECISION",
    "format_fixed",
    # validation
    "require_finite",
    "require_positive",
]
