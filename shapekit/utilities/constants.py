"""
Numeric constants shared by formulas and presentation.

PI is the double nearest to 3.14159265358979323846 (identical to math.pi).
PRECISION is the number of fixed-point decimals used for every printed value.
"""

from __future__ import annotations

PI: float = 3.14159265358979323846
PRECISION: int = 2


def format_fixed(value: float, precision: int = PRECISION) -> str:
    """Format *value* as fixed-point text with *precision* decimals."""
    return f"{value:.{precision}f}"
