"""Aggregate statistics over shape collections."""

from .aggregate import ShapeStats, calculate_shape_stats

__all__ = ["ShapeStats", "calculate_shape_stats"]
