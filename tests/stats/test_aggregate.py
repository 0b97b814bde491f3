"""Tests for stats.aggregate — ShapeStats and calculate_shape_stats."""

from __future__ import annotations

import math

import pytest

from shapekit.errors import EmptyCollectionError
from shapekit.shapes import Circle, Rectangle, Triangle
from shapekit.stats import ShapeStats, calculate_shape_stats


@pytest.fixture
def demo_shapes():
    return [
        Rectangle(5.0, 3.0),
        Circle(4.0),
        Triangle(3.0, 4.0, 5.0),
        Rectangle(2.5, 6.0),
        Circle(2.5),
    ]


class TestDemoSet:
    def test_count(self, demo_shapes):
        assert calculate_shape_stats(demo_shapes).count == 5

    def test_total_area(self, demo_shapes):
        """15 + 16π + 6 + 15 + 6.25π = 36 + 22.25π ≈ 105.90."""
        stats = calculate_shape_stats(demo_shapes)
        assert stats.total_area == pytest.approx(36.0 + 22.25 * math.pi)
        assert round(stats.total_area, 2) == 105.90

    def test_total_perimeter(self, demo_shapes):
        """16 + 8π + 12 + 17 + 5π = 45 + 13π."""
        stats = calculate_shape_stats(demo_shapes)
        assert stats.total_perimeter == pytest.approx(45.0 + 13.0 * math.pi)

    def test_average_area(self, demo_shapes):
        stats = calculate_shape_stats(demo_shapes)
        assert stats.average_area == pytest.approx(stats.total_area / 5)

    def test_average_perimeter(self, demo_shapes):
        stats = calculate_shape_stats(demo_shapes)
        assert stats.average_perimeter == pytest.approx(stats.total_perimeter / 5)

    def test_uses_memoized_metrics(self, demo_shapes):
        calculate_shape_stats(demo_shapes)
        assert all("area" in vars(s) and "perimeter" in vars(s) for s in demo_shapes)

    def test_accepts_any_iterable(self, demo_shapes):
        from_list = calculate_shape_stats(demo_shapes)
        from_gen = calculate_shape_stats(s for s in demo_shapes)
        assert from_gen == from_list

    def test_does_not_consume_collection(self, demo_shapes):
        calculate_shape_stats(demo_shapes)
        assert len(demo_shapes) == 5


class TestEmptyCollection:
    def test_totals_are_zero(self):
        stats = calculate_shape_stats([])
        assert stats == ShapeStats(total_area=0.0, total_perimeter=0.0, count=0)
        assert stats.is_empty

    def test_average_area_raises(self):
        with pytest.raises(EmptyCollectionError, match="average area of an empty"):
            calculate_shape_stats([]).average_area

    def test_average_perimeter_raises(self):
        with pytest.raises(EmptyCollectionError) as exc_info:
            calculate_shape_stats([]).average_perimeter
        assert exc_info.value.metric == "perimeter"

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            ShapeStats().average_area


class TestShapeStats:
    def test_single_shape(self):
        stats = calculate_shape_stats([Rectangle(7.0, 2.0)])
        assert stats.count == 1
        assert stats.average_area == 14.0
        assert stats.average_perimeter == 18.0

    def test_rejects_negative_count(self):
        with pytest.raises(ValueError, match="count must be non-negative"):
            ShapeStats(count=-1)

    def test_is_frozen(self):
        stats = ShapeStats()
        with pytest.raises(AttributeError):
            stats.count = 3  # type: ignore[misc]
