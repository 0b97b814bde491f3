"""Tests for shapes.rectangle."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from shapekit.errors import InvalidGeometryError
from shapekit.shapes import Rectangle, ShapeKind


class TestRectangleConstruction:
    def test_stores_measurements(self):
        rect = Rectangle(width=5.0, height=3.0)
        assert rect.width == 5.0
        assert rect.height == 3.0

    def test_name_and_kind(self):
        rect = Rectangle(5.0, 3.0)
        assert rect.name == "Rectangle"
        assert rect.kind == ShapeKind.RECTANGLE

    def test_is_frozen(self):
        rect = Rectangle(5.0, 3.0)
        with pytest.raises(FrozenInstanceError):
            rect.width = 10.0  # type: ignore[misc]

    def test_rejects_zero_width(self):
        with pytest.raises(InvalidGeometryError, match="width must be positive"):
            Rectangle(0.0, 3.0)

    def test_rejects_negative_height(self):
        with pytest.raises(InvalidGeometryError, match="height must be positive"):
            Rectangle(5.0, -1.0)

    def test_equal_rectangles_compare_equal(self):
        assert Rectangle(5.0, 3.0) == Rectangle(5.0, 3.0)
        assert Rectangle(5.0, 3.0) != Rectangle(3.0, 5.0)


class TestRectangleFormulas:
    @pytest.mark.parametrize(
        ("width", "height"),
        [(5.0, 3.0), (2.5, 6.0), (7.0, 2.0), (0.1, 1000.0)],
    )
    def test_area_is_width_times_height(self, width, height):
        assert Rectangle(width, height).area == pytest.approx(width * height)

    @pytest.mark.parametrize(
        ("width", "height"),
        [(5.0, 3.0), (2.5, 6.0), (7.0, 2.0), (0.1, 1000.0)],
    )
    def test_perimeter_is_twice_width_plus_height(self, width, height):
        assert Rectangle(width, height).perimeter == pytest.approx(2 * (width + height))

    def test_square(self):
        square = Rectangle(4.0, 4.0)
        assert square.area == 16.0
        assert square.perimeter == 16.0


class TestRectangleDescribe:
    def test_full_block(self):
        assert Rectangle(5.0, 3.0).describe() == (
            "Shape: Rectangle\n"
            "Dimensions: 5.00 x 3.00\n"
            "Area: 15.00\n"
            "Perimeter: 16.00\n"
            "------------------------"
        )

    def test_fractional_dimensions(self):
        assert "Dimensions: 2.50 x 6.00" in Rectangle(2.5, 6.0).describe()


class TestRectangleOverflow:
    def test_rejects_area_overflow(self):
        with pytest.raises(InvalidGeometryError, match="area must be finite"):
            Rectangle(1e200, 1e200)

    def test_rejects_perimeter_overflow(self):
        with pytest.raises(InvalidGeometryError, match="perimeter must be finite"):
            Rectangle(1.7e308, 1e-300)

    def test_accepts_large_finite_metrics(self):
        rect = Rectangle(1e150, 1e150)
        assert rect.area == pytest.approx(1e300)
