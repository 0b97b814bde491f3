"""
Shape factory registry.

A simple mapping from ShapeKind to the concrete shape class that builds it.
The built-in shapes self-register when the ``shapekit.shapes`` package is
imported::

    import shapekit.shapes
    from shapekit.shapes.registry import build_shape

    shape = build_shape({"kind": "circle", "radius": 4.0})
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from shapekit.errors import InvalidGeometryError
from shapekit.shapes.base import Shape, ShapeKind

logger = logging.getLogger(__name__)

_REGISTRY: dict[ShapeKind, type[Shape]] = {}


def register(shape_cls: type[Shape]) -> type[Shape]:
    """Register *shape_cls* under its ``kind``. Usable as a class decorator."""
    _REGISTRY[shape_cls.kind] = shape_cls
    return shape_cls


def get(kind: ShapeKind | str) -> type[Shape]:
    """Return the shape class registered for *kind*.

    Raises
    ------
    KeyError
        If *kind* is not a known ShapeKind or has no registered class.
    """
    try:
        key = ShapeKind(kind)
    except ValueError:
        raise KeyError(f"Unknown shape kind: {kind!r}") from None
    if key not in _REGISTRY:
        raise KeyError(f"Unknown shape kind: {kind!r}")
    return _REGISTRY[key]


def list_kinds() -> list[str]:
    """Return a sorted list of all registered shape kind values."""
    return sorted(kind.value for kind in _REGISTRY)


def measurement_names(kind: ShapeKind | str) -> tuple[str, ...]:
    """Return the constructor measurement names for *kind*, in declaration order."""
    return tuple(f.name for f in dataclasses.fields(get(kind)) if f.init)


def build_shape(entry: Mapping[str, Any]) -> Shape:
    """
    Build a shape from a plain mapping such as one entry of a YAML shape set.

    Parameters
    ----------
    entry:
        Mapping with a ``kind`` key and exactly the measurement keys the
        registered class accepts (e.g. ``{"kind": "rectangle", "width": 5,
        "height": 3}``).

    Returns
    -------
    Shape
        A newly constructed, validated shape.

    Raises
    ------
    KeyError
        If ``kind`` is missing or not registered.
    InvalidGeometryError
        If measurement keys are missing or unexpected, a value is not a number,
        or the measurements fail validation.
    """
    if "kind" not in entry:
        raise KeyError(f"Shape entry has no 'kind': {dict(entry)!r}")
    shape_cls = get(entry["kind"])
    expected = measurement_names(shape_cls.kind)
    given = {key: value for key, value in entry.items() if key != "kind"}

    missing = [name for name in expected if name not in given]
    unexpected = sorted(set(given) - set(expected), key=str)
    if missing or unexpected:
        raise InvalidGeometryError(
            shape_cls.name,
            f"expected measurements {list(expected)}, "
            f"missing {missing}, unexpected {unexpected}",
        )

    values: dict[str, float] = {}
    for name in expected:
        value = given[name]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidGeometryError(
                shape_cls.name, f"{name} must be a number, got {value!r}"
            )
        values[name] = float(value)

    shape = shape_cls(**values)
    logger.debug("Built %r", shape)
    return shape
