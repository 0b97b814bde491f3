"""
Shape-set loader: reads named shape collections from YAML files.

File layout::

    name: demo
    description: Free text shown nowhere but useful to humans.
    shapes:                 # ordered; folded into summary statistics
      - {kind: rectangle, width: 5.0, height: 3.0}
    process:                # optional; shown one by one via process_shape()
      - {kind: circle, radius: 3.0}

Bundled sets live in the package ``data`` directory and are addressed by
file stem (``get_shape_set("demo")``). Any other file can be loaded by path.
Every loaded shape is constructed and validated immediately; nothing is
cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

import yaml

from shapekit.shapes import Shape, build_shape

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


@dataclass(frozen=True)
class ShapeSet:
    """An ordered, validated shape collection plus its demonstration shapes."""

    name: str
    shapes: tuple[Shape, ...]
    process: tuple[Shape, ...] = ()
    description: str = ""


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Shape set file not found: {path}") from None
    except OSError as exc:
        raise ValueError(f"Cannot read shape set file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse shape set file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Shape set file {path} must contain a mapping at top level")
    return cast(dict[str, Any], data)


def _build_shapes(entries: Any, section: str, path: Path) -> tuple[Shape, ...]:
    if entries is None:
        return ()
    if not isinstance(entries, list):
        raise ValueError(f"'{section}' in {path} must be a list of shape entries")
    shapes: list[Shape] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ValueError(f"{section}[{index}] in {path} must be a mapping, got {entry!r}")
        try:
            shapes.append(build_shape(entry))
        except KeyError as exc:
            raise ValueError(f"{section}[{index}] in {path}: {exc.args[0]}") from exc
    return tuple(shapes)


def load_shape_set(path: Path | str) -> ShapeSet:
    """
    Load and validate a shape set from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        The validated ShapeSet. ``name`` defaults to the file stem.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not valid YAML or is structurally malformed.
        InvalidGeometryError: If any shape's measurements are rejected.
    """
    path = Path(path)
    data = _load_yaml(path)
    if "shapes" not in data:
        raise ValueError(f"Shape set file {path} has no 'shapes' section")

    shape_set = ShapeSet(
        name=str(data.get("name", path.stem)),
        description=str(data.get("description", "")),
        shapes=_build_shapes(data["shapes"], "shapes", path),
        process=_build_shapes(data.get("process"), "process", path),
    )
    logger.debug(
        "Loaded shape set %r from %s (%d shapes, %d to process)",
        shape_set.name,
        path,
        len(shape_set.shapes),
        len(shape_set.process),
    )
    return shape_set


def list_shape_sets(data_dir: Path = _DATA_DIR) -> list[str]:
    """Return a sorted list of bundled shape set names."""
    return sorted(p.stem for p in data_dir.glob("*.yaml"))


def get_shape_set(name: str, data_dir: Path = _DATA_DIR) -> ShapeSet:
    """Load the bundled shape set called *name*.

    Raises
    ------
    KeyError
        If no file named ``<name>.yaml`` exists in *data_dir*.
    """
    path = data_dir / f"{name}.yaml"
    if not path.is_file():
        raise KeyError(f"Unknown shape set: {name!r}")
    return load_shape_set(path)
