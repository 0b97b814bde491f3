"""Shape-set configuration: named, ordered shape collections loaded from YAML."""

from .loader import ShapeSet, get_shape_set, list_shape_sets, load_shape_set

__all__ = ["ShapeSet", "get_shape_set", "list_shape_sets", "load_shape_set"]
