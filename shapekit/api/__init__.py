"""Public entry points."""

from .generate import generate_report

__all__ = ["generate_report"]
