"""Typed validation errors raised by mesh construction and face averaging."""

from __future__ import annotations

from typing import Optional


class MeshError(ValueError):
    """Base class for invalid mesh or field input."""

    def __init__(self, message: str, axis: Optional[int] = None, parameter: str = "") -> None:
        self.axis = axis
        self.parameter = parameter
        prefix = []
        if parameter:
            prefix.append(parameter)
        if axis is not None:
            prefix.append(f"axis {axis}")
        text = f"[{', '.join(prefix)}] {message}" if prefix else message
        super().__init__(text)


class InvalidDimensionError(MeshError):
    """Cell count, length or dimensionality is not usable."""


class NonMonotonicGridError(MeshError):
    """Face locations along an axis are not strictly increasing."""


class ShapeMismatchError(MeshError):
    """Cell field shape fits neither the interior nor the ghost-padded layout."""
