"""Structured finite-volume meshes and cell-to-face interpolation."""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .run import MeshCase

__version__ = "0.1.0"

__all__ = [*_core_all, "MeshCase"]
