"""Case loading."""

from .case import MeshCase, mesh_registry

__all__ = ["MeshCase", "mesh_registry"]
