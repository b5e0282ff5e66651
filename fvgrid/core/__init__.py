"""Core mesh, field and interpolation structures."""

from .errors import InvalidDimensionError, MeshError, NonMonotonicGridError, ShapeMismatchError
from .field import FaceField, GhostPaddedField, InteriorField, create_face_variable
from .fv_ops import arithmetic_mean_faces, geometric_mean_faces, harmonic_mean_faces, interpolate_faces
from .indexing import linear_index, padded_shape
from .mesh import (
    MeshStructure,
    build_nonuniform_mesh,
    build_uniform_mesh,
    create_mesh_1d,
    create_mesh_2d,
    create_mesh_3d,
)

__all__ = [
    "FaceField",
    "GhostPaddedField",
    "InteriorField",
    "InvalidDimensionError",
    "MeshError",
    "MeshStructure",
    "NonMonotonicGridError",
    "ShapeMismatchError",
    "arithmetic_mean_faces",
    "build_nonuniform_mesh",
    "build_uniform_mesh",
    "create_face_variable",
    "create_mesh_1d",
    "create_mesh_2d",
    "create_mesh_3d",
    "geometric_mean_faces",
    "harmonic_mean_faces",
    "interpolate_faces",
    "linear_index",
    "padded_shape",
]
