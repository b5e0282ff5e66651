"""Structured Cartesian meshes with a ghost-cell layer on every axis."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..utils.logging import format_summary, get_logger
from .errors import InvalidDimensionError, NonMonotonicGridError
from .indexing import corner_indices, edge_indices, node_numbering, padded_shape

logger = get_logger(__name__)

AXIS_NAMES = ("x", "y", "z")


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class AxisArrays:
    """One array per populated axis; absent axes are ``None``."""

    x: np.ndarray
    y: Optional[np.ndarray] = None
    z: Optional[np.ndarray] = None

    @classmethod
    def from_list(cls, arrays: Sequence[np.ndarray]) -> "AxisArrays":
        return cls(*[_frozen(arr) for arr in arrays])

    def __getitem__(self, axis: int) -> np.ndarray:
        value = (self.x, self.y, self.z)[axis]
        if value is None:
            raise IndexError(f"axis {axis} is not populated")
        return value

    def __iter__(self) -> Iterator[np.ndarray]:
        for value in (self.x, self.y, self.z):
            if value is not None:
                yield value

    def __len__(self) -> int:
        return sum(1 for _ in self)


@dataclass(frozen=True, eq=False)
class MeshStructure:
    """Uniform or non-uniform Cartesian mesh in 1, 2 or 3 dimensions.

    Attributes:
        dimensions: Number of populated axes.
        numberofcells: Interior cell count per axis.
        cellsize: Per axis, N+2 widths; the first and last entries are the ghost
            cells and repeat the adjacent interior width.
        cellcenters: Per axis, the N interior cell-center coordinates.
        facecenters: Per axis, the N+1 face coordinates including both domain
            boundaries.
        corners: Global indices of the 2**dimensions corner nodes of the padded
            lattice.
        edges: Global indices of the boundary-edge nodes of the padded lattice,
            corners excluded. Empty in 1D.
    """

    dimensions: int
    numberofcells: Tuple[int, ...]
    cellsize: AxisArrays
    cellcenters: AxisArrays
    facecenters: AxisArrays
    corners: np.ndarray
    edges: np.ndarray

    @property
    def padded_shape(self) -> Tuple[int, ...]:
        return padded_shape(self.numberofcells)

    @property
    def ncells(self) -> int:
        return int(np.prod(self.numberofcells))

    @property
    def numbering(self) -> np.ndarray:
        return node_numbering(self.padded_shape)

    def __repr__(self) -> str:
        return f"MeshStructure(dimensions={self.dimensions}, numberofcells={self.numberofcells})"


def _check_dimensions(dimensions: int) -> int:
    if isinstance(dimensions, bool) or not isinstance(dimensions, Integral) or dimensions not in (1, 2, 3):
        raise InvalidDimensionError(f"dimensions must be 1, 2 or 3, got {dimensions!r}", parameter="dimensions")
    return int(dimensions)


def _check_axis_count(name: str, values: Sequence, dimensions: int) -> None:
    try:
        size = len(values)
    except TypeError as exc:
        raise InvalidDimensionError(
            f"expected a sequence with one entry per axis, got {values!r}", parameter=name
        ) from exc
    if isinstance(values, (str, bytes)):
        raise InvalidDimensionError(f"expected a sequence with one entry per axis, got {values!r}", parameter=name)
    if size != dimensions:
        raise InvalidDimensionError(
            f"expected {dimensions} entries for a {dimensions}D mesh, got {size}",
            parameter=name,
        )


def _check_count(count, axis: int) -> int:
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise InvalidDimensionError(f"cell count must be an integer, got {count!r}", axis=axis, parameter="counts")
    if count <= 0:
        raise InvalidDimensionError(f"cell count must be positive, got {count}", axis=axis, parameter="counts")
    return int(count)


def _check_length(length, axis: int) -> float:
    if isinstance(length, bool) or not isinstance(length, Real):
        raise InvalidDimensionError(f"length must be a real number, got {length!r}", axis=axis, parameter="lengths")
    value = float(length)
    if not np.isfinite(value) or value <= 0.0:
        raise InvalidDimensionError(f"length must be positive and finite, got {value}", axis=axis, parameter="lengths")
    return value


def _uniform_axis(count: int, length: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    d = length / count
    cellsize = np.full(count + 2, d)
    centers = (np.arange(count) + 0.5) * d
    faces = np.arange(count + 1) * d
    return cellsize, centers, faces


def _nonuniform_axis(face_locations, axis: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    try:
        faces = np.asarray(face_locations, dtype=float).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise InvalidDimensionError("face locations must be real numbers", axis=axis, parameter="face_locations") from exc
    if faces.size < 2:
        raise InvalidDimensionError(
            f"need at least 2 face locations, got {faces.size}", axis=axis, parameter="face_locations"
        )
    if not np.all(np.isfinite(faces)):
        raise InvalidDimensionError("face locations must be finite", axis=axis, parameter="face_locations")
    spacing = np.diff(faces)
    if np.any(spacing <= 0.0):
        first = int(np.argmax(spacing <= 0.0))
        raise NonMonotonicGridError(
            f"face locations must be strictly increasing; "
            f"faces[{first}]={faces[first]} is followed by faces[{first + 1}]={faces[first + 1]}",
            axis=axis,
            parameter="face_locations",
        )
    cellsize = np.concatenate(([spacing[0]], spacing, [spacing[-1]]))
    centers = 0.5 * (faces[1:] + faces[:-1])
    return cellsize, centers, faces


def _assemble(axes: List[Tuple[np.ndarray, np.ndarray, np.ndarray]], kind: str) -> MeshStructure:
    counts = tuple(len(centers) for _, centers, _ in axes)
    shape = padded_shape(counts)
    corners = corner_indices(shape)
    edges = edge_indices(shape)
    corners.flags.writeable = False
    edges.flags.writeable = False
    mesh = MeshStructure(
        dimensions=len(axes),
        numberofcells=counts,
        cellsize=AxisArrays.from_list([size for size, _, _ in axes]),
        cellcenters=AxisArrays.from_list([centers for _, centers, _ in axes]),
        facecenters=AxisArrays.from_list([faces for _, _, faces in axes]),
        corners=corners,
        edges=edges,
    )
    if logger.isEnabledFor(logging.DEBUG):
        summary = {"cells": "x".join(str(n) for n in counts), "padded": shape}
        for name, faces in zip(AXIS_NAMES, mesh.facecenters):
            summary[f"L{name}"] = float(faces[-1] - faces[0])
        logger.debug(format_summary(f"{kind} {len(axes)}D mesh", summary))
    return mesh


def build_uniform_mesh(dimensions: int, counts: Sequence[int], lengths: Sequence[float]) -> MeshStructure:
    """Build a mesh with ``counts[a]`` equal cells spanning ``lengths[a]`` per axis."""
    dimensions = _check_dimensions(dimensions)
    _check_axis_count("counts", counts, dimensions)
    _check_axis_count("lengths", lengths, dimensions)
    axes = [
        _uniform_axis(_check_count(count, axis), _check_length(length, axis))
        for axis, (count, length) in enumerate(zip(counts, lengths))
    ]
    return _assemble(axes, "uniform")


def build_nonuniform_mesh(dimensions: int, face_locations: Sequence[Sequence[float]]) -> MeshStructure:
    """Build a mesh from one strictly increasing face-location sequence per axis."""
    dimensions = _check_dimensions(dimensions)
    _check_axis_count("face_locations", face_locations, dimensions)
    axes = [_nonuniform_axis(faces, axis) for axis, faces in enumerate(face_locations)]
    return _assemble(axes, "non-uniform")


def _create_mesh(dimensions: int, args: tuple) -> MeshStructure:
    if len(args) == 2 * dimensions:
        return build_uniform_mesh(dimensions, args[:dimensions], args[dimensions:])
    if len(args) == dimensions:
        return build_nonuniform_mesh(dimensions, args)
    raise InvalidDimensionError(
        f"expected {2 * dimensions} arguments (counts then lengths) or {dimensions} face sequences, got {len(args)}",
        parameter="args",
    )


def create_mesh_1d(*args) -> MeshStructure:
    """``create_mesh_1d(Nx, Lx)`` or ``create_mesh_1d(face_x)``."""
    return _create_mesh(1, args)


def create_mesh_2d(*args) -> MeshStructure:
    """``create_mesh_2d(Nx, Ny, Lx, Ly)`` or ``create_mesh_2d(face_x, face_y)``."""
    return _create_mesh(2, args)


def create_mesh_3d(*args) -> MeshStructure:
    """``create_mesh_3d(Nx, Ny, Nz, Lx, Ly, Lz)`` or ``create_mesh_3d(face_x, face_y, face_z)``.

    Example:
        >>> m = create_mesh_3d(2, 3, 4, 1.0, 2.0, 3.0)
        >>> m.padded_shape
        (4, 5, 6)
    """
    return _create_mesh(3, args)
