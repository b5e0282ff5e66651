"""Cell-to-face interpolation on structured meshes."""

from __future__ import annotations

from numbers import Integral
from typing import Callable, List, Sequence, Tuple, Union

import numpy as np

from ..utils.logging import get_logger
from ..utils.registry import Registry
from .errors import InvalidDimensionError
from .field import CellField, FaceField, GhostPaddedField, classify_cell_field
from .mesh import MeshStructure

logger = get_logger(__name__)

mean_registry = Registry("mean scheme")

MeanFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]


@mean_registry.register("arithmetic")
def arithmetic_mean(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return 0.5 * (a + b)


@mean_registry.register("geometric")
def geometric_mean(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.sqrt(a * b)


@mean_registry.register("harmonic")
def harmonic_mean(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    total = a + b
    product = 2.0 * a * b
    return np.divide(product, total, out=np.zeros(np.broadcast(a, b).shape), where=total != 0.0)


def _cell_counts(mesh: Union[MeshStructure, Sequence[int]]) -> Tuple[int, ...]:
    counts = mesh.numberofcells if isinstance(mesh, MeshStructure) else tuple(mesh)
    if len(counts) not in (1, 2, 3):
        raise InvalidDimensionError(f"expected 1 to 3 cell counts, got {len(counts)}", parameter="counts")
    for axis, n in enumerate(counts):
        if isinstance(n, bool) or not isinstance(n, Integral) or n <= 0:
            raise InvalidDimensionError(f"cell count must be a positive integer, got {n!r}", axis=axis, parameter="counts")
    return tuple(int(n) for n in counts)


def _along(ndim: int, axis: int, sl: slice, other: slice = slice(None)) -> Tuple[slice, ...]:
    return tuple(sl if a == axis else other for a in range(ndim))


def _interior_faces(values: np.ndarray, axis: int, mean: MeanFunction) -> np.ndarray:
    # boundary faces take the adjacent cell value unchanged
    ndim = values.ndim
    lo = values[_along(ndim, axis, slice(None, -1))]
    hi = values[_along(ndim, axis, slice(1, None))]
    first = values[_along(ndim, axis, slice(0, 1))]
    last = values[_along(ndim, axis, slice(-1, None))]
    return np.concatenate((first, mean(lo, hi), last), axis=axis)


def _ghost_faces(values: np.ndarray, axis: int, mean: MeanFunction) -> np.ndarray:
    # faces along ``axis`` only exist for interior positions on the other axes
    ndim = values.ndim
    lo = values[_along(ndim, axis, slice(None, -1), slice(1, -1))]
    hi = values[_along(ndim, axis, slice(1, None), slice(1, -1))]
    return mean(lo, hi)


def interpolate_faces(
    mesh: Union[MeshStructure, Sequence[int]],
    field: Union[CellField, np.ndarray],
    scheme: str = "arithmetic",
) -> FaceField:
    """Interpolate cell-center ``field`` onto every face of the mesh.

    ``field`` is an :class:`InteriorField`, a :class:`GhostPaddedField`, or a
    raw array whose full shape identifies one of the two layouts. Interior
    fields replicate the boundary cell value onto the boundary face; ghost-padded
    fields average the boundary cell with its ghost.
    """
    counts = _cell_counts(mesh)
    mean = mean_registry.get(scheme)
    cell_field = classify_cell_field(counts, field)
    values = cell_field.values
    faces_for_axis = _ghost_faces if isinstance(cell_field, GhostPaddedField) else _interior_faces
    components: List[np.ndarray] = [faces_for_axis(values, axis, mean) for axis in range(len(counts))]
    logger.debug("%s mean over %s field, cells %s", scheme, cell_field.mode, counts)
    return FaceField.from_components(components)


def arithmetic_mean_faces(mesh: Union[MeshStructure, Sequence[int]], field) -> FaceField:
    return interpolate_faces(mesh, field, "arithmetic")


def geometric_mean_faces(mesh: Union[MeshStructure, Sequence[int]], field) -> FaceField:
    return interpolate_faces(mesh, field, "geometric")


def harmonic_mean_faces(mesh: Union[MeshStructure, Sequence[int]], field) -> FaceField:
    return interpolate_faces(mesh, field, "harmonic")
