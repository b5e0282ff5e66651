"""Global node numbering on the ghost-padded lattice.

Nodes are numbered from zero with the first axis varying fastest, so that in
3D ``index = i + j*(Nx+2) + k*(Nx+2)*(Ny+2)``. Corner and edge index sets are
defined purely from which positions along each axis are extremal (``0`` or
``N+1``).
"""

from __future__ import annotations

from itertools import product
from numbers import Integral
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .errors import InvalidDimensionError


def padded_shape(counts: Sequence[int]) -> Tuple[int, ...]:
    return tuple(int(n) + 2 for n in counts)


def linear_index(axis_positions: Sequence[int], shape: Sequence[int]) -> int:
    """Flatten ``axis_positions`` into a global index, first axis fastest."""
    if len(axis_positions) != len(shape):
        raise InvalidDimensionError(
            f"got {len(axis_positions)} positions for a {len(shape)}D lattice",
            parameter="axis_positions",
        )
    index = 0
    stride = 1
    for axis, (pos, size) in enumerate(zip(axis_positions, shape)):
        if isinstance(pos, bool) or not isinstance(pos, Integral):
            raise IndexError(f"position {pos!r} on axis {axis} must be an integer")
        if not 0 <= pos < size:
            raise IndexError(f"position {pos} out of range for axis {axis} with size {size}")
        index += int(pos) * stride
        stride *= int(size)
    return index


def node_numbering(shape: Sequence[int]) -> np.ndarray:
    """Array of global indices laid out on the padded lattice."""
    total = int(np.prod(shape))
    return np.arange(total).reshape(tuple(shape), order="F")


def _lattice(ranges: Sequence[Sequence[int]]) -> Iterator[Tuple[int, ...]]:
    # itertools.product varies its last argument fastest
    for combo in product(*reversed(ranges)):
        yield tuple(reversed(combo))


def corner_indices(shape: Sequence[int]) -> np.ndarray:
    ranges = [(0, size - 1) for size in shape]
    return np.array([linear_index(pos, shape) for pos in _lattice(ranges)], dtype=int)


def edge_indices(shape: Sequence[int]) -> np.ndarray:
    """Boundary-edge nodes excluding corners.

    Each edge runs along one free axis with every other axis pinned to an
    extreme. Edges are grouped by free axis from last to first. A 1D lattice
    has no edges.
    """
    ndim = len(shape)
    if ndim < 2:
        return np.zeros(0, dtype=int)
    indices: List[int] = []
    for free in reversed(range(ndim)):
        ranges = [
            range(1, size - 1) if axis == free else (0, size - 1)
            for axis, size in enumerate(shape)
        ]
        indices.extend(linear_index(pos, shape) for pos in _lattice(ranges))
    return np.array(indices, dtype=int)
