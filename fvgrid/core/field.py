"""Cell-center and face-center field containers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import ShapeMismatchError
from .indexing import padded_shape
from .mesh import MeshStructure


class CellField(ABC):
    """Cell-center values tagged with their ghost-layer layout."""

    mode = "abstract"

    def __init__(self, values) -> None:
        self.values = np.asarray(values, dtype=float)

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.values.shape

    @abstractmethod
    def expected_shape(self, counts: Sequence[int]) -> Tuple[int, ...]:
        """Shape the values must have on a mesh with ``counts`` interior cells."""

    def matches(self, counts: Sequence[int]) -> bool:
        return self.values.shape == self.expected_shape(counts)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        values = self.values if dtype is None else self.values.astype(dtype, copy=False)
        return values.copy() if copy else values

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(shape={self.values.shape})"


class InteriorField(CellField):
    """Values on interior cells only, shape ``numberofcells``."""

    mode = "interior"

    def expected_shape(self, counts: Sequence[int]) -> Tuple[int, ...]:
        return tuple(int(n) for n in counts)


class GhostPaddedField(CellField):
    """Values including one ghost cell at each end of every axis."""

    mode = "ghost"

    def expected_shape(self, counts: Sequence[int]) -> Tuple[int, ...]:
        return padded_shape(counts)

    @property
    def interior(self) -> np.ndarray:
        return self.values[(slice(1, -1),) * self.values.ndim]


def classify_cell_field(counts: Sequence[int], field) -> CellField:
    """Return ``field`` as a tagged cell field checked against ``counts``.

    Tagged fields keep their tag and must match its shape. Raw arrays are
    classified by comparing every axis against the interior and padded shapes.
    """
    counts = tuple(int(n) for n in counts)
    if isinstance(field, CellField):
        if not field.matches(counts):
            raise ShapeMismatchError(
                f"{field.mode} field has shape {field.shape}, expected {field.expected_shape(counts)} "
                f"for numberofcells={counts}",
                parameter="field",
            )
        return field
    values = np.asarray(field, dtype=float)
    if values.shape == counts:
        return InteriorField(values)
    if values.shape == padded_shape(counts):
        return GhostPaddedField(values)
    axis = _first_bad_axis(values.shape, counts)
    raise ShapeMismatchError(
        f"field shape {values.shape} matches neither interior {counts} nor ghost-padded {padded_shape(counts)}",
        axis=axis,
        parameter="field",
    )


def _first_bad_axis(shape: Tuple[int, ...], counts: Tuple[int, ...]) -> Optional[int]:
    if len(shape) != len(counts):
        return None
    for axis, (size, n) in enumerate(zip(shape, counts)):
        if size not in (n, n + 2):
            return axis
    # every axis is individually plausible but the layouts are mixed
    return None


@dataclass(eq=False)
class FaceField:
    """Face-center values, one component per axis.

    The component along axis ``a`` has ``numberofcells[a] + 1`` entries along
    ``a`` and ``numberofcells[b]`` entries along every other axis ``b``.
    """

    dimensions: int
    xvalue: np.ndarray
    yvalue: Optional[np.ndarray] = None
    zvalue: Optional[np.ndarray] = None

    @classmethod
    def from_components(cls, components: Sequence[np.ndarray]) -> "FaceField":
        return cls(len(components), *components)

    def __getitem__(self, axis: int) -> np.ndarray:
        if not 0 <= axis < self.dimensions:
            raise IndexError(f"axis {axis} out of range for a {self.dimensions}D face field")
        return (self.xvalue, self.yvalue, self.zvalue)[axis]

    def __iter__(self) -> Iterator[np.ndarray]:
        for axis in range(self.dimensions):
            yield self[axis]

    def shapes(self) -> List[Tuple[int, ...]]:
        return [component.shape for component in self]


def face_shape(counts: Sequence[int], axis: int) -> Tuple[int, ...]:
    return tuple(int(n) + 1 if a == axis else int(n) for a, n in enumerate(counts))


def create_face_variable(mesh: MeshStructure, value: Union[float, Sequence[float]] = 0.0) -> FaceField:
    """Face field on ``mesh`` filled with ``value``, or one value per axis."""
    counts = mesh.numberofcells
    values = np.broadcast_to(np.asarray(value, dtype=float), (mesh.dimensions,))
    components = [np.full(face_shape(counts, axis), values[axis]) for axis in range(mesh.dimensions)]
    return FaceField.from_components(components)
