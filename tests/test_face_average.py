import pathlib
import sys

import numpy as np
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fvgrid.core.errors import InvalidDimensionError, ShapeMismatchError
from fvgrid.core.field import CellField, GhostPaddedField, InteriorField, create_face_variable
from fvgrid.core.fv_ops import (
    arithmetic_mean_faces,
    geometric_mean_faces,
    harmonic_mean_faces,
    interpolate_faces,
)
from fvgrid.core.mesh import create_mesh_1d, create_mesh_2d, create_mesh_3d


def test_interior_field_replicates_boundary_values():
    faces = arithmetic_mean_faces((3,), np.array([10.0, 20.0, 30.0]))
    assert faces.dimensions == 1
    assert np.allclose(faces.xvalue, [10.0, 15.0, 25.0, 30.0])
    assert faces.yvalue is None


def test_ghost_field_averages_every_face():
    faces = arithmetic_mean_faces((3,), np.array([0.0, 10.0, 20.0, 30.0, 0.0]))
    assert np.allclose(faces.xvalue, [5.0, 15.0, 25.0, 15.0])


def test_single_cell_interior_field():
    faces = arithmetic_mean_faces((1,), [4.0])
    assert np.allclose(faces.xvalue, [4.0, 4.0])


def test_interior_field_2d():
    mesh = create_mesh_2d(2, 3, 1.0, 1.0)
    phi = np.array([[1.0, 2.0, 3.0], [5.0, 6.0, 7.0]])
    faces = arithmetic_mean_faces(mesh, phi)
    assert faces.xvalue.shape == (3, 3)
    assert faces.yvalue.shape == (2, 4)
    assert np.allclose(faces.xvalue, [[1.0, 2.0, 3.0], [3.0, 4.0, 5.0], [5.0, 6.0, 7.0]])
    assert np.allclose(faces.yvalue, [[1.0, 1.5, 2.5, 3.0], [5.0, 5.5, 6.5, 7.0]])


def test_ghost_field_2d_uses_interior_slab():
    phi = np.arange(20, dtype=float).reshape(4, 5)
    faces = arithmetic_mean_faces((2, 3), phi)
    assert faces.xvalue.shape == (3, 3)
    assert faces.yvalue.shape == (2, 4)
    expected_x = 0.5 * (phi[:-1, 1:-1] + phi[1:, 1:-1])
    expected_y = 0.5 * (phi[1:-1, :-1] + phi[1:-1, 1:])
    assert np.allclose(faces.xvalue, expected_x)
    assert np.allclose(faces.yvalue, expected_y)


@pytest.mark.parametrize("ghost", [False, True])
def test_face_shapes_3d(ghost):
    mesh = create_mesh_3d(2, 3, 4, 1.0, 2.0, 3.0)
    shape = mesh.padded_shape if ghost else mesh.numberofcells
    faces = arithmetic_mean_faces(mesh, np.ones(shape))
    assert faces.shapes() == [(3, 3, 4), (2, 4, 4), (2, 3, 5)]
    for component in faces:
        assert np.allclose(component, 1.0)


def test_linear_field_is_reproduced_on_interior_faces():
    mesh = create_mesh_1d(5, 1.0)
    phi = 2.0 * mesh.cellcenters.x + 1.0
    faces = arithmetic_mean_faces(mesh, phi)
    assert np.allclose(faces.xvalue[1:-1], 2.0 * mesh.facecenters.x[1:-1] + 1.0)


def test_tagged_fields_select_mode_explicitly():
    values = [1.0, 3.0, 5.0]
    interior = interpolate_faces((3,), InteriorField(values))
    assert np.allclose(interior.xvalue, [1.0, 2.0, 4.0, 5.0])
    ghost = interpolate_faces((1,), GhostPaddedField(values))
    assert np.allclose(ghost.xvalue, [2.0, 4.0])


def test_tagged_field_with_wrong_shape_is_rejected():
    with pytest.raises(ShapeMismatchError):
        interpolate_faces((3,), GhostPaddedField([1.0, 2.0, 3.0]))
    with pytest.raises(ShapeMismatchError):
        interpolate_faces((2, 2), InteriorField(np.zeros((4, 4))))


@pytest.mark.parametrize("shape, axis", [((5,), 0), ((2, 4), 1), ((2, 5), None), ((3, 5), 0), ((2, 3, 1), None)])
def test_unrecognized_shape_is_rejected(shape, axis):
    counts = (2,) if len(shape) == 1 else (2, 3)
    with pytest.raises(ShapeMismatchError) as info:
        arithmetic_mean_faces(counts, np.zeros(shape))
    assert info.value.axis == axis


def test_bad_counts_are_rejected():
    with pytest.raises(InvalidDimensionError):
        arithmetic_mean_faces((0,), np.zeros(0))
    with pytest.raises(InvalidDimensionError):
        arithmetic_mean_faces((1, 1, 1, 1), np.zeros((1, 1, 1, 1)))


def test_interpolation_is_repeatable_and_pure():
    rng = np.random.default_rng(7)
    phi = rng.random((5, 6, 7))
    original = phi.copy()
    first = interpolate_faces((3, 4, 5), phi)
    second = interpolate_faces((3, 4, 5), phi)
    for a, b in zip(first, second):
        assert np.array_equal(a, b)
    assert np.array_equal(phi, original)


def test_geometric_and_harmonic_means():
    phi = np.array([1.0, 4.0, 0.0])
    geo = geometric_mean_faces((3,), phi)
    assert np.allclose(geo.xvalue, [1.0, 2.0, 0.0, 0.0])
    harm = harmonic_mean_faces((3,), phi)
    assert np.allclose(harm.xvalue, [1.0, 1.6, 0.0, 0.0])
    zeros = harmonic_mean_faces((2,), np.zeros(4))
    assert np.allclose(zeros.xvalue, 0.0)


def test_unknown_scheme_raises_key_error():
    with pytest.raises(KeyError):
        interpolate_faces((2,), [1.0, 2.0], scheme="upwind")


def test_create_face_variable_shapes_and_values():
    mesh = create_mesh_2d(2, 3, 1.0, 1.0)
    faces = create_face_variable(mesh, (1.0, -2.0))
    assert faces.shapes() == [(3, 3), (2, 4)]
    assert np.allclose(faces.xvalue, 1.0)
    assert np.allclose(faces.yvalue, -2.0)
    assert faces.zvalue is None
    with pytest.raises(IndexError):
        faces[2]


def test_cell_field_base_cannot_be_constructed():
    with pytest.raises(TypeError):
        CellField([1.0, 2.0, 3.0])


def test_cell_field_array_copy_detaches_buffer():
    field = InteriorField([1.0, 2.0])
    assert field.__array__() is field.values
    assert np.array_equal(np.asarray(field), [1.0, 2.0])
    detached = field.__array__(copy=True)
    detached[0] = 9.0
    assert field.values[0] == 1.0


def test_interior_field_3d_values():
    rng = np.random.default_rng(11)
    phi = rng.random((2, 3, 4))
    faces = arithmetic_mean_faces((2, 3, 4), phi)
    assert np.allclose(faces.zvalue[:, :, 0], phi[:, :, 0])
    assert np.allclose(faces.zvalue[:, :, -1], phi[:, :, -1])
    assert np.allclose(faces.zvalue[:, :, 1:-1], 0.5 * (phi[:, :, :-1] + phi[:, :, 1:]))
    assert np.allclose(faces.yvalue[:, 1:-1, :], 0.5 * (phi[:, :-1, :] + phi[:, 1:, :]))
    assert np.allclose(faces.xvalue[1, :, :], 0.5 * (phi[0] + phi[1]))


def test_ghost_field_3d_values():
    rng = np.random.default_rng(12)
    phi = rng.random((4, 5, 6))
    faces = arithmetic_mean_faces((2, 3, 4), phi)
    inner = slice(1, -1)
    assert np.allclose(faces.xvalue, 0.5 * (phi[:-1, inner, inner] + phi[1:, inner, inner]))
    assert np.allclose(faces.yvalue, 0.5 * (phi[inner, :-1, inner] + phi[inner, 1:, inner]))
    assert np.allclose(faces.zvalue, 0.5 * (phi[inner, inner, :-1] + phi[inner, inner, 1:]))
