import math

import numpy as np
import pytest

from gameball.physics.bodies import Cube, RigidBody, Sphere, rotation_matrix


def test_rigid_body_defaults():
    body = RigidBody()
    assert body.mass == 1.0
    assert np.allclose(body.gravity, [0.0, -9.8, 0.0])
    assert np.allclose(body.orientation, np.eye(3))
    assert body.friction == 0.0 and body.elasticity == 0.0


def test_update_moves_position_by_velocity():
    body = RigidBody()
    body.velocity = np.array([1.0, 2.0, 3.0])
    body.update(0.5)
    assert np.allclose(body.position, body.velocity * 0.5)


def test_update_without_spin_keeps_orientation():
    body = RigidBody()
    body.update(1.0)
    assert np.allclose(body.orientation, np.eye(3))


def test_update_with_spin_keeps_orientation_orthonormal():
    body = RigidBody()
    body.angular_velocity = np.array([0.3, -1.2, 2.0])
    for _ in range(10):
        body.update(0.1)
    assert np.allclose(body.orientation @ body.orientation.T, np.eye(3))


def test_rotation_matrix_zero_is_identity():
    assert np.allclose(rotation_matrix([0.0, 0.0, 0.0]), np.eye(3))


@pytest.mark.parametrize("vector", [[1.0, 0.0, 0.0], [0.2, 0.5, -0.7], [3.0, 1.0, 2.0]])
def test_rotation_matrix_is_proper_rotation(vector):
    r = rotation_matrix(vector)
    assert np.allclose(r @ r.T, np.eye(3))
    assert math.isclose(np.linalg.det(r), 1.0)


def test_rotation_matrix_fixes_axis():
    axis = np.array([0.2, 0.5, -0.7])
    assert np.allclose(rotation_matrix(axis) @ axis, axis)


def test_rotation_matrix_right_handed():
    r = rotation_matrix([0.0, 0.0, math.pi / 2])
    assert np.allclose(r @ np.array([1.0, 0.0, 0.0]), [0.0, 1.0, 0.0])


def test_rotation_matrix_inverse_is_opposite_vector():
    v = np.array([0.4, -0.3, 1.1])
    assert np.allclose(rotation_matrix(v) @ rotation_matrix(-v), np.eye(3))


def test_sphere_inertia_inverse():
    sphere = Sphere(radius=2.0, mass=3.0)
    assert np.allclose(sphere.inertia @ sphere.inertia_inv, np.eye(3))
    assert np.allclose(sphere.inertia, np.eye(3) * sphere.inertia[0, 0])


def test_sphere_inertia_scales_with_mass():
    light = Sphere(radius=1.5, mass=1.0)
    heavy = Sphere(radius=1.5, mass=2.0)
    assert np.allclose(heavy.inertia, 2.0 * light.inertia)


def test_sphere_set_radius_mass():
    sphere = Sphere()
    sphere.set_radius_mass(0.5, 7.0)
    assert sphere.radius == 0.5
    assert sphere.mass == 7.0


def test_sphere_zero_radius_raises():
    with pytest.raises(ValueError):
        Sphere(radius=0.0, mass=1.0)


def test_cube_infinite_mass_is_immovable():
    cube = Cube(side_length=20.0, mass=math.inf)
    assert np.all(cube.inertia_inv == 0.0)
    assert math.isinf(cube.inertia[0, 0])
    assert cube.side_length == 20.0


def test_cube_inertia_inverse():
    cube = Cube(side_length=2.0, mass=5.0)
    assert np.allclose(cube.inertia @ cube.inertia_inv, np.eye(3))
    assert cube.mass == 5.0