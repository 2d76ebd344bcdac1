import math
import random

import numpy as np
import pytest

from gameball.physics.simulation import PhysicsWorld


def _world():
    return PhysicsWorld(rng=random.Random(0))


def test_ids_start_at_one_per_kind():
    world = _world()
    assert world.create_sphere() == 1
    assert world.create_sphere() == 2
    assert world.create_cube() == 1


def test_missing_body_raises_key_error():
    world = _world()
    world.create_sphere()
    with pytest.raises(KeyError):
        world.get_sphere(5)
    with pytest.raises(KeyError):
        world.get_cube(1)


def test_created_bodies_keep_parameters():
    world = _world()
    sphere = world.get_sphere(world.create_sphere(radius=0.5, mass=2.0))
    cube = world.get_cube(world.create_cube(side_length=3.0, mass=4.0))
    assert (sphere.radius, sphere.mass) == (0.5, 2.0)
    assert (cube.side_length, cube.mass) == (3.0, 4.0)


def test_apply_gravity_and_update():
    world = _world()
    sphere = world.get_sphere(world.create_sphere())
    world.apply_gravity(0.5)
    assert np.allclose(sphere.velocity, sphere.gravity * 0.5)
    world.update(2.0)
    assert np.allclose(sphere.position, sphere.gravity)


def test_head_on_elastic_spheres_swap():
    world = _world()
    s1 = world.get_sphere(world.create_sphere())
    s2 = world.get_sphere(world.create_sphere())
    s2.position = np.array([1.5, 0.0, 0.0])
    s1.velocity = np.array([1.0, 0.0, 0.0])
    s2.velocity = np.array([-1.0, 0.0, 0.0])
    s1.elasticity = s2.elasticity = 1.0
    world.solve_collisions()
    assert np.allclose(s1.velocity, [-1.0, 0.0, 0.0])
    assert np.allclose(s2.velocity, [1.0, 0.0, 0.0])


def test_no_contacts_leaves_velocities():
    world = _world()
    s1 = world.get_sphere(world.create_sphere())
    s2 = world.get_sphere(world.create_sphere())
    s2.position = np.array([5.0, 0.0, 0.0])
    s1.velocity = np.array([1.0, 0.0, 0.0])
    world.solve_collisions()
    assert np.allclose(s1.velocity, [1.0, 0.0, 0.0])
    assert np.allclose(s2.velocity, [0.0, 0.0, 0.0])


def test_ball_rests_on_immovable_floor():
    world = _world()
    ball = world.get_sphere(world.create_sphere())
    ball.position = np.array([0.0, 1.0, 0.0])
    floor = world.get_cube(world.create_cube(side_length=20.0, mass=math.inf))
    floor.position = np.array([0.0, -10.0, 0.0])
    floor.gravity = np.zeros(3)
    dt = 1.0 / 64.0
    for _ in range(200):
        world.apply_gravity(dt)
        world.solve_collisions()
        world.update(dt)
    assert ball.position[1] > 0.9
    assert np.allclose(floor.position, [0.0, -10.0, 0.0])


def test_contacts_leave_no_approaching_pairs():
    world = _world()
    ball = world.get_sphere(world.create_sphere())
    ball.position = np.array([0.0, 0.95, 0.0])
    ball.velocity = np.array([0.0, -3.0, 0.0])
    floor = world.get_cube(world.create_cube(side_length=2.0, mass=math.inf))
    floor.position = np.array([0.0, -1.0, 0.0])
    world.solve_collisions()
    assert ball.velocity[1] > -1e-4