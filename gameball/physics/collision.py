"""Collision detection between shapes and impulse-based resolution."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from gameball.physics.bodies import Cube, RigidBody, Sphere

_EPSILON = 0.0001


@dataclass(eq=False)
class Collision:
    """A contact: world point, unit normal from the first body, and depth."""

    point: np.ndarray
    normal: np.ndarray
    penetration: float


def detect_sphere_sphere(sphere1: Sphere, sphere2: Sphere) -> Collision | None:
    """Return the contact between two spheres, or None if they are apart."""
    offset = sphere2.position - sphere1.position
    distance = float(np.linalg.norm(offset))
    penetration = sphere1.radius + sphere2.radius - distance
    if penetration < 0.0:
        return None
    if distance < _EPSILON:
        return Collision(np.array(sphere1.position, dtype=float), np.array([1.0, 0.0, 0.0]), penetration)
    point = sphere1.position + offset * (sphere1.radius - penetration / 2.0) / distance
    return Collision(point, offset / distance, penetration)


def detect_sphere_cube(sphere: Sphere, cube: Cube) -> Collision | None:
    """Return the contact between a sphere and a cube, or None if they are apart."""
    cube_to_sphere = sphere.position - cube.position
    half = cube.side_length / 2.0
    closest = np.array(cube.position, dtype=float)
    for axis in cube.orientation.T:
        closest = closest + float(np.clip(np.dot(cube_to_sphere, axis), -half, half)) * axis

    to_closest = closest - sphere.position
    distance = float(np.linalg.norm(to_closest))
    penetration = sphere.radius - distance
    if penetration < 0.0:
        return None
    if distance < _EPSILON:
        return Collision(np.array(sphere.position, dtype=float), np.array([1.0, 0.0, 0.0]), penetration)
    point = sphere.position + to_closest * (sphere.radius - penetration / 2.0) / distance
    return Collision(point, to_closest / distance, penetration)


def _world_inverse_inertia(body: RigidBody) -> np.ndarray:
    return body.orientation @ body.inertia_inv @ body.orientation.T


def _apply_impulse(body1, body2, inv1, inv2, r1, r2, impulse) -> None:
    body1.velocity = body1.velocity - impulse / body1.mass
    body1.angular_velocity = body1.angular_velocity - inv1 @ np.cross(r1, impulse)
    body2.velocity = body2.velocity + impulse / body2.mass
    body2.angular_velocity = body2.angular_velocity + inv2 @ np.cross(r2, impulse)


def solve_collision(body1: RigidBody, body2: RigidBody, collision: Collision) -> bool:
    """Apply normal and friction impulses; return False if the bodies already separate."""
    normal = collision.normal
    r1 = collision.point - body1.position
    r2 = collision.point - body2.position
    relative_velocity = (
        body2.velocity
        + np.cross(body2.angular_velocity, r2)
        - body1.velocity
        - np.cross(body1.angular_velocity, r1)
    )
    velocity_along_normal = float(np.dot(relative_velocity, normal))
    if velocity_along_normal > -_EPSILON:
        return False

    inv1 = _world_inverse_inertia(body1)
    inv2 = _world_inverse_inertia(body2)

    alpha = sum(1.0 / body.mass for body in (body1, body2) if not math.isinf(body.mass))

    def effective(direction: np.ndarray) -> float:
        rotational = np.cross(inv1 @ np.cross(r1, direction), r1) + np.cross(
            inv2 @ np.cross(r2, direction), r2
        )
        return alpha + float(np.dot(direction, rotational))

    elasticity = min(body1.elasticity, body2.elasticity)
    j = -(1.0 + elasticity) * velocity_along_normal / effective(normal)
    _apply_impulse(body1, body2, inv1, inv2, r1, r2, j * normal)

    friction = math.sqrt(body1.friction ** 2 + body2.friction ** 2)
    tangent = relative_velocity - np.dot(relative_velocity, normal) * normal
    tangent_length = float(np.linalg.norm(tangent))
    if tangent_length > _EPSILON:
        tangent = tangent / tangent_length
        jt = -float(np.dot(relative_velocity, tangent)) / effective(tangent)
        limit = j * friction
        if jt > limit:
            jt = limit
        elif jt < -limit:
            jt = -limit
        _apply_impulse(body1, body2, inv1, inv2, r1, r2, jt * tangent)

    return True