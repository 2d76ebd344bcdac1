"""Rigid bodies: the generic body plus sphere and cube shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

DEFAULT_GRAVITY = (0.0, -9.8, 0.0)


def rotation_matrix(rotation_vector) -> np.ndarray:
    """Return the 3x3 rotation by |v| radians about the axis of ``v``."""
    v = np.asarray(rotation_vector, dtype=float).reshape(3)
    angle = float(np.linalg.norm(v))
    if angle < 1e-12:
        return np.eye(3)
    kx, ky, kz = v / angle
    k = np.array([[0.0, -kz, ky], [kz, 0.0, -kx], [-ky, kx, 0.0]])
    return np.eye(3) + math.sin(angle) * k + (1.0 - math.cos(angle)) * (k @ k)


def _scalar_inverse(value: float) -> float:
    if value == 0.0:
        raise ValueError("inertia must be non-zero")
    return 1.0 / value


@dataclass(eq=False)
class RigidBody:
    """State of a rigid body; inertia tensors are given in body space."""

    mass: float = 1.0
    inertia: np.ndarray = field(default_factory=lambda: np.eye(3))
    inertia_inv: np.ndarray = field(default_factory=lambda: np.eye(3))
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(default_factory=lambda: np.eye(3))
    gravity: np.ndarray = field(default_factory=lambda: np.array(DEFAULT_GRAVITY))
    friction: float = 0.0
    elasticity: float = 0.0

    def update(self, delta_time: float) -> None:
        """Advance position and orientation by one time step."""
        self.position = self.position + self.velocity * delta_time
        self.orientation = rotation_matrix(self.angular_velocity * delta_time) @ self.orientation


class Sphere(RigidBody):
    """A solid sphere."""

    def __init__(self, radius: float = 1.0, mass: float = 1.0) -> None:
        super().__init__()
        self.radius = 1.0
        self.set_radius_mass(radius, mass)

    def set_radius_mass(self, radius: float = 1.0, mass: float = 1.0) -> None:
        """Set radius and mass and recompute the inertia tensor."""
        self.radius = float(radius)
        self.mass = float(mass)
        moment = 0.4 * self.mass * self.radius * self.radius
        self.inertia = np.eye(3) * moment
        if math.isinf(moment):
            self.inertia_inv = np.zeros((3, 3))
        else:
            self.inertia_inv = np.eye(3) * _scalar_inverse(moment)


class Cube(RigidBody):
    """A solid cube."""

    def __init__(self, side_length: float = 1.0, mass: float = 1.0) -> None:
        super().__init__()
        self.side_length = 1.0
        self.set_side_length_mass(side_length, mass)

    def set_side_length_mass(self, side_length: float = 1.0, mass: float = 1.0) -> None:
        """Set side length and mass; an infinite mass makes the cube immovable."""
        self.side_length = float(side_length)
        self.mass = float(mass)
        if math.isinf(self.mass):
            self.inertia = np.eye(3) * self.mass
            self.inertia_inv = np.zeros((3, 3))
        else:
            moment = self.mass * self.side_length * self.side_length / 6.0
            self.inertia = np.eye(3) * moment
            self.inertia_inv = np.eye(3) * _scalar_inverse(moment)