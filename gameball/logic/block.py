"""A cubic obstacle backed by a cube in the physics world."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from gameball.logic.objects import Obstacle
from gameball.physics.bodies import DEFAULT_GRAVITY, Cube

if TYPE_CHECKING:
    from gameball.logic.world import World

_ELASTICITY = 0.25
_FRICTION = 0.5


class Block(Obstacle):
    """A cube obstacle; an infinite mass makes it immovable."""

    def __init__(
        self,
        world: World,
        position,
        mass: float = math.inf,
        gravity: bool = False,
        side_length: float = 1.0,
    ) -> None:
        super().__init__(world)
        self._side_length = float(side_length)
        self._position = np.array(position, dtype=float)
        self._velocity = np.zeros(3)
        self._orientation = np.eye(3)
        self._angular_momentum = np.zeros(3)
        self._inertia = np.eye(3)
        self._gravity = np.array(DEFAULT_GRAVITY) if gravity else np.zeros(3)
        self._mass = float(mass)

        self._cube_id = world.physics_world.create_cube()
        self.set_gravity(self._gravity)
        self.set_mass(self._mass)
        self.set_side_length(self._side_length)
        self.set_motion(self._position, self._velocity, self._orientation, self._angular_momentum)
        cube = self.cube
        cube.elasticity = _ELASTICITY
        cube.friction = _FRICTION

    @property
    def cube(self) -> Cube:
        """The physics body behind this block."""
        return self.world.physics_world.get_cube(self._cube_id)

    @property
    def side_length(self) -> float:
        return self._side_length

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def gravity(self) -> np.ndarray:
        return self._gravity.copy()

    @property
    def inertia(self) -> np.ndarray:
        return self._inertia.copy()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity.copy()

    @property
    def orientation(self) -> np.ndarray:
        return self._orientation.copy()

    @property
    def angular_momentum(self) -> np.ndarray:
        return self._angular_momentum.copy()

    def set_mass(self, mass: float) -> None:
        """Change the mass and recompute the inertia tensor."""
        cube = self.cube
        self._mass = float(mass)
        cube.set_side_length_mass(self._side_length, self._mass)
        self._inertia = cube.inertia.copy()

    def set_gravity(self, gravity) -> None:
        """Set the gravitational acceleration acting on the block."""
        self._gravity = np.array(gravity, dtype=float)
        self.cube.gravity = self._gravity.copy()

    def set_side_length(self, side_length: float) -> None:
        """Change the side length and recompute the inertia tensor."""
        self._side_length = float(side_length)
        cube = self.cube
        cube.set_side_length_mass(self._side_length, self._mass)
        self._inertia = cube.inertia.copy()

    def set_motion(self, position, velocity, orientation, angular_momentum) -> None:
        """Set the full motion state of the block and its physics body."""
        cube = self.cube
        self._orientation = np.array(orientation, dtype=float)
        self._position = np.array(position, dtype=float)
        self._velocity = np.array(velocity, dtype=float)
        self._angular_momentum = np.array(angular_momentum, dtype=float)

        cube.position = self._position.copy()
        cube.velocity = self._velocity.copy()
        cube.orientation = self._orientation.copy()
        cube.angular_velocity = cube.inertia_inv @ self._angular_momentum

    def update_tick(self) -> None:
        """Copy the physics body's motion back into the block."""
        cube = self.cube
        self._position = np.array(cube.position, dtype=float)
        self._velocity = np.array(cube.velocity, dtype=float)
        self._orientation = np.array(cube.orientation, dtype=float)
        with np.errstate(invalid="ignore"):
            self._angular_momentum = cube.inertia @ cube.angular_velocity