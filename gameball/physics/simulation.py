"""A world of spheres and cubes stepped with gravity and collisions."""

from __future__ import annotations

import random

from gameball.physics.bodies import Cube, RigidBody, Sphere
from gameball.physics.collision import Collision, detect_sphere_cube, detect_sphere_sphere, solve_collision


class PhysicsWorld:
    """Holds bodies by id; sphere and cube ids each start at 1."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._spheres: dict[int, Sphere] = {}
        self._cubes: dict[int, Cube] = {}
        self._next_sphere_id = 1
        self._next_cube_id = 1

    def _bodies(self):
        yield from self._spheres.values()
        yield from self._cubes.values()

    def update(self, delta_time: float) -> None:
        """Integrate every body."""
        for body in self._bodies():
            body.update(delta_time)

    def create_sphere(self, radius: float = 1.0, mass: float = 1.0) -> int:
        """Add a sphere and return its id."""
        body_id = self._next_sphere_id
        self._next_sphere_id += 1
        self._spheres[body_id] = Sphere(radius=radius, mass=mass)
        return body_id

    def create_cube(self, side_length: float = 1.0, mass: float = 1.0) -> int:
        """Add a cube and return its id."""
        body_id = self._next_cube_id
        self._next_cube_id += 1
        self._cubes[body_id] = Cube(side_length=side_length, mass=mass)
        return body_id

    def get_sphere(self, body_id: int) -> Sphere:
        """Return the sphere with this id; KeyError if there is none."""
        return self._spheres[body_id]

    def get_cube(self, body_id: int) -> Cube:
        """Return the cube with this id; KeyError if there is none."""
        return self._cubes[body_id]

    def _contacts(self) -> list[tuple[RigidBody, RigidBody, Collision]]:
        contacts = []
        for id1, sphere1 in self._spheres.items():
            for id2, sphere2 in self._spheres.items():
                if id1 >= id2:
                    continue
                collision = detect_sphere_sphere(sphere1, sphere2)
                if collision is not None:
                    contacts.append((sphere1, sphere2, collision))
            for cube in self._cubes.values():
                collision = detect_sphere_cube(sphere1, cube)
                if collision is not None:
                    contacts.append((sphere1, cube, collision))
        return contacts

    def solve_collisions(self) -> None:
        """Resolve all current contacts, in random order, until none approach."""
        contacts = self._contacts()
        self._rng.shuffle(contacts)
        solved = True
        while solved:
            solved = False
            for body1, body2, collision in contacts:
                if solve_collision(body1, body2, collision):
                    solved = True

    def apply_gravity(self, delta_time: float) -> None:
        """Accelerate every body by its own gravity."""
        for body in self._bodies():
            body.velocity = body.velocity + body.gravity * delta_time