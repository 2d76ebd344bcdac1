"""The logic world: registries of players and objects plus the physics world."""

from __future__ import annotations

from collections import deque
from typing import Callable, TypeVar

from gameball.logic.objects import GameObject, Obstacle, Unit
from gameball.logic.player import Player
from gameball.physics.simulation import PhysicsWorld

_U = TypeVar("_U", bound=Unit)
_O = TypeVar("_O", bound=Obstacle)

TICKS_PER_SECOND = 64


class World:
    """Holds players, units and obstacles by id; every id kind starts at 1."""

    def __init__(self) -> None:
        self.physics_world = PhysicsWorld()
        self.events: deque[Callable[[], object]] = deque()
        self._objects: dict[int, GameObject] = {}
        self._units: dict[int, Unit] = {}
        self._obstacles: dict[int, Obstacle] = {}
        self._players: dict[int, Player] = {}
        self._next_object_id = 1
        self._next_unit_id = 1
        self._next_obstacle_id = 1
        self._next_player_id = 1
        self._version = 1

    @property
    def version(self) -> int:
        """Number of the current tick; increases by one per update."""
        return self._version

    @property
    def tick_delta_t(self) -> float:
        return 1.0 / TICKS_PER_SECOND

    def register_object(self, obj: GameObject) -> int:
        object_id = self._next_object_id
        self._next_object_id += 1
        self._objects[object_id] = obj
        return object_id

    def unregister_object(self, object_id: int) -> None:
        self._objects.pop(object_id, None)

    def register_unit(self, unit: Unit) -> int:
        unit_id = self._next_unit_id
        self._next_unit_id += 1
        self._units[unit_id] = unit
        return unit_id

    def unregister_unit(self, unit_id: int) -> None:
        self._units.pop(unit_id, None)

    def register_obstacle(self, obstacle: Obstacle) -> int:
        obstacle_id = self._next_obstacle_id
        self._next_obstacle_id += 1
        self._obstacles[obstacle_id] = obstacle
        return obstacle_id

    def unregister_obstacle(self, obstacle_id: int) -> None:
        self._obstacles.pop(obstacle_id, None)

    def register_player(self, player: Player) -> int:
        player_id = self._next_player_id
        self._next_player_id += 1
        self._players[player_id] = player
        return player_id

    def unregister_player(self, player_id: int) -> None:
        self._players.pop(player_id, None)

    def get_object(self, object_id: int) -> GameObject | None:
        return self._objects.get(object_id)

    def get_unit(self, unit_id: int) -> Unit | None:
        return self._units.get(unit_id)

    def get_obstacle(self, obstacle_id: int) -> Obstacle | None:
        return self._obstacles.get(obstacle_id)

    def get_player(self, player_id: int) -> Player | None:
        return self._players.get(player_id)

    def create_unit(self, unit_type: type[_U], player_id: int, *args, **kwargs) -> _U:
        """Create a unit of the given type owned by ``player_id``."""
        return unit_type(self, player_id, *args, **kwargs)

    def create_obstacle(self, obstacle_type: type[_O], *args, **kwargs) -> _O:
        """Create an obstacle of the given type."""
        return obstacle_type(self, *args, **kwargs)

    def create_player(self) -> Player:
        return Player(self)

    def remove_player(self, player_id: int) -> bool:
        """Remove a player; return False if there is no such player."""
        player = self.get_player(player_id)
        if player is None:
            return False
        player.destroy()
        return True

    def remove_unit(self, unit_id: int) -> bool:
        """Remove a unit; return False if there is no such unit."""
        unit = self.get_unit(unit_id)
        if unit is None:
            return False
        unit.destroy()
        return True

    def remove_obstacle(self, obstacle_id: int) -> bool:
        """Remove an obstacle; return False if there is no such obstacle."""
        obstacle = self.get_obstacle(obstacle_id)
        if obstacle is None:
            return False
        obstacle.destroy()
        return True

    def push_event(self, event: Callable[[], object]) -> None:
        """Queue a deferred change to the world."""
        self.events.append(event)

    def update_tick(self) -> None:
        """Run one logic tick: gravity, collisions, object updates, integration."""
        dt = self.tick_delta_t
        self.physics_world.apply_gravity(dt)
        self.physics_world.solve_collisions()
        for obj in list(self._objects.values()):
            obj.update_tick()
        self.physics_world.solve_collisions()
        self.physics_world.update(dt)
        self._version += 1