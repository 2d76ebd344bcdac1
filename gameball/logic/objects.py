"""Objects living in the logic world: the base object, units and obstacles."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gameball.logic.world import World


class GameObject:
    """Anything in the world that is updated every tick."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.actor_initialize = True
        self._object_id = world.register_object(self)

    @property
    def object_id(self) -> int:
        return self._object_id

    def update_tick(self) -> None:
        """Advance this object by one logic tick; the base object does nothing."""

    def destroy(self) -> None:
        """Remove this object from its world."""
        self.world.unregister_object(self._object_id)


class Unit(GameObject):
    """An object owned by a player."""

    def __init__(self, world: World, player_id: int) -> None:
        super().__init__(world)
        self.player_id = player_id
        self._unit_id = world.register_unit(self)

    @property
    def unit_id(self) -> int:
        return self._unit_id

    def destroy(self) -> None:
        """Remove this unit from the unit and object registries."""
        self.world.unregister_unit(self._unit_id)
        super().destroy()


class Obstacle(GameObject):
    """An object that belongs to no player."""

    def __init__(self, world: World) -> None:
        super().__init__(world)
        self._obstacle_id = world.register_obstacle(self)

    @property
    def obstacle_id(self) -> int:
        return self._obstacle_id

    def destroy(self) -> None:
        """Remove this obstacle from the obstacle and object registries."""
        self.world.unregister_obstacle(self._obstacle_id)
        super().destroy()