"""Players and the input they send to the units they control."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gameball.logic.world import World


@dataclass
class PlayerInput:
    """One frame of player commands; orientation is the horizontal look direction."""

    move_forward: bool = False
    move_backward: bool = False
    move_left: bool = False
    move_right: bool = False
    brake: bool = False
    orientation: tuple[float, float, float] = (0.0, 0.0, 1.0)


class Player:
    """A participant in the world; it registers itself on creation."""

    def __init__(self, world: World) -> None:
        self._world = world
        self.primary_unit_id = 0
        self.input = PlayerInput()
        self._player_id = world.register_player(self)

    @property
    def player_id(self) -> int:
        return self._player_id

    def take_input(self) -> PlayerInput:
        """Return the pending input and reset it to the defaults."""
        taken, self.input = self.input, PlayerInput()
        return taken

    def destroy(self) -> None:
        """Remove this player from its world."""
        self._world.unregister_player(self._player_id)